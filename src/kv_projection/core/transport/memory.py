# src/kv_projection/core/transport/memory.py
"""
Transporte em memória com a semântica de listagem do store remoto.

Usado em testes e em ambientes sem agente disponível. Emula:
    - chaves ordenadas lexicograficamente nas listagens
    - listagem recursiva por prefixo e listagem de filhos imediatos
    - valores devolvidos em base64 (payload vazio → None)
    - índices de modificação e escrita condicional (`cas`)

Injeção de falhas (para cenários de escrita parcial):
    - `put_budget`: quantas escritas são aceitas antes de falhar (None = sem limite)
    - `failure_mode`: "raise" levanta `KvTransportError`; "reject" devolve False
    - `fail_reads`: leituras levantam `KvTransportError`
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..codec import to_wire
from ..config.settings import DEFAULT_SEPARATOR
from ..exceptions import KvTransportError
from .base import KvEntry


@dataclass
class _Stored:
    payload: bytes
    create_index: int
    modify_index: int


class InMemoryTransport:
    """Store chave-valor em memória, isolado por instância."""

    def __init__(
        self,
        *,
        separator: str = DEFAULT_SEPARATOR,
        put_budget: Optional[int] = None,
        failure_mode: str = "raise",
        fail_reads: bool = False,
    ):
        if failure_mode not in {"raise", "reject"}:
            raise ValueError(f"failure_mode inválido: {failure_mode}")
        self.separator = separator
        self.put_budget = put_budget
        self.failure_mode = failure_mode
        self.fail_reads = fail_reads
        self.put_calls: List[str] = []
        self._data: Dict[str, _Stored] = {}
        self._index = 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _entry(self, key: str) -> KvEntry:
        stored = self._data[key]
        return KvEntry(
            key=key,
            value=to_wire(stored.payload) if stored.payload else None,
            modify_index=stored.modify_index,
        )

    def _check_read(self, operation: str, key: str) -> None:
        if self.fail_reads:
            raise KvTransportError(
                message="Leitura indisponível",
                details={"operation": operation, "key": key},
            )

    def keys(self) -> List[str]:
        return sorted(self._data)

    # ------------------------------------------------------------------
    # KvTransport
    # ------------------------------------------------------------------
    def get(self, key: str) -> Optional[KvEntry]:
        self._check_read("get", key)
        if key not in self._data:
            return None
        return self._entry(key)

    def list(self, prefix: str, recursive: bool = True) -> List[KvEntry]:
        self._check_read("list", prefix)
        matching = [k for k in self.keys() if k.startswith(prefix)]
        if recursive:
            return [self._entry(k) for k in matching]

        entries: List[KvEntry] = []
        seen = set()
        for key in matching:
            rest = key[len(prefix):]
            head, sep, _ = rest.partition(self.separator)
            if sep:
                child = prefix + head + sep
                if child not in seen:
                    seen.add(child)
                    entries.append(KvEntry(key=child))
            elif key not in seen:
                seen.add(key)
                entries.append(self._entry(key))
        return entries

    def put(self, key: str, payload: bytes, cas: Optional[int] = None) -> bool:
        self.put_calls.append(key)
        if self.put_budget is not None:
            if self.put_budget <= 0:
                if self.failure_mode == "reject":
                    return False
                raise KvTransportError(
                    message="Escrita falhou no transporte",
                    details={"operation": "put", "key": key},
                )
            self.put_budget -= 1

        current = self._data.get(key)
        if cas is not None:
            if cas == 0 and current is not None:
                return False
            if cas > 0 and (current is None or current.modify_index != cas):
                return False

        self._index += 1
        create_index = current.create_index if current is not None else self._index
        self._data[key] = _Stored(
            payload=bytes(payload),
            create_index=create_index,
            modify_index=self._index,
        )
        return True

    def delete(self, key: str, recursive: bool = False) -> bool:
        if recursive:
            for k in [k for k in self._data if k.startswith(key)]:
                del self._data[k]
        else:
            self._data.pop(key, None)
        return True

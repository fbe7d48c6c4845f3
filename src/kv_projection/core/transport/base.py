# src/kv_projection/core/transport/base.py
"""
Contrato canônico de transporte KV.

Este módulo define o protocolo mínimo que qualquer transporte precisa
satisfazer para ser usado pelo `KvClient`, e a estrutura `KvEntry`
devolvida pelas leituras.

Responsabilidades de um transporte:
    - `get(key)`: uma entrada ou None quando a chave não existe
    - `list(prefix, recursive)`: entradas sob o prefixo, na ordem do store;
      não recursivo devolve apenas os filhos imediatos, com subdiretórios
      representados por chaves terminadas no separador e sem valor
    - `put(key, payload, cas)`: True se o store aceitou a escrita
    - `delete(key, recursive)`: True se o store confirmou a remoção

Decisões arquiteturais:
    - Valores de leitura chegam na forma do fio (base64) e são
      decodificados pelo codec, nunca pelo transporte
    - Falhas de comunicação são levantadas como `KvTransportError`;
      recusa de escrita (ex.: CAS) é o retorno False de `put`
    - Conformidade é garantida por duck typing (@runtime_checkable)

Limites explícitos:
    - Não define política de retry
    - Não gerencia credenciais além de anexar o token configurado
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, runtime_checkable

from ..config.settings import DEFAULT_SEPARATOR


@dataclass(frozen=True)
class KvEntry:
    """
    Entrada como armazenada no store remoto.

    Campos:
    - key: chave de transporte completa
    - value: valor na forma do fio (base64) ou None (vazio/diretório)
    - modify_index: índice de modificação (usado como `cas`)
    - flags: flags opacas do store
    """

    key: str
    value: Optional[str] = None
    modify_index: Optional[int] = None
    flags: int = 0

    def is_directory(self, separator: str = DEFAULT_SEPARATOR) -> bool:
        return self.value is None and self.key.endswith(separator)


@runtime_checkable
class KvTransport(Protocol):
    """Interface mínima de um store hierárquico chave-valor."""

    def get(self, key: str) -> Optional[KvEntry]:
        ...

    def list(self, prefix: str, recursive: bool = True) -> List[KvEntry]:
        ...

    def put(self, key: str, payload: bytes, cas: Optional[int] = None) -> bool:
        ...

    def delete(self, key: str, recursive: bool = False) -> bool:
        ...

# src/kv_projection/client.py
"""
KvClient — fachada do KV Projection sobre um transporte KV.

O cliente compõe transporte, codec e projetor hierárquico:

    escrita: estrutura → flatten → encode → um `put` por entrada
    leitura: `list(recursive)` → decode por entrada → fold → estrutura

Responsabilidades do módulo:
    - Operações de chave única (get, put com CAS, delete)
    - Listagem de filhos imediatos de um namespace
    - Leitura e escrita de estruturas aninhadas inteiras
    - Registro de eventos estruturados no `OperationContext`

Decisões arquiteturais:
    - A configuração (`ClientConfig`) é explícita; nada é lido de estado global
    - `write_nested` NÃO é transacional: para na primeira falha, reporta
      a falha e mantém gravadas as entradas anteriores (sem rollback)
    - Falhas de leitura são levantadas (`KvTransportError`, `KeyNotFound`),
      nunca convertidas em resultado vazio

Limites explícitos:
    - Não aplica retry
    - Não coordena atomicidade (ex.: staging + rename) entre escritas
"""

from __future__ import annotations

from typing import Any, List, Optional

from .core.codec import DecodeStage, decode, decode_entry, encode, unwrap_text
from .core.config.hashing import compute_document_hash
from .core.config.settings import ClientConfig
from .core.context import OperationContext
from .core.errors import transport_write_failed, write_rejected
from .core.exceptions import InvalidKvPath, KeyNotFound, KvTransportError
from .core.projection import KvPath, flatten, fold, project_keys
from .core.transport import ConsulHttpTransport, KvEntry, KvTransport
from .core.types import WriteReport, WriteStatus
from .core.value import Value


class KvClient:
    """Cliente de projeção entre estruturas aninhadas e um namespace KV plano."""

    def __init__(
        self,
        transport: Optional[KvTransport] = None,
        *,
        config: Optional[ClientConfig] = None,
        context: Optional[OperationContext] = None,
    ):
        self.config = config if config is not None else ClientConfig()
        self.transport = transport if transport is not None else ConsulHttpTransport(self.config)
        self.context = context if context is not None else OperationContext()

    @property
    def separator(self) -> str:
        return self.config.separator

    def _path(self, namespace: str) -> KvPath:
        return KvPath.parse(namespace, self.separator)

    def _require_key(self, key: str, operation: str) -> None:
        if self._path(key).is_root:
            raise InvalidKvPath(
                message=f"{operation} requer uma chave não vazia",
                details={"operation": operation, "key": key},
            )

    # ------------------------------------------------------------------
    # Chave única
    # ------------------------------------------------------------------
    def _fetch(self, key: str, operation: str) -> KvEntry:
        entry = self.transport.get(key)
        if entry is None:
            self.context.log(operation=operation, level="WARNING", message="key not found", key=key)
            raise KeyNotFound(
                message=f"Chave não encontrada: {key}",
                details={"key": key},
                hint="Confira o namespace e o separador configurado.",
            )
        self.context.log(operation=operation, level="INFO", message="key read", key=key)
        return entry

    def get(self, key: str) -> Optional[str]:
        """Valor da chave como texto (base64 desfeito, sem parse JSON).

        Raises:
            KeyNotFound: Se a chave não existir.
            KvTransportError: Se o transporte falhar.
        """
        return unwrap_text(self._fetch(key, "get").value)

    def get_value(self, key: str) -> Any:
        """Valor da chave decodificado (JSON quando possível, senão texto)."""
        return decode(self._fetch(key, "get_value").value)

    def put(self, key: str, value: Any, cas: Optional[int] = None) -> bool:
        """Grava um único valor; `cas` restringe a escrita a um índice de modificação.

        Returns:
            bool: True se o store aceitou a escrita (False em conflito de CAS).
        """
        self._require_key(key, "put")
        accepted = self.transport.put(key, encode(value), cas=cas)
        self.context.log(
            operation="put",
            level="INFO" if accepted else "WARNING",
            message="put accepted" if accepted else "put rejected",
            key=key,
            cas=cas,
        )
        return accepted

    def delete(self, key: str) -> bool:
        self._require_key(key, "delete")
        deleted = self.transport.delete(key, recursive=False)
        self.context.log(operation="delete", level="INFO", message="key deleted", key=key)
        return deleted

    def delete_recursive(self, namespace: str) -> bool:
        """Remove o namespace, seus descendentes e seu marcador de diretório."""
        self._require_key(namespace, "delete_recursive")
        path = self._path(namespace)
        deleted_tree = self.transport.delete(path.prefix, recursive=True)
        deleted_leaf = self.transport.delete(path.key, recursive=False)
        self.context.log(
            operation="delete_recursive", level="INFO", message="namespace deleted", namespace=path.key
        )
        return deleted_tree and deleted_leaf

    # ------------------------------------------------------------------
    # Listagem
    # ------------------------------------------------------------------
    def list_keys(self, namespace: str, skip_directories: bool = True) -> List[str]:
        """Filhos imediatos do namespace; subdiretórios terminam no separador.

        A listagem é recursiva para que `skip_directories` descarte apenas
        subdiretórios só de marcadores, mantendo os que contêm dados.
        """
        path = self._path(namespace)
        entries = self.transport.list(path.prefix, recursive=True)
        keys = project_keys(
            path.key,
            [entry.key for entry in entries],
            skip_directories=skip_directories,
            separator=self.separator,
        )
        self.context.log(
            operation="list_keys", level="INFO", message="keys listed", namespace=path.key, count=len(keys)
        )
        return keys

    # ------------------------------------------------------------------
    # Estruturas aninhadas
    # ------------------------------------------------------------------
    def read_nested(self, namespace: str) -> Any:
        """Lê recursivamente o namespace e reconstrói a estrutura aninhada.

        Raises:
            KvTransportError: Se a listagem falhar (nunca vira resultado vazio).
        """
        operation = "read_nested"
        path = self._path(namespace)
        try:
            entries = self.transport.list(path.prefix, recursive=True)
        except KvTransportError as exc:
            self.context.log(
                operation=operation, level="ERROR", message="listing failed", namespace=path.key, error=str(exc)
            )
            raise

        decoded = []
        for entry in entries:
            result = decode_entry(entry.value)
            if result.stage is DecodeStage.RAW_WIRE:
                self.context.add_warning(
                    operation=operation,
                    message=f"valor de '{entry.key}' não era base64 válido; mantido como texto",
                )
            decoded.append((entry.key, result.value))

        document = fold(path.key, decoded, separator=self.separator)
        self.context.log(
            operation=operation, level="INFO", message="namespace folded", namespace=path.key, entries=len(entries)
        )
        return document

    def write_nested(self, namespace: str, value: Any) -> WriteReport:
        """Projeta `value` sob `namespace` com um `put` por entrada, em ordem.

        A escrita para na primeira falha (exceção de transporte ou recusa do
        store). Entradas já gravadas permanecem gravadas.

        Returns:
            WriteReport: truthy apenas em sucesso total.

        Raises:
            InvalidKvPath: Se alguma entrada cair na raiz do namespace
                (ex.: escalar com namespace vazio); nada é gravado.
        """
        operation = "write_nested"
        path = self._path(namespace)
        entries = flatten(path.key, value, separator=self.separator)
        total = len(entries)

        for entry in entries:
            if entry.path.is_root:
                raise InvalidKvPath(
                    message="Valor não-mapa não pode ser gravado na raiz do namespace",
                    details={"operation": operation, "namespace": path.key},
                    hint="Informe um namespace ou projete um mapa na raiz.",
                )

        document_hash = compute_document_hash(Value.of(value).to_native())
        self.context.log(
            operation=operation,
            level="INFO",
            message="write started",
            namespace=path.key,
            total=total,
            document_hash=document_hash,
        )

        written: List[str] = []
        for position, entry in enumerate(entries, start=1):
            key = entry.key
            try:
                accepted = self.transport.put(key, encode(entry.value))
            except KvTransportError as exc:
                error = transport_write_failed(key=key, position=position, total=total, exc_message=str(exc))
                return self._write_failed(path, total, written, key, error, document_hash)
            if not accepted:
                error = write_rejected(key=key, position=position, total=total)
                return self._write_failed(path, total, written, key, error, document_hash)
            written.append(key)

        self.context.log(
            operation=operation, level="INFO", message="write finished", namespace=path.key, written=len(written)
        )
        return WriteReport(
            namespace=path.key,
            status=WriteStatus.SUCCESS,
            total=total,
            written=written,
            document_hash=document_hash,
        )

    def _write_failed(self, path, total, written, key, error, document_hash) -> WriteReport:
        self.context.log(
            operation="write_nested",
            level="ERROR",
            message="write aborted",
            namespace=path.key,
            failed_key=key,
            written=len(written),
            error=error.to_dict(),
        )
        return WriteReport(
            namespace=path.key,
            status=WriteStatus.FAILED,
            total=total,
            written=written,
            failed_key=key,
            error=error,
            document_hash=document_hash,
        )

    # Nomes legados (get/put recursivos)
    get_recursive = read_nested
    put_recursive = write_nested

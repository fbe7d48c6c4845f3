# src/kv_projection/__init__.py
"""
KV Projection — projeção bidirecional entre estruturas aninhadas e um
namespace plano de chaves em um store hierárquico chave-valor.

Escrita: uma estrutura aninhada (ex.: um YAML de configuração) é achatada
em entradas `caminho/da/chave = valor` e gravada com um `put` por entrada.
Leitura: uma listagem recursiva é decodificada e dobrada de volta em uma
única estrutura aninhada.

Arquitetura em alto nível:
    - core.codec      → encode/decode de valores (JSON + base64 no fio)
    - core.projection → flatten, fold e listagem de chaves
    - core.transport  → contrato de transporte, store em memória, HTTP (Consul)
    - client          → KvClient (read_nested, write_nested, get, put, ...)
"""

from .client import KvClient
from .core.codec import decode, encode
from .core.config import ClientConfig, load_config
from .core.context import OperationContext
from .core.documents import dump_document, load_document
from .core.exceptions import InvalidKvPath, KeyNotFound, KvException, KvTransportError
from .core.projection import FlatEntry, KvPath, flatten, fold, project_keys
from .core.transport import ConsulHttpTransport, InMemoryTransport, KvEntry, KvTransport
from .core.types import WriteReport, WriteStatus
from .core.value import Value, ValueKind

__version__ = "0.1.0"

__all__ = [
    "KvClient",
    "ClientConfig",
    "load_config",
    "OperationContext",
    "encode",
    "decode",
    "flatten",
    "fold",
    "project_keys",
    "FlatEntry",
    "KvPath",
    "Value",
    "ValueKind",
    "KvEntry",
    "KvTransport",
    "InMemoryTransport",
    "ConsulHttpTransport",
    "WriteReport",
    "WriteStatus",
    "load_document",
    "dump_document",
    "KvException",
    "KvTransportError",
    "KeyNotFound",
    "InvalidKvPath",
]

# src/kv_projection/core/transport/__init__.py
"""
Transportes KV: contrato (`KvTransport`), store em memória e HTTP (Consul).
"""

from .base import KvEntry, KvTransport
from .consul import ConsulHttpTransport
from .memory import InMemoryTransport

__all__ = ["KvEntry", "KvTransport", "InMemoryTransport", "ConsulHttpTransport"]

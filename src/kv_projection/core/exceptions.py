# src/kv_projection/core/exceptions.py
"""
KV Projection — Canonical Exceptions

Este módulo define exceções tipadas internas do KV Projection.

Objetivo:
- Permitir que cliente e transportes levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para KvErrorPayload
- Evitar ValueError/RuntimeError genéricos em falhas de transporte

Regras:
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class KvException(Exception):
    """Base class para exceções internas do KV Projection.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Transporte
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class KvTransportError(KvException):
    """Falha de comunicação com o store remoto (rede, HTTP não esperado, payload inválido)."""


@dataclass(frozen=True)
class KeyNotFound(KvException):
    """Chave solicitada não existe no store remoto."""


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InvalidKvPath(KvException):
    """Path vazio onde uma chave concreta é obrigatória."""

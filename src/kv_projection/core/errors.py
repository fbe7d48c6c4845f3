# src/kv_projection/core/errors.py
"""
KV Projection — Canonical Error Structures

Este módulo define o padrão canônico de erros reportados (e não levantados)
pelo KV Projection, em especial nos relatórios de escrita em lote
(`write_nested`), onde uma falha interrompe a sequência mas não é relançada.

Erros devem ser:

- explícitos
- serializáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class KvErrorPayload:
    """
    Payload canônico de erro do KV Projection.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro
# ---------------------------------------------------------------------------

TRANSPORT_WRITE_FAILED = "TRANSPORT_WRITE_FAILED"
WRITE_REJECTED = "WRITE_REJECTED"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def write_rejected(
    *,
    key: str,
    position: int,
    total: int,
    hint: str = "O store recusou a escrita. Entradas anteriores permanecem gravadas.",
) -> KvErrorPayload:
    return KvErrorPayload(
        type=WRITE_REJECTED,
        message="Escrita recusada pelo store remoto",
        details={
            "key": key,
            "position": position,
            "total": total,
        },
        hint=hint,
    )


def transport_write_failed(
    *,
    key: str,
    position: int,
    total: int,
    exc_message: Optional[str] = None,
    hint: str = "Verifique conectividade e token ACL. Nenhum rollback é aplicado às entradas já gravadas.",
) -> KvErrorPayload:
    return KvErrorPayload(
        type=TRANSPORT_WRITE_FAILED,
        message="Falha de transporte durante escrita em lote",
        details={
            "key": key,
            "position": position,
            "total": total,
            "exc_message": exc_message,
        },
        hint=hint,
    )


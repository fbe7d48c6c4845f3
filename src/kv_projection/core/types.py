# src/kv_projection/core/types.py
"""
Tipos canônicos de resultado do KV Projection.

Componentes principais:
    - WriteStatus → enum de estados finais de uma escrita em lote
    - WriteReport → resultado imutável de `write_nested`

Princípios fundamentais:
    - Tipos são estáveis e serializáveis
    - Nenhuma lógica de transporte vive neste módulo

Invariantes:
    - `written` preserva a ordem de emissão do flatten
    - Um relatório FAILED sempre aponta `failed_key` e `error`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import KvErrorPayload


class WriteStatus(str, Enum):
    """
    Estados finais possíveis de uma escrita em lote.

    Estados definidos:
        - SUCCESS: todas as entradas projetadas foram gravadas
        - FAILED: a sequência parou na primeira falha; entradas
          anteriores permanecem gravadas (sem rollback)
    """
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class WriteReport:
    """
    Resultado imutável de uma escrita em lote (`write_nested`).

    Campos:
        - namespace: namespace normalizado onde o documento foi projetado
        - status: estado final da escrita
        - total: quantidade de entradas produzidas pelo flatten
        - written: chaves de transporte gravadas com sucesso, em ordem
        - failed_key: chave de transporte que falhou (se houver)
        - error: payload canônico da falha (se houver)
        - document_hash: hash canônico do documento de entrada

    Decisões arquiteturais:
        - O relatório é truthy apenas quando `status` é SUCCESS, para que
          chamadores possam tratá-lo como o booleano da operação
        - Falhas são reportadas, não relançadas
    """
    namespace: str
    status: WriteStatus
    total: int
    written: List[str] = field(default_factory=list)
    failed_key: Optional[str] = None
    error: Optional[KvErrorPayload] = None
    document_hash: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is WriteStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.ok

    def to_dict(self) -> Dict[str, Any]:
        return {
            "namespace": self.namespace,
            "status": self.status.value,
            "total": self.total,
            "written": list(self.written),
            "failed_key": self.failed_key,
            "error": self.error.to_dict() if self.error is not None else None,
            "document_hash": self.document_hash,
        }

# src/kv_projection/core/context.py
"""
OperationContext — log estruturado das operações do cliente KV.

O OperationContext é o meio pelo qual o cliente registra:
- eventos estruturados de cada operação (get, put, list, write_nested, ...)
- warnings não fatais agrupados por operação (ex.: valores que não eram JSON)

Princípios fundamentais:
- Logs não são strings livres, mas eventos estruturados
- Warnings não interrompem a operação
- Nenhum estado global: cada cliente possui (ou recebe) seu próprio contexto
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4


@dataclass
class OperationContext:
    """
    Contexto de observabilidade compartilhado pelas operações de um cliente.

    Campos canônicos:
    - context_id: identificador do contexto (default: uuid4 hex)
    - created_at: timestamp UTC de criação do contexto
    - events: log estruturado de eventos
    - warnings: warnings por operação
    """

    context_id: str = field(default_factory=lambda: uuid4().hex)
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, operation: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "context_id": self.context_id,
            "operation": operation,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, operation: str, message: str) -> None:
        if operation not in self.warnings:
            self.warnings[operation] = []
        self.warnings[operation].append(message)

    def events_for(self, operation: str) -> List[Dict[str, Any]]:
        return [ev for ev in self.events if ev.get("operation") == operation]

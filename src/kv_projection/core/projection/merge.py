# src/kv_projection/core/projection/merge.py
"""
Deep-merge last-wins utilizado pelo fold.

Política de merge:
    - MAPPING + MAPPING → merge recursivo por chave
    - qualquer outra combinação → o valor que chega substitui o existente

Diferente do merge estrito de `core.config.merge`, conflitos de tipo não
são erro aqui: a listagem remota é a fonte de verdade e a última entrada
(na ordem da listagem) vence.

Invariantes:
    - Para caminhos sem conflito, o resultado independe da ordem de chegada
    - Apenas `existing` é mutado, e só quando ele e `incoming` são MAPPING;
      o fold só passa como `existing` mapas que ele mesmo construiu
"""

from __future__ import annotations

from ..value import Value, ValueKind


def merge_last_wins(existing: Value, incoming: Value) -> Value:
    if existing.kind is ValueKind.MAPPING and incoming.kind is ValueKind.MAPPING:
        target = existing.payload
        for key, child in incoming.items():
            if key in target:
                target[key] = merge_last_wins(target[key], child)
            else:
                target[key] = child
        return existing
    return incoming

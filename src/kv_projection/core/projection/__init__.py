# src/kv_projection/core/projection/__init__.py
"""
Projetor hierárquico do KV Projection.

Componentes principais:
    - path    → KvPath (normalização e relativização de chaves)
    - flatten → estrutura aninhada → entradas planas (escrita)
    - fold    → listagem plana → estrutura aninhada (leitura)
    - merge   → deep-merge last-wins usado pelo fold
    - keys    → filhos imediatos de um namespace (listagem de chaves)

Todas as operações são puras e síncronas: nenhuma chamada de transporte
acontece neste pacote.
"""

from .flatten import FlatEntry, flatten
from .fold import fold, fold_entries
from .keys import project_keys
from .merge import merge_last_wins
from .path import KvPath

__all__ = [
    "FlatEntry",
    "KvPath",
    "flatten",
    "fold",
    "fold_entries",
    "merge_last_wins",
    "project_keys",
]

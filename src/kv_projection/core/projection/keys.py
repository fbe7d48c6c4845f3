# src/kv_projection/core/projection/keys.py
"""
Projeção de listagem de chaves: filhos imediatos de um namespace.

A entrada é a listagem recursiva (todas as chaves sob o namespace), de
modo que é possível distinguir:

    - subdiretório com dados (ex.: `db/` implícito por `app/db/host`)
    - subdiretório só de marcadores (ex.: `cache/`, gravado a partir de null)

Apenas o segundo caso é excluído por `skip_directories=True`.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..config.settings import DEFAULT_SEPARATOR
from .path import KvPath


def project_keys(
    namespace: str,
    keys: Iterable[str],
    *,
    skip_directories: bool = True,
    separator: str = DEFAULT_SEPARATOR,
) -> List[str]:
    """
    Reduz chaves de transporte aos segmentos filhos imediatos de `namespace`.

    Subdiretórios mantêm o separador no fim, ex.: `db/`. Um subdiretório
    é "só marcador" quando nenhuma chave sob ele carrega valor (todas
    terminam no separador). Com `skip_directories=True` (padrão), esses
    subdiretórios são excluídos; subdiretórios com dados permanecem.
    A ordem é a da listagem, sem repetições.

    Example:
        >>> project_keys("app", ["app/cache/", "app/db/host", "app/name"])
        ['db/', 'name']
    """
    prefix = KvPath.parse(namespace, separator).prefix
    children: List[str] = []
    has_data: Dict[str, bool] = {}
    for key in keys:
        rest = key[len(prefix):] if key.startswith(prefix) else key
        rest = rest.lstrip(separator)
        if not rest:
            continue
        head, sep, _ = rest.partition(separator)
        child = head + sep
        if child not in has_data:
            children.append(child)
            has_data[child] = False
        if not rest.endswith(separator):
            has_data[child] = True

    if not skip_directories:
        return children
    return [c for c in children if not c.endswith(separator) or has_data[c]]

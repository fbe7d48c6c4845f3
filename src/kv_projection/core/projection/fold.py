# src/kv_projection/core/projection/fold.py
"""
Fold — reconstrução de uma estrutura aninhada a partir de uma listagem plana.

Este módulo implementa a direção de leitura do projetor hierárquico. Cada
entrada `(chave_completa, valor)` de uma listagem recursiva é:

    1. relativizada: o namespace base (e o separador seguinte) é removido
    2. quebrada em segmentos (segmentos vazios, como o do separador final
       de um marcador de diretório, são descartados)
    3. embrulhada em um ramo de mapas de uma única chave por segmento
    4. mesclada no resultado acumulado via `merge_last_wins`

Decisões arquiteturais:
    - O resultado inicial é um mapa vazio: listagem vazia → {}
    - Entrada com caminho relativo vazio (o próprio namespace base tem
      valor) é mesclada como o resultado inteiro, sem embrulho
    - Entradas fora do namespace base são mantidas com o caminho completo
    - Conflitos de tipo no mesmo caminho: a última entrada da listagem vence

Invariantes:
    - A ordem da listagem não altera o resultado para caminhos sem conflito
    - Nenhuma referência aos valores de entrada é retida ou mutada

Limites explícitos:
    - Sequências expandidas por índice voltam como mapas com chaves "0", "1", ...
      (não há reconstrução de listas a partir de índices)
"""

from __future__ import annotations

from typing import Any, Iterable, Tuple

from ..codec import decode
from ..config.settings import DEFAULT_SEPARATOR
from ..value import Value
from .merge import merge_last_wins
from .path import KvPath


def _relative(base: KvPath, full_key: str) -> KvPath:
    path = KvPath.parse(full_key, base.separator)
    relative = path.relative_to(base)
    return path if relative is None else relative


def _branch(relative: KvPath, value: Value) -> Value:
    for segment in reversed(relative.segments):
        value = Value.mapping({segment: value})
    return value


def fold(
    base_namespace: str,
    entries: Iterable[Tuple[str, Any]],
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> Any:
    """
    Reconstrói a estrutura aninhada a partir de pares `(chave, valor)` já decodificados.

    Args:
        base_namespace (str): Namespace consultado; removido do início de cada chave.
        entries (Iterable[Tuple[str, Any]]): Pares na ordem da listagem.
        separator (str): Separador de segmentos.

    Returns:
        Any: Estrutura nativa (normalmente dict).

    Example:
        >>> fold("app", [("app/db/host", "x"), ("app/db/port", "5432")])
        {'db': {'host': 'x', 'port': '5432'}}
    """
    base = KvPath.parse(base_namespace, separator)
    result = Value.mapping()
    for full_key, value in entries:
        branch = _branch(_relative(base, full_key), Value.of(value))
        result = merge_last_wins(result, branch)
    return result.to_native()


def fold_entries(
    base_namespace: str,
    entries: Iterable[Any],
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> Any:
    """Fold sobre `KvEntry` do transporte, decodificando cada valor do fio."""
    return fold(
        base_namespace,
        ((entry.key, decode(entry.value)) for entry in entries),
        separator=separator,
    )

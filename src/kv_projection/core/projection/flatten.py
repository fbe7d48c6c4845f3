# src/kv_projection/core/projection/flatten.py
"""
Flatten — projeção de uma estrutura aninhada em entradas de path plano.

Este módulo implementa a direção de escrita do projetor hierárquico:
uma estrutura aninhada (tipicamente um documento YAML/JSON) é percorrida
em profundidade e convertida em uma sequência ordenada de `FlatEntry`,
uma por chave de transporte.

Política de projeção:
    - MAPPING  → recursão por chave, na ordem de iteração do mapa
    - SEQUENCE só de STRING/NUMBER (inclusive vazia) → uma única folha
      com a sequência inteira (array JSON), sem expansão por índice
    - SEQUENCE mista/composta → recursão por índice ("0", "1", ...)
    - NULL     → marcador de diretório (chave com separador no fim)
    - demais escalares → uma folha

Decisões arquiteturais:
    - A função é pura: nenhuma chamada de transporte acontece aqui
    - A ordem de emissão é a ordem de visitação (irmãos na ordem do mapa,
      profundidade primeiro); o cliente grava nessa mesma ordem
    - Se dois caminhos colapsam na mesma chave (ex.: chave "a/b" ao lado
      de {"a": {"b": ...}}), a entrada mantém a posição da primeira
      ocorrência e o valor da última

Invariantes:
    - Nenhuma chave duplicada no resultado
    - MAPPING vazio não produz entradas
    - Booleanos nunca contam como elementos "simples" de um array folha

Limites explícitos:
    - Não codifica valores (ver `core.codec`)
    - Não valida se a chave raiz é gravável (ver `KvClient.write_nested`)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from ..config.settings import DEFAULT_SEPARATOR
from ..value import Value, ValueKind, ensure_exhaustive
from .path import KvPath


@dataclass(frozen=True)
class FlatEntry:
    """
    Entrada do flat set.

    Campos:
    - path: path normalizado da entrada
    - value: valor da folha (NULL para marcadores de diretório)
    - directory: True quando a entrada representa um nó de namespace
    """

    path: KvPath
    value: Value
    directory: bool = False

    @property
    def key(self) -> str:
        """Chave de transporte: marcadores de diretório levam o separador no fim."""
        return self.path.directory_key if self.directory else self.path.key


_Sink = Dict[str, FlatEntry]


def _visit_mapping(path: KvPath, value: Value, sink: _Sink) -> None:
    for key, child in value.items():
        _visit(path.child(key), child, sink)


def _visit_sequence(path: KvPath, value: Value, sink: _Sink) -> None:
    if value.is_leaf_array:
        _emit(path, value, sink)
        return
    for index, child in enumerate(value.payload):
        _visit(path.child(str(index)), child, sink)


def _visit_null(path: KvPath, value: Value, sink: _Sink) -> None:
    _emit(path, value, sink, directory=True)


def _visit_scalar(path: KvPath, value: Value, sink: _Sink) -> None:
    _emit(path, value, sink)


def _emit(path: KvPath, value: Value, sink: _Sink, *, directory: bool = False) -> None:
    sink[path.key] = FlatEntry(path=path, value=value, directory=directory)


_VISITORS: Dict[ValueKind, Callable[[KvPath, Value, _Sink], None]] = {
    ValueKind.MAPPING: _visit_mapping,
    ValueKind.SEQUENCE: _visit_sequence,
    ValueKind.NULL: _visit_null,
    ValueKind.BOOLEAN: _visit_scalar,
    ValueKind.NUMBER: _visit_scalar,
    ValueKind.STRING: _visit_scalar,
}

ensure_exhaustive(_VISITORS, "flatten")


def _visit(path: KvPath, value: Value, sink: _Sink) -> None:
    _VISITORS[value.kind](path, value, sink)


def flatten(
    namespace: str,
    value: Any,
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> List[FlatEntry]:
    """
    Projeta `value` sob `namespace` em uma sequência ordenada de entradas.

    Args:
        namespace (str): Prefixo de path; separadores nas pontas são normalizados.
            Vazio significa a raiz do namespace remoto.
        value (Any): Estrutura nativa (dict/list/escalares) ou `Value`.
        separator (str): Separador de segmentos.

    Returns:
        List[FlatEntry]: Entradas em ordem de emissão, sem paths duplicados.

    Raises:
        UnsupportedValueError: Se `value` contiver tipos fora do domínio.

    Example:
        >>> [(e.key, e.value.to_native()) for e in flatten("app", {"tags": ["a", "b"]})]
        [('app/tags', ['a', 'b'])]
    """
    sink: _Sink = {}
    _visit(KvPath.parse(namespace, separator), Value.of(value), sink)
    return list(sink.values())

# src/kv_projection/core/value.py
"""
Value — variante tipada do domínio de valores projetáveis.

Este módulo define `Value`, a representação canônica (tagged variant) de
qualquer valor que atravessa o projetor hierárquico e o codec:

    - NULL      → nó de diretório (sem valor escalar próprio)
    - BOOLEAN   → true / false
    - NUMBER    → int ou float (bool nunca é NUMBER)
    - STRING    → texto
    - SEQUENCE  → sequência ordenada de Values
    - MAPPING   → mapa str → Value, em ordem de inserção

A classificação por tipo Python acontece uma única vez, na fronteira
(`Value.of`). Daí em diante, flatten, fold e codec despacham sobre
`ValueKind` por tabelas de handlers verificadas como exaustivas
(`ensure_exhaustive`).

Invariantes:
    - Chaves de MAPPING são sempre strings (chaves não-string são
      convertidas com `str`, como acontece ao serializar paths)
    - `Value.of(x).to_native()` reconstrói uma estrutura equivalente a `x`
      (tuplas viram listas)

Limites explícitos:
    - Tipos fora do domínio (datas, bytes, objetos) são rejeitados
      com `UnsupportedValueError`
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple


class ValueKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


SIMPLE_LEAF_KINDS = frozenset({ValueKind.STRING, ValueKind.NUMBER})


class UnsupportedValueError(TypeError):
    """Valor Python sem representação no domínio projetável."""


@dataclass(frozen=True)
class Value:
    """
    Valor projetável com tag explícita.

    Campos:
    - kind: tag da variante
    - payload: None | bool | int | float | str | Tuple[Value, ...] | Dict[str, Value]

    Importante:
    - Para MAPPING, o payload é um dict criado por `Value.of`/`Value.mapping`;
      o fold mescla in-place apenas mapas que ele mesmo construiu.
    """

    kind: ValueKind
    payload: Any = None

    # -----------------------------
    # Construtores
    # -----------------------------
    @classmethod
    def null(cls) -> "Value":
        return cls(ValueKind.NULL, None)

    @classmethod
    def mapping(cls, items: Optional[Mapping[str, "Value"]] = None) -> "Value":
        return cls(ValueKind.MAPPING, dict(items or {}))

    @classmethod
    def of(cls, obj: Any) -> "Value":
        """Classifica um valor Python nativo (ex.: saída de YAML/JSON).

        Sempre constrói uma árvore nova: um `Value` recebido é copiado, de
        modo que quem chama nunca compartilha mapas com o resultado.
        """
        if isinstance(obj, Value):
            return cls.of(obj.to_native())
        if obj is None:
            return cls.null()
        # bool antes de int: bool é subclasse de int em Python
        if isinstance(obj, bool):
            return cls(ValueKind.BOOLEAN, obj)
        if isinstance(obj, (int, float)):
            return cls(ValueKind.NUMBER, obj)
        if isinstance(obj, str):
            return cls(ValueKind.STRING, obj)
        if isinstance(obj, Mapping):
            return cls(ValueKind.MAPPING, {str(k): cls.of(v) for k, v in obj.items()})
        if isinstance(obj, (list, tuple)):
            return cls(ValueKind.SEQUENCE, tuple(cls.of(v) for v in obj))
        raise UnsupportedValueError(
            f"Tipo não suportado para projeção: {type(obj).__name__}"
        )

    # -----------------------------
    # Inspeção
    # -----------------------------
    @property
    def is_leaf_array(self) -> bool:
        """SEQUENCE cujos elementos são todos STRING ou NUMBER (inclui vazia)."""
        return self.kind is ValueKind.SEQUENCE and all(
            item.kind in SIMPLE_LEAF_KINDS for item in self.payload
        )

    def items(self) -> Iterator[Tuple[str, "Value"]]:
        if self.kind is not ValueKind.MAPPING:
            raise TypeError(f"items() requer MAPPING, recebido: {self.kind.value}")
        return iter(self.payload.items())

    def to_native(self) -> Any:
        return _TO_NATIVE[self.kind](self)


def ensure_exhaustive(table: Mapping[ValueKind, Any], name: str) -> None:
    """Falha na importação se uma tabela de despacho não cobre todas as variantes."""
    missing = [kind.value for kind in ValueKind if kind not in table]
    if missing:
        raise RuntimeError(f"{name}: variantes sem handler: {missing}")


_TO_NATIVE: Dict[ValueKind, Callable[[Value], Any]] = {
    ValueKind.NULL: lambda v: None,
    ValueKind.BOOLEAN: lambda v: v.payload,
    ValueKind.NUMBER: lambda v: v.payload,
    ValueKind.STRING: lambda v: v.payload,
    ValueKind.SEQUENCE: lambda v: [item.to_native() for item in v.payload],
    ValueKind.MAPPING: lambda v: {k: item.to_native() for k, item in v.payload.items()},
}

ensure_exhaustive(_TO_NATIVE, "Value.to_native")

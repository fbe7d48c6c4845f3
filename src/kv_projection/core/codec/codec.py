# src/kv_projection/core/codec/codec.py
"""
Value Codec — política de codificação de valores do KV Projection.

Escrita (`encode`):
    - NULL      → payload vazio (corpo de um marcador de diretório)
    - BOOLEAN   → `true` / `false`
    - NUMBER    → texto decimal canônico do Python (`repr`)
    - STRING    → o próprio texto, em UTF-8; se o texto for vazio ou já for
                  um literal JSON (ex.: "5432", "true"), vai entre aspas JSON
    - SEQUENCE  → array JSON compacto (folha ou não)
    - MAPPING   → objeto JSON compacto

Leitura (`decode`), em estágios explícitos:
    1. valor ausente → None
    2. desfaz o base64 do fio (base64 inválido → texto do fio como está)
    3. tenta interpretar o texto como literal JSON
    4. se o parse falha, o texto é o valor (string inalterada)

Decisões arquiteturais:
    - O parse é uma tentativa com resultado explícito (`ParseOutcome`);
      chamadores nunca usam try/except como fluxo de controle
    - `NaN`/`Infinity` não são aceitos como literais: continuam strings
    - Strings ambíguas são gravadas como string JSON, então voltam como
      string; texto puro continua cru no store, legível por outras ferramentas
    - Valores crus gravados por terceiros (ex.: "5432") voltam tipados

Invariantes:
    - `encode` nunca falha para valores do domínio `Value`
    - `decode` nunca levanta exceção
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from ..value import Value, ValueKind, ensure_exhaustive
from .wire import payload_text, unwrap_wire


# -----------------------------
# Encode
# -----------------------------

def _json_bytes(value: Value) -> bytes:
    return json.dumps(
        value.to_native(),
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")


def _string_bytes(value: Value) -> bytes:
    text = value.payload
    if not text or parse_literal(text).ok:
        return json.dumps(text, ensure_ascii=False).encode("utf-8")
    return text.encode("utf-8")


_ENCODERS: Dict[ValueKind, Callable[[Value], bytes]] = {
    ValueKind.NULL: lambda v: b"",
    ValueKind.BOOLEAN: lambda v: b"true" if v.payload else b"false",
    ValueKind.NUMBER: lambda v: repr(v.payload).encode("ascii"),
    ValueKind.STRING: _string_bytes,
    ValueKind.SEQUENCE: _json_bytes,
    ValueKind.MAPPING: _json_bytes,
}

ensure_exhaustive(_ENCODERS, "codec.encode")


def encode(value: Any) -> bytes:
    """Codifica um valor (nativo ou `Value`) no payload enviado em `put`."""
    v = Value.of(value)
    return _ENCODERS[v.kind](v)


# -----------------------------
# Decode
# -----------------------------

class DecodeStage(str, Enum):
    """Estágio em que o decode produziu o valor final."""
    ABSENT = "absent"
    STRUCTURED = "structured"
    RAW_TEXT = "raw_text"
    RAW_WIRE = "raw_wire"


@dataclass(frozen=True)
class ParseOutcome:
    ok: bool
    value: Any = None


@dataclass(frozen=True)
class DecodeResult:
    value: Any
    stage: DecodeStage


def _reject_constant(name: str) -> Any:
    raise ValueError(f"literal não suportado: {name}")


def parse_literal(text: str) -> ParseOutcome:
    """Tenta interpretar `text` como literal JSON; nunca levanta."""
    try:
        return ParseOutcome(ok=True, value=json.loads(text, parse_constant=_reject_constant))
    except (ValueError, RecursionError):
        return ParseOutcome(ok=False)


def unwrap_text(wire: Optional[Union[str, bytes]]) -> Optional[str]:
    """Desfaz apenas a transformação do fio (base64 → texto), sem parse."""
    if wire is None:
        return None
    return payload_text(unwrap_wire(wire).payload)


def decode_entry(wire: Optional[Union[str, bytes]]) -> DecodeResult:
    """Decode com o estágio de origem explícito (usado para warnings do cliente)."""
    if wire is None:
        return DecodeResult(value=None, stage=DecodeStage.ABSENT)

    unwrapped = unwrap_wire(wire)
    text = payload_text(unwrapped.payload)

    outcome = parse_literal(text)
    if outcome.ok:
        return DecodeResult(value=outcome.value, stage=DecodeStage.STRUCTURED)
    if not unwrapped.ok:
        return DecodeResult(value=text, stage=DecodeStage.RAW_WIRE)
    return DecodeResult(value=text, stage=DecodeStage.RAW_TEXT)


def decode(wire: Optional[Union[str, bytes]]) -> Any:
    """Decodifica um valor do fio (base64) para um valor nativo."""
    return decode_entry(wire).value

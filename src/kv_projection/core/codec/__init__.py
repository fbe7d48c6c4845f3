# src/kv_projection/core/codec/__init__.py
"""
Value Codec do KV Projection.

Converte valores em payloads de transporte (`encode`) e valores do fio
em valores tipados (`decode`), com ordem de fallback definida.
"""

from .codec import (
    DecodeResult,
    DecodeStage,
    ParseOutcome,
    decode,
    decode_entry,
    encode,
    parse_literal,
    unwrap_text,
)
from .wire import WireOutcome, to_wire, unwrap_wire

__all__ = [
    "encode",
    "decode",
    "decode_entry",
    "parse_literal",
    "unwrap_text",
    "DecodeResult",
    "DecodeStage",
    "ParseOutcome",
    "to_wire",
    "unwrap_wire",
    "WireOutcome",
]

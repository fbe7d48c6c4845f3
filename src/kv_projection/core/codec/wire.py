# src/kv_projection/core/codec/wire.py
"""
Transformação binário ↔ texto do protocolo de fio.

O protocolo HTTP do store devolve valores como base64 dentro de JSON,
já que texto JSON não transporta bytes arbitrários. Este módulo isola
essa transformação:

    - to_wire(bytes) -> str     (usado por transportes que emulam o fio)
    - unwrap_wire(str) -> WireOutcome

`unwrap_wire` é determinístico e nunca levanta: base64 inválido produz
um `WireOutcome` com `ok=False` e o texto original preservado.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class WireOutcome:
    ok: bool
    payload: bytes


def to_wire(payload: bytes) -> str:
    return base64.b64encode(payload).decode("ascii")


def unwrap_wire(wire: Union[str, bytes]) -> WireOutcome:
    raw = wire.encode("utf-8") if isinstance(wire, str) else bytes(wire)
    try:
        return WireOutcome(ok=True, payload=base64.b64decode(raw, validate=True))
    except (binascii.Error, ValueError):
        return WireOutcome(ok=False, payload=raw)


def payload_text(payload: bytes) -> str:
    # bytes não-UTF-8 são substituídos por U+FFFD; o domínio de valores é textual
    return payload.decode("utf-8", errors="replace")

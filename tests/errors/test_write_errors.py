"""
Test — Write Failure Payloads (Guardrail)

Cenário: escrita em lote interrompida por falha de transporte ou recusa do store.
Esperado: o WriteReport carrega um payload de erro canônico e serializável
(type, message, details, hint), com a posição da entrada que falhou.
"""

import json

import pytest

from kv_projection.client import KvClient
from kv_projection.core.errors import (
    TRANSPORT_WRITE_FAILED,
    WRITE_REJECTED,
    KvErrorPayload,
    transport_write_failed,
    write_rejected,
)
from kv_projection.core.exceptions import KvException, KvTransportError
from kv_projection.core.transport.memory import InMemoryTransport


_CANONICAL_KEYS = {"type", "message", "details", "hint"}


def _assert_canonical(payload: dict) -> None:
    assert set(payload) == _CANONICAL_KEYS
    assert isinstance(payload["type"], str) and payload["type"].isupper()
    assert payload["message"]
    assert isinstance(payload["details"], dict)
    json.dumps(payload)


def test_factories_produce_canonical_payloads() -> None:
    rejected = write_rejected(key="ns/a", position=1, total=2)
    failed = transport_write_failed(key="ns/b", position=2, total=2, exc_message="boom")

    assert isinstance(rejected, KvErrorPayload)
    _assert_canonical(rejected.to_dict())
    _assert_canonical(failed.to_dict())
    assert rejected.type == WRITE_REJECTED
    assert rejected.details == {"key": "ns/a", "position": 1, "total": 2}
    assert failed.type == TRANSPORT_WRITE_FAILED
    assert failed.details["exc_message"] == "boom"


@pytest.mark.parametrize(
    "failure_mode, expected_type",
    [("raise", TRANSPORT_WRITE_FAILED), ("reject", WRITE_REJECTED)],
)
def test_write_report_error_payload(failure_mode: str, expected_type: str) -> None:
    client = KvClient(InMemoryTransport(put_budget=1, failure_mode=failure_mode))

    report = client.write_nested("ns", {"a": 1, "b": 2, "c": 3})
    payload = report.to_dict()

    json.dumps(payload)
    assert payload["status"] == "failed"
    assert payload["written"] == ["ns/a"]
    assert payload["failed_key"] == "ns/b"
    _assert_canonical(payload["error"])
    assert payload["error"]["type"] == expected_type
    assert payload["error"]["details"]["position"] == 2
    assert payload["error"]["details"]["total"] == 3

    (aborted,) = [ev for ev in client.context.events_for("write_nested") if ev["level"] == "ERROR"]
    assert aborted["error"]["type"] == expected_type


def test_exceptions_carry_structured_details() -> None:
    exc = KvTransportError(message="HTTP 500", details={"status_code": 500}, hint="retry later")
    assert isinstance(exc, KvException)
    assert str(exc) == "HTTP 500"
    assert exc.details == {"status_code": 500}
    assert exc.hint == "retry later"

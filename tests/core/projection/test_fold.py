# tests/core/projection/test_fold.py
"""
Testes do fold (listagem plana → estrutura aninhada).

Os testes asseguram que:
- o namespace base é removido de cada chave antes do embrulho
- entradas com prefixo comum são mescladas recursivamente
- a ordem da listagem não altera o resultado para caminhos sem conflito
- conflitos de tipo no mesmo caminho seguem a regra last-wins
- a entrada do próprio namespace base é o resultado inteiro

Decisões arquiteturais:
    - O last-wins é uma política documentada e é testado como tal
"""

import base64
import itertools

import pytest

try:
    from kv_projection.core.projection.fold import fold, fold_entries
    from kv_projection.core.projection.merge import merge_last_wins
    from kv_projection.core.transport.base import KvEntry
    from kv_projection.core.value import Value
except Exception as e:  # noqa: BLE001
    fold = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing fold modules. Implement:\n"
            "- src/kv_projection/core/projection/fold.py (fold, fold_entries)\n"
            "- src/kv_projection/core/projection/merge.py (merge_last_wins)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_fold_reconstructs_nested_structure():
    _require_imports()
    entries = [("app/db/host", "x"), ("app/db/port", 5432), ("app/tags", ["a", "b"])]
    assert fold("app", entries) == {"db": {"host": "x", "port": 5432}, "tags": ["a", "b"]}


def test_fold_is_order_invariant_for_non_conflicting_paths():
    """
    Verifica que toda permutação da listagem produz o mesmo resultado.

    Invariantes:
        - Merge é comutativo e associativo para caminhos sem conflito
    """
    _require_imports()
    entries = [
        ("app/db/host", "x"),
        ("app/db/port", 5432),
        ("app/tags", ["a", "b"]),
        ("app/workers/0/name", "w1"),
    ]
    expected = fold("app", entries)
    for perm in itertools.permutations(entries):
        assert fold("app", list(perm)) == expected


def test_fold_conflict_last_entry_wins():
    _require_imports()
    mapping_then_scalar = [("app/db/host", "x"), ("app/db", "flat")]
    scalar_then_mapping = [("app/db", "flat"), ("app/db/host", "x")]

    assert fold("app", mapping_then_scalar) == {"db": "flat"}
    assert fold("app", scalar_then_mapping) == {"db": {"host": "x"}}


def test_fold_empty_listing_is_empty_mapping():
    _require_imports()
    assert fold("app", []) == {}


def test_fold_base_namespace_value_is_whole_result():
    _require_imports()
    assert fold("app/name", [("app/name", "svc")]) == "svc"


def test_fold_directory_marker_becomes_null():
    _require_imports()
    assert fold("app", [("app/cache/", None), ("app/a", 1)]) == {"cache": None, "a": 1}


def test_fold_keeps_full_path_outside_base():
    _require_imports()
    assert fold("app", [("other/x", 1)]) == {"other": {"x": 1}}


def test_fold_root_namespace():
    _require_imports()
    assert fold("", [("a/b", 1), ("c", 2)]) == {"a": {"b": 1}, "c": 2}


def test_fold_does_not_mutate_inputs():
    _require_imports()
    shared = {"host": "x"}
    fold("app", [("app/db", shared), ("app/db/port", 5432)])
    assert shared == {"host": "x"}


def test_fold_entries_decodes_wire_values():
    _require_imports()
    wire = base64.b64encode(b"5432").decode("ascii")
    entries = [KvEntry(key="app/db/port", value=wire), KvEntry(key="app/cache/")]
    assert fold_entries("app", entries) == {"db": {"port": 5432}, "cache": None}


def test_merge_last_wins_merges_mappings_recursively():
    _require_imports()
    existing = Value.of({"a": {"x": 1}})
    merged = merge_last_wins(existing, Value.of({"a": {"y": 2}, "b": 3}))
    assert merged.to_native() == {"a": {"x": 1, "y": 2}, "b": 3}


def test_merge_last_wins_replaces_non_mappings():
    _require_imports()
    assert merge_last_wins(Value.of({"a": 1}), Value.of([1])).to_native() == [1]
    assert merge_last_wins(Value.of(1), Value.of({"a": 1})).to_native() == {"a": 1}

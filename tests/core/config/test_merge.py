# tests/core/config/test_merge.py
"""
Testes da política de deep-merge estrito de arquivos de configuração.

Os testes asseguram que:
- valores escalares são sobrescritos corretamente
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- conflitos de tipo são rejeitados explicitamente
- int e float são intercambiáveis; None no override limpa a chave
- objetos de entrada não são mutados durante o merge

Limites explícitos:
    - Não cobre o merge last-wins do fold (ver tests/core/projection)
"""

import pytest

try:
    from kv_projection.core.config.merge import deep_merge
    from kv_projection.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    ConfigTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que os módulos de merge de config estejam disponíveis para os testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/kv_projection/core/config/merge.py (deep_merge)\n"
            "- src/kv_projection/core/config/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    """
    Verifica o override básico de valores escalares sem mutar as entradas.

    Invariantes:
        - O valor sobrescrito reflete exatamente o override
        - `base` e `override` não sofrem mutação
    """
    _require_imports()
    base = {"a": 1, "b": 2}
    override = {"b": 99}
    out = deep_merge(base, override)
    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_nested_dict():
    _require_imports()
    base = {"kv": {"url": "http://localhost:8500", "separator": "/"}}
    override = {"kv": {"url": "http://consul:8500"}}
    out = deep_merge(base, override)
    assert out == {"kv": {"url": "http://consul:8500", "separator": "/"}}


def test_merge_list_override_total():
    _require_imports()
    out = deep_merge({"hosts": ["a", "b"]}, {"hosts": ["c"]})
    assert out == {"hosts": ["c"]}


def test_merge_int_over_float_is_compatible():
    _require_imports()
    out = deep_merge({"kv": {"timeout_s": 10.0}}, {"kv": {"timeout_s": 3}})
    assert out == {"kv": {"timeout_s": 3}}


def test_merge_none_override_clears_value():
    _require_imports()
    out = deep_merge({"kv": {"acl_token": "abc"}}, {"kv": {"acl_token": None}})
    assert out == {"kv": {"acl_token": None}}


def test_merge_bool_vs_int_conflict_raises():
    """bool não é tratado como número, mesmo sendo subclasse de int em Python."""
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"kv": {"timeout_s": 10}}, {"kv": {"timeout_s": True}})


def test_merge_type_conflict_raises():
    """
    Verifica que conflitos de tipo são rejeitados explicitamente.

    Decisões arquiteturais:
        - Um dicionário não pode ser sobrescrito por um tipo escalar
        - Nenhum merge parcial é produzido em caso de conflito
    """
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"kv": {"url": "http://localhost:8500"}}, {"kv": "DEBUG"})

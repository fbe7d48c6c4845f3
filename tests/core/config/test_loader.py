# tests/core/config/test_loader.py
"""
Testes do carregador de configuração do cliente (load_config).

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional e sobrescreve defaults
- formatos não suportados e raízes inválidas são rejeitados
- a seção `kv` é materializada em um `ClientConfig` validado

Decisões arquiteturais:
    - A configuração é declarativa e baseada em arquivos
    - Nenhuma variável de ambiente participa da resolução

Limites explícitos:
    - Não valida uso da configuração pelo transporte HTTP
"""

import json
from pathlib import Path

import pytest

try:
    from kv_projection.core.config.loader import load_config, resolve_config
    from kv_projection.core.config.settings import ClientConfig
    from kv_projection.core.config.errors import (
        ConfigTypeConflictError,
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        InvalidConfigValueError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de configuração e suas exceções tipadas estejam disponíveis.

    Falha imediatamente, com mensagem orientada, quando `loader`,
    `settings` ou `errors` não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config modules. Implement:\n"
            "- src/kv_projection/core/config/loader.py (load_config, resolve_config)\n"
            "- src/kv_projection/core/config/settings.py (ClientConfig)\n"
            "- src/kv_projection/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    """
    Verifica que a ausência do arquivo defaults é tratada como erro fatal.

    Invariantes:
        - A exceção utilizada é específica (`DefaultsNotFoundError`)
        - Nenhuma configuração parcial é retornada
    """
    _require_imports()
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(tmp_path / "kv.defaults.yaml"))


def test_load_defaults_only(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "kv.defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    cfg = load_config(defaults_path=str(defaults))

    assert isinstance(cfg, ClientConfig)
    assert cfg.url == "http://localhost:8500"
    assert cfg.acl_token is None
    assert cfg.separator == "/"
    assert cfg.timeout_s == 10.0


def test_missing_local_is_ok(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "kv.defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    cfg = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "kv.local.yaml"))

    assert cfg.url == "http://localhost:8500"


def test_load_defaults_and_local(
    tmp_path: Path, project_like_config_defaults_yaml, project_like_config_local_yaml
):
    """
    Verifica o merge defaults + local na configuração do cliente.

    O resultado deve refletir:
    - valores sobrescritos pelo arquivo local (url, token, timeout int sobre float)
    - valores preservados do defaults (separator)
    """
    _require_imports()
    defaults = tmp_path / "kv.defaults.yaml"
    local = tmp_path / "kv.local.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text(project_like_config_local_yaml, encoding="utf-8")

    cfg = load_config(defaults_path=str(defaults), local_path=str(local))

    assert cfg.url == "http://consul.internal:8500"
    assert cfg.acl_token == "s3cr3t"
    assert cfg.timeout_s == 2
    assert cfg.separator == "/"


def test_json_defaults_supported(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "kv.defaults.json"
    defaults.write_text(json.dumps({"kv": {"separator": ":"}}), encoding="utf-8")

    cfg = load_config(defaults_path=str(defaults))

    assert cfg.separator == ":"
    assert cfg.url == "http://localhost:8500"


def test_missing_kv_section_uses_client_defaults(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "kv.defaults.yaml"
    defaults.write_text("", encoding="utf-8")

    assert load_config(defaults_path=str(defaults)) == ClientConfig()


def test_unsupported_format_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "kv.defaults.toml"
    defaults.write_text("[kv]\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults))


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "kv.defaults.yaml"
    defaults.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults))


def test_unknown_kv_key_raises(tmp_path: Path):
    """
    Verifica que chaves desconhecidas na seção `kv` são rejeitadas.

    Um erro de digitação (ex.: `acl_tokn`) não pode ser ignorado em
    silêncio, já que o cliente seguiria sem token.
    """
    _require_imports()
    defaults = tmp_path / "kv.defaults.yaml"
    defaults.write_text("kv:\n  acl_tokn: abc\n", encoding="utf-8")
    with pytest.raises(InvalidConfigValueError):
        load_config(defaults_path=str(defaults))


@pytest.mark.parametrize(
    "body",
    [
        "kv:\n  separator: ''\n",
        "kv:\n  timeout_s: 0\n",
        "kv:\n  timeout_s: true\n",
    ],
)
def test_invalid_kv_values_raise(tmp_path: Path, body: str):
    _require_imports()
    defaults = tmp_path / "kv.defaults.yaml"
    defaults.write_text(body, encoding="utf-8")
    with pytest.raises(InvalidConfigValueError):
        load_config(defaults_path=str(defaults))


def test_type_conflict_between_files_raises(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "kv.defaults.yaml"
    local = tmp_path / "kv.local.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text("kv: http://elsewhere:8500\n", encoding="utf-8")
    with pytest.raises(ConfigTypeConflictError):
        load_config(defaults_path=str(defaults), local_path=str(local))


def test_resolve_config_returns_stable_hash(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "kv.defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    effective_a, hash_a = resolve_config(defaults_path=str(defaults))
    effective_b, hash_b = resolve_config(defaults_path=str(defaults))

    assert effective_a == effective_b
    assert hash_a == hash_b
    assert len(hash_a) == 64

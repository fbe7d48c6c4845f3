# src/kv_projection/core/config/loader.py
"""
Loader canônico de configuração do KV Projection.

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

As opções do cliente vivem sob a seção raiz `kv`:

    kv:
      url: http://localhost:8500
      acl_token: null
      separator: /
      timeout_s: 10

Responsabilidades do módulo:
    - Carregar arquivos de configuração em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver a configuração final via deep-merge estrito
    - Materializar um `ClientConfig` imutável

Invariantes:
    - O arquivo de defaults é obrigatório
    - Overrides nunca mutam os defaults
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não lê variáveis de ambiente
    - Não persiste configuração ou hash
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import json

import yaml  # PyYAML

from .merge import deep_merge
from .hashing import compute_config_hash
from .settings import ClientConfig
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Arquivos vazios são interpretados como dicionários vazios

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def resolve_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Tuple[Dict[str, Any], str]:
    """
    Resolve a configuração efetiva (dict) e seu hash canônico.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional e, quando presente, tem prioridade
        - A resolução utiliza `deep_merge` estrito

    Returns:
        Tuple[Dict[str, Any], str]: configuração resolvida e hash SHA-256.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    defaults = _load_file(Path(defaults_path))

    effective = defaults

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            local = _load_file(local_file)
            effective = deep_merge(defaults, local)

    return effective, compute_config_hash(effective)


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> ClientConfig:
    """
    Carrega e resolve a configuração do cliente.

    A seção `kv` é opcional; ausente, todos os campos assumem os defaults
    de `ClientConfig`. Chaves desconhecidas dentro de `kv` são rejeitadas.

    Raises:
        InvalidConfigValueError: Se a seção `kv` for inválida.
        (além das exceções de `resolve_config`)
    """
    effective, _ = resolve_config(defaults_path=defaults_path, local_path=local_path)
    section = effective.get("kv")
    if section is None:
        section = {}
    return ClientConfig.from_dict(section)

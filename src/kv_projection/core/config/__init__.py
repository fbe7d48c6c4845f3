# src/kv_projection/core/config/__init__.py
"""
Camada de configuração do KV Projection.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, validar estruturalmente e identificar a configuração do cliente.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Materialização de um `ClientConfig` imutável
    - Geração de hash canônico para rastreabilidade

Princípios fundamentais:
    - Configuração é passada explicitamente, nunca lida de estado global
    - Overrides são sempre explícitos
    - Conflitos estruturais são tratados como erro
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash, compute_document_hash
from .loader import load_config, resolve_config
from .merge import deep_merge
from .settings import ClientConfig

__all__ = [
    "ClientConfig",
    "load_config",
    "resolve_config",
    "deep_merge",
    "compute_config_hash",
    "compute_document_hash",
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidConfigValueError",
    "UnsupportedConfigFormatError",
]

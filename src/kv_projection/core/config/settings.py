# src/kv_projection/core/config/settings.py
"""
Configuração explícita do cliente KV.

`ClientConfig` concentra o único estado "de processo" que o cliente
conhece: endpoint, token ACL, separador de namespace e timeout. A
configuração é sempre passada explicitamente para transportes, cliente e
projetor; nenhum módulo lê ou muta estado global.

Invariantes:
    - `separator` é uma string não vazia
    - `timeout_s` é positivo
    - A instância é imutável (frozen)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .errors import InvalidConfigValueError


DEFAULT_URL = "http://localhost:8500"
DEFAULT_SEPARATOR = "/"
DEFAULT_TIMEOUT_S = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuração efetiva do cliente.

    Campos:
    - url: endpoint HTTP do agente (ex.: http://localhost:8500)
    - acl_token: token ACL opcional anexado às requisições
    - separator: separador de segmentos de path no namespace remoto
    - timeout_s: timeout por requisição HTTP
    """

    url: str = DEFAULT_URL
    acl_token: Optional[str] = None
    separator: str = DEFAULT_SEPARATOR
    timeout_s: float = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        if not isinstance(self.url, str) or not self.url.strip():
            raise InvalidConfigValueError("kv.url deve ser uma string não vazia")
        if not isinstance(self.separator, str) or not self.separator:
            raise InvalidConfigValueError("kv.separator deve ser uma string não vazia")
        if self.acl_token is not None and not isinstance(self.acl_token, str):
            raise InvalidConfigValueError("kv.acl_token deve ser string ou null")
        if isinstance(self.timeout_s, bool) or not isinstance(self.timeout_s, (int, float)):
            raise InvalidConfigValueError("kv.timeout_s deve ser numérico")
        if self.timeout_s <= 0:
            raise InvalidConfigValueError("kv.timeout_s deve ser positivo")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientConfig":
        """Constrói a configuração a partir da seção `kv` já resolvida."""
        if not isinstance(data, dict):
            raise InvalidConfigValueError(
                f"Seção kv deve ser dict, recebido: {type(data).__name__}"
            )
        known = {"url", "acl_token", "separator", "timeout_s"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigValueError(f"Chaves desconhecidas na seção kv: {unknown}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

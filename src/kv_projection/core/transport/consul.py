# src/kv_projection/core/transport/consul.py
"""
Transporte HTTP para a API KV do Consul (`/v1/kv/<key>`).

Mapeamento das operações:
    - get     → GET    /v1/kv/<key>                    (404 → None)
    - list    → GET    /v1/kv/<prefix>?recurse          (404 → [])
                GET    /v1/kv/<prefix>?keys&separator=/ (não recursivo)
    - put     → PUT    /v1/kv/<key>[?cas=N]             (corpo "true"/"false")
    - delete  → DELETE /v1/kv/<key>[?recurse]

O token ACL configurado é anexado como parâmetro `token`.

Decisões arquiteturais:
    - Erros de rede, HTTP inesperado ou JSON inválido viram `KvTransportError`
    - Nenhum retry é aplicado; a política de retry pertence a quem chama
    - A sessão HTTP pode ser injetada (testes, pools compartilhados)
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import requests

from ..config.settings import ClientConfig
from ..exceptions import KvTransportError
from .base import KvEntry


def _entry_from_json(item: Mapping[str, Any]) -> KvEntry:
    return KvEntry(
        key=str(item.get("Key", "")),
        value=item.get("Value"),
        modify_index=item.get("ModifyIndex"),
        flags=int(item.get("Flags") or 0),
    )


class ConsulHttpTransport:
    """Transporte KV sobre a API HTTP do Consul."""

    def __init__(self, config: ClientConfig, *, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session if session is not None else requests.Session()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _url(self, key: str) -> str:
        return f"{self.config.url.rstrip('/')}/v1/kv/{quote(key, safe='/')}"

    def _params(self, **extra: Any) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.config.acl_token:
            params["token"] = self.config.acl_token
        params.update({k: v for k, v in extra.items() if v is not None})
        return params

    def _request(
        self,
        method: str,
        key: str,
        *,
        params: Dict[str, Any],
        data: Optional[bytes] = None,
        allow_404: bool = False,
    ) -> Optional[requests.Response]:
        try:
            r = self.session.request(
                method,
                self._url(key),
                params=params,
                data=data,
                timeout=self.config.timeout_s,
            )
        except requests.RequestException as exc:
            raise KvTransportError(
                message=f"Falha de rede em {method} {key}",
                details={"method": method, "key": key, "exc_class": exc.__class__.__name__},
                hint="Verifique kv.url e a disponibilidade do agente.",
            ) from exc

        if allow_404 and r.status_code == 404:
            return None
        if r.status_code >= 400:
            raise KvTransportError(
                message=f"HTTP {r.status_code} em {method} {key}",
                details={"method": method, "key": key, "status_code": r.status_code, "body": r.text[:200]},
                hint="Status 403 normalmente indica token ACL ausente ou sem permissão.",
            )
        return r

    def _json(self, r: requests.Response, key: str) -> Any:
        try:
            return r.json()
        except ValueError as exc:
            raise KvTransportError(
                message=f"Resposta não-JSON para {key}",
                details={"key": key, "body": r.text[:200]},
            ) from exc

    # ------------------------------------------------------------------
    # KvTransport
    # ------------------------------------------------------------------
    def get(self, key: str) -> Optional[KvEntry]:
        r = self._request("GET", key, params=self._params(), allow_404=True)
        if r is None:
            return None
        items = self._json(r, key)
        if not items:
            return None
        return _entry_from_json(items[0])

    def list(self, prefix: str, recursive: bool = True) -> List[KvEntry]:
        if recursive:
            params = self._params(recurse="")
        else:
            params = self._params(keys="", separator=self.config.separator)
        r = self._request("GET", prefix, params=params, allow_404=True)
        if r is None:
            return []
        items = self._json(r, prefix) or []
        if recursive:
            return [_entry_from_json(item) for item in items]
        return [KvEntry(key=str(k)) for k in items]

    def put(self, key: str, payload: bytes, cas: Optional[int] = None) -> bool:
        r = self._request("PUT", key, params=self._params(cas=cas), data=payload)
        return r.text.strip() == "true"

    def delete(self, key: str, recursive: bool = False) -> bool:
        params = self._params(recurse="") if recursive else self._params()
        r = self._request("DELETE", key, params=params)
        return r.text.strip() == "true"

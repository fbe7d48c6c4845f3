# src/kv_projection/core/config/hashing.py
"""
Hashing canônico de configuração e de documentos aninhados.

O hash gerado representa a **identidade estrutural** de uma estrutura
JSON-compatível e é utilizado para:
    - identificar a configuração efetiva do cliente
    - registrar, em cada `WriteReport`, qual documento foi projetado

Princípios fundamentais:
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - UTF-8 + SHA-256

Invariantes:
    - Estruturas equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""


import json
import hashlib
from typing import Any, Dict


def _canonical_sha256(data: Any) -> str:
    canonical_json = json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva do cliente.

    Args:
        config (Dict[str, Any]): Configuração resolvida (defaults + local).

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    return _canonical_sha256(config)


def compute_document_hash(document: Any) -> str:
    """
    Gera o hash canônico de um documento aninhado arbitrário.

    Diferente de `compute_config_hash`, aceita qualquer raiz do domínio
    de valores (mapa, sequência, escalar ou None), já que `write_nested`
    aceita qualquer uma delas.

    Raises:
        TypeError: Se o documento contiver valores não serializáveis em JSON.
    """
    return _canonical_sha256(document)

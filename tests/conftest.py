# tests/conftest.py
"""
Fixtures compartilhados para testes do KV Projection.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações YAML mínimas e determinísticas (defaults + local)
- um documento aninhado semelhante a um arquivo de configuração real
- um transporte em memória e um cliente ligado a ele

O objetivo destas fixtures é permitir testes de codec, projetor e cliente
sem depender de:
- rede ou de um agente Consul em execução
- variáveis de ambiente

Invariantes:
    - Nenhuma fixture realiza I/O de rede
    - Cada teste recebe um transporte novo e isolado
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


# =====================================================
# Config loader fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults) semelhante ao uso real do projeto.

    Representa o conteúdo típico de um `kv.defaults.yaml`, base canônica
    sobre a qual o arquivo local é aplicado via deep-merge.
    """

    return """\
kv:
  url: http://localhost:8500
  acl_token: null
  separator: /
  timeout_s: 10.0
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML local (override) apontando para outro agente e com token ACL."""

    return """\
kv:
  url: http://consul.internal:8500
  acl_token: s3cr3t
  timeout_s: 2
"""


# =====================================================
# Documentos aninhados
# =====================================================

@pytest.fixture
def app_document() -> dict:
    """
    Documento aninhado típico de configuração de aplicação.

    Cobre as formas que o projetor trata de maneira distinta:
    - mapas aninhados (`db`)
    - array folha de strings (`tags`)
    - array misto, expandido por índice (`workers`)
    - marcador de diretório (`cache: null`)
    - booleano e float escalares
    """

    return {
        "db": {"host": "x", "port": 5432},
        "tags": ["a", "b"],
        "workers": [{"name": "w1"}, "standalone"],
        "cache": None,
        "debug": False,
        "ratio": 0.25,
    }


# =====================================================
# Transporte + cliente
# =====================================================

@pytest.fixture
def memory_transport():
    from kv_projection.core.transport.memory import InMemoryTransport

    return InMemoryTransport()


@pytest.fixture
def kv_client(memory_transport):
    """Cliente ligado ao transporte em memória, com contexto próprio."""
    from kv_projection.client import KvClient
    from kv_projection.core.context import OperationContext

    return KvClient(memory_transport, context=OperationContext(context_id="test-ctx"))

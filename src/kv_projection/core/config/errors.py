# src/kv_projection/core/config/errors.py
"""
Exceções canônicas da camada de configuração do KV Projection.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento, a validação estrutural e a resolução da configuração do
cliente (endpoint, token, separador de namespace).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao operador

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de transporte ou de projeção

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do cliente, do transporte ou do projetor
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do KV Projection.

    Todas as exceções levantadas durante carregamento, validação estrutural
    e resolução de configuração herdam desta classe, permitindo captura
    genérica sem confundir falhas de configuração com falhas de transporte.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Não há defaults implícitos lidos de variáveis de ambiente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge
    entre defaults e overrides locais.

    Exemplo de conflito:
        - base:     {"kv": {"url": "http://localhost:8500"}}
        - override: {"kv": "http://consul:8500"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito

    Limites explícitos:
        - Esta política vale apenas para arquivos de configuração;
          o fold de listagens remotas usa a política last-wins
          de `core.projection.merge`
    """


class InvalidConfigValueError(ConfigError):
    """
    Exceção levantada quando a seção `kv` contém chaves desconhecidas
    ou valores com tipo inválido (ex.: separador vazio, timeout negativo).
    """

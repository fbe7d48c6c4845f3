# src/kv_projection/core/__init__.py
"""
Core do KV Projection.

Este pacote reúne as peças independentes de transporte concreto:

    - value      → variante tipada de valores projetáveis
    - codec      → encode/decode de valores e transformação do fio (base64)
    - projection → flatten, fold, merge last-wins e listagem de chaves
    - transport  → contrato de transporte, store em memória e HTTP
    - config     → configuração explícita do cliente (YAML/JSON)
    - context    → log estruturado de operações

Princípios fundamentais:
    - Flatten, fold e codec são puros e síncronos
    - Toda configuração é passada explicitamente
    - Falhas são tipadas (`core.exceptions`) ou reportadas (`core.errors`)
"""

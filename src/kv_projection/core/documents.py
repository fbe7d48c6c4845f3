# src/kv_projection/core/documents.py
"""
Leitura e escrita de documentos aninhados (YAML/JSON) em disco.

Documentos são a origem típica de `write_nested` (ex.: um `app.yaml`
inteiro projetado sob um namespace) e o destino típico de `read_nested`.

Formatos suportados:
    - YAML (.yaml, .yml) via PyYAML (`safe_load` / `safe_dump`)
    - JSON (.json)

Diferente do loader de configuração, a raiz pode ser qualquer valor do
domínio (mapa, lista, escalar); um arquivo vazio é lido como None.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml  # PyYAML

from .config.errors import UnsupportedConfigFormatError


def _format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return "yaml"
    if suffix == ".json":
        return "json"
    raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")


def load_document(path: Union[str, Path]) -> Any:
    p = Path(path)
    fmt = _format(p)
    if not p.exists():
        raise FileNotFoundError(str(p))
    with p.open("r", encoding="utf-8") as f:
        if fmt == "yaml":
            return yaml.safe_load(f)
        text = f.read()
    return json.loads(text) if text.strip() else None


def dump_document(document: Any, path: Union[str, Path]) -> Path:
    """Grava o documento e retorna o caminho gravado (diretórios criados se necessário)."""
    p = Path(path)
    fmt = _format(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        if fmt == "yaml":
            yaml.safe_dump(document, f, sort_keys=False, allow_unicode=True)
        else:
            json.dump(document, f, ensure_ascii=False, indent=2)
            f.write("\n")
    return p

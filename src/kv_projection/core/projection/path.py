# src/kv_projection/core/projection/path.py
"""
KvPath — path hierárquico do namespace remoto.

Um path é uma tupla ordenada de segmentos não vazios, unidos pelo
separador configurado para formar a chave de transporte. O path vazio
representa a raiz do namespace.

Normalização:
    - separadores no início/fim são descartados
    - segmentos vazios (ex.: `a//b`) são descartados
    - um segmento que contém o separador gera níveis adicionais
      (`child("db/host")` equivale a `child("db").child("host")`)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..config.settings import DEFAULT_SEPARATOR


@dataclass(frozen=True)
class KvPath:
    segments: Tuple[str, ...] = ()
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def parse(cls, text: Optional[str], separator: str = DEFAULT_SEPARATOR) -> "KvPath":
        if not text:
            return cls((), separator)
        return cls(tuple(s for s in text.split(separator) if s), separator)

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def key(self) -> str:
        return self.separator.join(self.segments)

    @property
    def directory_key(self) -> str:
        """Chave de transporte de um marcador de diretório (separador no fim)."""
        return self.key + self.separator

    @property
    def prefix(self) -> str:
        """Prefixo de listagem dos descendentes (vazio na raiz)."""
        return "" if self.is_root else self.directory_key

    def child(self, segment: str) -> "KvPath":
        extra = tuple(s for s in str(segment).split(self.separator) if s)
        return KvPath(self.segments + extra, self.separator)

    def relative_to(self, base: "KvPath") -> Optional["KvPath"]:
        """Remove `base` do início do path; None se o path não está sob `base`."""
        n = len(base.segments)
        if self.segments[:n] != base.segments:
            return None
        return KvPath(self.segments[n:], self.separator)

    def __str__(self) -> str:
        return self.key

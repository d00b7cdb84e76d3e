"""
Normalização de nomes para chaves de árvore, nomes de arquivo e classificação.

Regras (v1):
    - case-fold e trim
    - fronteiras camelCase viram separador ("primaryColor" → "primary-color")
    - sequências de espaços/pontuação colapsam em um único separador
    - separadores nas pontas são removidos

A mesma normalização é usada para classificar coleções/grupos, o que
garante que "Global", " GLOBAL " e "global" caiam na mesma categoria.
"""

from __future__ import annotations

import re
from typing import List

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_WORD_RE = re.compile(r"[^0-9a-z]+")


def _words(name: str) -> List[str]:
    spaced = _CAMEL_BOUNDARY_RE.sub(" ", name.strip())
    return [w for w in _NON_WORD_RE.split(spaced.casefold()) if w]


def to_kebab(name: str) -> str:
    """"Brand A / Dark" → "brand-a-dark"."""
    return "-".join(_words(name))


def to_camel(name: str) -> str:
    """"Brand A / Dark" → "brandADark"."""
    words = _words(name)
    if not words:
        return ""
    return words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:])


def normalize_name(name: str) -> str:
    """Forma canônica usada na classificação (equivale a `to_kebab`)."""
    return to_kebab(name)

"""Hashing canônico do TokenSet.

O hashing do working set serve para:
- rastreabilidade no Manifest da exportação
- detecção de divergência de entrada entre execuções

Decisão: o hash é calculado a partir de JSON canônico (sort_keys, separators).
"""

from __future__ import annotations

import hashlib

from atlas_tokens.core.config.hashing import canonical_json

from .entities import TokenSet


def compute_token_set_hash(token_set: TokenSet) -> str:
    """Computa SHA-256 do working set em formato canônico."""
    return hashlib.sha256(canonical_json(token_set.to_dict()).encode("utf-8")).hexdigest()

"""Modelo de dados do working set de design tokens (Atlas Tokens)."""

from .entities import (
    Brand,
    ExportRequest,
    ExportScope,
    Theme,
    ThemeOverride,
    Token,
    TokenCollection,
    TokenGroup,
    TokenSet,
)
from .errors import (
    TokenSetError,
    TokenSetFileNotFoundError,
    TokenSetParseError,
    TokenSetValidationError,
    UnsupportedTokenSetFormatError,
)
from .hashing import compute_token_set_hash
from .loader import load_token_set, validate_token_set
from .provider import SnapshotTokenProvider, TokenProvider

__all__ = [
    "Brand",
    "ExportRequest",
    "ExportScope",
    "Theme",
    "ThemeOverride",
    "Token",
    "TokenCollection",
    "TokenGroup",
    "TokenSet",
    "TokenSetError",
    "TokenSetFileNotFoundError",
    "TokenSetParseError",
    "TokenSetValidationError",
    "UnsupportedTokenSetFormatError",
    "compute_token_set_hash",
    "load_token_set",
    "validate_token_set",
    "SnapshotTokenProvider",
    "TokenProvider",
]

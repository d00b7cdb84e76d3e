"""Overlay de temas (fronteira `ThemeOverlay` + implementação sequencial)."""

from .themes import SequentialThemeOverlay, ThemeOverlay, changed_token_ids, is_token_changed

__all__ = [
    "SequentialThemeOverlay",
    "ThemeOverlay",
    "changed_token_ids",
    "is_token_changed",
]

"""Formatação de tokens em árvore (fronteira `TreeFormatter`)."""

from .formatter import NestedTreeFormatter, TreeFormatter, leaf_theme_key

__all__ = ["NestedTreeFormatter", "TreeFormatter", "leaf_theme_key"]

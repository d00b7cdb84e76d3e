"""
Fronteira do token provider.

O provider remoto (store do design system) é um colaborador externo:
todo fetch acontece **antes** da composição, que opera apenas sobre um
TokenSet já materializado. Este módulo define o contrato mínimo e um
provider em memória, usado por snapshots e testes.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from .entities import Brand, Theme, Token, TokenCollection, TokenGroup, TokenSet


@runtime_checkable
class TokenProvider(Protocol):
    """Contrato de leitura de uma versão do design system."""

    def get_tokens(self) -> Sequence[Token]:
        ...

    def get_token_groups(self) -> Sequence[TokenGroup]:
        ...

    def get_token_collections(self) -> Sequence[TokenCollection]:
        ...

    def get_token_themes(self) -> Sequence[Theme]:
        ...

    def get_brands(self) -> Sequence[Brand]:
        ...


class SnapshotTokenProvider:
    """Provider que serve um TokenSet em memória (ex.: `load_token_set`)."""

    def __init__(self, token_set: TokenSet):
        self._token_set = token_set

    def get_tokens(self) -> Sequence[Token]:
        return self._token_set.tokens

    def get_token_groups(self) -> Sequence[TokenGroup]:
        return self._token_set.groups

    def get_token_collections(self) -> Sequence[TokenCollection]:
        return self._token_set.collections

    def get_token_themes(self) -> Sequence[Theme]:
        return self._token_set.themes

    def get_brands(self) -> Sequence[Brand]:
        return self._token_set.brands

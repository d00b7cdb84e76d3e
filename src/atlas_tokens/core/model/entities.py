"""
Entidades canônicas do working set de design tokens.

Todas as entidades são imutáveis (frozen dataclasses). O core nunca muta
um token carregado: a aplicação de temas produz novas instâncias via
`dataclasses.replace`.

Entidades:
    - Token            → valor de design nomeado (payload opaco)
    - TokenGroup       → nó da hierarquia de grupos (floresta via parent_id)
    - TokenCollection  → partição lógica de tokens ("Global", "Components"...)
    - ThemeOverride    → override de valor de um token por um tema
    - Theme            → conjunto ordenado de overrides
    - Brand            → brand da versão exportada (filtro de escopo)
    - TokenSet         → working set materializado, na ordem de entrada
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Token:
    """Token de design. `value` é opaco para o core."""

    id: str
    name: str
    type: str
    value: Any
    description: Optional[str] = None
    parent_group_id: Optional[str] = None
    collection_id: Optional[str] = None
    brand_id: Optional[str] = None
    alias_of: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "value": self.value,
            "description": self.description,
            "group_id": self.parent_group_id,
            "collection_id": self.collection_id,
            "brand_id": self.brand_id,
            "alias_of": self.alias_of,
        }


@dataclass(frozen=True)
class TokenGroup:
    id: str
    name: str
    parent_id: Optional[str] = None
    brand_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "parent_id": self.parent_id,
            "brand_id": self.brand_id,
        }


@dataclass(frozen=True)
class TokenCollection:
    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class ThemeOverride:
    """Override de um token: valor literal ou referência (`alias_of`)."""

    token_id: str
    value: Any = None
    alias_of: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"token_id": self.token_id, "value": self.value, "alias_of": self.alias_of}


@dataclass(frozen=True)
class Theme:
    """
    Tema: conjunto ordenado de overrides.

    `version_id` é o identificador estável entre versões do design system;
    temas podem ser solicitados por `id` ou por `version_id`.
    """

    id: str
    name: str
    overrides: Tuple[ThemeOverride, ...] = ()
    version_id: Optional[str] = None

    def matches(self, ref: str) -> bool:
        return ref == self.id or (self.version_id is not None and ref == self.version_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "version_id": self.version_id,
            "overrides": [o.to_dict() for o in self.overrides],
        }


@dataclass(frozen=True)
class Brand:
    id: str
    name: str
    version_id: Optional[str] = None

    def matches(self, ref: str) -> bool:
        return ref == self.id or (self.version_id is not None and ref == self.version_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "version_id": self.version_id}


@dataclass(frozen=True)
class TokenSet:
    """
    Working set materializado de uma versão do design system.

    Invariantes:
        - A ordem de cada sequência é a ordem de entrada (determinismo)
        - Ids de token são únicos (validado no loader)
    """

    tokens: Tuple[Token, ...] = ()
    groups: Tuple[TokenGroup, ...] = ()
    collections: Tuple[TokenCollection, ...] = ()
    themes: Tuple[Theme, ...] = ()
    brands: Tuple[Brand, ...] = ()

    @classmethod
    def from_provider(cls, provider: Any) -> "TokenSet":
        """Materializa um TokenSet a partir de um provider (ver `provider.TokenProvider`)."""
        return cls(
            tokens=tuple(provider.get_tokens()),
            groups=tuple(provider.get_token_groups()),
            collections=tuple(provider.get_token_collections()),
            themes=tuple(provider.get_token_themes()),
            brands=tuple(provider.get_brands()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tokens": [t.to_dict() for t in self.tokens],
            "groups": [g.to_dict() for g in self.groups],
            "collections": [c.to_dict() for c in self.collections],
            "themes": [t.to_dict() for t in self.themes],
            "brands": [b.to_dict() for b in self.brands],
        }


@dataclass(frozen=True)
class ExportRequest:
    """
    Pedido de exportação: temas (na ordem de aplicação) e brand opcional.
    """

    theme_ids: Tuple[str, ...] = ()
    brand_id: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ExportRequest":
        data = data or {}
        theme_ids = data.get("theme_ids") or data.get("themeIds") or ()
        brand_id = data.get("brand_id") or data.get("brandId")
        # um id isolado é um único tema, nunca uma sequência de caracteres
        if isinstance(theme_ids, str):
            theme_ids = (theme_ids,)
        elif not isinstance(theme_ids, (list, tuple)):
            raise TypeError(f"theme_ids must be a list of theme ids, got {type(theme_ids).__name__}")
        return cls(theme_ids=tuple(str(t) for t in theme_ids), brand_id=brand_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"theme_ids": list(self.theme_ids), "brand_id": self.brand_id}


@dataclass(frozen=True)
class ExportScope:
    """
    Entradas resolvidas de uma exportação.

    - tokens/groups: já filtrados pela brand solicitada (se houver)
    - themes: temas resolvidos, na ordem do pedido
    """

    tokens: Tuple[Token, ...]
    groups: Tuple[TokenGroup, ...]
    collections: Tuple[TokenCollection, ...]
    themes: Tuple[Theme, ...] = ()
    brand: Optional[Brand] = None

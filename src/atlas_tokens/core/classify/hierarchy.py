"""
Classificação hierárquica de coleções e grupos.

Este módulo responde duas perguntas usadas pelo composer no layout
por coleção:

    - Em qual categoria semântica cai uma coleção?
      (`classify_collection` → Category)
    - Qual é o "grupo de componente" dono de um token?
      (`find_component_group` → id de grupo)

Princípios fundamentais:
    - Funções puras: nenhuma dependência de ordem ou estado global
    - Vocabulários vêm de uma `ClassificationPolicy` injetável
    - A subida na hierarquia é limitada por `policy.max_group_depth`,
      mesmo que a floresta de grupos seja declarada acíclica

Fallbacks (lacunas de integridade não são fatais):
    - Nenhum ancestral reconhecido → id do grupo pai imediato
    - Grupo inexistente no meio da cadeia → id do grupo pai imediato
    - Token sem grupo pai → None (sem bucket; o composer reporta)
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Union

from atlas_tokens.core.model.entities import Token, TokenCollection, TokenGroup
from atlas_tokens.core.naming import normalize_name

from .policy import DEFAULT_POLICY, ClassificationPolicy


class Category(str, Enum):
    """Categoria semântica derivada do nome normalizado da coleção."""

    GLOBAL = "global"
    ALIAS = "alias"
    COMPONENT = "component"
    BRAND = "brand"
    OTHER = "other"

    @property
    def is_root_level(self) -> bool:
        """Global/Alias: um documento na raiz, nunca tematizado."""
        return self in (Category.GLOBAL, Category.ALIAS)


GroupsLike = Union[Mapping[str, TokenGroup], Iterable[TokenGroup]]


def index_groups(groups: GroupsLike) -> Dict[str, TokenGroup]:
    """Indexa grupos por id (aceita mapping já indexado ou sequência)."""
    if isinstance(groups, Mapping):
        return dict(groups)
    return {g.id: g for g in groups}


def classify_name(name: str, policy: ClassificationPolicy = DEFAULT_POLICY) -> Category:
    normalized = normalize_name(name)
    if normalized in policy.global_names:
        return Category.GLOBAL
    if normalized in policy.alias_names:
        return Category.ALIAS
    if normalized in policy.component_collection_names:
        return Category.COMPONENT
    if policy.is_brand_name(normalized):
        return Category.BRAND
    return Category.OTHER


def classify_collection(
    collection: Optional[TokenCollection],
    policy: ClassificationPolicy = DEFAULT_POLICY,
) -> Category:
    """
    Classifica uma coleção pelo nome normalizado.

    Coleção ausente (referência não resolvida) cai em `Category.OTHER`.
    """
    if collection is None:
        return Category.OTHER
    return classify_name(collection.name, policy)


def ancestor_chain(
    group_id: Optional[str],
    groups: GroupsLike,
    *,
    max_depth: int = DEFAULT_POLICY.max_group_depth,
) -> List[TokenGroup]:
    """
    Lista o grupo `group_id` e seus ancestrais (mais próximo primeiro).

    A cadeia termina no primeiro grupo raiz, numa referência não resolvida,
    ou após `max_depth` grupos visitados.
    """
    by_id = index_groups(groups)
    chain: List[TokenGroup] = []
    current = group_id
    while current is not None and len(chain) < max_depth:
        group = by_id.get(current)
        if group is None:
            break
        chain.append(group)
        current = group.parent_id
    return chain


def find_component_group(
    token: Token,
    groups: GroupsLike,
    policy: ClassificationPolicy = DEFAULT_POLICY,
) -> Optional[str]:
    """
    Resolve o grupo de componente de um token.

    Sobe a partir do grupo pai imediato (inclusive) e retorna o id do
    primeiro ancestral cujo nome normalizado pertence a
    `policy.component_names`. Sem correspondência, retorna o id do pai
    imediato (bucket de fallback). Token sem grupo pai retorna None.
    """
    if token.parent_group_id is None:
        return None

    for group in ancestor_chain(token.parent_group_id, groups, max_depth=policy.max_group_depth):
        if policy.is_component_name(normalize_name(group.name)):
            return group.id

    return token.parent_group_id


def group_path(
    group_id: Optional[str],
    groups: GroupsLike,
    *,
    max_depth: int = DEFAULT_POLICY.max_group_depth,
) -> List[str]:
    """Nomes dos grupos da raiz até `group_id` (grupos sem nome são omitidos)."""
    names = [g.name for g in ancestor_chain(group_id, groups, max_depth=max_depth)]
    return [n for n in reversed(names) if n.strip()]

"""
Política de classificação injetável.

Os vocabulários usados para classificar coleções e detectar grupos de
componente não são constantes compiladas: vivem em uma
`ClassificationPolicy` imutável, que pode ser substituída em testes ou
construída a partir da seção `classification` da configuração.

Seção `classification` (todas as chaves opcionais; listas substituem o default):

    classification:
      globalNames: [global]
      aliasNames: [alias]
      componentCollectionNames: [components, component]
      componentNames: [button, card, ...]
      brandNames: [acme, ...]
      brandPrefixes: [brand-]
      maxGroupDepth: 64

Todos os nomes são normalizados com `normalize_name` na construção.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Mapping, Tuple

from atlas_tokens.core.config.errors import InvalidExportOptionError
from atlas_tokens.core.naming import normalize_name


DEFAULT_COMPONENT_NAMES: Tuple[str, ...] = (
    "button",
    "accordion",
    "badge",
    "card",
    "input",
    "dialog",
    "dropdown",
    "checkbox",
    "radio",
    "switch",
    "tab",
    "toast",
    "tooltip",
)

DEFAULT_BRAND_NAMES: Tuple[str, ...] = (
    "zest",
    "factor",
    "chefsplate",
    "everyplate",
    "factorform",
    "factorui2",
    "goodchop",
    "greenchef",
    "hellofresh",
    "thepetstable",
    "youfoodz",
)

DEFAULT_MAX_GROUP_DEPTH = 64


def _normalized(names: Iterable[str]) -> FrozenSet[str]:
    return frozenset(normalize_name(n) for n in names if normalize_name(n))


@dataclass(frozen=True)
class ClassificationPolicy:
    """
    Vocabulários de classificação (já normalizados).

    Campos:
        - global_names / alias_names: coleções raiz, nunca tematizadas
        - component_collection_names: coleções expandidas por grupo de componente
        - component_names: nomes de grupo reconhecidos como componente
        - brand_names / brand_prefixes: coleções de brand (nome exato ou prefixo)
        - max_group_depth: limite de saltos na subida da hierarquia de grupos
    """

    global_names: FrozenSet[str] = frozenset({"global"})
    alias_names: FrozenSet[str] = frozenset({"alias"})
    component_collection_names: FrozenSet[str] = frozenset({"components", "component"})
    component_names: FrozenSet[str] = frozenset(DEFAULT_COMPONENT_NAMES)
    brand_names: FrozenSet[str] = frozenset(DEFAULT_BRAND_NAMES)
    brand_prefixes: Tuple[str, ...] = ("brand-",)
    max_group_depth: int = DEFAULT_MAX_GROUP_DEPTH

    def is_brand_name(self, normalized: str) -> bool:
        if normalized in self.brand_names:
            return True
        return any(normalized.startswith(prefix) for prefix in self.brand_prefixes)

    def is_component_name(self, normalized: str) -> bool:
        return normalized in self.component_names


DEFAULT_POLICY = ClassificationPolicy()


_LIST_KEYS = {
    "globalNames": "global_names",
    "aliasNames": "alias_names",
    "componentCollectionNames": "component_collection_names",
    "componentNames": "component_names",
    "brandNames": "brand_names",
}


def parse_classification_policy(config: Mapping[str, Any]) -> ClassificationPolicy:
    """
    Constrói a política a partir da seção `classification` da configuração.

    Raises:
        InvalidExportOptionError: Se alguma chave tiver tipo inválido.
    """
    section = config.get("classification") or {}
    if not isinstance(section, Mapping):
        raise InvalidExportOptionError("classification section must be a mapping")

    kwargs: dict = {}
    for key, attr in _LIST_KEYS.items():
        if key not in section:
            continue
        names = section[key]
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise InvalidExportOptionError(f"classification.{key} must be a list of strings")
        kwargs[attr] = _normalized(names)

    if "brandPrefixes" in section:
        prefixes = section["brandPrefixes"]
        if not isinstance(prefixes, list) or not all(isinstance(p, str) and p.strip() for p in prefixes):
            raise InvalidExportOptionError("classification.brandPrefixes must be a list of non-empty strings")
        # prefixos preservam o separador final ("brand-")
        kwargs["brand_prefixes"] = tuple(p.strip().casefold() for p in prefixes)

    if "maxGroupDepth" in section:
        depth = section["maxGroupDepth"]
        if not isinstance(depth, int) or isinstance(depth, bool) or depth < 1:
            raise InvalidExportOptionError("classification.maxGroupDepth must be a positive int")
        kwargs["max_group_depth"] = depth

    return ClassificationPolicy(**kwargs)

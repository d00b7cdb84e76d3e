"""
Particionamento de tokens e convenções de caminho dos documentos.

Uma partição é o conjunto de tokens que vira um documento (antes de
qualquer tema): o set inteiro, um tipo de token, uma coleção ou um grupo
de componente. O composer decide, por estilo de tema, quantos documentos
cada partição gera e em qual diretório.

Convenções de caminho:
    - base / aninhado           → "." (grupos de componente: "./components")
    - tema separado (arquivo/tipo) → "./<temaCamel>"
    - tema separado (coleção)   → "./brand/<tema-kebab>"
    - resumo de brand           → "./brand/<tema-kebab>.json"
    - tema mesclado             → "./themed"

Ordem determinística:
    - tipos pela primeira aparição
    - coleções na ordem de entrada (apenas as que têm tokens), seguidas de
      referências de coleção não resolvidas pela primeira aparição
    - grupos de componente pela primeira aparição de um token
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from atlas_tokens.core.classify.hierarchy import Category, classify_collection, find_component_group
from atlas_tokens.core.classify.policy import ClassificationPolicy
from atlas_tokens.core.model.entities import Theme, Token, TokenCollection, TokenGroup
from atlas_tokens.core.naming import to_camel, to_kebab


ROOT_DIR = "."
COMPONENTS_DIR = "./components"
BRAND_DIR = "./brand"
THEMED_DIR = "./themed"
SINGLE_FILE_NAME = "tokens.json"
UNCATEGORIZED = "uncategorized"


@dataclass(frozen=True)
class Partition:
    """
    Conjunto de tokens que origina um documento.

    - file_name: nome do arquivo (igual em todos os diretórios de tema)
    - directory: diretório do documento base/aninhado
    - category: categoria da coleção (apenas no layout por coleção)
    - component: True para partições de grupo de componente
    """

    file_name: str
    tokens: Tuple[Token, ...]
    directory: str = ROOT_DIR
    category: Optional[Category] = None
    component: bool = False

    @property
    def is_root_level(self) -> bool:
        return self.category is not None and self.category.is_root_level


def json_name(stem: str) -> str:
    return f"{stem}.json"


def theme_label(theme: Theme) -> str:
    return to_kebab(theme.name) or to_kebab(theme.id)


def theme_key(theme: Theme) -> str:
    """Chave do tema dentro das folhas aninhadas."""
    return theme_label(theme)


def theme_camel_dir(theme: Theme) -> str:
    return f"./{to_camel(theme.name) or to_camel(theme.id)}"


def theme_brand_dir(theme: Theme) -> str:
    return f"{BRAND_DIR}/{theme_label(theme)}"


# ---------------------------------------------------------------------------
# Particionadores
# ---------------------------------------------------------------------------

def single_partition(tokens: Sequence[Token]) -> List[Partition]:
    return [Partition(file_name=SINGLE_FILE_NAME, tokens=tuple(tokens))]


def partitions_by_type(tokens: Sequence[Token]) -> List[Partition]:
    buckets: Dict[str, List[Token]] = {}
    for token in tokens:
        buckets.setdefault(token.type, []).append(token)
    return [
        Partition(file_name=json_name(to_kebab(token_type) or token_type), tokens=tuple(items))
        for token_type, items in buckets.items()
    ]


def partitions_by_collection(
    tokens: Sequence[Token],
    collections: Sequence[TokenCollection],
    policy: ClassificationPolicy,
    warnings: List[str],
) -> List[Partition]:
    """Uma partição por coleção com tokens, com a categoria classificada."""
    known = {c.id: c for c in collections}
    buckets: Dict[Optional[str], List[Token]] = {}
    for token in tokens:
        buckets.setdefault(token.collection_id, []).append(token)

    result: List[Partition] = []
    for collection in collections:
        items = buckets.get(collection.id)
        if not items:
            continue
        result.append(
            Partition(
                file_name=json_name(to_kebab(collection.name) or to_kebab(collection.id)),
                tokens=tuple(items),
                category=classify_collection(collection, policy),
            )
        )

    for collection_id, items in buckets.items():
        if collection_id in known:
            continue
        stem = to_kebab(collection_id) if collection_id else UNCATEGORIZED
        warnings.append(
            f"{len(items)} token(s) reference unknown collection {collection_id!r}; "
            f"exported as {json_name(stem)}"
        )
        result.append(Partition(file_name=json_name(stem), tokens=tuple(items), category=Category.OTHER))
    return result


def component_partitions(
    partition: Partition,
    groups: Mapping[str, TokenGroup],
    policy: ClassificationPolicy,
    warnings: List[str],
) -> List[Partition]:
    """Expande uma coleção de componentes em uma partição por grupo de componente."""
    buckets: Dict[str, List[Token]] = {}
    for token in partition.tokens:
        group_id = find_component_group(token, groups, policy)
        if group_id is None:
            warnings.append(
                f"token {token.id!r} in collection {partition.file_name} has no parent group; "
                "skipped in component documents"
            )
            continue
        buckets.setdefault(group_id, []).append(token)

    result: List[Partition] = []
    for group_id, items in buckets.items():
        group = groups.get(group_id)
        if group is None:
            warnings.append(f"component group {group_id!r} not found; using its id as file name")
            stem = to_kebab(group_id)
        else:
            stem = to_kebab(group.name) or to_kebab(group.id)
        result.append(
            Partition(
                file_name=json_name(stem),
                tokens=tuple(items),
                directory=COMPONENTS_DIR,
                category=Category.COMPONENT,
                component=True,
            )
        )
    return result

"""
Classificação de coleções e grupos (Atlas Tokens).

- policy    → `ClassificationPolicy` injetável (vocabulários + limite de profundidade)
- hierarchy → `classify_collection`, `find_component_group`, `group_path`
"""

from .hierarchy import (
    Category,
    ancestor_chain,
    classify_collection,
    classify_name,
    find_component_group,
    group_path,
    index_groups,
)
from .policy import DEFAULT_POLICY, ClassificationPolicy, parse_classification_policy

__all__ = [
    "Category",
    "ancestor_chain",
    "classify_collection",
    "classify_name",
    "find_component_group",
    "group_path",
    "index_groups",
    "DEFAULT_POLICY",
    "ClassificationPolicy",
    "parse_classification_policy",
]

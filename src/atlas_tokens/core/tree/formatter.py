"""
Formatação de tokens em árvore aninhada.

O formatter transforma uma lista plana de tokens em um mapping aninhado
pelo caminho hierárquico de cada token (nomes dos grupos ancestrais +
nome do token). É a fronteira entre o composer e o formato final dos
documentos.

Formato das folhas (formatter de referência):

    base                     → {"value": ..., "type": ..., "description"?: ...}
    tema, base habilitada    → igual à base, com o valor tematizado
    tema, base suprimida     → {<theme_key>: {"value": ...}}

O último caso existe para o modo de temas aninhados: o deep-merge da
árvore base com a árvore do tema produz, na mesma folha, o valor base e
uma entrada adicional chaveada pelo tema.

A chave do tema divide o namespace da folha com `value`, `type` e
`description`. Um tema cujo nome coincide com uma dessas chaves recebe o
prefixo `theme-` (ver `leaf_theme_key`), para que o deep-merge nunca
substitua os metadados da base.

Referências:
    Um token com `alias_of` resolvível em `all_tokens` é emitido como
    `"{caminho.do.alvo}"`. Alvo não resolvível → valor bruto.

Invariantes:
    - Lista vazia de tokens → None (o composer pula o documento)
    - A ordem das chaves segue a ordem dos tokens de entrada
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from atlas_tokens.core.classify.hierarchy import group_path, index_groups
from atlas_tokens.core.classify.policy import DEFAULT_MAX_GROUP_DEPTH
from atlas_tokens.core.config.merge import deep_merge
from atlas_tokens.core.model.entities import Token, TokenGroup
from atlas_tokens.core.naming import to_kebab


LEAF_KEYS = frozenset({"value", "type", "description"})


def leaf_theme_key(theme_key: str) -> str:
    """Chave do tema dentro da folha, sem colidir com os metadados da base."""
    return f"theme-{theme_key}" if theme_key in LEAF_KEYS else theme_key


@runtime_checkable
class TreeFormatter(Protocol):
    """Contrato do formatter usado pelo composer."""

    def tokens_to_tree(
        self,
        tokens: Sequence[Token],
        groups: Sequence[TokenGroup],
        *,
        theme_key: Optional[str] = None,
        all_tokens: Optional[Sequence[Token]] = None,
        export_base_values: bool = True,
    ) -> Optional[Dict[str, Any]]:
        ...


class NestedTreeFormatter:
    """Formatter de referência (árvore por caminho de grupos)."""

    def __init__(self, *, max_group_depth: int = DEFAULT_MAX_GROUP_DEPTH) -> None:
        self.max_group_depth = max_group_depth

    def token_path(self, token: Token, groups: Mapping[str, TokenGroup]) -> List[str]:
        segments = [to_kebab(n) for n in group_path(token.parent_group_id, groups, max_depth=self.max_group_depth)]
        segments.append(to_kebab(token.name) or token.id)
        return [s for s in segments if s]

    def tokens_to_tree(
        self,
        tokens: Sequence[Token],
        groups: Sequence[TokenGroup],
        *,
        theme_key: Optional[str] = None,
        all_tokens: Optional[Sequence[Token]] = None,
        export_base_values: bool = True,
    ) -> Optional[Dict[str, Any]]:
        if not tokens:
            return None

        by_group = index_groups(groups)
        by_id = {t.id: t for t in (all_tokens if all_tokens is not None else tokens)}

        tree: Dict[str, Any] = {}
        for token in tokens:
            value = self._render_value(token, by_id, by_group)
            if theme_key is not None and not export_base_values:
                leaf: Dict[str, Any] = {leaf_theme_key(theme_key): {"value": value}}
            else:
                leaf = {"value": value, "type": token.type}
                if token.description:
                    leaf["description"] = token.description
            _insert(tree, self.token_path(token, by_group), leaf)
        return tree

    def _render_value(
        self,
        token: Token,
        by_id: Mapping[str, Token],
        by_group: Mapping[str, TokenGroup],
    ) -> Any:
        if token.alias_of is None:
            return token.value
        target = by_id.get(token.alias_of)
        if target is None:
            return token.value
        return "{" + ".".join(self.token_path(target, by_group)) + "}"


def _insert(tree: Dict[str, Any], path: List[str], leaf: Dict[str, Any]) -> None:
    node = tree
    for segment in path[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child

    key = path[-1]
    existing = node.get(key)
    node[key] = deep_merge(existing, leaf) if isinstance(existing, dict) else leaf

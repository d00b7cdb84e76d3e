"""
Overlay de temas sobre tokens base.

Um overlay aplica os overrides de um ou mais temas, em ordem, sobre um
subconjunto de tokens e devolve novas instâncias com os valores efetivos.

Decisões arquiteturais:
    - O overlay é uma fronteira (`ThemeOverlay`): o composer depende apenas
      do protocolo, e a implementação de referência pode ser substituída
    - Tokens nunca são mutados; overrides produzem cópias via `replace`
    - Referências (`alias_of`) são resolvidas contra o conjunto completo,
      não apenas contra o subconjunto sendo tematizado

Invariantes:
    - A ordem de saída é a ordem do subconjunto de entrada
    - Temas posteriores vencem (aplicação sequencial)
    - Token sem override é devolvido como a mesma instância

Limites explícitos:
    - Não valida o conteúdo de valores (payload opaco)
    - Alvo de referência desconhecido não é erro: o valor bruto é mantido
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Protocol, Sequence, Set, runtime_checkable

from atlas_tokens.core.model.entities import Theme, ThemeOverride, Token


@runtime_checkable
class ThemeOverlay(Protocol):
    """Contrato do overlay de temas usado pelo composer."""

    def apply_themes(
        self,
        all_tokens: Sequence[Token],
        subset: Sequence[Token],
        themes: Sequence[Theme],
    ) -> List[Token]:
        ...


class SequentialThemeOverlay:
    """Overlay de referência: aplica os temas na ordem recebida."""

    def apply_themes(
        self,
        all_tokens: Sequence[Token],
        subset: Sequence[Token],
        themes: Sequence[Theme],
    ) -> List[Token]:
        by_id: Dict[str, Token] = {t.id: t for t in all_tokens}
        result = list(subset)
        if not themes:
            return result

        positions = {t.id: i for i, t in enumerate(result)}
        for theme in themes:
            for override in theme.overrides:
                pos = positions.get(override.token_id)
                if pos is None:
                    continue
                result[pos] = _apply_override(result[pos], override, by_id)
        return result


def _apply_override(token: Token, override: ThemeOverride, by_id: Dict[str, Token]) -> Token:
    if override.alias_of is not None:
        target = by_id.get(override.alias_of)
        if target is not None:
            return replace(token, value=target.value, alias_of=target.id)
    return replace(token, value=override.value, alias_of=None)


def is_token_changed(original: Token, overlaid: Token) -> bool:
    """True quando o overlay alterou o valor ou a referência do token."""
    return original.value != overlaid.value or original.alias_of != overlaid.alias_of


def changed_token_ids(originals: Iterable[Token], overlaid: Iterable[Token]) -> Set[str]:
    """Ids dos tokens cujo valor efetivo difere entre base e overlay."""
    base = {t.id: t for t in originals}
    changed: Set[str] = set()
    for token in overlaid:
        original = base.get(token.id)
        if original is not None and is_token_changed(original, token):
            changed.add(token.id)
    return changed

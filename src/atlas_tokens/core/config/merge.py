# src/atlas_tokens/core/config/merge.py
"""
Deep-merge canônico de árvores aninhadas.

Este módulo implementa a política de deep-merge usada em dois pontos
do Atlas Tokens:
    - resolução da configuração efetiva (defaults + overrides locais)
    - composição de documentos com temas aninhados (base + temas)

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - list/tuple  → folha (sobrescrita total, sem merge elemento a elemento)
    - escalar     → sobrescrita direta pelo segundo argumento
    - tipos diferentes na mesma chave → o segundo argumento vence

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - O resultado não compartilha estrutura mutável com os inputs
    - Conflitos nunca são erros: last-write-wins

Invariantes:
    - Chaves presentes em apenas um lado são preservadas
    - `merge_all([d0, ..., dN])` é o fold à esquerda: dN vence em folhas comuns
    - `deep_merge(a, b) != deep_merge(b, a)` quando folhas divergem

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não valida semântica de domínio
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict, Iterable, Mapping, Optional

from .errors import MergeInputError


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre duas árvores aninhadas.

    A função combina `base` com `override`, produzindo uma nova estrutura
    sem mutar nenhum dos inputs. O composer encadeia muitos merges sobre
    os mesmos documentos, por isso o resultado é sempre construído com
    dicionários novos (e folhas copiadas).

    Política de merge (v1):
        - dict + dict → merge recursivo por chave
        - list        → sobrescrita total
        - escalar     → sobrescrita direta pelo override
        - dict vs folha (em qualquer ordem) → o override vence

    Args:
        base (Mapping[str, Any]): Árvore base.
        override (Mapping[str, Any]): Árvore cujas folhas vencem.

    Returns:
        Dict[str, Any]: Nova árvore resultante do deep-merge.

    Raises:
        MergeInputError: Se algum dos argumentos não for um mapeamento.
    """

    if not isinstance(base, Mapping) or not isinstance(override, Mapping):
        raise MergeInputError(
            f"Deep-merge requer mapeamentos no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = {key: _copy_value(value) for key, value in base.items()}

    for key, override_value in override.items():
        base_value = result.get(key)

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, Mapping):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list, escalar ou tipos divergentes -> sobrescrita
        result[key] = _copy_value(override_value)

    return result


def merge_all(documents: Iterable[Optional[Mapping[str, Any]]]) -> Optional[Dict[str, Any]]:
    """
    Fold à esquerda de `deep_merge` sobre uma sequência ordenada.

    Entradas `None` são ignoradas (documento vazio). Documentos posteriores
    vencem em folhas comuns. Retorna `None` quando nenhum documento foi
    fornecido.
    """
    merged: Optional[Dict[str, Any]] = None
    for doc in documents:
        if doc is None:
            continue
        merged = _copy_value(doc) if merged is None else deep_merge(merged, doc)
    return merged


def _copy_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy_value(v) for k, v in value.items()}
    return deepcopy(value)

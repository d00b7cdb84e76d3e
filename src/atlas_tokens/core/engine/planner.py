# src/atlas_tokens/core/engine/planner.py
"""
Planejamento da ordem de execução dos Steps (DAG).

Decisões arquiteturais:
    - Ordenação topológica de Kahn, com empates resolvidos pela ordem
      lexicográfica de `step.id`
    - Dependência desconhecida, id duplicado e ciclo são erros fatais,
      detectados antes de qualquer execução

Invariantes:
    - Nenhum Step aparece antes de suas dependências
    - A mesma definição de pipeline produz sempre a mesma ordem
"""

from __future__ import annotations

import heapq
from typing import Dict, Iterable, List

from atlas_tokens.core.pipeline.step import Step


class UnknownDependencyError(ValueError):
    """Um Step declara em `depends_on` um id que não foi registrado."""


class CycleDetectedError(ValueError):
    """As dependências formam um ciclo; nenhuma ordem válida existe."""


def plan_execution(steps: Iterable[Step]) -> List[Step]:
    """
    Valida o grafo de Steps e devolve a ordem de execução.

    Args:
        steps (Iterable[Step]): Steps declarados do pipeline.

    Returns:
        List[Step]: Steps em ordem topológica determinística.

    Raises:
        ValueError: `id` inválido ou duplicado.
        UnknownDependencyError: Dependência inexistente.
        CycleDetectedError: Ciclo no grafo.
    """
    by_id: Dict[str, Step] = {}
    for step in steps:
        sid = getattr(step, "id", None)
        if not isinstance(sid, str) or not sid.strip():
            raise ValueError("step.id must be a non-empty string")
        if sid in by_id:
            raise ValueError(f"Duplicate step id: {sid}")
        by_id[sid] = step

    pending: Dict[str, int] = {}
    dependents: Dict[str, List[str]] = {sid: [] for sid in by_id}
    for sid, step in by_id.items():
        deps = list(getattr(step, "depends_on", None) or [])
        for dep in deps:
            if dep not in by_id:
                raise UnknownDependencyError(f"Step '{sid}' depends on unknown step '{dep}'")
            dependents[dep].append(sid)
        pending[sid] = len(deps)

    ready = [sid for sid, count in pending.items() if count == 0]
    heapq.heapify(ready)

    order: List[str] = []
    while ready:
        sid = heapq.heappop(ready)
        order.append(sid)
        for child in dependents[sid]:
            pending[child] -= 1
            if pending[child] == 0:
                heapq.heappush(ready, child)

    if len(order) != len(by_id):
        stuck = sorted(sid for sid, count in pending.items() if count > 0)
        raise CycleDetectedError(f"Cycle detected in step dependency graph: {stuck}")

    return [by_id[sid] for sid in order]

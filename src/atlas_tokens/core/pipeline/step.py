# src/atlas_tokens/core/pipeline/step.py
"""
Contrato de Step do pipeline de exportação.

Um Step é uma unidade atômica (resolver entradas, compor, deduplicar,
serializar) que interage apenas via `RunContext` e devolve um
`StepResult`. Conformidade é estrutural (`@runtime_checkable`).

Invariantes:
    - `id` é único no pipeline
    - `depends_on` lista explicitamente os Steps anteriores
    - `run` é chamado no máximo uma vez por run

Limites explícitos:
    - Steps não conhecem o Engine nem o planner
    - Steps não tratam as próprias exceções fatais (o Engine converte)
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from .context import RunContext
from .types import StepKind, StepResult


@runtime_checkable
class Step(Protocol):
    id: str
    kind: StepKind
    depends_on: List[str]

    def run(self, ctx: RunContext) -> StepResult:
        """Executa a etapa uma única vez usando exclusivamente o RunContext."""
        ...

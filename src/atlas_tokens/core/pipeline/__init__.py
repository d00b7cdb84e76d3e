"""
# Pipeline Core — Atlas Tokens

Contratos do pipeline de exportação, modelado como um DAG explícito de Steps.

- **types**: `StepKind`, `StepStatus`, `StepResult`
- **step**: `Step` (Protocol)
- **context**: `RunContext` (artefatos, eventos de log, avisos)
- **registry**: `StepRegistry` (unicidade de `step.id`)

Steps não conhecem o Engine; comunicação apenas via `RunContext`.
"""

from .context import RunContext
from .registry import DuplicateStepIdError, StepRegistry
from .step import Step
from .types import StepKind, StepResult, StepStatus

__all__ = [
    "RunContext",
    "DuplicateStepIdError",
    "StepRegistry",
    "Step",
    "StepKind",
    "StepResult",
    "StepStatus",
]

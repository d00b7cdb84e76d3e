"""
Engine do Atlas Tokens.

- planner → ordenação topológica determinística e validações estruturais
- engine  → execução fail-fast de Steps, com erros como payload estruturado

Planejamento e execução são responsabilidades separadas; o Engine não
contém lógica de composição de documentos.
"""

from .engine import Engine, RunResult, exception_to_error
from .planner import CycleDetectedError, UnknownDependencyError, plan_execution

__all__ = [
    "Engine",
    "RunResult",
    "exception_to_error",
    "CycleDetectedError",
    "UnknownDependencyError",
    "plan_execution",
]

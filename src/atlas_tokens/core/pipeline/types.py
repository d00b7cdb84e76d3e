# src/atlas_tokens/core/pipeline/types.py
"""
Tipos canônicos do pipeline de exportação do Atlas Tokens.

Componentes:
    - StepKind   → classificação semântica de um Step
    - StepStatus → estado final de execução
    - StepResult → resultado imutável produzido por um Step

Invariantes:
    - Enums possuem valores textuais estáveis (persistidos no manifest)
    - StepResult nunca é alterado após criado (o Engine usa `replace`)

Limites explícitos:
    - Não executa Steps
    - Não contém lógica de composição
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StepKind(str, Enum):
    """
    Tipo semântico de um Step.

    - RESOLVE: resolução de entradas (brand, temas)
    - COMPOSE: geração de documentos em árvore
    - VALIDATE: verificações estruturais sobre documentos (ex.: destinos)
    - EXPORT: materialização da saída final

    O Engine não usa `kind` para decidir execução; é informativo.
    """

    RESOLVE = "resolve"
    COMPOSE = "compose"
    VALIDATE = "validate"
    EXPORT = "export"


class StepStatus(str, Enum):
    """Estado final de um Step (não existe estado intermediário)."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """
    Resultado imutável da execução de um Step.

    Campos:
        - step_id / kind / status: identidade e estado final
        - summary: resumo textual curto
        - metrics: contagens produzidas pelo Step
        - warnings: avisos não fatais
        - artifacts: chaves de artefatos gravados no RunContext
        - payload: dados adicionais (ex.: `error` em falhas)
    """

    step_id: str
    kind: StepKind
    status: StepStatus
    summary: str
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    artifacts: Dict[str, str] = field(default_factory=dict)
    payload: Dict[str, Any] = field(default_factory=dict)

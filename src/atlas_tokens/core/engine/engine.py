# src/atlas_tokens/core/engine/engine.py
"""
Engine de execução do pipeline de exportação.

Responsabilidades:
    - Planejar a ordem dos Steps (`plan_execution`)
    - Executar cada Step uma única vez com o `RunContext`
    - Converter exceções em `AtlasErrorPayload` (StepResult.payload["error"])
    - Incorporar ao StepResult os avisos que o Step registrou no contexto
    - Registrar cada resultado no manifest, quando fornecido

Política de execução:
    - Fail-fast sempre: após a primeira falha, os Steps restantes são
      marcados SKIPPED e não executam. Erros de configuração abortam a
      exportação inteira; saída parcial nunca é aceitável.

Invariantes:
    - StepResult é imutável; enriquecimento cria nova instância (`replace`)
    - Nenhum stack trace cru chega ao operador, apenas payload estruturado
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence

from atlas_tokens.core.config.errors import ConfigError
from atlas_tokens.core.errors import (
    BRAND_NOT_FOUND,
    DOCUMENT_PATH_COLLISION,
    THEME_NOT_FOUND,
    AtlasErrorPayload,
    engine_configuration_error,
    engine_execution_error,
)
from atlas_tokens.core.exceptions import (
    AtlasException,
    BrandNotFoundError,
    DocumentPathCollisionError,
    ThemeNotFoundError,
)
from atlas_tokens.core.pipeline.context import RunContext
from atlas_tokens.core.pipeline.step import Step
from atlas_tokens.core.pipeline.types import StepKind, StepResult, StepStatus
from atlas_tokens.core.traceability.manifest import ExportManifest, record_step_result

from .planner import plan_execution

_ERROR_CODES = {
    ThemeNotFoundError: THEME_NOT_FOUND,
    BrandNotFoundError: BRAND_NOT_FOUND,
    DocumentPathCollisionError: DOCUMENT_PATH_COLLISION,
}


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma execução (StepResult por `step_id`, em ordem)."""

    steps: Dict[str, StepResult] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return all(r.status is not StepStatus.FAILED for r in self.steps.values())

    def first_error(self) -> Optional[Dict[str, object]]:
        for result in self.steps.values():
            if result.status is StepStatus.FAILED:
                error = result.payload.get("error")
                if error is None:
                    error = engine_execution_error(step=result.step_id, exc_message=result.summary).to_dict()
                return error
        return None


def exception_to_error(exc: Exception, *, step_id: str) -> AtlasErrorPayload:
    """
    Converte uma exceção em payload canônico.

    - AtlasException → código do catálogo (ou nome da classe), com
      message/details/hint da própria exceção
    - ConfigError (opções inválidas) → ENGINE_CONFIGURATION_ERROR
    - Demais exceções → ENGINE_EXECUTION_ERROR
    """
    if isinstance(exc, AtlasException):
        code = _ERROR_CODES.get(type(exc), type(exc).__name__)
        return AtlasErrorPayload(
            type=code,
            message=exc.message,
            details=dict(exc.details or {}),
            hint=exc.hint,
        )
    if isinstance(exc, ConfigError):
        return engine_configuration_error(
            message=str(exc),
            details={"step": step_id, "exc_type": type(exc).__name__},
        )
    return engine_execution_error(
        step=step_id,
        exc_type=type(exc).__name__,
        exc_message=str(exc),
    )


class Engine:
    """Planner + executor fail-fast."""

    def __init__(
        self,
        *,
        steps: Sequence[Step],
        ctx: RunContext,
        manifest: Optional[ExportManifest] = None,
    ):
        self.steps: List[Step] = list(steps)
        self.ctx = ctx
        self.manifest = manifest

    def _finalize(self, step: Step, result: StepResult) -> StepResult:
        merged: List[str] = []
        for msg in list(result.warnings) + list(self.ctx.warnings.get(step.id, [])):
            if msg not in merged:
                merged.append(msg)

        final = replace(result, step_id=step.id, kind=getattr(step, "kind", None) or result.kind, warnings=merged)
        if self.manifest is not None:
            record_step_result(self.manifest, final)
        return final

    def _result(
        self,
        step: Step,
        status: StepStatus,
        summary: str,
        *,
        payload: Optional[Dict[str, object]] = None,
    ) -> StepResult:
        return StepResult(
            step_id=step.id,
            kind=getattr(step, "kind", None) or StepKind.COMPOSE,
            status=status,
            summary=summary,
            payload=dict(payload or {}),
        )

    def run(self) -> RunResult:
        ordered = plan_execution(self.steps)

        results: Dict[str, StepResult] = {}
        failed: Optional[str] = None
        for step in ordered:
            sid = step.id

            if failed is not None:
                skipped = self._result(step, StepStatus.SKIPPED, f"skipped after failure of {failed}")
                results[sid] = self._finalize(step, skipped)
                continue

            self.ctx.log(step_id=sid, level="info", message="step started")
            try:
                outcome = step.run(self.ctx)
                if not isinstance(outcome, StepResult):
                    error = engine_configuration_error(
                        message="Step retornou tipo inválido",
                        details={
                            "step_id": sid,
                            "expected": "StepResult",
                            "received": type(outcome).__name__,
                        },
                        hint="Ajuste o Step para retornar StepResult",
                    )
                    outcome = self._result(step, StepStatus.FAILED, error.message, payload={"error": error.to_dict()})
            except Exception as exc:
                error = exception_to_error(exc, step_id=sid)
                outcome = self._result(step, StepStatus.FAILED, error.message, payload={"error": error.to_dict()})

            results[sid] = self._finalize(step, outcome)
            if outcome.status is StepStatus.FAILED:
                failed = sid
                self.ctx.log(
                    step_id=sid,
                    level="error",
                    message=outcome.summary,
                    error_type=(outcome.payload.get("error") or {}).get("type"),
                )
            else:
                self.ctx.log(step_id=sid, level="info", message="step finished", status=outcome.status.value)

        return RunResult(steps=results)

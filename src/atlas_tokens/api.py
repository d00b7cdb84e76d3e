# src/atlas_tokens/api.py
"""
API pública de exportação do Atlas Tokens.

`run_export` executa o pipeline completo sob o Engine:

    inputs.resolve → documents.compose → documents.dedupe → documents.render

e devolve um `ExportRun` com os documentos finais, os resultados por
Step, os eventos de log, os avisos e o manifest da run.

Política de falha:
    - Erros de configuração (opções inválidas, tema/brand desconhecidos,
      colisão de destino em modo estrito) abortam a run
    - Em falha, `ExportRun.documents` é vazio (nunca saída parcial) e
      `raise_for_status()` levanta `ExportFailedError` com o payload

Para uso sem Engine (erros tipados levantados diretamente), ver
`atlas_tokens.core.compose.compose_documents`.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from atlas_tokens import __version__
from atlas_tokens.core.compose.documents import OutputDocument
from atlas_tokens.core.config.hashing import compute_config_hash
from atlas_tokens.core.config.loader import DEFAULT_CONFIG
from atlas_tokens.core.config.merge import deep_merge
from atlas_tokens.core.engine.engine import Engine, RunResult
from atlas_tokens.core.exceptions import ExportFailedError
from atlas_tokens.core.model.entities import ExportRequest, TokenSet
from atlas_tokens.core.model.hashing import compute_token_set_hash
from atlas_tokens.core.overlay.themes import ThemeOverlay
from atlas_tokens.core.pipeline.context import RunContext
from atlas_tokens.core.pipeline.registry import StepRegistry
from atlas_tokens.core.pipeline.step import Step
from atlas_tokens.core.pipeline.types import StepResult
from atlas_tokens.core.traceability.manifest import (
    ExportManifest,
    add_event,
    create_manifest,
    record_documents,
)
from atlas_tokens.core.tree.formatter import TreeFormatter
from atlas_tokens.steps.documents.compose import DocumentsComposeStep
from atlas_tokens.steps.documents.dedupe import DocumentsDedupeStep
from atlas_tokens.steps.documents.render import OUTPUT_ARTIFACT, DocumentsRenderStep
from atlas_tokens.steps.inputs.resolve import REQUEST_ARTIFACT, TOKEN_SET_ARTIFACT, InputsResolveStep


@dataclass(frozen=True)
class ExportRun:
    """Resultado de uma exportação executada pelo Engine."""

    run_id: str
    documents: List[OutputDocument]
    steps: Dict[str, StepResult]
    events: List[Dict[str, Any]]
    warnings: Dict[str, List[str]]
    manifest: ExportManifest
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_status(self) -> None:
        """Levanta `ExportFailedError` quando algum Step falhou."""
        if self.error is None:
            return
        raise ExportFailedError(
            str(self.error.get("message") or "Exportação falhou"),
            dict(self.error),
            self.error.get("hint"),
        )


def default_steps(
    *,
    formatter: Optional[TreeFormatter] = None,
    overlay: Optional[ThemeOverlay] = None,
) -> List[Step]:
    """Steps canônicos da exportação, registrados na ordem de declaração."""
    registry = StepRegistry.of(
        [
            InputsResolveStep(),
            DocumentsComposeStep(formatter=formatter, overlay=overlay),
            DocumentsDedupeStep(),
            DocumentsRenderStep(),
        ]
    )
    return registry.list()


def run_export(
    token_set: TokenSet,
    *,
    config: Optional[Mapping[str, Any]] = None,
    request: Union[ExportRequest, Mapping[str, Any], None] = None,
    run_id: Optional[str] = None,
    formatter: Optional[TreeFormatter] = None,
    overlay: Optional[ThemeOverlay] = None,
    steps: Optional[Sequence[Step]] = None,
) -> ExportRun:
    """
    Executa uma exportação completa sob o Engine.

    Args:
        token_set (TokenSet): Working set materializado.
        config (Mapping | None): Configuração; aplicada com deep-merge sobre
            `DEFAULT_CONFIG`.
        request (ExportRequest | Mapping | None): Temas e brand solicitados.
        run_id (str | None): Identificador da run (uuid4 quando ausente).
        formatter / overlay: Implementações alternativas das fronteiras.
        steps: Substitui os Steps canônicos (testes e extensões).

    Returns:
        ExportRun: Documentos, resultados por Step, eventos e manifest.
    """
    effective = deep_merge(DEFAULT_CONFIG, config or {})
    if not isinstance(request, ExportRequest):
        request = ExportRequest.from_mapping(request)

    run_id = run_id or uuid.uuid4().hex
    started_at = datetime.now(timezone.utc)

    ctx = RunContext(
        run_id=run_id,
        created_at=started_at,
        config=effective,
        meta={"atlas_version": __version__},
    )
    ctx.set_artifact(TOKEN_SET_ARTIFACT, token_set)
    ctx.set_artifact(REQUEST_ARTIFACT, request)

    manifest = create_manifest(
        run_id=run_id,
        started_at=started_at,
        atlas_version=__version__,
        config_hash=compute_config_hash(effective),
        token_set_hash=compute_token_set_hash(token_set),
        request=request.to_dict(),
        options=dict(effective.get("export") or {}),
    )
    add_event(manifest, event_type="run_started", ts=started_at)

    pipeline = list(steps) if steps is not None else default_steps(formatter=formatter, overlay=overlay)
    result: RunResult = Engine(steps=pipeline, ctx=ctx, manifest=manifest).run()

    error = result.first_error()
    documents: List[OutputDocument] = []
    if error is None and ctx.has_artifact(OUTPUT_ARTIFACT):
        documents = list(ctx.get_artifact(OUTPUT_ARTIFACT))
    record_documents(manifest, documents)

    add_event(
        manifest,
        event_type="run_failed" if error is not None else "run_finished",
        ts=datetime.now(timezone.utc),
        payload={"documents": len(documents)},
    )

    return ExportRun(
        run_id=run_id,
        documents=documents,
        steps=dict(result.steps),
        events=list(ctx.events),
        warnings={k: list(v) for k, v in ctx.warnings.items()},
        manifest=manifest,
        error=error,
    )

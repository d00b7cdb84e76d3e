"""Step canônico: documents.dedupe (v1).

Responsabilidades:
- Consumir `documents.draft`
- Manter apenas o primeiro documento por destino (directory, file_name)
- Reportar cada colisão como warning (onPathCollision: warn) ou abortar a
  run com `DocumentPathCollisionError` (onPathCollision: error)
- Publicar o resultado como artifact `documents.unique`

Payload mínimo:
payload:
  collisions:
    - {directory, file_name, dropped}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from atlas_tokens.core.compose.dedupe import dedupe_documents
from atlas_tokens.core.config.options import parse_export_options
from atlas_tokens.core.pipeline.context import RunContext
from atlas_tokens.core.pipeline.step import Step
from atlas_tokens.core.pipeline.types import StepKind, StepResult, StepStatus

DRAFT_ARTIFACT = "documents.draft"
UNIQUE_ARTIFACT = "documents.unique"


@dataclass
class DocumentsDedupeStep(Step):
    """Deduplicação por destino, first-wins, com relatório de colisões."""

    id: str = "documents.dedupe"
    kind: StepKind = StepKind.VALIDATE
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = ["documents.compose"]

    def run(self, ctx: RunContext) -> StepResult:
        options = parse_export_options(ctx.config)
        draft = ctx.get_artifact(DRAFT_ARTIFACT)

        report = dedupe_documents(draft, policy=options.on_path_collision)
        for collision in report.collisions:
            ctx.add_warning(step_id=self.id, message=collision.describe())

        ctx.set_artifact(UNIQUE_ARTIFACT, report.documents)

        dropped = len(draft) - len(report.documents)
        ctx.log(
            step_id=self.id,
            level="info",
            message="documents deduplicated",
            documents_before=len(draft),
            documents_after=len(report.documents),
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary="documents deduplicated",
            metrics={
                "documents_before": len(draft),
                "documents_after": len(report.documents),
                "documents_dropped": dropped,
            },
            artifacts={"unique": UNIQUE_ARTIFACT},
            payload={"collisions": [c.to_dict() for c in report.collisions]},
        )

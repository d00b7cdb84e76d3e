"""Step canônico: documents.render (v1).

Responsabilidades:
- Consumir `documents.unique`
- Serializar cada árvore em JSON com o `indent` configurado, preservando
  a ordem de inserção das chaves (mesmas entradas → mesmos bytes)
- Publicar a lista final de `OutputDocument` como `documents.output`

Limites explícitos (v1):
- NÃO escreve arquivos em disco
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from atlas_tokens.core.config.options import parse_export_options
from atlas_tokens.core.pipeline.context import RunContext
from atlas_tokens.core.pipeline.step import Step
from atlas_tokens.core.pipeline.types import StepKind, StepResult, StepStatus

UNIQUE_ARTIFACT = "documents.unique"
OUTPUT_ARTIFACT = "documents.output"


@dataclass
class DocumentsRenderStep(Step):
    id: str = "documents.render"
    kind: StepKind = StepKind.EXPORT
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = ["documents.dedupe"]

    def run(self, ctx: RunContext) -> StepResult:
        options = parse_export_options(ctx.config)
        documents = [doc.render(options.indent) for doc in ctx.get_artifact(UNIQUE_ARTIFACT)]
        ctx.set_artifact(OUTPUT_ARTIFACT, documents)

        total_bytes = sum(len(doc.content.encode("utf-8")) for doc in documents)
        ctx.log(
            step_id=self.id,
            level="info",
            message="documents rendered",
            documents=len(documents),
            bytes=total_bytes,
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary="documents rendered",
            metrics={"documents": len(documents), "bytes": total_bytes},
            artifacts={"output": OUTPUT_ARTIFACT},
            payload={"paths": [doc.path for doc in documents]},
        )

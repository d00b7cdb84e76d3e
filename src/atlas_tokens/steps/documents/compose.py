"""Step canônico: documents.compose (v1).

Responsabilidades:
- Consumir o escopo resolvido (artifact `tokens.scope`)
- Validar a seção `export` e `classification` da configuração
- Gerar os documentos em árvore conforme a tabela de decisão do composer
- Publicar a lista ordenada como artifact `documents.draft`
- Registrar lacunas de integridade (grupo/coleção não resolvidos) como
  warnings do Step

Config esperada (exemplo):
export:
  fileStructure: separateByCollection
  exportThemesAs: separateFiles
  exportBaseValues: true
  exportOnlyThemedTokens: false

Limites explícitos (v1):
- NÃO deduplica destinos (ver `documents.dedupe`)
- NÃO serializa documentos (ver `documents.render`)
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

from atlas_tokens.core.classify.policy import parse_classification_policy
from atlas_tokens.core.compose.composer import DocumentComposer
from atlas_tokens.core.config.options import parse_export_options
from atlas_tokens.core.overlay.themes import ThemeOverlay
from atlas_tokens.core.pipeline.context import RunContext
from atlas_tokens.core.pipeline.step import Step
from atlas_tokens.core.pipeline.types import StepKind, StepResult, StepStatus
from atlas_tokens.core.tree.formatter import TreeFormatter

SCOPE_ARTIFACT = "tokens.scope"
DRAFT_ARTIFACT = "documents.draft"


@dataclass
class DocumentsComposeStep(Step):
    """Gera os documentos em árvore (formatter e overlay injetáveis)."""

    id: str = "documents.compose"
    kind: StepKind = StepKind.COMPOSE
    depends_on: List[str] = None  # type: ignore[assignment]
    formatter: Optional[TreeFormatter] = None
    overlay: Optional[ThemeOverlay] = None

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = ["inputs.resolve"]

    def run(self, ctx: RunContext) -> StepResult:
        options = parse_export_options(ctx.config)
        policy = parse_classification_policy(ctx.config)
        scope = ctx.get_artifact(SCOPE_ARTIFACT)

        composer = DocumentComposer(options, formatter=self.formatter, overlay=self.overlay, policy=policy)
        composition = composer.generate(scope)

        for message in composition.warnings:
            ctx.add_warning(step_id=self.id, message=message)

        ctx.set_artifact(DRAFT_ARTIFACT, composition.documents)

        per_directory = Counter(doc.directory for doc in composition.documents)
        ctx.log(
            step_id=self.id,
            level="info",
            message="documents composed",
            file_structure=options.file_structure.value,
            export_themes_as=options.export_themes_as.value,
            documents=len(composition.documents),
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"{len(composition.documents)} document(s) composed",
            metrics={
                "documents": len(composition.documents),
                "warnings": len(composition.warnings),
            },
            warnings=list(composition.warnings),
            artifacts={"draft": DRAFT_ARTIFACT},
            payload={
                "options": options.to_dict(),
                "documents_per_directory": dict(per_directory),
            },
        )

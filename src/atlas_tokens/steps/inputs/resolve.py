"""Step canônico: inputs.resolve (v1).

Responsabilidades:
- Consumir o working set (artifact `tokens.set`) e o pedido de exportação
  (artifact `export.request`, opcional)
- Aplicar o filtro de brand e resolver os temas pedidos, na ordem do pedido
- Publicar o escopo resolvido como artifact `tokens.scope`

Falhas:
- Brand ou tema desconhecido levanta `BrandNotFoundError` /
  `ThemeNotFoundError`; o Engine converte em payload e aborta a run.

Limites explícitos (v1):
- NÃO busca tokens em serviços remotos (o working set já está materializado)
- NÃO aplica temas (isso é papel do composer)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from atlas_tokens.core.compose.composer import resolve_inputs
from atlas_tokens.core.model.entities import ExportRequest
from atlas_tokens.core.pipeline.context import RunContext
from atlas_tokens.core.pipeline.step import Step
from atlas_tokens.core.pipeline.types import StepKind, StepResult, StepStatus

TOKEN_SET_ARTIFACT = "tokens.set"
REQUEST_ARTIFACT = "export.request"
SCOPE_ARTIFACT = "tokens.scope"


@dataclass
class InputsResolveStep(Step):
    """Resolve brand e temas do pedido contra o working set."""

    id: str = "inputs.resolve"
    kind: StepKind = StepKind.RESOLVE
    depends_on: List[str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.depends_on is None:
            self.depends_on = []

    def run(self, ctx: RunContext) -> StepResult:
        token_set = ctx.get_artifact(TOKEN_SET_ARTIFACT)
        request = ctx.get_artifact(REQUEST_ARTIFACT) if ctx.has_artifact(REQUEST_ARTIFACT) else ExportRequest()

        scope = resolve_inputs(token_set, request)
        ctx.set_artifact(SCOPE_ARTIFACT, scope)

        ctx.log(
            step_id=self.id,
            level="info",
            message="inputs resolved",
            brand=scope.brand.id if scope.brand else None,
            themes=[t.id for t in scope.themes],
            tokens=len(scope.tokens),
        )

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary="inputs resolved",
            metrics={
                "tokens": len(scope.tokens),
                "groups": len(scope.groups),
                "collections": len(scope.collections),
                "themes": len(scope.themes),
            },
            artifacts={"scope": SCOPE_ARTIFACT},
            payload={
                "brand_id": scope.brand.id if scope.brand else None,
                "theme_ids": [t.id for t in scope.themes],
            },
        )

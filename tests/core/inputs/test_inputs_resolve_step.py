# tests/core/inputs/test_inputs_resolve_step.py
"""
Testes do Step canônico `inputs.resolve`.

Valida:
- publicação do escopo resolvido em `tokens.scope`
- pedido ausente equivale a pedido vazio (sem brand, sem temas)
- tema desconhecido propaga `ThemeNotFoundError` (o Engine converte)
"""

import pytest

try:
    from atlas_tokens.core.exceptions import ThemeNotFoundError
    from atlas_tokens.core.model.entities import ExportRequest
    from atlas_tokens.core.pipeline.types import StepStatus
    from atlas_tokens.steps.inputs.resolve import (
        REQUEST_ARTIFACT,
        SCOPE_ARTIFACT,
        TOKEN_SET_ARTIFACT,
        InputsResolveStep,
    )
except Exception as e:  # noqa: BLE001
    InputsResolveStep = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing inputs.resolve Step. Import error: {_IMPORT_ERR}")


def test_resolve_step_publishes_scope(dummy_ctx, collection_token_set):
    _require_imports()
    dummy_ctx.set_artifact(TOKEN_SET_ARTIFACT, collection_token_set)
    dummy_ctx.set_artifact(REQUEST_ARTIFACT, ExportRequest(theme_ids=("th-dark",), brand_id="b-acme"))

    result = InputsResolveStep().run(dummy_ctx)

    assert result.status is StepStatus.SUCCESS
    assert result.payload == {"brand_id": "b-acme", "theme_ids": ["th-dark"]}
    assert result.metrics["tokens"] == len(collection_token_set.tokens)
    scope = dummy_ctx.get_artifact(SCOPE_ARTIFACT)
    assert [t.id for t in scope.themes] == ["th-dark"]


def test_resolve_step_without_request(dummy_ctx, color_token_set):
    _require_imports()
    dummy_ctx.set_artifact(TOKEN_SET_ARTIFACT, color_token_set)
    result = InputsResolveStep().run(dummy_ctx)
    assert result.payload == {"brand_id": None, "theme_ids": []}


def test_resolve_step_unknown_theme_raises(dummy_ctx, color_token_set):
    _require_imports()
    dummy_ctx.set_artifact(TOKEN_SET_ARTIFACT, color_token_set)
    dummy_ctx.set_artifact(REQUEST_ARTIFACT, ExportRequest(theme_ids=("th-nope",)))
    with pytest.raises(ThemeNotFoundError):
        InputsResolveStep().run(dummy_ctx)

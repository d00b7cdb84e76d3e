# tests/core/documents/test_documents_steps.py
"""
Testes dos Steps canônicos de documentos.

    documents.compose → documents.draft
    documents.dedupe  → documents.unique
    documents.render  → documents.output

Cada Step é executado isoladamente sobre um RunContext preparado à mão,
sem Engine.
"""

import json

import pytest

try:
    from atlas_tokens.core.compose.composer import resolve_inputs
    from atlas_tokens.core.compose.documents import DocumentTree
    from atlas_tokens.core.config.errors import InvalidExportOptionError
    from atlas_tokens.core.exceptions import DocumentPathCollisionError
    from atlas_tokens.core.model.entities import ExportRequest
    from atlas_tokens.core.pipeline.types import StepStatus
    from atlas_tokens.steps.documents.compose import DRAFT_ARTIFACT, DocumentsComposeStep
    from atlas_tokens.steps.documents.dedupe import UNIQUE_ARTIFACT, DocumentsDedupeStep
    from atlas_tokens.steps.documents.render import OUTPUT_ARTIFACT, DocumentsRenderStep
    from atlas_tokens.steps.inputs.resolve import SCOPE_ARTIFACT
except Exception as e:  # noqa: BLE001
    DocumentsComposeStep = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing documents Steps. Import error: {_IMPORT_ERR}")


def test_compose_step_publishes_draft(dummy_ctx, color_token_set):
    _require_imports()
    dummy_ctx.set_artifact(
        SCOPE_ARTIFACT, resolve_inputs(color_token_set, ExportRequest(theme_ids=("th-dark",)))
    )

    result = DocumentsComposeStep().run(dummy_ctx)

    assert result.status is StepStatus.SUCCESS
    assert result.metrics == {"documents": 1, "warnings": 0}
    assert result.payload["options"]["exportThemesAs"] == "nestedThemes"
    assert result.payload["documents_per_directory"] == {".": 1}
    (doc,) = dummy_ctx.get_artifact(DRAFT_ARTIFACT)
    assert doc.tree["color"]["primary"]["dark"] == {"value": "#FFFFFF"}


def test_compose_step_reports_integrity_warnings(dummy_ctx, collection_token_set):
    _require_imports()
    from dataclasses import replace

    from atlas_tokens.core.model.entities import Token

    orphan = Token(id="t-orphan", name="orphan", type="color", value="#fff", collection_id="c-components")
    token_set = replace(collection_token_set, tokens=collection_token_set.tokens + (orphan,))
    dummy_ctx.config["export"]["fileStructure"] = "separateByCollection"
    dummy_ctx.set_artifact(SCOPE_ARTIFACT, resolve_inputs(token_set))

    result = DocumentsComposeStep().run(dummy_ctx)

    assert result.metrics["warnings"] == 1
    assert "t-orphan" in dummy_ctx.warnings["documents.compose"][0]


def test_compose_step_rejects_invalid_options(dummy_ctx, color_token_set):
    _require_imports()
    dummy_ctx.config["export"]["exportThemesAs"] = "inline"
    dummy_ctx.set_artifact(SCOPE_ARTIFACT, resolve_inputs(color_token_set))
    with pytest.raises(InvalidExportOptionError):
        DocumentsComposeStep().run(dummy_ctx)


def test_compose_step_uses_classification_section(dummy_ctx, collection_token_set):
    """`classification.componentNames` muda o bucket de componente."""
    _require_imports()
    dummy_ctx.config["export"]["fileStructure"] = "separateByCollection"
    dummy_ctx.config["export"]["exportThemesAs"] = "none"
    dummy_ctx.config["classification"] = {"componentNames": ["primary"]}
    dummy_ctx.set_artifact(SCOPE_ARTIFACT, resolve_inputs(collection_token_set))

    DocumentsComposeStep().run(dummy_ctx)

    identities = [d.identity for d in dummy_ctx.get_artifact(DRAFT_ARTIFACT)]
    assert ("./components", "primary.json") in identities


def test_dedupe_step_warns_on_collision(dummy_ctx):
    _require_imports()
    dummy_ctx.set_artifact(
        DRAFT_ARTIFACT,
        (
            DocumentTree(directory=".", file_name="a.json", tree={"x": 1}),
            DocumentTree(directory=".", file_name="a.json", tree={"x": 2}),
        ),
    )
    result = DocumentsDedupeStep().run(dummy_ctx)

    assert result.metrics["documents_dropped"] == 1
    assert result.payload["collisions"] == [{"directory": ".", "file_name": "a.json", "dropped": 1}]
    assert len(dummy_ctx.get_artifact(UNIQUE_ARTIFACT)) == 1
    assert dummy_ctx.warnings["documents.dedupe"]


def test_dedupe_step_strict_mode_raises(dummy_ctx):
    _require_imports()
    dummy_ctx.config["export"]["onPathCollision"] = "error"
    doc = DocumentTree(directory=".", file_name="a.json", tree={})
    dummy_ctx.set_artifact(DRAFT_ARTIFACT, (doc, doc))
    with pytest.raises(DocumentPathCollisionError):
        DocumentsDedupeStep().run(dummy_ctx)


def test_render_step_serializes_with_indent(dummy_ctx):
    _require_imports()
    dummy_ctx.config["export"]["indent"] = "\t"
    dummy_ctx.set_artifact(
        UNIQUE_ARTIFACT,
        (DocumentTree(directory="./dark", file_name="color.json", tree={"b": 1, "a": 2}),),
    )
    result = DocumentsRenderStep().run(dummy_ctx)

    (doc,) = dummy_ctx.get_artifact(OUTPUT_ARTIFACT)
    assert doc.content == '{\n\t"b": 1,\n\t"a": 2\n}'
    assert json.loads(doc.content) == {"b": 1, "a": 2}
    assert result.payload["paths"] == ["./dark/color.json"]

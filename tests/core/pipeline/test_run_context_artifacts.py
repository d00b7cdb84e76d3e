# tests/core/pipeline/test_run_context_artifacts.py
"""
Testes do artifact store do RunContext.

Ler um artefato que nenhum Step produziu é erro tipado
(`MissingArtifactError`), com os artefatos disponíveis nos detalhes.
"""

import pytest

try:
    from atlas_tokens.core.exceptions import MissingArtifactError
except Exception as e:  # noqa: BLE001
    MissingArtifactError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing RunContext dependencies. Import error: {_IMPORT_ERR}")


def test_set_and_get_artifact(dummy_ctx):
    _require_imports()
    dummy_ctx.set_artifact("documents.draft", ["doc"])
    assert dummy_ctx.has_artifact("documents.draft")
    assert dummy_ctx.get_artifact("documents.draft") == ["doc"]


def test_missing_artifact_raises(dummy_ctx):
    _require_imports()
    dummy_ctx.set_artifact("tokens.set", object())
    with pytest.raises(MissingArtifactError) as exc_info:
        dummy_ctx.get_artifact("tokens.scope")
    assert exc_info.value.details == {"artifact": "tokens.scope", "available": ["tokens.set"]}
    assert exc_info.value.hint


def test_artifacts_are_isolated_per_context(dummy_ctx):
    _require_imports()
    from datetime import datetime, timezone

    from atlas_tokens.core.pipeline.context import RunContext

    other = RunContext(run_id="run-2", created_at=datetime.now(timezone.utc), config={})
    dummy_ctx.set_artifact("x", 1)
    assert not other.has_artifact("x")

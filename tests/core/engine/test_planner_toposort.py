# tests/core/engine/test_planner_toposort.py
"""
Testes de ordenação topológica do planner.

Invariantes:
    - Nenhum Step aparece antes de suas dependências
    - Todos os Steps aparecem exatamente uma vez
    - Empates são resolvidos pela ordem lexicográfica de `id`
"""

import pytest

try:
    from atlas_tokens.core.engine.planner import plan_execution
except Exception as e:  # noqa: BLE001
    plan_execution = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Missing planner (atlas_tokens.core.engine.planner). Import error: {_IMPORT_ERR}")


def _ids(steps):
    return [s.id for s in steps]


def test_toposort_linear(DummyStep):
    _require_imports()
    steps = [
        DummyStep(step_id="documents.render", depends_on=["documents.dedupe"]),
        DummyStep(step_id="documents.dedupe", depends_on=["documents.compose"]),
        DummyStep(step_id="documents.compose", depends_on=["inputs.resolve"]),
        DummyStep(step_id="inputs.resolve"),
    ]
    assert _ids(plan_execution(steps)) == [
        "inputs.resolve",
        "documents.compose",
        "documents.dedupe",
        "documents.render",
    ]


def test_toposort_ties_are_lexicographic(DummyStep):
    """Raízes independentes saem em ordem de id, não de declaração."""
    _require_imports()
    steps = [
        DummyStep(step_id="c"),
        DummyStep(step_id="a"),
        DummyStep(step_id="d", depends_on=["a", "c"]),
        DummyStep(step_id="b", depends_on=["a"]),
    ]
    assert _ids(plan_execution(steps)) == ["a", "b", "c", "d"]


def test_toposort_is_deterministic(DummyStep):
    _require_imports()
    steps = [DummyStep(step_id=s) for s in ("z", "m", "a")]
    assert _ids(plan_execution(steps)) == _ids(plan_execution(list(reversed(steps))))

# tests/core/pipeline/test_run_context_logging.py
"""
Testes do logging estruturado do RunContext.

Cada evento é um dict com `run_id`, `step_id`, `level`, `message`,
`timestamp` (UTC ISO 8601) e campos extras. Avisos registrados com
`add_warning` são agrupados por Step e também viram eventos.
"""

from datetime import datetime

import pytest


def test_log_appends_structured_event(dummy_ctx):
    dummy_ctx.log(step_id="documents.compose", level="info", message="composed", documents=3)

    (event,) = dummy_ctx.events
    assert event["run_id"] == "run-test-001"
    assert event["step_id"] == "documents.compose"
    assert event["level"] == "info"
    assert event["message"] == "composed"
    assert event["documents"] == 3
    assert datetime.fromisoformat(event["timestamp"]).tzinfo is not None


def test_add_warning_groups_by_step_and_logs(dummy_ctx):
    dummy_ctx.add_warning(step_id="documents.dedupe", message="w1")
    dummy_ctx.add_warning(step_id="documents.dedupe", message="w2")
    dummy_ctx.add_warning(step_id="documents.compose", message="w3")

    assert dummy_ctx.warnings == {"documents.dedupe": ["w1", "w2"], "documents.compose": ["w3"]}
    assert [e["level"] for e in dummy_ctx.events] == ["warning"] * 3


@pytest.mark.parametrize("level", ["debug", "info", "warning", "error"])
def test_log_preserves_level(dummy_ctx, level):
    dummy_ctx.log(step_id="s", level=level, message="m")
    assert dummy_ctx.events[-1]["level"] == level

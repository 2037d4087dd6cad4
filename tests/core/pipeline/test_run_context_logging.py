# tests/core/pipeline/test_run_context_logging.py
"""
Testes de logging estruturado e coleta de warnings no RunContext.

Os testes asseguram que:
- eventos de log são registrados de forma estruturada
- cada evento contém run_id, step_id, level e timestamp
- campos adicionais são preservados
- warnings são agrupados por Step e também viram eventos WARNING
"""

import pytest


def test_log_event_is_structured(run_ctx):
    run_ctx.log(step_id="deploy.bundle", level="info", message="deploy resolved", region="R1")

    assert len(run_ctx.events) == 1
    event = run_ctx.events[0]
    assert event["run_id"] == "run-test-001"
    assert event["step_id"] == "deploy.bundle"
    assert event["level"] == "INFO"
    assert event["message"] == "deploy resolved"
    assert event["region"] == "R1"
    assert "timestamp" in event


def test_unknown_level_is_rejected(run_ctx):
    with pytest.raises(ValueError):
        run_ctx.log(step_id="deploy.bundle", level="LOUD", message="x")


def test_warnings_grouped_by_step(run_ctx):
    run_ctx.add_warning(step_id="deploy.bundle", message="w1")
    run_ctx.add_warning(step_id="deploy.bundle", message="w2")
    run_ctx.add_warning(step_id="package.bundle", message="w3")

    assert run_ctx.warnings == {"deploy.bundle": ["w1", "w2"], "package.bundle": ["w3"]}
    assert [e["message"] for e in run_ctx.events_for("deploy.bundle")] == ["w1", "w2"]
    assert all(e["level"] == "WARNING" for e in run_ctx.events)

# tests/core/engine/test_executor_happy_path.py
"""
Testes do Engine: execução sequencial na ordem declarada.
"""

import pytest

from cics_bundle_deploy.core.engine import DuplicateStepIdError, Engine, UnknownDependencyError
from cics_bundle_deploy.core.pipeline.types import StepStatus


def test_steps_run_in_declared_order(run_ctx, DummyStep):
    a = DummyStep("package.bundle")
    b = DummyStep("verify.bundle", depends_on=["package.bundle"])

    result = Engine(steps=[a, b], ctx=run_ctx).run()

    assert list(result.steps) == ["package.bundle", "verify.bundle"]
    assert all(r.status == StepStatus.SUCCESS for r in result.steps.values())
    assert result.ok is True
    assert run_ctx.get_artifact("verify.bundle.ok") is True
    assert [e["message"] for e in run_ctx.events_for("package.bundle")] == ["step started", "step finished"]


def test_duplicate_step_id_rejected(run_ctx, DummyStep):
    with pytest.raises(DuplicateStepIdError):
        Engine(steps=[DummyStep("a"), DummyStep("a")], ctx=run_ctx)


def test_dependency_must_be_declared_before(run_ctx, DummyStep):
    with pytest.raises(UnknownDependencyError):
        Engine(steps=[DummyStep("b", depends_on=["a"]), DummyStep("a")], ctx=run_ctx)


def test_non_step_result_is_configuration_error(run_ctx):
    class BadStep:
        id = "bad"
        kind = None
        depends_on = []

        def run(self, ctx):
            return {"status": "success"}

    result = Engine(steps=[BadStep()], ctx=run_ctx).run()

    failed = result.steps["bad"]
    assert failed.status == StepStatus.FAILED
    assert failed.error["type"] == "ENGINE_CONFIGURATION_ERROR"
    assert failed.error["details"]["received"] == "dict"

# tests/core/engine/test_executor_fail_fast.py
"""
Testes da política fail-fast do Engine.

Os testes asseguram que:
- exceções de Steps viram FAILED com ErrorPayload serializável
- com fail_fast (padrão) nenhum Step posterior é executado
- sem fail_fast, dependentes do Step falho são SKIPPED e independentes rodam
- exceções tipadas do deploy preservam o código estável
"""

from cics_bundle_deploy.core.engine import Engine
from cics_bundle_deploy.core.exceptions import MissingFieldError
from cics_bundle_deploy.core.pipeline.types import StepStatus


def test_fail_fast_stops_pipeline(run_ctx, DummyStep):
    boom = DummyStep("package.bundle", fail=True)
    after = DummyStep("deploy.bundle")

    result = Engine(steps=[boom, after], ctx=run_ctx).run()

    assert result.ok is False
    assert result.failed == ["package.bundle"]
    assert "deploy.bundle" not in result.steps
    assert after.runs == 0

    error = result.steps["package.bundle"].error
    assert error["type"] == "ENGINE_EXECUTION_ERROR"
    assert error["details"]["exc_type"] == "RuntimeError"
    assert error["details"]["exc_message"] == "package.bundle exploded"


def test_without_fail_fast_dependants_are_skipped(run_ctx, DummyStep):
    run_ctx.config["engine"]["fail_fast"] = False
    boom = DummyStep("package.bundle", fail=True)
    dependant = DummyStep("deploy.bundle", depends_on=["package.bundle"])
    independent = DummyStep("report.summary")

    result = Engine(steps=[boom, dependant, independent], ctx=run_ctx).run()

    assert result.steps["deploy.bundle"].status == StepStatus.SKIPPED
    assert result.steps["deploy.bundle"].summary == "skipped due to failed dependency"
    assert result.steps["report.summary"].status == StepStatus.SUCCESS
    assert dependant.runs == 0


def test_typed_exception_keeps_stable_code(run_ctx):
    class Raising:
        id = "deploy.bundle"
        kind = None
        depends_on = []

        def run(self, ctx):
            raise MissingFieldError("region")

    result = Engine(steps=[Raising()], ctx=run_ctx).run()
    error = result.steps["deploy.bundle"].error

    assert error["type"] == "CONFIG_MISSING_FIELD"
    assert error["details"] == {"field": "region", "step": "deploy.bundle"}
    assert "region" in error["message"]

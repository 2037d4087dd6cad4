"""
Engine de execução do pipeline.

Executa Steps na ordem declarada, de forma síncrona e single-threaded:
- Step desabilitado por config (`steps.<id>.enabled: false`) → SKIPPED
- Config de step que não é mapa → FAILED (ENGINE_CONFIGURATION_ERROR)
- Step cuja dependência falhou ou foi pulada → SKIPPED
- Exceção não tratada pelo Step → FAILED com ErrorPayload serializável
- Fail-fast por padrão (`engine.fail_fast`)

O Engine não muta instâncias de StepResult: warnings do RunContext são
incorporados via dataclasses.replace.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Sequence

from cics_bundle_deploy.core.errors import (
    ErrorPayload,
    engine_configuration_error,
    engine_execution_error,
    payload_from_exception,
)
from cics_bundle_deploy.core.exceptions import BundleDeployException
from cics_bundle_deploy.core.pipeline.context import RunContext
from cics_bundle_deploy.core.pipeline.step import Step
from cics_bundle_deploy.core.pipeline.types import StepKind, StepResult, StepStatus


class DuplicateStepIdError(ValueError):
    """Dois Steps declarados com o mesmo `id`."""


class UnknownDependencyError(ValueError):
    """Step depende de um id não declarado antes dele."""


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma execução de pipeline."""

    steps: Dict[str, StepResult] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not any(r.status == StepStatus.FAILED for r in self.steps.values())

    @property
    def failed(self) -> List[str]:
        return [sid for sid, r in self.steps.items() if r.status == StepStatus.FAILED]


def _validate_steps(steps: Sequence[Step]) -> None:
    seen: List[str] = []
    for step in steps:
        step_id = getattr(step, "id", None)
        if not isinstance(step_id, str) or not step_id.strip():
            raise ValueError("step.id must be a non-empty string")
        if step_id in seen:
            raise DuplicateStepIdError(f"Duplicate step id: {step_id}")
        for dep in getattr(step, "depends_on", []) or []:
            if dep not in seen:
                raise UnknownDependencyError(
                    f"Step '{step_id}' depende de '{dep}', que não foi declarado antes dele"
                )
        seen.append(step_id)


class Engine:
    """Engine canônico: execução sequencial na ordem declarada."""

    def __init__(self, *, steps: Sequence[Step], ctx: RunContext):
        _validate_steps(steps)
        self.steps: List[Step] = list(steps)
        self.ctx: RunContext = ctx

    def _step_config(self, step_id: str) -> Any:
        steps_cfg = (self.ctx.config or {}).get("steps", {}) or {}
        if not isinstance(steps_cfg, Mapping):
            return steps_cfg
        return steps_cfg.get(step_id, {}) or {}

    def _fail_fast(self) -> bool:
        engine_cfg = (self.ctx.config or {}).get("engine", {}) or {}
        if not isinstance(engine_cfg, Mapping):
            return True
        return bool(engine_cfg.get("fail_fast", True))

    def _exception_to_error(self, step_id: str, exc: Exception) -> ErrorPayload:
        if isinstance(exc, BundleDeployException):
            return payload_from_exception(exc, step=step_id)
        return engine_execution_error(
            step=step_id,
            exc_type=exc.__class__.__name__,
            exc_message=str(exc),
        )

    def _with_ctx_warnings(self, result: StepResult) -> StepResult:
        merged: List[str] = []
        for msg in list(result.warnings) + self.ctx.warnings.get(result.step_id, []):
            if msg not in merged:
                merged.append(msg)
        return replace(result, warnings=merged)

    def _mk_result(
        self,
        *,
        step: Step,
        status: StepStatus,
        summary: str,
        payload: Dict[str, Any] | None = None,
    ) -> StepResult:
        kind = getattr(step, "kind", StepKind.DIAGNOSTIC) or StepKind.DIAGNOSTIC
        r = StepResult(
            step_id=step.id,
            kind=kind,
            status=status,
            summary=summary,
            payload=dict(payload or {}),
        )
        return self._with_ctx_warnings(r)

    def run(self) -> RunResult:
        results: Dict[str, StepResult] = {}

        for step in self.steps:
            sid = step.id

            step_cfg = self._step_config(sid)
            if not isinstance(step_cfg, Mapping):
                error = engine_configuration_error(
                    message="Configuração do step deve ser um mapa",
                    details={
                        "step_id": sid,
                        "expected": "mapping",
                        "received": type(step_cfg).__name__,
                    },
                    hint=f"Ajuste steps.{sid} para um mapa de parâmetros",
                )
                self.ctx.log(step_id=sid, level="ERROR", message=error.message, error_type=error.type)
                results[sid] = self._mk_result(
                    step=step,
                    status=StepStatus.FAILED,
                    summary=error.message,
                    payload={"error": error.to_dict()},
                )
                if self._fail_fast():
                    break
                continue

            if not step_cfg.get("enabled", True):
                results[sid] = self._mk_result(
                    step=step,
                    status=StepStatus.SKIPPED,
                    summary="skipped by config",
                )
                continue

            deps = list(getattr(step, "depends_on", []) or [])
            if any(results[d].status != StepStatus.SUCCESS for d in deps if d in results):
                results[sid] = self._mk_result(
                    step=step,
                    status=StepStatus.SKIPPED,
                    summary="skipped due to failed dependency",
                )
                continue

            self.ctx.log(step_id=sid, level="INFO", message="step started")
            try:
                step_result = step.run(self.ctx)
            except Exception as e:
                error = self._exception_to_error(sid, e)
                self.ctx.log(step_id=sid, level="ERROR", message=error.message, error_type=error.type)
                results[sid] = self._mk_result(
                    step=step,
                    status=StepStatus.FAILED,
                    summary=error.message,
                    payload={"error": error.to_dict()},
                )
            else:
                if not isinstance(step_result, StepResult):
                    error = engine_configuration_error(
                        message="Step retornou tipo inválido",
                        details={
                            "step_id": sid,
                            "expected": "StepResult",
                            "received": type(step_result).__name__,
                        },
                        hint="Ajuste o Step para retornar StepResult",
                    )
                    results[sid] = self._mk_result(
                        step=step,
                        status=StepStatus.FAILED,
                        summary=error.message,
                        payload={"error": error.to_dict()},
                    )
                else:
                    results[sid] = self._with_ctx_warnings(replace(step_result, step_id=sid))
                self.ctx.log(step_id=sid, level="INFO", message="step finished", status=results[sid].status.value)

            if results[sid].status == StepStatus.FAILED and self._fail_fast():
                break

        return RunResult(steps=results)

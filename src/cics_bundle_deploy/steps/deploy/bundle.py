"""
Step canônico: deploy.bundle (v1)

Publica um bundle CICS em uma região via operação remota de deploy.
A definição BUNDLE (bunddef) precisa existir previamente no CSD.

Fontes de verdade (v1):
- parâmetros em ctx.config["steps"]["deploy.bundle"]
- artefato primário publicado pelo build em `project.artifact`
- artefatos anexados em `project.attached_artifacts` (opcional)
- lookup/decrypt de perfis e operação de deploy injetados no construtor

Invariantes:
- Nenhum retry: a primeira falha encerra o Step com status FAILED
- Erros são padronizados (ErrorPayload) em payload["error"]
- Senhas nunca são registradas em eventos ou no payload
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional

from cics_bundle_deploy.core.config.hashing import compute_config_hash
from cics_bundle_deploy.core.errors import payload_from_exception
from cics_bundle_deploy.core.exceptions import BundleDeployException
from cics_bundle_deploy.core.pipeline.types import StepKind, StepResult, StepStatus
from cics_bundle_deploy.deploy.dispatcher import BundleDeployer
from cics_bundle_deploy.deploy.model import ArtifactRef
from cics_bundle_deploy.deploy.parameters import DeployParameters
from cics_bundle_deploy.deploy.resolver import Decrypt, ProfileLookup
from cics_bundle_deploy.deploy.service import deploy_bundle
from cics_bundle_deploy.profiles.store import passthrough_decrypt

PRIMARY_ARTIFACT_KEY = "project.artifact"
ATTACHED_ARTIFACTS_KEY = "project.attached_artifacts"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _as_artifact(value: Any) -> ArtifactRef:
    if isinstance(value, ArtifactRef):
        return value
    if isinstance(value, Mapping):
        return ArtifactRef.from_mapping(value)
    if isinstance(value, (str, Path)):
        return ArtifactRef.of(value)
    raise TypeError(f"Artefato do projeto com tipo inesperado: {type(value).__name__}")


def _primary_artifact(ctx: Any) -> Optional[ArtifactRef]:
    if not ctx.has_artifact(PRIMARY_ARTIFACT_KEY):
        return None
    value = ctx.get_artifact(PRIMARY_ARTIFACT_KEY)
    return None if value is None else _as_artifact(value)


def _attached_artifacts(ctx: Any) -> List[ArtifactRef]:
    if not ctx.has_artifact(ATTACHED_ARTIFACTS_KEY):
        return []
    return [_as_artifact(v) for v in ctx.get_artifact(ATTACHED_ARTIFACTS_KEY) or []]


def _step_config(ctx: Any, step_id: str) -> Any:
    steps_cfg = (ctx.config or {}).get("steps", {}) or {}
    if not isinstance(steps_cfg, Mapping):
        return steps_cfg
    value = steps_cfg.get(step_id, {}) or {}
    # mapas são copiados; outros tipos são rejeitados por DeployParameters
    return dict(value) if isinstance(value, Mapping) else value


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------

class BundleDeployStep:
    """deploy.bundle — resolve servidor, escolhe o bundle e despacha o deploy."""

    id = "deploy.bundle"
    kind = StepKind.DEPLOY

    def __init__(
        self,
        *,
        profile_lookup: ProfileLookup,
        deploy: BundleDeployer,
        decrypt: Decrypt = passthrough_decrypt,
        depends_on: Optional[List[str]] = None,
    ) -> None:
        self.profile_lookup = profile_lookup
        self.decrypt = decrypt
        self.deploy = deploy
        self.depends_on: List[str] = list(depends_on or [])

    def _failed(self, ctx: Any, exc: BundleDeployException) -> StepResult:
        err = payload_from_exception(exc, step=self.id)
        ctx.log(step_id=self.id, level="ERROR", message=err.message, error_type=err.type)
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.FAILED,
            summary=f"deploy.bundle failed ({err.type})",
            payload={"error": err.to_dict()},
        )

    def run(self, ctx: Any) -> StepResult:
        step_cfg = _step_config(ctx, self.id)

        def progress(stage: str, data: dict) -> None:
            ctx.log(step_id=self.id, level="INFO", message=f"deploy {stage}", **data)

        try:
            params = DeployParameters.from_mapping(step_cfg)

            if params.bundle is not None and params.classifier is not None:
                ctx.add_warning(
                    step_id=self.id,
                    message=f"classifier '{params.classifier}' ignorado: bundle informado explicitamente",
                )

            record = deploy_bundle(
                params,
                primary_artifact=_primary_artifact(ctx),
                attached_artifacts=_attached_artifacts(ctx),
                profile_lookup=self.profile_lookup,
                decrypt=self.decrypt,
                deploy=self.deploy,
                progress=progress,
            )
        except BundleDeployException as e:
            return self._failed(ctx, e)

        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"bundle {record.bunddef} deployed to {record.cicsplex}/{record.region}",
            warnings=list(ctx.warnings.get(self.id, [])),
            artifacts={
                "bundle": str(record.bundle),
                "config_sha256": compute_config_hash(step_cfg),
            },
            payload={"deployment": record.to_dict()},
        )

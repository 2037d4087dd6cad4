"""
Sequência completa de um deploy: resolver → validator → selector → dispatcher.

O primeiro erro interrompe a sequência: ou a chamada remota é feita com
configuração e artefato válidos, ou nada é tentado.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from .artifacts import select_artifact
from .dispatcher import BundleDeployer, dispatch
from .model import ArtifactRef, DeploymentRecord, ServerConfig
from .parameters import DeployParameters
from .resolver import Decrypt, ProfileLookup, resolve_server_config
from .validator import validate_server_config

# callback de progresso: (etapa, dados)
Progress = Callable[[str, dict], None]


def _noop(stage: str, data: dict) -> None:
    return None


def deploy_bundle(
    params: DeployParameters,
    *,
    primary_artifact: Optional[ArtifactRef],
    attached_artifacts: Sequence[ArtifactRef] = (),
    profile_lookup: ProfileLookup,
    decrypt: Decrypt,
    deploy: BundleDeployer,
    progress: Progress = _noop,
) -> DeploymentRecord:
    """
    Executa um deploy completo e retorna o registro do que foi despachado.

    `progress` recebe as etapas `resolved`, `selected` e `dispatched`, sem
    segredos nos dados.
    """
    cfg: ServerConfig = resolve_server_config(
        params.server_id,
        params.overrides(),
        profile_lookup,
        decrypt,
    )
    validate_server_config(cfg)
    progress(
        "resolved",
        {
            "server_id": params.server_id,
            "url": cfg.endpoint,
            "cicsplex": cfg.cicsplex,
            "region": cfg.region,
            "authenticated": cfg.username is not None,
        },
    )

    bundle = select_artifact(
        params.bundle,
        params.classifier,
        primary_artifact,
        attached_artifacts,
    )
    progress("selected", {"bundle": str(bundle), "classifier": params.classifier})

    dispatch(cfg, bundle, params.bunddef, params.csdgroup, deploy)

    record = DeploymentRecord(
        endpoint_url=cfg.endpoint,
        bundle=bundle,
        bunddef=params.bunddef,
        csdgroup=params.csdgroup,
        cicsplex=cfg.cicsplex,
        region=cfg.region,
        authenticated=cfg.username is not None,
    )
    progress("dispatched", record.to_dict())
    return record

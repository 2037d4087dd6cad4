"""
Dispatch da chamada remota de deploy.

A operação de deploy é externa e opaca (BundleDeployer). Este módulo
executa exatamente uma chamada e encapsula qualquer falha, inclusive de I/O,
em `DeploymentError`, preservando a causa original. Não há retry nem
rollback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Protocol

from cics_bundle_deploy.core.exceptions import DeploymentError

from .model import ServerConfig


class BundleDeployer(Protocol):
    """Operação remota de deploy de um bundle CICS."""

    def __call__(
        self,
        endpoint_url: str,
        bundle: Path,
        bunddef: str,
        csdgroup: str,
        cicsplex: str,
        region: str,
        username: Optional[str],
        password: Optional[str],
    ) -> Any:
        ...


def dispatch(
    cfg: ServerConfig,
    bundle: Path,
    bunddef: str,
    csdgroup: str,
    deploy: BundleDeployer,
) -> None:
    """
    Invoca `deploy` uma única vez com a configuração validada.

    Um retorno `False` da operação é tratado como falha; qualquer outro
    retorno é sucesso.

    Raises:
        DeploymentError: encapsula a exceção original (`__cause__`).
    """
    try:
        outcome = deploy(
            endpoint_url=cfg.endpoint,
            bundle=bundle,
            bunddef=bunddef,
            csdgroup=csdgroup,
            cicsplex=cfg.cicsplex,
            region=cfg.region,
            username=cfg.username,
            password=cfg.password,
        )
    except Exception as e:
        raise DeploymentError(
            str(e) or e.__class__.__name__,
            details={
                "bundle": str(bundle),
                "bunddef": bunddef,
                "csdgroup": csdgroup,
                "exception_class": e.__class__.__name__,
            },
        ) from e

    if outcome is False:
        raise DeploymentError(
            "Operação de deploy retornou falha",
            details={"bundle": str(bundle), "bunddef": bunddef, "csdgroup": csdgroup},
        )

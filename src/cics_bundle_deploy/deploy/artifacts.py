"""
Seleção do arquivo de bundle a publicar.

Precedência (v1):
    1. `explicit_path` informado → retornado imediatamente; o classifier é
       ignorado mesmo quando também informado
    2. `classifier` informado → primeiro artefato anexado, na ordem dada,
       com classifier igual
    3. caso contrário → artefato primário do projeto

O artefato escolhido precisa ter arquivo resolvido. Nenhum arquivo é aberto
aqui: apenas paths são inspecionados.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from cics_bundle_deploy.core.exceptions import ArtifactFileMissingError, ArtifactNotFoundError

from .model import ArtifactRef, PathLike


def find_attached(classifier: str, attached_artifacts: Iterable[ArtifactRef]) -> Optional[ArtifactRef]:
    return next((a for a in attached_artifacts if a.classifier == classifier), None)


def select_artifact(
    explicit_path: Optional[PathLike],
    classifier: Optional[str],
    primary_artifact: Optional[ArtifactRef],
    attached_artifacts: Iterable[ArtifactRef] = (),
) -> Path:
    """
    Escolhe o arquivo de bundle a ser despachado.

    Raises:
        ArtifactNotFoundError: nenhum anexo com o classifier pedido, ou
            nenhum artefato primário quando ele é o escolhido.
        ArtifactFileMissingError: o artefato escolhido não tem arquivo.
    """
    if explicit_path is not None:
        return Path(explicit_path)

    if classifier is not None:
        artifact = find_attached(classifier, attached_artifacts)
    else:
        artifact = primary_artifact

    if artifact is None:
        raise ArtifactNotFoundError(classifier)

    if artifact.file is None:
        raise ArtifactFileMissingError(classifier)

    return artifact.file

"""
Deploy de bundles CICS.

Fluxo de uma invocação:
    resolver (perfil + overrides) → validator → selector de artefato → dispatcher

Colaboradores externos são injetados pelo chamador: lookup de perfis,
decrypt de segredos e a operação remota de deploy.
"""

from .artifacts import select_artifact
from .dispatcher import BundleDeployer, dispatch
from .model import (
    ArtifactRef,
    CredentialInfo,
    DecryptedProfile,
    DeploymentRecord,
    ProfileFields,
    ServerConfig,
    ServerOverrides,
    StoredProfile,
)
from .parameters import DeployParameters
from .profile import extract_credentials, extract_profile_fields
from .resolver import parse_url, resolve_server_config
from .service import deploy_bundle
from .validator import validate_server_config

__all__ = [
    "ArtifactRef",
    "BundleDeployer",
    "CredentialInfo",
    "DecryptedProfile",
    "DeployParameters",
    "DeploymentRecord",
    "ProfileFields",
    "ServerConfig",
    "ServerOverrides",
    "StoredProfile",
    "deploy_bundle",
    "dispatch",
    "extract_credentials",
    "extract_profile_fields",
    "parse_url",
    "resolve_server_config",
    "select_artifact",
    "validate_server_config",
]

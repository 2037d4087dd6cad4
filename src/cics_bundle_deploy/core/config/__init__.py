# src/cics_bundle_deploy/core/config/__init__.py

"""
Camada de configuração do CICS Bundle Deploy.

Responsabilidades do pacote:
    - Carregamento de documentos YAML/JSON (defaults + overrides locais)
    - Deep-merge determinístico de documentos
    - Overlay campo a campo de overrides explícitos sobre perfis
    - Hash canônico (com segredos mascarados) para rastreabilidade

Limites explícitos:
    - Não resolve perfis de servidor
    - Não valida campos obrigatórios de deploy
    - Não interage com Engine ou Steps diretamente
"""

from .errors import (
    ConfigFileError,
    ConfigFileNotFoundError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidProfileStoreError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash, redact_secrets
from .loader import load_config, load_document
from .merge import deep_merge, overlay_fields

__all__ = [
    "ConfigFileError",
    "ConfigFileNotFoundError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "InvalidProfileStoreError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "redact_secrets",
    "load_config",
    "load_document",
    "deep_merge",
    "overlay_fields",
]

"""
CICS Bundle Deploy — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros serializáveis do deploy.
Erros fazem parte do contrato operacional do step de deploy, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import (
    ArtifactFileMissingError,
    ArtifactNotFoundError,
    BundleDeployException,
    DecryptionFailedError,
    DeploymentError,
    InvalidParametersError,
    InvalidURLError,
    MissingFieldError,
    ProfileNotFoundError,
    UnsupportedProfileFormatError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - decision_required: indica se a execução aguarda decisão humana
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Configuração
PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
PROFILE_DECRYPTION_FAILED = "PROFILE_DECRYPTION_FAILED"
PROFILE_UNSUPPORTED_FORMAT = "PROFILE_UNSUPPORTED_FORMAT"
CONFIG_INVALID_URL = "CONFIG_INVALID_URL"
CONFIG_MISSING_FIELD = "CONFIG_MISSING_FIELD"
CONFIG_INVALID_PARAMETERS = "CONFIG_INVALID_PARAMETERS"

# Artefatos
ARTIFACT_NOT_FOUND = "ARTIFACT_NOT_FOUND"
ARTIFACT_FILE_MISSING = "ARTIFACT_FILE_MISSING"

# Deploy
DEPLOYMENT_FAILED = "DEPLOYMENT_FAILED"

# Engine / Execução
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"
ENGINE_CONFIGURATION_ERROR = "ENGINE_CONFIGURATION_ERROR"


_TYPE_BY_EXCEPTION = (
    (ProfileNotFoundError, PROFILE_NOT_FOUND),
    (DecryptionFailedError, PROFILE_DECRYPTION_FAILED),
    (UnsupportedProfileFormatError, PROFILE_UNSUPPORTED_FORMAT),
    (InvalidURLError, CONFIG_INVALID_URL),
    (MissingFieldError, CONFIG_MISSING_FIELD),
    (InvalidParametersError, CONFIG_INVALID_PARAMETERS),
    (ArtifactNotFoundError, ARTIFACT_NOT_FOUND),
    (ArtifactFileMissingError, ARTIFACT_FILE_MISSING),
    (DeploymentError, DEPLOYMENT_FAILED),
)


def error_type_for(exc: BaseException) -> str:
    """Código estável para uma exceção; nome da classe quando fora do catálogo."""
    for cls, code in _TYPE_BY_EXCEPTION:
        if isinstance(exc, cls):
            return code
    return exc.__class__.__name__


def payload_from_exception(exc: BundleDeployException, *, step: Optional[str] = None) -> ErrorPayload:
    details = dict(exc.details)
    if step is not None:
        details.setdefault("step", step)
    cause = exc.__cause__
    if cause is not None:
        details.setdefault("cause_type", cause.__class__.__name__)
        details.setdefault("cause_message", str(cause))
    return ErrorPayload(
        type=error_type_for(exc),
        message=exc.message,
        details=details,
        hint=exc.hint,
        decision_required=exc.decision_required,
    )


def engine_execution_error(
    *,
    step: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique o stacktrace e a configuração do step. Nenhum retry é aplicado automaticamente.",
) -> ErrorPayload:
    return ErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message="Falha inesperada durante a execução do pipeline",
        details={
            "step": step,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
        decision_required=False,
    )


def engine_configuration_error(
    *,
    message: str = "Configuração inválida para execução do pipeline",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise a configuração do run/steps antes de reexecutar.",
) -> ErrorPayload:
    return ErrorPayload(
        type=ENGINE_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
        decision_required=False,
    )

"""
CICS Bundle Deploy — Exceções canônicas (v1)

Este módulo define as exceções tipadas levantadas durante a resolução de
configuração, a seleção do artefato e o dispatch do deploy.

Objetivo:
- Permitir que resolver/validator/selector/dispatcher levantem erros semânticos
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos nos guardrails do deploy

Regras:
- Toda exceção carrega dados estruturados (serializáveis) em `details`
- A mensagem é curta e humana
- A causa original é preservada via `raise ... from`
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BundleDeployException(Exception):
    """Base class para exceções internas do deploy de bundles.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    """

    default_hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint if hint is not None else self.default_hint
        self.decision_required = False

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Configuração
# ---------------------------------------------------------------------------

class ConfigError(BundleDeployException):
    """Falha na resolução ou validação da configuração do servidor."""


class ProfileNotFoundError(ConfigError):
    """O perfil referenciado por `serverId` não existe no profile store."""

    default_hint = "Declare o perfil no profile store ou corrija o valor de serverId."

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            f"Perfil de servidor '{profile_id}' não existe",
            details={"profile_id": profile_id},
        )
        self.profile_id = profile_id


class DecryptionFailedError(ConfigError):
    """A decriptação do perfil não produziu resultado."""

    default_hint = "Verifique a chave mestra do profile store e os segredos cifrados do perfil."

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            f"Decriptação do perfil '{profile_id}' não retornou dados",
            details={"profile_id": profile_id},
        )
        self.profile_id = profile_id


class UnsupportedProfileFormatError(ConfigError):
    """O bloco `configuration` do perfil tem formato desconhecido."""

    default_hint = "O bloco configuration do perfil deve ser um mapa com os campos url, cicsplex e region."

    def __init__(self, profile_id: Optional[str], found: str, field: Optional[str] = None) -> None:
        where = f" (campo '{field}')" if field else ""
        super().__init__(
            f"Formato de configuração de servidor desconhecido{where}: {found}",
            details={"profile_id": profile_id, "found": found, "field": field},
        )
        self.profile_id = profile_id


class InvalidURLError(ConfigError):
    """A URL do endpoint é sintaticamente inválida."""

    default_hint = "Corrija a sintaxe da URL, por exemplo https://host:port/."

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(
            "URL do endpoint é inválida",
            details={"url": url, "reason": reason},
        )
        self.url = url
        self.reason = reason


class MissingFieldError(ConfigError):
    """Campo obrigatório ausente após o merge de perfil + overrides."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"{name} deve ser informado na configuração do deploy ou no perfil do servidor",
            details={"field": name},
            hint=f"Declare '{name}' explicitamente nos parâmetros ou no bloco configuration do perfil.",
        )
        self.name = name


class InvalidParametersError(ConfigError):
    """Parâmetros de invocação ausentes, desconhecidos ou com tipo inválido."""

    default_hint = "Revise a seção steps.deploy.bundle da configuração."


# ---------------------------------------------------------------------------
# Artefatos
# ---------------------------------------------------------------------------

class ArtifactError(BundleDeployException):
    """Falha na seleção do artefato a ser publicado."""


class ArtifactNotFoundError(ArtifactError):
    """Nenhum artefato corresponde ao classifier (ou não há artefato primário)."""

    def __init__(self, classifier: Optional[str]) -> None:
        if classifier is None:
            message = "Artefato primário do projeto não encontrado"
            hint = "Garanta que o build publicou o artefato primário antes do deploy."
        else:
            message = f"Nenhum artefato anexado com classifier '{classifier}'"
            hint = "Confira o classifier configurado ou anexe o bundle ao projeto."
        super().__init__(message, details={"classifier": classifier}, hint=hint)
        self.classifier = classifier


class ArtifactFileMissingError(ArtifactError):
    """O artefato escolhido não possui arquivo resolvido."""

    default_hint = "Execute o empacotamento do bundle antes do deploy ou informe o parâmetro bundle."

    def __init__(self, classifier: Optional[str]) -> None:
        super().__init__(
            "Arquivo do bundle CICS não encontrado",
            details={"classifier": classifier},
        )
        self.classifier = classifier


# ---------------------------------------------------------------------------
# Deploy
# ---------------------------------------------------------------------------

class DeploymentError(BundleDeployException):
    """Falha na chamada remota de deploy (encapsulada)."""

    default_hint = "Verifique a causa original, a definição BUNDLE no CSD e a disponibilidade do endpoint."

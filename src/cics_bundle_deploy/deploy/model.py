"""
Estruturas de dados do deploy de bundles CICS.

- ServerConfig: configuração resolvida (perfil + overrides), imutável
- ServerOverrides: valores explícitos; None significa "não informado"
- CredentialInfo / ProfileFields: partes extraídas de um perfil
- StoredProfile / DecryptedProfile: perfis como o profile store os entrega
- ArtifactRef: artefato primário ou anexado do projeto
- DeploymentRecord: resumo de um deploy despachado
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import SplitResult

PathLike = Union[str, Path]

SERVER_FIELDS = ("url", "cicsplex", "region", "username", "password")


@dataclass(frozen=True)
class ServerConfig:
    """Configuração de servidor resolvida para um único deploy.

    Criada por invocação e descartada em seguida. A senha nunca aparece em
    `repr`.
    """

    endpoint_url: Optional[SplitResult] = None
    cicsplex: Optional[str] = None
    region: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    def with_values(self, **changes: Any) -> "ServerConfig":
        return replace(self, **changes)

    @property
    def endpoint(self) -> Optional[str]:
        return self.endpoint_url.geturl() if self.endpoint_url is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.endpoint,
            "cicsplex": self.cicsplex,
            "region": self.region,
            "username": self.username,
            "password": self.password,
        }


@dataclass(frozen=True)
class ServerOverrides:
    """Overrides explícitos de configuração do servidor.

    Strings vazias são valores informados; apenas None é ausência.
    """

    url: Optional[str] = None
    cicsplex: Optional[str] = None
    region: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {name: getattr(self, name) for name in SERVER_FIELDS}


@dataclass(frozen=True)
class CredentialInfo:
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    # extraídos e preservados, mas não usados pelo deploy
    private_key: Optional[str] = field(default=None, repr=False)
    passphrase: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class ProfileFields:
    """Campos opcionais lidos do bloco `configuration` de um perfil."""

    url: Optional[str] = None
    cicsplex: Optional[str] = None
    region: Optional[str] = None


@dataclass(frozen=True)
class StoredProfile:
    """Perfil como mantido pelo profile store (segredos possivelmente cifrados)."""

    id: str
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    private_key: Optional[str] = field(default=None, repr=False)
    passphrase: Optional[str] = field(default=None, repr=False)
    configuration: Any = None


@dataclass(frozen=True)
class DecryptedProfile:
    """Perfil com segredos em claro, produzido pelo decrypt injetado."""

    id: str
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    private_key: Optional[str] = field(default=None, repr=False)
    passphrase: Optional[str] = field(default=None, repr=False)
    configuration: Any = None


@dataclass(frozen=True)
class ArtifactRef:
    """Artefato do build: `file` é None enquanto não resolvido no disco."""

    file: Optional[Path] = None
    classifier: Optional[str] = None

    @classmethod
    def of(cls, file: Optional[PathLike], classifier: Optional[str] = None) -> "ArtifactRef":
        return cls(file=Path(file) if file is not None else None, classifier=classifier)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ArtifactRef":
        return cls.of(data.get("file"), data.get("classifier"))


@dataclass(frozen=True)
class DeploymentRecord:
    endpoint_url: str
    bundle: Path
    bunddef: str
    csdgroup: str
    cicsplex: str
    region: str
    authenticated: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "endpoint_url": self.endpoint_url,
            "bundle": str(self.bundle),
            "bunddef": self.bunddef,
            "csdgroup": self.csdgroup,
            "cicsplex": self.cicsplex,
            "region": self.region,
            "authenticated": self.authenticated,
        }

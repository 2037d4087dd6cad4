"""
Parâmetros de invocação do deploy.

`DeployParameters` é a estrutura imutável que o chamador constrói antes de
acionar o deploy, normalmente a partir da seção `steps.deploy.bundle` da
configuração do pipeline:

    steps:
      deploy.bundle:
        bunddef: MYBUNDLE        # obrigatório
        csdgroup: MYGROUP        # obrigatório
        serverId: prod           # perfil no profile store
        url: https://host:9080   # overrides explícitos
        cicsplex: PLEX1
        region: REGION1
        username: deployer
        password: secret
        bundle: target/my-bundle.zip
        classifier: cics-bundle  # ignorado quando bundle é informado
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from cics_bundle_deploy.core.exceptions import InvalidParametersError

from .model import ServerOverrides

# chave aceita -> atributo
_KEYS = {
    "bunddef": "bunddef",
    "csdgroup": "csdgroup",
    "serverId": "server_id",
    "server_id": "server_id",
    "url": "url",
    "cicsplex": "cicsplex",
    "region": "region",
    "username": "username",
    "password": "password",
    "bundle": "bundle",
    "classifier": "classifier",
}
# chaves consumidas pelo Engine, não pelo deploy
_ENGINE_KEYS = frozenset({"enabled"})


@dataclass(frozen=True)
class DeployParameters:
    bunddef: str
    csdgroup: str
    server_id: Optional[str] = None
    url: Optional[str] = None
    cicsplex: Optional[str] = None
    region: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    bundle: Optional[str] = None
    classifier: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("bunddef", "csdgroup"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidParametersError(
                    f"Parâmetro obrigatório ausente: {name}",
                    details={"parameter": name},
                )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DeployParameters":
        """
        Constrói os parâmetros a partir de um mapa de configuração.

        Raises:
            InvalidParametersError: chave desconhecida, valor não textual,
                `serverId` e `server_id` juntos, ou bunddef/csdgroup ausentes.
        """
        if not isinstance(data, Mapping):
            raise InvalidParametersError(
                f"Parâmetros de deploy devem ser um mapa, recebido: {type(data).__name__}",
                details={"found": type(data).__name__},
            )

        unknown = sorted(k for k in data if k not in _KEYS and k not in _ENGINE_KEYS)
        if unknown:
            raise InvalidParametersError(
                f"Parâmetros desconhecidos: {', '.join(map(str, unknown))}",
                details={"unknown": unknown},
            )

        if "serverId" in data and "server_id" in data:
            raise InvalidParametersError(
                "Informe serverId ou server_id, não ambos",
                details={"conflict": ["serverId", "server_id"]},
            )

        kwargs: Dict[str, Any] = {}
        for key, attr in _KEYS.items():
            if key not in data or data[key] is None:
                continue
            value = data[key]
            if not isinstance(value, str):
                raise InvalidParametersError(
                    f"Parâmetro '{key}' deve ser texto, recebido: {type(value).__name__}",
                    details={"parameter": key, "found": type(value).__name__},
                )
            kwargs[attr] = value

        kwargs.setdefault("bunddef", None)
        kwargs.setdefault("csdgroup", None)
        return cls(**kwargs)

    def overrides(self) -> ServerOverrides:
        return ServerOverrides(
            url=self.url,
            cicsplex=self.cicsplex,
            region=self.region,
            username=self.username,
            password=self.password,
        )

"""
Profile store baseado em arquivo (YAML ou JSON).

Formato (v1):

    profiles:
      prod:
        username: deployer
        password: "{cifrado}"
        private_key: ~/.ssh/id_rsa
        passphrase: "{cifrado}"
        configuration:
          url: https://host:9080
          cicsplex: PLEX1
          region: REGION1

Os segredos são entregues como estão; decriptação é responsabilidade do
`decrypt` injetado no resolver. `passthrough_decrypt` atende stores em
texto plano.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from cics_bundle_deploy.core.config.errors import InvalidProfileStoreError
from cics_bundle_deploy.core.config.loader import PathLike, load_document
from cics_bundle_deploy.deploy.model import DecryptedProfile, StoredProfile

_CREDENTIAL_KEYS = ("username", "password", "private_key", "passphrase")
_PROFILE_KEYS = frozenset(_CREDENTIAL_KEYS) | {"configuration"}


def _build_profile(profile_id: str, entry: Any) -> StoredProfile:
    if entry is None:
        entry = {}
    if not isinstance(entry, Mapping):
        raise InvalidProfileStoreError(
            f"Perfil '{profile_id}' deve ser um mapa, recebido: {type(entry).__name__}"
        )

    unknown = sorted(k for k in entry if k not in _PROFILE_KEYS)
    if unknown:
        raise InvalidProfileStoreError(
            f"Perfil '{profile_id}' possui chaves desconhecidas: {', '.join(map(str, unknown))}"
        )

    for key in _CREDENTIAL_KEYS:
        value = entry.get(key)
        if value is not None and not isinstance(value, str):
            raise InvalidProfileStoreError(
                f"Perfil '{profile_id}': '{key}' deve ser texto, recebido: {type(value).__name__}"
            )

    # configuration é opaco aqui; seu formato é verificado na extração
    return StoredProfile(
        id=profile_id,
        configuration=entry.get("configuration"),
        **{key: entry.get(key) for key in _CREDENTIAL_KEYS},
    )


@dataclass(frozen=True)
class ProfileStore:
    profiles: Dict[str, StoredProfile] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProfileStore":
        section = data.get("profiles")
        if section is None:
            return cls()
        if not isinstance(section, Mapping):
            raise InvalidProfileStoreError(
                f"'profiles' deve ser um mapa de perfis, recebido: {type(section).__name__}"
            )
        return cls(profiles={str(pid): _build_profile(str(pid), entry) for pid, entry in section.items()})

    @classmethod
    def from_file(cls, path: PathLike) -> "ProfileStore":
        return cls.from_mapping(load_document(path))

    def lookup(self, profile_id: str) -> Optional[StoredProfile]:
        return self.profiles.get(profile_id)

    def __contains__(self, profile_id: object) -> bool:
        return profile_id in self.profiles


def passthrough_decrypt(profile: StoredProfile) -> DecryptedProfile:
    """Decrypt identidade, para stores cujos segredos estão em texto plano."""
    return DecryptedProfile(
        id=profile.id,
        username=profile.username,
        password=profile.password,
        private_key=profile.private_key,
        passphrase=profile.passphrase,
        configuration=profile.configuration,
    )

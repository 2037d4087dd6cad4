"""
Extração tipada de campos de perfis de servidor.

Um perfil decriptado expõe credenciais (username, password, private_key,
passphrase) e um bloco `configuration` opaco. Este módulo converte esse
bloco em `ProfileFields` sem inspeção dinâmica fora dos campos conhecidos.

Política de extração (v1):
    - configuration ausente (None) → nenhum campo
    - configuration mapa → lê `url`, `cicsplex`, `region`
    - campo ausente ou None → campo não definido (não é erro)
    - campo com valor não textual → UnsupportedProfileFormatError
    - configuration de qualquer outro tipo → UnsupportedProfileFormatError
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from cics_bundle_deploy.core.exceptions import UnsupportedProfileFormatError

from .model import CredentialInfo, DecryptedProfile, ProfileFields

PROFILE_CONFIGURATION_FIELDS = ("url", "cicsplex", "region")


def extract_credentials(profile: DecryptedProfile) -> CredentialInfo:
    return CredentialInfo(
        username=profile.username,
        password=profile.password,
        private_key=profile.private_key,
        passphrase=profile.passphrase,
    )


def _text_field(configuration: Mapping[str, Any], name: str, profile_id: Optional[str]) -> Optional[str]:
    value = configuration.get(name)
    if value is None or isinstance(value, str):
        return value
    raise UnsupportedProfileFormatError(profile_id, type(value).__name__, field=name)


def extract_profile_fields(configuration: Any, *, profile_id: Optional[str] = None) -> ProfileFields:
    """
    Extrai `url`, `cicsplex` e `region` do bloco `configuration` de um perfil.

    Args:
        configuration: bloco opaco anexado ao perfil.
        profile_id: id do perfil, usado apenas nas mensagens de erro.

    Returns:
        ProfileFields: registro parcial; campos ausentes ficam None.

    Raises:
        UnsupportedProfileFormatError: formato de bloco ou campo desconhecido.
    """
    if configuration is None:
        return ProfileFields()

    if not isinstance(configuration, Mapping):
        raise UnsupportedProfileFormatError(profile_id, type(configuration).__name__)

    return ProfileFields(
        **{
            name: _text_field(configuration, name, profile_id)
            for name in PROFILE_CONFIGURATION_FIELDS
        }
    )

"""
Resolução da configuração de servidor: perfil armazenado + overrides.

Política de precedência (v1):
    - sem `profile_id`: a configuração é construída apenas dos overrides,
      sem consultar o profile store
    - com `profile_id`: lookup → decrypt → credenciais + bloco configuration
    - cada override explícito substitui o valor do perfil, campo a campo
    - campos não informados em nenhuma fonte permanecem None; a
      obrigatoriedade é verificada pelo validator

URLs são convertidas em `SplitResult` apenas quando presentes, tanto as do
perfil quanto as do override.
"""

from __future__ import annotations

import re
import string
from typing import Callable, Optional
from urllib.parse import SplitResult, urlsplit

from cics_bundle_deploy.core.config.merge import overlay_fields
from cics_bundle_deploy.core.exceptions import (
    DecryptionFailedError,
    InvalidURLError,
    ProfileNotFoundError,
)

from .model import (
    SERVER_FIELDS,
    DecryptedProfile,
    ServerConfig,
    ServerOverrides,
    StoredProfile,
)
from .profile import extract_credentials, extract_profile_fields

ProfileLookup = Callable[[str], Optional[StoredProfile]]
Decrypt = Callable[[StoredProfile], Optional[DecryptedProfile]]

# RFC 3986: unreserved + reserved + "%"
_URI_CHARS = frozenset(string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _illegal_char(c: str) -> bool:
    # fora do ASCII, apenas espaços e caracteres de controle são ilegais
    if c.isascii():
        return c not in _URI_CHARS
    return c.isspace() or not c.isprintable()


def parse_url(url: str) -> SplitResult:
    """
    Converte a URL do endpoint em estrutura, rejeitando apenas URLs
    sintaticamente inválidas.

    Esquema, host e porta não são verificados: URLs relativas, opacas
    (`host:9080`) ou com autoridade fora do formato servidor são aceitas.

    Raises:
        InvalidURLError: caractere ilegal (espaço, controle, ASCII fora da
            RFC 3986), escape `%` inválido ou colchetes IPv6 desbalanceados.
    """
    bad = sorted({c for c in url if _illegal_char(c)})
    if bad:
        raise InvalidURLError(url, f"caracteres inválidos: {''.join(bad)!r}")

    if _BAD_ESCAPE.search(url):
        raise InvalidURLError(url, "escape percentual inválido")

    try:
        return urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e


def _profile_values(profile_id: str, profile_lookup: ProfileLookup, decrypt: Decrypt) -> dict:
    stored = profile_lookup(profile_id)
    if stored is None:
        raise ProfileNotFoundError(profile_id)

    profile = decrypt(stored)
    if not profile:
        raise DecryptionFailedError(profile_id)

    credentials = extract_credentials(profile)
    fields = extract_profile_fields(profile.configuration, profile_id=profile_id)
    return {
        "url": fields.url,
        "cicsplex": fields.cicsplex,
        "region": fields.region,
        "username": credentials.username,
        "password": credentials.password,
    }


def resolve_server_config(
    profile_id: Optional[str],
    overrides: ServerOverrides,
    profile_lookup: ProfileLookup,
    decrypt: Decrypt,
) -> ServerConfig:
    """
    Resolve a configuração de servidor de um deploy.

    Args:
        profile_id: id do perfil (`serverId`), ou None.
        overrides: valores explícitos, que sempre vencem o perfil.
        profile_lookup: `id -> StoredProfile | None`.
        decrypt: `StoredProfile -> DecryptedProfile | None`.

    Raises:
        ProfileNotFoundError, DecryptionFailedError,
        UnsupportedProfileFormatError, InvalidURLError
    """
    base = {} if profile_id is None else _profile_values(profile_id, profile_lookup, decrypt)

    # URL do perfil é validada mesmo quando um override a substitui
    if base.get("url") is not None:
        parse_url(base["url"])

    values = overlay_fields(base, overrides.as_dict(), SERVER_FIELDS)
    url = values.pop("url")

    return ServerConfig(
        endpoint_url=parse_url(url) if url is not None else None,
        **values,
    )

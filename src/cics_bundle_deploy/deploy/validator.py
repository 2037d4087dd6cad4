"""
Validação de campos obrigatórios da configuração resolvida.

Obrigatórios: url (endpoint), cicsplex e region. Credenciais são opcionais,
pois o endpoint pode aceitar chamadas não autenticadas.
"""

from __future__ import annotations

from cics_bundle_deploy.core.exceptions import MissingFieldError

from .model import ServerConfig


def validate_server_config(cfg: ServerConfig) -> None:
    """Falha com `MissingFieldError` no primeiro campo obrigatório ausente (url, cicsplex, region)."""
    if cfg.endpoint_url is None or not cfg.endpoint:
        raise MissingFieldError("url")
    if not cfg.cicsplex:
        raise MissingFieldError("cicsplex")
    if not cfg.region:
        raise MissingFieldError("region")

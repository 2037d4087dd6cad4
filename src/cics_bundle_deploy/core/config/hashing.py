# src/cics_bundle_deploy/core/config/hashing.py
"""
Hashing canônico de configuração.

O hash gerado representa a identidade estrutural de uma configuração
resolvida e é publicado no StepResult do deploy para rastreabilidade.

Decisões arquiteturais:
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Segredos são mascarados antes da serialização
    - Algoritmo SHA-256

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import json
import hashlib
from typing import Any, Dict, FrozenSet

SECRET_KEYS: FrozenSet[str] = frozenset({"password", "passphrase", "private_key"})
REDACTED = "***"


def redact_secrets(config: Any) -> Any:
    """Cópia de `config` com valores de chaves sensíveis mascarados."""
    if isinstance(config, dict):
        return {
            k: (REDACTED if k in SECRET_KEYS and v is not None else redact_secrets(v))
            for k, v in config.items()
        }
    if isinstance(config, list):
        return [redact_secrets(v) for v in config]
    return config


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico da configuração.

    Args:
        config (Dict[str, Any]): Configuração resolvida.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        redact_secrets(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()

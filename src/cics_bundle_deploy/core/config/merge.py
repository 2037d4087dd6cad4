"""
Políticas canônicas de merge de configuração.

Duas políticas convivem neste módulo, com escopos distintos:

    deep_merge       → documentos de configuração (defaults + local)
        - dict → merge recursivo por chave
        - list → sobrescrita total
        - escalar → sobrescrita direta
        - conflito de tipos → erro estrutural explícito

    overlay_fields   → registros planos (perfil + overrides explícitos)
        - cada campo do override presente (não-None) substitui o da base
        - não existe merge profundo: valores compostos são trocados inteiros

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
"""

from copy import deepcopy
from typing import Any, Dict, Iterable, Mapping

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários de configuração.

    Invariantes:
        - A estrutura retornada é sempre um novo dicionário
        - Chaves não presentes no override são preservadas da base

    Args:
        base (Dict[str, Any]): Configuração base (ex.: defaults).
        override (Dict[str, Any]): Overrides explícitos da configuração.

    Returns:
        Dict[str, Any]: Nova configuração resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito de tipo entre base e override.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        base_value = result.get(key)

        if key not in result or base_value is None or override_value is None:
            # None declara "sem valor" em YAML; nunca conflita
            result[key] = deepcopy(override_value)
        elif isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
        elif isinstance(override_value, list):
            result[key] = deepcopy(override_value)
        elif type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )
        else:
            result[key] = deepcopy(override_value)

    return result


def overlay_fields(
    base: Mapping[str, Any],
    override: Mapping[str, Any],
    fields: Iterable[str],
) -> Dict[str, Any]:
    """
    Sobrepõe, campo a campo, os valores explícitos de `override` sobre `base`.

    Um campo é considerado explícito quando presente em `override` com valor
    diferente de None. Strings vazias são valores explícitos.

    Returns:
        Dict[str, Any]: novo dict contendo exatamente `fields`.
    """
    out: Dict[str, Any] = {}
    for name in fields:
        value = override.get(name)
        out[name] = value if value is not None else base.get(name)
    return out

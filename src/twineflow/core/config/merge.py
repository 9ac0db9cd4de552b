# src/twineflow/core/config/merge.py
"""
Deep-merge de configuração (defaults + overrides locais).

Política (v1):
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total
    - escalar     → sobrescrita direta
    - None        → sobrescrita direta (desliga um valor do defaults,
                    ex.: `max_concurrency: null`)
    - tipos diferentes → ConfigTypeConflictError, com o caminho completo
      da chave (ex.: `engine.fan_out.max_concurrency`)

Nenhum input é mutado; a mesma entrada produz sempre a mesma saída.
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


def _replaces(base_value: Any, override_value: Any) -> bool:
    """Override substitui o valor base sem checagem de tipo."""
    return base_value is None or override_value is None or isinstance(override_value, list)


def _merge_at(base: Dict[str, Any], override: Dict[str, Any], path: Tuple[str, ...]) -> Dict[str, Any]:
    merged: Dict[str, Any] = deepcopy(base)

    for key, new in override.items():
        here = path + (str(key),)
        if key not in base:
            merged[key] = deepcopy(new)
        elif isinstance(base[key], dict) and isinstance(new, dict):
            merged[key] = _merge_at(base[key], new, here)
        elif _replaces(base[key], new) or type(base[key]) is type(new):
            merged[key] = deepcopy(new)
        else:
            raise ConfigTypeConflictError(
                f"Conflito de tipo em '{'.'.join(here)}': "
                f"{type(base[key]).__name__} (defaults) vs {type(new).__name__} (override)"
            )

    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina `base` com `override`, devolvendo um novo dicionário.

    Args:
        base (Dict[str, Any]): Configuração base (ex.: defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se uma chave mudar de tipo entre base e override.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_at(base, override, ())

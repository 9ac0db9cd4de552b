# src/twineflow/core/config/settings.py
"""
Settings do Engine resolvidas a partir da configuração.

Chaves reconhecidas (todas opcionais)::

    engine:
      log_level: WARNING          # nível do logger "twineflow"
      fan_out:
        max_concurrency: null     # null = fan-out sem limite

A ausência da seção `engine` produz o comportamento padrão: fan-out sem
limite de concorrência, idêntico ao de um Runner criado sem settings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidEngineSettingsError

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class EngineSettings:
    """
    Política de execução de um Runner.

    Campos:
        - max_concurrency: limite de invocações simultâneas por Step fan-out;
          `None` mantém o fan-out sem limite
        - log_level: nível aplicado ao logger do pacote por `configure_logging`
    """
    max_concurrency: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        limit = self.max_concurrency
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
            raise InvalidEngineSettingsError(
                f"engine.fan_out.max_concurrency deve ser inteiro positivo ou null, recebido: {limit!r}"
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidEngineSettingsError(
                f"engine.log_level deve ser um de {sorted(_LOG_LEVELS)}, recebido: {self.log_level!r}"
            )

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "EngineSettings":
        engine_cfg = (config or {}).get("engine", {}) or {}
        if not isinstance(engine_cfg, dict):
            raise InvalidEngineSettingsError("engine deve ser um mapa")

        fan_out_cfg = engine_cfg.get("fan_out", {}) or {}
        if not isinstance(fan_out_cfg, dict):
            raise InvalidEngineSettingsError("engine.fan_out deve ser um mapa")

        return cls(
            max_concurrency=fan_out_cfg.get("max_concurrency"),
            log_level=engine_cfg.get("log_level", "WARNING"),
        )


def configure_logging(settings: EngineSettings) -> logging.Logger:
    """Aplica `settings.log_level` ao logger do pacote (sem instalar handlers)."""
    logger = logging.getLogger("twineflow")
    logger.setLevel(settings.log_level.upper())
    return logger

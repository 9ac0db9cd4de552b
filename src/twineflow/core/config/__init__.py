# src/twineflow/core/config/__init__.py
"""
Camada de configuração do twineflow.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar e interpretar a configuração de execução do Engine.

A configuração no twineflow é:
    - declarativa
    - determinística
    - opcional (um Runner sem settings usa os defaults)

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Conversão da seção `engine` em `EngineSettings`

Limites explícitos:
    - Não executa pipeline
    - Não define Steps
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidEngineSettingsError,
    UnsupportedConfigFormatError,
)
from .loader import load_config
from .merge import deep_merge
from .settings import EngineSettings, configure_logging

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidEngineSettingsError",
    "UnsupportedConfigFormatError",
    "load_config",
    "deep_merge",
    "EngineSettings",
    "configure_logging",
]

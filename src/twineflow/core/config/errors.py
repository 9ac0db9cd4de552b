# src/twineflow/core/config/errors.py
"""
Exceções canônicas da camada de configuração do twineflow.

As exceções aqui definidas representam violações estruturais da
configuração do Engine, e não erros de execução de Steps.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de domínio ou de execução de Step

Limites explícitos:
    - Não executa pipeline
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do twineflow.

    Permite captura genérica de falhas de carregamento, merge e
    resolução de settings, distinta das falhas de execução de uma run.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    O arquivo de defaults é obrigatório: não existe configuração efetiva
    sem ele, e o loader não tenta criá-lo ou inferi-lo.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz da configuração não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"engine": {"log_level": "INFO"}}
        - override: {"engine": "DEBUG"}
    """


class InvalidEngineSettingsError(ConfigError):
    """Seção `engine` presente, mas com valores inválidos."""

# tests/conftest.py
"""
Fixtures compartilhados para testes do twineflow.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas (YAML como string)
- um contexto compartilhado controlado
- uma fábrica de bodies que registram a própria execução

O objetivo destas fixtures é permitir testes do core
(config, pipeline e engine) sem depender de:
- filesystem (exceto via tmp_path nos testes de loader)
- rede ou serviços externos
- Steps de domínio reais

Invariantes:
    - Nenhuma fixture executa pipeline real
    - Nenhuma fixture realiza I/O
    - Todas as fixtures retornam objetos novos por teste

Limites explícitos:
    - Não substituir testes de integração (ver tests/e2e)
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Config Loader fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    Fixture que fornece um YAML de configuração padrão (defaults).

    Representa o conteúdo típico de um `twineflow.defaults.yaml`, base
    sobre a qual configurações locais são aplicadas via deep-merge.

    Returns:
        str: Conteúdo YAML representando configuração padrão (defaults).
    """
    return """\
engine:
  log_level: WARNING
  fan_out:
    max_concurrency: null
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    Fixture que fornece um YAML de configuração local (override).

    Limita o fan-out e aumenta a verbosidade do logger, simulando um
    ambiente de desenvolvimento que chama uma API com rate limit.

    Returns:
        str: Conteúdo YAML representando overrides locais.
    """
    return """\
engine:
  log_level: DEBUG
  fan_out:
    max_concurrency: 2
"""


# =====================================================
# Pipeline / Engine fixtures
# =====================================================

@pytest.fixture
def shared_ctx() -> dict:
    """
    Fixture que fornece um contexto compartilhado determinístico.

    Decisões arquiteturais:
        - O contexto é um dicionário simples, passado por referência
        - Os testes verificam identidade (`is`), nunca apenas igualdade

    Returns:
        dict: Contexto compartilhado novo para cada teste.
    """
    return {"tenant": "acme", "trail": []}


@pytest.fixture
def recording_body():
    """
    Fixture factory que fornece bodies que registram a própria execução.

    O body retornado anexa seu nome em `context["trail"]` e devolve o valor
    recebido acrescido do nome, permitindo verificar ordem de execução e
    encadeamento de valores ao mesmo tempo.

    Returns:
        Callable[[str], Callable]: fábrica de bodies nomeados.
    """

    def _make(name: str):
        def _body(value, context):
            context.setdefault("trail", []).append(name)
            return list(value) + [name]

        _body.__name__ = f"body_{name}"
        return _body

    return _make

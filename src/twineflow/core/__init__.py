# src/twineflow/core/__init__.py
"""
Core do twineflow.

Este pacote reúne a implementação canônica de construção e execução de
pipelines lineares de Steps validados por contrato.

O core é projetado para ser:
    - testável de forma isolada
    - livre de I/O próprio (I/O pertence aos bodies dos Steps)
    - explícito: toda falha chega ao chamador sem transformação

Componentes principais:
    - pipeline   → tipos, contratos de entrada e builder encadeável
    - engine     → derivação de Runners e execução (gate, dispatch, fan-out)
    - config     → carregamento de configuração e EngineSettings
    - exceptions → exceções tipadas de construção e execução
    - errors     → payload serializável de erro para quem reporta falhas

Limites explícitos:
    - Não persiste definições de pipeline
    - Não faz retry, recovery parcial ou cache entre runs
    - Não registra falhas em nome do chamador

Este pacote existe como a fonte de verdade operacional do twineflow.
"""

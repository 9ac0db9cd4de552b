# src/twineflow/core/engine/__init__.py
"""
Engine do twineflow.

Este pacote contém a implementação responsável por **executar** pipelines,
respeitando contratos de entrada e a política de fan-out configurada.

Princípios fundamentais:
    - Steps executam estritamente em sequência, na ordem de registro
    - O gate de validação precede todo body
    - Fan-out preserva a ordem dos resultados, não a de conclusão
    - A primeira falha encerra a run; não há retry nem recuperação parcial

Limites explícitos:
    - Não define Steps de domínio
    - Não persiste resultados
    - Não oferece cancelamento externo nem timeout
"""

from .engine import Runner, bootstrap

__all__ = ["Runner", "bootstrap"]

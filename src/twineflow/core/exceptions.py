"""
twineflow — Canonical Exceptions (v1)

Este módulo define as exceções tipadas do twineflow.

Objetivo:
- Permitir que Builder/Engine levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos nos guardrails do pipeline

Regras:
- Não contém lógica de domínio.
- Exceções carregam apenas dados estruturados em `details`.
- O Engine nunca encapsula exceções levantadas por Steps: elas chegam
  ao chamador exatamente como foram levantadas.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TwineflowError(Exception):
    """Base class para exceções internas do twineflow.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Construção do pipeline
# ---------------------------------------------------------------------------

class InvalidStepBody(TwineflowError):
    """Body registrado não é callable compatível nem Pipeline finalizado."""


class InvalidContract(TwineflowError):
    """Objeto informado como contrato de entrada não pode ser convertido em contrato."""


# ---------------------------------------------------------------------------
# Execução
# ---------------------------------------------------------------------------

class ValidationFailed(TwineflowError):
    """Entrada de um Step rejeitada pelo seu contrato.

    Atributos:
    - step_name: nome do Step cujo gate rejeitou o valor
    - value_repr: representação (limitada) do valor rejeitado
    """

    def __init__(
        self,
        message: str,
        *,
        step_name: str,
        value_repr: str,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        merged = {"step_name": step_name, "value_repr": value_repr}
        merged.update(details or {})
        super().__init__(message, details=merged, hint=hint)
        self.step_name = step_name
        self.value_repr = value_repr


class TypeMismatch(ValidationFailed):
    """Step fan-out recebeu um valor que não é sequência."""


class StepExecutionError(TwineflowError):
    """Erro semântico levantado pelo próprio body de um Step.

    O Engine não cria instâncias desta classe; ela existe para que bodies
    sinalizem falhas de domínio com dados estruturados. Como qualquer outra
    exceção de body, ela é propagada sem transformação.
    """

"""
twineflow — Canonical Error Structures (v1)

Este módulo define o payload canônico de erro do twineflow.

O Engine não registra nem converte falhas: a primeira exceção encerra a
run e chega intacta ao chamador. Quem chama um Runner e precisa reportar
a falha (logs, respostas HTTP, relatórios) usa `describe_error` para obter
uma representação:

- explícita
- serializável
- acionável

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional

from .exceptions import (
    InvalidContract,
    InvalidStepBody,
    TwineflowError,
    TypeMismatch,
    ValidationFailed,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do twineflow.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Construção
PIPELINE_INVALID_STEP_BODY = "PIPELINE_INVALID_STEP_BODY"
PIPELINE_INVALID_CONTRACT = "PIPELINE_INVALID_CONTRACT"

# Engine / Execução
ENGINE_VALIDATION_FAILED = "ENGINE_VALIDATION_FAILED"
ENGINE_TYPE_MISMATCH = "ENGINE_TYPE_MISMATCH"
ENGINE_STEP_EXECUTION_ERROR = "ENGINE_STEP_EXECUTION_ERROR"


# A ordem importa: subclasses antes das bases.
_CODES = (
    (TypeMismatch, ENGINE_TYPE_MISMATCH),
    (ValidationFailed, ENGINE_VALIDATION_FAILED),
    (InvalidStepBody, PIPELINE_INVALID_STEP_BODY),
    (InvalidContract, PIPELINE_INVALID_CONTRACT),
)


def describe_error(exc: BaseException) -> ErrorPayload:
    """Converte uma exceção de run em ErrorPayload (serializável, acionável).

    Regras:
    - Exceções do twineflow: já trazem message/details/hint.
    - Outras exceções (levantadas por bodies): ENGINE_STEP_EXECUTION_ERROR,
      sem expor stack trace.
    """
    if isinstance(exc, TwineflowError):
        code = ENGINE_STEP_EXECUTION_ERROR
        for cls, candidate in _CODES:
            if isinstance(exc, cls):
                code = candidate
                break
        return ErrorPayload(
            type=code,
            message=exc.message or "Erro de execução",
            details=dict(exc.details),
            hint=exc.hint,
        )

    # Fallback genérico
    return ErrorPayload(
        type=ENGINE_STEP_EXECUTION_ERROR,
        message=str(exc) or "Erro inesperado durante execução",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o body do Step que falhou",
    )


__all__ = [
    "ErrorPayload",
    "describe_error",
    "PIPELINE_INVALID_STEP_BODY",
    "PIPELINE_INVALID_CONTRACT",
    "ENGINE_VALIDATION_FAILED",
    "ENGINE_TYPE_MISMATCH",
    "ENGINE_STEP_EXECUTION_ERROR",
]

# src/twineflow/core/pipeline/builder.py
"""
Builder declarativo de Pipelines.

Este módulo define o `PipelineBuilder`, responsável por acumular Steps
em ordem de registro e congelá-los em um `Pipeline` imutável.

O builder atua como uma camada de proteção antecipada, garantindo que:
    - cada Step possua um nome válido
    - cada body seja um callable compatível ou um Pipeline finalizado
    - cada contrato de entrada seja utilizável pelo Engine
    - a ordem de declaração dos Steps seja preservada explicitamente

Responsabilidades do módulo:
    - Oferecer API encadeável (`add_plain`, `add_effect`, `add_fan_out`)
    - Converter o contrato de elemento de um fan-out em contrato de sequência
    - Produzir o Pipeline imutável (`finalize`)

Decisões arquiteturais:
    - A validação ocorre no registro, nunca em tempo de execução
    - Erros estruturais são levantados de forma síncrona
    - O estado de acumulação vive em campos explícitos do builder;
      métodos destacados do objeto continuam operando sobre ele
    - `finalize` devolve um snapshot: registros posteriores não alteram
      Pipelines já produzidos

Invariantes:
    - A sequência de Steps reflete exatamente a ordem de registro
    - Nenhum Step com body inválido é aceito
    - O contrato de um Step FAN_OUT é sempre "sequência de T"

Limites explícitos:
    - Não executa pipeline
    - Não impõe unicidade de nomes (nomes são apenas diagnóstico)
    - Não persiste definições

Este módulo existe para garantir integridade estrutural,
previsibilidade e segurança na definição do pipeline.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, List, Union

from ..exceptions import InvalidStepBody
from .contract import as_contract, sequence_of
from .types import Pipeline, Step, StepFunction, StepKind

logger = logging.getLogger(__name__)

_MAX_POSITIONAL = 2


def _required_positional(fn: Any) -> int | None:
    """Quantidade de parâmetros posicionais obrigatórios, ou None se não inspecionável."""
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    return sum(
        1
        for p in sig.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    )


def _check_body(name: str, body: Any) -> Union[StepFunction, Pipeline]:
    if isinstance(body, Pipeline):
        return body

    if not callable(body):
        raise InvalidStepBody(
            f"Body inválido para o Step '{name}': esperado callable ou Pipeline",
            details={"step_name": name, "received": type(body).__name__},
            hint="Registre uma função (value, context) ou um Pipeline finalizado",
        )

    required = _required_positional(body)
    if required is not None and required > _MAX_POSITIONAL:
        raise InvalidStepBody(
            f"Body do Step '{name}' exige {required} argumentos posicionais",
            details={"step_name": name, "required_positional": required},
            hint="Bodies recebem no máximo (value, context)",
        )
    return body


@dataclass
class PipelineBuilder:
    """
    Builder encadeável de Pipelines.

    Exemplo::

        pipeline = (
            create_pipeline()
            .add_effect("fetch", Any, fetch_users)
            .add_fan_out("transform", User, to_summary)
            .add_effect("load", List[Summary], store)
            .finalize()
        )
    """

    _steps: List[Step] = field(default_factory=list, init=False, repr=False)

    def _add(self, name: str, contract: Any, body: Any, kind: StepKind) -> "PipelineBuilder":
        if not isinstance(name, str) or not name.strip():
            raise ValueError("step name must be a non-empty string")

        checked = _check_body(name, body)
        resolved = as_contract(contract)
        if kind is StepKind.FAN_OUT:
            resolved = sequence_of(resolved, step_name=name)

        self._steps.append(Step(name=name, kind=kind, contract=resolved, body=checked))
        logger.debug("registered step %r (%s)", name, kind.value)
        return self

    def add_plain(self, name: str, contract: Any, body: Union[StepFunction, Pipeline]) -> "PipelineBuilder":
        return self._add(name, contract, body, StepKind.PLAIN)

    def add_effect(self, name: str, contract: Any, body: Union[StepFunction, Pipeline]) -> "PipelineBuilder":
        return self._add(name, contract, body, StepKind.EFFECT)

    def add_fan_out(self, name: str, element_contract: Any, body: Union[StepFunction, Pipeline]) -> "PipelineBuilder":
        """Registra um Step aplicado a cada elemento da sequência de entrada.

        `element_contract` descreve um elemento; o Step armazena a variante
        "sequência de elemento".
        """
        return self._add(name, element_contract, body, StepKind.FAN_OUT)

    def finalize(self) -> Pipeline:
        """Retorna o Pipeline imutável com os Steps acumulados até aqui."""
        return Pipeline(steps=tuple(self._steps))


def create_pipeline() -> PipelineBuilder:
    return PipelineBuilder()

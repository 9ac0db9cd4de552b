# src/twineflow/core/pipeline/types.py
"""
Tipos canônicos do pipeline do twineflow.

Este módulo define as estruturas e enums fundamentais que padronizam
a comunicação entre Builder e Engine.

Os tipos aqui definidos representam:
    - classificação de Steps (governa o dispatch do Engine)
    - o Step declarativo (nome, kind, contrato de entrada, body)
    - o Pipeline imutável (sequência ordenada de Steps)
    - o contexto compartilhado de uma run

Componentes principais:
    - StepKind      → enum de classificação (PLAIN, EFFECT, FAN_OUT)
    - Step          → descritor imutável de um estágio do pipeline
    - Pipeline      → sequência ordenada e imutável de Steps
    - SharedContext → mapa mutável compartilhado por referência

Princípios fundamentais:
    - Nenhuma lógica de execução vive neste módulo
    - Pipeline e Step são imutáveis após criados
    - A ordem dos Steps é significativa

Invariantes:
    - A ordem dos Steps de um Pipeline nunca muda após a construção
    - Todo Step possui exatamente um `kind`
    - O contrato de um Step FAN_OUT é sempre "sequência de T"

Limites explícitos:
    - Não executa Steps
    - Não valida bodies (responsabilidade do builder)
    - Não persiste definições de pipeline

Este módulo existe para garantir consistência,
imutabilidade e clareza semântica no pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Iterator, Tuple, Union

if TYPE_CHECKING:
    from .contract import InputContract


SharedContext = Dict[str, Any]

StepFunction = Callable[..., Union[Any, Awaitable[Any]]]


class StepKind(str, Enum):
    """
    Classificação de Steps no pipeline.

    Os valores são strings para facilitar serialização e mensagens de
    diagnóstico.

    Tipos definidos:
        - PLAIN: transformação comum do valor corrente
        - EFFECT: Step com efeito colateral (I/O, carga, notificação)
        - FAN_OUT: aplica o body a cada elemento de uma sequência, concorrentemente

    Decisões arquiteturais:
        - PLAIN e EFFECT são despachados de forma idêntica pelo Engine;
          a distinção é documental
        - FAN_OUT é o único kind que altera o dispatch

    Invariantes:
        - O valor textual do enum é estável e canônico
    """
    PLAIN = "plain"
    EFFECT = "effect"
    FAN_OUT = "fan_out"


@dataclass(frozen=True)
class Step:
    """
    Descritor imutável de um estágio do pipeline.

    Campos:
        - name: rótulo do Step, usado apenas para diagnóstico
        - kind: classificação do Step (`StepKind`)
        - contract: contrato verificado antes da execução do body
        - body: função de Step ou Pipeline aninhado

    Invariantes:
        - Uma instância de Step nunca é alterada após criada
        - Para FAN_OUT, `contract` já é a variante "sequência de T"
    """
    name: str
    kind: StepKind
    contract: "InputContract"
    body: Union[StepFunction, "Pipeline"]


@dataclass(frozen=True)
class Pipeline:
    """
    Sequência ordenada e imutável de Steps.

    Um Pipeline é produzido pelo `PipelineBuilder.finalize()` e pode ser
    usado como body de um Step em outro Pipeline (composição), sem limite
    de profundidade.
    """
    steps: Tuple[Step, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

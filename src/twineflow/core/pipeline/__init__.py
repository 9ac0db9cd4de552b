# src/twineflow/core/pipeline/__init__.py
"""
# Pipeline Core — twineflow

Este pacote define as **estruturas fundamentais** e a **API de construção**
de pipelines no twineflow.

Um pipeline é modelado como uma **sequência linear e imutável de Steps**, onde:
- cada Step declara nome, kind, contrato de entrada e body
- a execução é coordenada exclusivamente pelo Engine
- o estado compartilhado é um dicionário passado por referência

## Componentes

- **types**
  - `StepKind`: PLAIN, EFFECT, FAN_OUT
  - `Step`: descritor imutável de um estágio
  - `Pipeline`: sequência ordenada e imutável de Steps

- **contract**
  - `InputContract` (Protocol): capacidade de verificação sem exceção
  - `PydanticContract`: implementação padrão via `pydantic.TypeAdapter`

- **builder**
  - `PipelineBuilder`: API encadeável e validação no registro

## Invariantes

- A ordem dos Steps nunca muda após `finalize()`
- Bodies inválidos são rejeitados no registro, nunca na execução
- Contratos de fan-out são sempre "sequência de T"
"""

from .builder import PipelineBuilder, create_pipeline
from .contract import ContractCheck, InputContract, PydanticContract, as_contract, sequence_of
from .types import Pipeline, SharedContext, Step, StepFunction, StepKind

__all__ = [
    "PipelineBuilder",
    "create_pipeline",
    "ContractCheck",
    "InputContract",
    "PydanticContract",
    "as_contract",
    "sequence_of",
    "Pipeline",
    "SharedContext",
    "Step",
    "StepFunction",
    "StepKind",
]

# src/twineflow/__init__.py
"""
twineflow — pipelines lineares de Steps validados por contrato.

Monte um pipeline declarativamente (buscar, transformar, carregar, com
fan-out opcional por elemento) e execute-o contra um valor inicial e um
contexto compartilhado::

    from typing import Any, List
    import twineflow

    pipeline = (
        twineflow.create_pipeline()
        .add_effect("fetch", Any, fetch_users)
        .add_fan_out("transform", User, summarize)
        .add_effect("load", List[Summary], store)
        .finalize()
    )

    run = twineflow.bootstrap(pipeline)
    result = run.run_sync({}, {"tenant": "acme"})

Arquitetura em alto nível:
    - core.pipeline → tipos, contratos e builder
    - core.engine   → Runner (gate de validação, dispatch, fan-out, recursão)
    - core.config   → configuração e EngineSettings
"""

from .core.config import EngineSettings, configure_logging, load_config
from .core.engine import Runner, bootstrap
from .core.errors import ErrorPayload, describe_error
from .core.exceptions import (
    InvalidContract,
    InvalidStepBody,
    StepExecutionError,
    TwineflowError,
    TypeMismatch,
    ValidationFailed,
)
from .core.pipeline import (
    ContractCheck,
    InputContract,
    Pipeline,
    PipelineBuilder,
    PydanticContract,
    Step,
    StepKind,
    create_pipeline,
)

__all__ = [
    "EngineSettings",
    "configure_logging",
    "load_config",
    "Runner",
    "bootstrap",
    "ErrorPayload",
    "describe_error",
    "InvalidContract",
    "InvalidStepBody",
    "StepExecutionError",
    "TwineflowError",
    "TypeMismatch",
    "ValidationFailed",
    "ContractCheck",
    "InputContract",
    "Pipeline",
    "PipelineBuilder",
    "PydanticContract",
    "Step",
    "StepKind",
    "create_pipeline",
]

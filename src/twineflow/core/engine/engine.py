# src/twineflow/core/engine/engine.py
"""
Engine de execução do pipeline do twineflow.

Converte um `Pipeline` imutável em um `Runner`: um callable assíncrono que
conduz um valor e um contexto compartilhado através de cada Step, na ordem
de registro.

Por Step:
    1. (FAN_OUT) o valor corrente precisa ser list/tuple → senão TypeMismatch
    2. gate de validação do contrato de entrada → senão ValidationFailed
    3. dispatch por kind:
        - PLAIN/EFFECT: body(valor, contexto) ou run recursiva do Pipeline aninhado
        - FAN_OUT: uma invocação por elemento, concorrentes, ordem preservada

Política de falha:
    - Nenhuma exceção é capturada, convertida ou repetida em nenhum nível
    - A primeira falha encerra a run e é o seu resultado
    - Em fan-out, irmãos em andamento não são cancelados; seus resultados
      são descartados

Contexto compartilhado:
    - O mesmo objeto é entregue a todos os bodies, runs aninhadas e
      elementos de fan-out; o Engine nunca escreve nele
    - Não há lock nem cópia por ramo: escritas concorrentes de irmãos de
      fan-out seguem "última escrita vence" (estado apenas consultivo)
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import reprlib
from typing import Any, List, Optional, Sequence

from twineflow.core.config.settings import EngineSettings
from twineflow.core.exceptions import TypeMismatch, ValidationFailed
from twineflow.core.pipeline.types import Pipeline, SharedContext, Step, StepFunction, StepKind

logger = logging.getLogger(__name__)

_repr = reprlib.Repr()
_repr.maxstring = 80
_repr.maxother = 80


def _positional_arity(fn: StepFunction) -> int:
    """Quantos argumentos (value, context) o body aceita: 0, 1 ou 2.

    Callables sem assinatura legível (ex.: `str`, `int`) recebem só o valor.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    count = 0
    for p in sig.parameters.values():
        if p.kind is p.VAR_POSITIONAL:
            return 2
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            count += 1
    return min(count, 2)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class Runner:
    """Callable reutilizável ligado a exatamente um Pipeline.

    Não guarda estado entre invocações além do Pipeline e das settings.
    """

    def __init__(self, pipeline: Pipeline, *, settings: Optional[EngineSettings] = None):
        self.pipeline: Pipeline = pipeline
        self.settings: EngineSettings = settings or EngineSettings()

    async def __call__(self, value: Any, context: Optional[SharedContext] = None) -> Any:
        if context is None:
            context = {}

        logger.debug("run started (%d steps)", len(self.pipeline))
        current = value
        for step in self.pipeline.steps:
            current = await self._run_step(step, current, context)
        logger.debug("run finished")
        return current

    def run_sync(self, value: Any, context: Optional[SharedContext] = None) -> Any:
        """Executa a run em um event loop novo (`asyncio.run`)."""
        return asyncio.run(self(value, context))

    # ------------------------------------------------------------------
    # Gate
    # ------------------------------------------------------------------

    def _validate(self, step: Step, value: Any) -> None:
        if step.kind is StepKind.FAN_OUT and not _is_sequence(value):
            raise TypeMismatch(
                f"Fan-out step \"{step.name}\" expected a sequence but received: {_repr.repr(value)}",
                step_name=step.name,
                value_repr=_repr.repr(value),
                details={"received_type": type(value).__name__},
            )

        result = step.contract.check(value)
        if not result.ok:
            raise ValidationFailed(
                f"Invalid input for execution step \"{step.name}\": {_repr.repr(value)}",
                step_name=step.name,
                value_repr=_repr.repr(value),
                details={"errors": list(result.errors)},
            )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def _run_step(self, step: Step, value: Any, context: SharedContext) -> Any:
        logger.debug("step %r (%s) started", step.name, step.kind.value)
        self._validate(step, value)

        if step.kind is StepKind.FAN_OUT:
            return await self._fan_out(step, value, context)
        return await self._apply(step.body, value, context)

    async def _apply(self, body: Any, value: Any, context: SharedContext) -> Any:
        if isinstance(body, Pipeline):
            return await bootstrap(body, settings=self.settings)(value, context)

        args = (value, context)[: _positional_arity(body)]
        result = body(*args)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def _fan_out(self, step: Step, items: Sequence[Any], context: SharedContext) -> List[Any]:
        limit = self.settings.max_concurrency
        logger.debug(
            "fan-out %r launching %d invocations (limit=%s)",
            step.name,
            len(items),
            limit if limit is not None else "unbounded",
        )

        if limit is None:
            return list(await asyncio.gather(*(self._apply(step.body, item, context) for item in items)))

        semaphore = asyncio.Semaphore(limit)

        async def bounded(item: Any) -> Any:
            async with semaphore:
                return await self._apply(step.body, item, context)

        return list(await asyncio.gather(*(bounded(item) for item in items)))


def bootstrap(pipeline: Pipeline, *, settings: Optional[EngineSettings] = None) -> Runner:
    """
    Deriva um Runner para o Pipeline informado.

    O Runner é barato de criar e não possui estado próprio; pode ser
    invocado repetidamente com valores e contextos diferentes::

        run = bootstrap(pipeline)
        result = await run(initial_value, {"tenant": "acme"})

    Args:
        pipeline (Pipeline): Pipeline finalizado pelo builder.
        settings (Optional[EngineSettings]): Política de fan-out; o padrão é
            fan-out sem limite de concorrência.

    Returns:
        Runner: callable assíncrono `(value, context=None) -> valor final`.
    """
    if not isinstance(pipeline, Pipeline):
        raise TypeError(f"bootstrap expects a Pipeline, received {type(pipeline).__name__}")
    return Runner(pipeline, settings=settings)

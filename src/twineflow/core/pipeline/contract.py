# src/twineflow/core/pipeline/contract.py
"""
Contratos de entrada dos Steps.

O Engine depende apenas da capacidade "verificar um valor contra um
contrato e reportar sucesso/falha sem levantar exceção" (`InputContract`).
Qualquer objeto com essa forma é aceito pelo builder.

A implementação padrão delega ao Pydantic (`TypeAdapter`), o que permite
usar como contrato qualquer anotação de tipo: `int`, `List[str]`,
`typing.Any`, subclasses de `BaseModel`, etc.

Decisões arquiteturais:
    - O gate apenas verifica: o valor original segue adiante, sem coerção
    - A validação Pydantic é estrita por padrão (`"5"` não satisfaz `int`)
    - A variante "sequência de X" é construída pelo próprio contrato
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Protocol, Tuple, Union, runtime_checkable

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticUserError

from ..exceptions import InvalidContract


@dataclass(frozen=True)
class ContractCheck:
    """Resultado de uma verificação de contrato."""

    ok: bool
    errors: List[str] = field(default_factory=list)


@runtime_checkable
class InputContract(Protocol):
    """Capacidade mínima exigida de um contrato de entrada."""

    def check(self, value: Any) -> ContractCheck:
        """Verifica `value` sem levantar exceção para valores inválidos."""
        ...


class PydanticContract:
    """InputContract baseado em `pydantic.TypeAdapter`."""

    def __init__(self, annotation: Any, *, strict: bool = True) -> None:
        self.annotation = annotation
        self.strict = strict
        try:
            self._adapter = TypeAdapter(annotation)
        except (PydanticUserError, TypeError) as e:
            raise InvalidContract(
                f"Não é possível construir contrato para {annotation!r}",
                details={"annotation": repr(annotation)},
                hint="Use uma anotação de tipo suportada pelo Pydantic ou um InputContract",
            ) from e

    def check(self, value: Any) -> ContractCheck:
        try:
            self._adapter.validate_python(value, strict=self.strict)
        except ValidationError as e:
            messages = [
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            ]
            return ContractCheck(ok=False, errors=messages)
        return ContractCheck(ok=True)

    def as_sequence(self) -> "PydanticContract":
        element = self.annotation
        return PydanticContract(
            Union[List[element], Tuple[element, ...]],  # type: ignore[valid-type]
            strict=self.strict,
        )

    def __repr__(self) -> str:
        return f"PydanticContract({self.annotation!r}, strict={self.strict})"


def as_contract(obj: Any) -> InputContract:
    """Normaliza o que o chamador informa como contrato de entrada."""
    if isinstance(obj, InputContract) and not isinstance(obj, type):
        return obj
    return PydanticContract(obj)


def sequence_of(contract: InputContract, *, step_name: str) -> InputContract:
    """
    Variante "sequência de X" de um contrato, exigida por Steps de fan-out.

    Contratos próprios só precisam de `check`; para uso em fan-out também
    devem oferecer `as_sequence()`.

    Raises:
        InvalidContract: Se o contrato não souber construir a variante.
    """
    build = getattr(contract, "as_sequence", None)
    if not callable(build):
        raise InvalidContract(
            f"Contrato do Step de fan-out '{step_name}' não oferece as_sequence()",
            details={"step_name": step_name, "contract": type(contract).__name__},
            hint="Implemente as_sequence() no contrato ou use uma anotação de tipo",
        )
    return build()

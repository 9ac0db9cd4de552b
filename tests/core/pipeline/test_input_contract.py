# tests/core/pipeline/test_input_contract.py
"""
Testes dos contratos de entrada (InputContract / PydanticContract).

Os testes asseguram que:
- anotações de tipo e modelos Pydantic viram contratos utilizáveis
- a verificação nunca levanta exceção para valores inválidos
- a verificação é estrita (sem coerção de strings numéricas)
- contratos próprios, que apenas satisfazem o protocolo, são aceitos
- contratos só com `check` servem para Steps simples, não para fan-out
- objetos que não descrevem tipos são rejeitados com InvalidContract
"""

from typing import Any, Dict, List

import pytest
from pydantic import BaseModel

try:
    from twineflow.core.exceptions import InvalidContract
    from twineflow.core.pipeline.contract import (
        ContractCheck,
        InputContract,
        PydanticContract,
        as_contract,
        sequence_of,
    )
except Exception as e:  # noqa: BLE001
    as_contract = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing input contracts. Implement:"
            "- src/twineflow/core/pipeline/contract.py (InputContract, PydanticContract, as_contract)"
            f"Import error: {_IMPORT_ERR}"
        )


class User(BaseModel):
    id: int
    name: str


class EvenNumbers:
    """Contrato próprio, sem Pydantic: apenas satisfaz o protocolo."""

    def __init__(self, sequence: bool = False):
        self.sequence = sequence

    def check(self, value):
        if self.sequence:
            ok = isinstance(value, list) and all(isinstance(v, int) and v % 2 == 0 for v in value)
        else:
            ok = isinstance(value, int) and value % 2 == 0
        return ContractCheck(ok=ok, errors=[] if ok else ["not even"])

    def as_sequence(self):
        return EvenNumbers(sequence=True)


class NonEmptyString:
    """Contrato mínimo: só `check`, sem variante de sequência."""

    def check(self, value):
        ok = isinstance(value, str) and bool(value)
        return ContractCheck(ok=ok, errors=[] if ok else ["empty or not a string"])


def test_annotation_becomes_pydantic_contract():
    _require_imports()
    contract = as_contract(int)
    assert isinstance(contract, PydanticContract)
    assert isinstance(contract, InputContract)
    assert contract.check(5).ok


def test_check_reports_failure_without_raising():
    """
    Verifica que valores inválidos produzem ContractCheck negativo.

    Invariantes:
        - Nenhuma exceção é levantada
        - As mensagens de erro são preenchidas
    """
    _require_imports()
    result = as_contract(int).check("abc")
    assert result.ok is False
    assert result.errors


def test_check_is_strict():
    _require_imports()
    assert not as_contract(int).check("5").ok
    assert as_contract(float).check(5).ok


def test_any_accepts_everything():
    _require_imports()
    contract = as_contract(Any)
    for value in (None, 1, "x", [1], {"a": 1}, object()):
        assert contract.check(value).ok


def test_model_contract_accepts_matching_dicts():
    _require_imports()
    contract = as_contract(User)
    assert contract.check({"id": 1, "name": "Leanne"}).ok
    assert contract.check(User(id=1, name="Leanne")).ok
    assert not contract.check({"id": "1", "name": "Leanne"}).ok
    assert not contract.check({"name": "Leanne"}).ok


def test_generic_annotations_are_supported():
    _require_imports()
    contract = as_contract(Dict[str, List[int]])
    assert contract.check({"a": [1, 2]}).ok
    assert not contract.check({"a": [1, "b"]}).ok


def test_as_sequence_wraps_element_contract():
    _require_imports()
    seq = as_contract(User).as_sequence()
    assert seq.check([{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]).ok
    assert not seq.check({"id": 1, "name": "a"}).ok
    assert not seq.check([{"id": 1}]).ok


def test_custom_contract_is_used_as_is():
    """
    Verifica que qualquer objeto com a capacidade do protocolo é aceito.

    Decisões arquiteturais:
        - O Engine não depende da representação interna do Pydantic
        - A variante de sequência é construída pelo próprio contrato
    """
    _require_imports()
    custom = EvenNumbers()
    assert as_contract(custom) is custom
    assert as_contract(custom).as_sequence().check([2, 4]).ok
    assert not as_contract(custom).as_sequence().check([2, 3]).ok


def test_non_type_object_is_rejected():
    _require_imports()
    with pytest.raises(InvalidContract):
        as_contract(42)


def test_check_only_contract_is_accepted_for_simple_steps():
    """
    Verifica que `check` basta para Steps PLAIN/EFFECT.

    Invariantes:
        - O objeto não é repassado ao Pydantic
        - O gate usa o `check` do próprio contrato
    """
    _require_imports()
    from twineflow.core.engine.engine import bootstrap
    from twineflow.core.exceptions import ValidationFailed
    from twineflow.core.pipeline.builder import create_pipeline

    contract = NonEmptyString()
    assert as_contract(contract) is contract

    pipeline = (
        create_pipeline()
        .add_plain("shout", contract, lambda v: v.upper())
        .add_effect("echo", NonEmptyString(), lambda v, c: v)
        .finalize()
    )
    run = bootstrap(pipeline)

    assert run.run_sync("hi") == "HI"
    with pytest.raises(ValidationFailed):
        run.run_sync("")


def test_fan_out_requires_sequence_variant():
    _require_imports()
    from twineflow.core.pipeline.builder import create_pipeline

    with pytest.raises(InvalidContract) as exc_info:
        create_pipeline().add_fan_out("each", NonEmptyString(), lambda v: v)

    assert exc_info.value.details["step_name"] == "each"
    assert sequence_of(EvenNumbers(), step_name="x").check([2, 4]).ok


def test_contract_classes_are_not_taken_as_instances():
    _require_imports()
    with pytest.raises(InvalidContract):
        as_contract(NonEmptyString)


def test_failed_contract_still_has_readable_repr():
    _require_imports()
    contract = PydanticContract.__new__(PydanticContract)
    with pytest.raises(InvalidContract):
        contract.__init__(42)
    assert repr(contract) == "PydanticContract(42, strict=True)"

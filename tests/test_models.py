import pytest
from pydantic import ValidationError

from medcalc.models import CalculatorDefinition, Choice, FieldDefinition, FieldKind, Result, Specialty


def _result(v):
    return Result(value="0", unit="x")


def test_choice_field_requires_choices():
    with pytest.raises(ValidationError):
        FieldDefinition(id="sex", label="Sex", kind=FieldKind.CHOICE)


def test_numeric_field_rejects_choices():
    with pytest.raises(ValidationError):
        FieldDefinition(id="w", label="Weight", choices=(Choice(label="a", value=1),))


def test_duplicate_field_ids_rejected():
    weight = FieldDefinition(id="w", label="Weight", unit="kg")
    with pytest.raises(ValidationError):
        CalculatorDefinition(
            id="dup", name="Dup", short_name="D", specialty=Specialty.GENERAL,
            description="", inputs=(weight, weight), compute=_result,
        )


def test_get_input():
    calc = CalculatorDefinition(
        id="one", name="One", short_name="1", specialty="Neurology", description="",
        inputs=(FieldDefinition(id="w", label="Weight", unit="kg"),), compute=_result,
    )
    assert calc.specialty is Specialty.NEUROLOGY
    assert calc.input_ids == ("w",)
    assert calc.get_input("w").unit == "kg"
    with pytest.raises(KeyError):
        calc.get_input("h")


def test_result_interpretation_optional():
    r = Result(value="93", unit="mmHg")
    assert r.interpretation is None
    assert r.model_dump() == {"value": "93", "unit": "mmHg", "interpretation": None}

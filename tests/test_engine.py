import pytest

from medcalc.engine import CalculatorSession, evaluate, initialize, parse_number, set_field
from medcalc.registry import REGISTRY


@pytest.mark.parametrize("raw, expected", [
    ("70", 70.0),
    (" 3.5 ", 3.5),
    ("-2", -2.0),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("12abc", 12.0),
    ("abc", 0.0),
    ("", 0.0),
    ("-", 0.0),
    (None, 0.0),
    (4, 4.0),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_initialize_applies_defaults_and_first_choice():
    assert initialize(REGISTRY.get("aa-grad")) == {"fio2": 21}
    assert initialize(REGISTRY.get("bic-def")) == {"target": 24}
    assert initialize(REGISTRY.get("gcs")) == {"eye": 4, "verbal": 5, "motor": 6}
    assert initialize(REGISTRY.get("bmr")) == {"sex": 5}


def test_initialize_leaves_plain_numbers_unset():
    assert initialize(REGISTRY.get("bmi")) == {}


def test_set_field_parse_failure_reads_back_zero():
    for calc in REGISTRY.all():
        field_id = calc.inputs[0].id
        values = set_field(initialize(calc), field_id, "abc")
        assert values[field_id] == 0


def test_set_field_returns_new_mapping():
    calc = REGISTRY.get("bmi")
    start = initialize(calc)
    updated = set_field(start, "weight", "70")
    assert updated == {"weight": 70.0}
    assert start == {}


def test_every_calculator_evaluates_from_initial_state():
    for calc in REGISTRY.all():
        result = evaluate(calc, initialize(calc))
        assert result.value, calc.id
        assert result.unit, calc.id


def test_every_calculator_evaluates_with_entered_values():
    for calc in REGISTRY.all():
        values = initialize(calc)
        for inp in calc.inputs:
            if not inp.is_choice:
                values = set_field(values, inp.id, "7")
        result = evaluate(calc, values)
        assert result.value, calc.id


def test_evaluate_passes_only_declared_inputs():
    seen = {}
    calc = REGISTRY.get("bmi")

    def spy(v):
        seen.update(v)
        return calc.compute(v)

    spying = calc.model_copy(update={"compute": spy})
    evaluate(spying, {"weight": 70, "stray": 1})
    assert seen == {"weight": 70.0, "height": 0.0}


def test_session_resets_when_switching_calculator():
    session = CalculatorSession(REGISTRY.get("bmi"))
    session.set("weight", "70")
    session.set("height", "175")
    assert session.calculate().value == "22.9"

    session.open(REGISTRY.get("gcs"))
    assert session.values == {"eye": 4, "verbal": 5, "motor": 6}
    assert session.result is None
    assert session.calculate().value == "15"


def test_session_set_returns_stored_value():
    session = CalculatorSession(REGISTRY.get("map"))
    assert session.set("sbp", "not a number") == 0
    assert session.set("sbp", "120") == 120


def test_session_without_calculator():
    session = CalculatorSession()
    with pytest.raises(RuntimeError):
        session.calculate()

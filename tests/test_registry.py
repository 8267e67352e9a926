import pytest
from pydantic import ValidationError

from medcalc.calculators import CALCULATORS
from medcalc.models import ALL_SPECIALTIES, Specialty
from medcalc.registry import REGISTRY, FormulaRegistry


def ids(calcs):
    return [c.id for c in calcs]


def test_catalog_is_complete_and_ordered():
    assert len(REGISTRY) == 45
    assert ids(REGISTRY.all())[:3] == ["standard-dose", "weight-dose", "bsa-dose"]
    assert REGISTRY.all()[-1].id == "curb65"
    assert REGISTRY.all() is REGISTRY.all()


def test_ids_are_unique():
    all_ids = ids(REGISTRY.all())
    assert len(all_ids) == len(set(all_ids))


def test_empty_search_returns_everything():
    assert REGISTRY.search("") == REGISTRY.all()


def test_search_is_case_insensitive_on_name_and_short_name():
    assert ids(REGISTRY.search("dose")) == ["standard-dose", "weight-dose", "bsa-dose"]
    assert "map" in ids(REGISTRY.search("MAP"))
    assert ids(REGISTRY.search("mean arterial")) == ["map"]
    # short name only
    assert ids(REGISTRY.search("p/f")) == ["pf-ratio"]


def test_search_no_match():
    assert REGISTRY.search("zzz-not-a-tool") == ()


def test_by_specialty_filters_and_preserves_order():
    cardiology = REGISTRY.by_specialty(Specialty.CARDIOLOGY)
    assert ids(cardiology) == ["has-bled", "ldl", "qtc", "chads"]
    assert all(c.specialty == Specialty.CARDIOLOGY for c in cardiology)

    positions = [ids(REGISTRY.all()).index(c.id) for c in REGISTRY.by_specialty(Specialty.CRITICAL_CARE)]
    assert positions == sorted(positions)


def test_by_specialty_accepts_plain_string_and_all_sentinel():
    assert REGISTRY.by_specialty("Pediatrics") == REGISTRY.by_specialty(Specialty.PEDIATRICS)
    assert REGISTRY.by_specialty(ALL_SPECIALTIES) == REGISTRY.all()
    assert REGISTRY.by_specialty(Specialty.NEUROLOGY) == ()


def test_by_specialty_and_search():
    assert ids(REGISTRY.by_specialty_and_search(Specialty.CRITICAL_CARE, "gap")) == ["anion-gap"]
    assert REGISTRY.by_specialty_and_search(ALL_SPECIALTIES, "") == REGISTRY.all()
    assert REGISTRY.by_specialty_and_search(Specialty.PEDIATRICS, "bmi") == ()


def test_specialties_display_order():
    assert [s.value for s in REGISTRY.specialties()] == [
        "General", "Critical Care", "Nephrology", "Cardiology", "Pediatrics",
        "Pharmacology", "Gastroenterology", "Neurology", "Emergency",
    ]


def test_get_and_contains():
    assert REGISTRY.get("bmi").short_name == "BMI"
    assert "bmi" in REGISTRY
    with pytest.raises(KeyError, match="not found"):
        REGISTRY.get("nope")


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        FormulaRegistry([CALCULATORS[0], CALCULATORS[0]])


def test_definitions_are_frozen():
    calc = REGISTRY.get("bmi")
    with pytest.raises(ValidationError):
        calc.name = "changed"
    assert isinstance(calc.inputs, tuple)

"""Read-only lookup and filtering over the calculator catalog."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Tuple, Union

from .calculators import CALCULATORS
from .models import ALL_SPECIALTIES, CalculatorDefinition, Specialty

logger = logging.getLogger(__name__)

SpecialtyFilter = Union[Specialty, str]


class FormulaRegistry:
    """
    Immutable, ordered catalog of calculator definitions.

    Populated once from a fixed table; every query returns a fresh tuple in
    catalog order, so callers can never reorder or mutate the registry.
    """

    def __init__(self, calculators: Iterable[CalculatorDefinition]):
        calcs = tuple(calculators)
        index = {}
        for calc in calcs:
            if calc.id in index:
                raise ValueError(f"Duplicate calculator id '{calc.id}'")
            index[calc.id] = calc
        self._calculators: Tuple[CalculatorDefinition, ...] = calcs
        self._index = index
        logger.debug(f"Loaded {len(calcs)} calculators")

    def __len__(self) -> int:
        return len(self._calculators)

    def __iter__(self) -> Iterator[CalculatorDefinition]:
        return iter(self._calculators)

    def __contains__(self, calc_id: object) -> bool:
        return calc_id in self._index

    def all(self) -> Tuple[CalculatorDefinition, ...]:
        return self._calculators

    def get(self, calc_id: str) -> CalculatorDefinition:
        try:
            return self._index[calc_id]
        except KeyError:
            raise KeyError(f"Calculator '{calc_id}' not found") from None

    @staticmethod
    def specialties() -> Tuple[Specialty, ...]:
        return tuple(Specialty)

    def by_specialty(self, specialty: SpecialtyFilter) -> Tuple[CalculatorDefinition, ...]:
        return tuple(c for c in self._calculators if _matches_specialty(c, specialty))

    def search(self, term: str) -> Tuple[CalculatorDefinition, ...]:
        """Case-insensitive substring match on name or short name."""
        return tuple(c for c in self._calculators if _matches_term(c, term))

    def by_specialty_and_search(self, specialty: SpecialtyFilter, term: str) -> Tuple[CalculatorDefinition, ...]:
        return tuple(
            c for c in self._calculators
            if _matches_specialty(c, specialty) and _matches_term(c, term)
        )


def _matches_specialty(calc: CalculatorDefinition, specialty: SpecialtyFilter) -> bool:
    if specialty == ALL_SPECIALTIES:
        return True
    return calc.specialty == Specialty(specialty)


def _matches_term(calc: CalculatorDefinition, term: str) -> bool:
    needle = term.lower()
    return needle in calc.name.lower() or needle in calc.short_name.lower()


REGISTRY = FormulaRegistry(CALCULATORS)

"""
Evaluation engine: turns raw field entry into numbers and runs a calculator.

Entry is permissive. Anything that does not start with a decimal number is
stored as 0, so editing a form never fails. Computation is left to each
calculator, including how undefined maths (x/0, sqrt of a negative) shows up
in its result.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

from .models import CalculatorDefinition, Result

logger = logging.getLogger(__name__)

InputValueSet = Dict[str, float]

# Leading decimal literal; trailing junk is ignored ("12abc" -> 12).
_DECIMAL_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(raw: Any) -> float:
    """Parse user entry as a decimal number, 0 on any failure."""
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        return float(raw)
    m = _DECIMAL_PREFIX.match(str(raw) if raw is not None else "")
    if not m:
        return 0.0
    return float(m.group(1))


def initialize(calc: CalculatorDefinition) -> InputValueSet:
    """
    Starting values for a freshly opened calculator.

    Declared defaults win; choice fields otherwise take their first option;
    plain numeric fields stay unset until typed.
    """
    values: InputValueSet = {}
    for inp in calc.inputs:
        if inp.default_value is not None:
            values[inp.id] = inp.default_value
        elif inp.is_choice:
            values[inp.id] = inp.choices[0].value
    return values


def set_field(values: InputValueSet, field_id: str, raw_text: Any) -> InputValueSet:
    """Return a copy of ``values`` with ``field_id`` set from raw entry."""
    updated = dict(values)
    updated[field_id] = parse_number(raw_text)
    return updated


def evaluate(calc: CalculatorDefinition, values: InputValueSet) -> Result:
    """
    Run ``calc`` on the current values.

    The formula sees exactly its declared inputs: unset ones read as 0 and
    keys that belong to no input are dropped.
    """
    inputs = {fid: float(values.get(fid, 0.0)) for fid in calc.input_ids}
    result = calc.compute(inputs)
    logger.debug(f"Evaluated {calc.id} -> {result.value} {result.unit}")
    return result


class CalculatorSession:
    """One open calculator form: its definition, entered values and last result."""

    def __init__(self, calc: Optional[CalculatorDefinition] = None):
        self.calculator: Optional[CalculatorDefinition] = None
        self.values: InputValueSet = {}
        self.result: Optional[Result] = None
        if calc is not None:
            self.open(calc)

    def open(self, calc: CalculatorDefinition) -> InputValueSet:
        """Switch to ``calc``, discarding values and result of the previous one."""
        self.calculator = calc
        self.values = initialize(calc)
        self.result = None
        return self.values

    def close(self) -> None:
        self.calculator = None
        self.values = {}
        self.result = None

    def set(self, field_id: str, raw_text: Any) -> float:
        self.values = set_field(self.values, field_id, raw_text)
        return self.values[field_id]

    def calculate(self) -> Result:
        if self.calculator is None:
            raise RuntimeError("No calculator is open")
        self.result = evaluate(self.calculator, self.values)
        return self.result

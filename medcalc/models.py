"""Pydantic models for the MedCalc formula catalog."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class Specialty(str, Enum):
    """Clinical domain a calculator is filed under. Filtering only."""

    GENERAL = "General"
    CRITICAL_CARE = "Critical Care"
    NEPHROLOGY = "Nephrology"
    CARDIOLOGY = "Cardiology"
    PEDIATRICS = "Pediatrics"
    PHARMACOLOGY = "Pharmacology"
    GASTROENTEROLOGY = "Gastroenterology"
    NEUROLOGY = "Neurology"
    EMERGENCY = "Emergency"


# Filter sentinel meaning "every specialty"
ALL_SPECIALTIES = "All"


class FieldKind(str, Enum):
    NUMBER = "number"
    CHOICE = "select"


class Choice(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: float


class FieldDefinition(BaseModel):
    """One input slot of a calculator."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    unit: str = ""
    kind: FieldKind = FieldKind.NUMBER
    choices: Tuple[Choice, ...] = ()
    default_value: Optional[float] = None

    @model_validator(mode="after")
    def _check_choices(self) -> "FieldDefinition":
        if self.kind is FieldKind.CHOICE and not self.choices:
            raise ValueError(f"choice field '{self.id}' declares no choices")
        if self.kind is FieldKind.NUMBER and self.choices:
            raise ValueError(f"numeric field '{self.id}' cannot declare choices")
        return self

    @property
    def is_choice(self) -> bool:
        return self.kind is FieldKind.CHOICE


class Result(BaseModel):
    """Display-ready output of one evaluation."""

    value: str
    unit: str
    interpretation: Optional[str] = None


Formula = Callable[[Dict[str, float]], Result]


class CalculatorDefinition(BaseModel):
    """A fixed clinical tool: its inputs and its pure computation."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    short_name: str
    specialty: Specialty
    description: str
    inputs: Tuple[FieldDefinition, ...]
    compute: Formula

    @model_validator(mode="after")
    def _check_field_ids(self) -> "CalculatorDefinition":
        seen = set()
        for f in self.inputs:
            if f.id in seen:
                raise ValueError(f"Calculator '{self.id}' declares field '{f.id}' twice")
            seen.add(f.id)
        return self

    @property
    def input_ids(self) -> Tuple[str, ...]:
        return tuple(f.id for f in self.inputs)

    def get_input(self, field_id: str) -> FieldDefinition:
        for f in self.inputs:
            if f.id == field_id:
                return f
        raise KeyError(f"Calculator '{self.id}' has no field '{field_id}'")

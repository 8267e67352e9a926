"""Prompt text for the clinical advisory assistant."""
from __future__ import annotations

from typing import Iterable

from .models import CalculatorDefinition


def build_calculator_context(calculators: Iterable[CalculatorDefinition]) -> str:
    return "\n".join(
        f"- {c.name} ({c.short_name}): {c.description}"
        for c in calculators
    )


def build_advice_prompt(query: str, calculators: Iterable[CalculatorDefinition]) -> str:
    return (
        "You are a clinical assistant for a hospital app.\n"
        "The user is asking about a medical calculation or a clinical case.\n"
        "Based on the available tools listed below, suggest the most appropriate "
        "calculation and explain why.\n\n"
        "Tools Available:\n"
        f"{build_calculator_context(calculators)}\n\n"
        f'User Query: "{query}"\n\n'
        "Provide a concise, professional answer. "
        "Suggest exactly which tool from the list above should be used."
    )

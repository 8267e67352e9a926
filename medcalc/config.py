"""
Advisor configuration.

Read from the environment, with a local ``.env`` file loaded first when present.
"""
from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class AdvisorConfig(BaseModel):
    """Settings for the text-generation service behind the advisor."""

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    temperature: float = 0.7
    max_output_tokens: int = 500
    thinking_budget: int = 100
    timeout: float = 30.0

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "AdvisorConfig":
        if dotenv:
            load_dotenv()
        return cls(
            api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
            model=os.getenv("MEDCALC_ADVISOR_MODEL", DEFAULT_MODEL),
            api_base=os.getenv("MEDCALC_ADVISOR_URL", DEFAULT_API_BASE),
            timeout=float(os.getenv("MEDCALC_ADVISOR_TIMEOUT", "30")),
        )

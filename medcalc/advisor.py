"""Clinical advisory lookup backed by a hosted text-generation model."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

import requests

from .config import AdvisorConfig
from .models import CalculatorDefinition
from .prompts import build_advice_prompt
from .registry import REGISTRY

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "No response generated."
ERROR_MESSAGE = "Error connecting to clinical assistant. Please try again."


class AdvisorError(Exception):
    """Raised when the advisory service cannot be reached or answers badly."""


class ClinicalAdvisor:
    """
    Suggests which catalog calculator fits a free-text clinical question.

    One synchronous request per question, no retries. ``ask`` never raises:
    service failures come back as a fixed message so the catalog stays usable.
    """

    def __init__(
        self,
        config: Optional[AdvisorConfig] = None,
        calculators: Optional[Iterable[CalculatorDefinition]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or AdvisorConfig.from_env()
        self.calculators = tuple(calculators) if calculators is not None else REGISTRY.all()
        self._http = session or requests

    def ask(self, query: str) -> Optional[str]:
        """Return advisory text, or ``None`` for a blank query."""
        if not query or not query.strip():
            return None
        try:
            text = self.get_advice(query)
        except AdvisorError as e:
            logger.error(f"Clinical advice request failed: {e}")
            return ERROR_MESSAGE
        return text or NO_RESPONSE_MESSAGE

    def get_advice(self, query: str) -> str:
        """Call the service and return its raw text. Raises AdvisorError."""
        if not self.config.api_key:
            raise AdvisorError("No API key configured (set GEMINI_API_KEY)")

        payload = self._build_payload(build_advice_prompt(query, self.calculators))
        logger.info(f"Requesting clinical advice from {self.config.model}")
        try:
            response = self._http.post(
                self.config.endpoint,
                json=payload,
                headers={"x-goog-api-key": self.config.api_key},
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise AdvisorError(str(e)) from e
        return _extract_text(data)

    def _build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.config.temperature,
                "maxOutputTokens": self.config.max_output_tokens,
                "thinkingConfig": {"thinkingBudget": self.config.thinking_budget},
            },
        }


def _extract_text(data: Any) -> str:
    """Concatenate the text parts of the first candidate."""
    if not isinstance(data, dict):
        raise AdvisorError(f"Unexpected response body: {type(data).__name__}")
    if "error" in data:
        err = data["error"]
        raise AdvisorError(str(err.get("message", err) if isinstance(err, dict) else err))
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    if not isinstance(candidates, list):
        raise AdvisorError(f"Unexpected candidates: {type(candidates).__name__}")
    content = _expect_dict(candidates[0], "candidate").get("content") or {}
    parts = _expect_dict(content, "content").get("parts") or []
    if not isinstance(parts, list):
        raise AdvisorError(f"Unexpected parts: {type(parts).__name__}")
    texts = []
    for part in parts:
        part = _expect_dict(part, "part")
        if not part.get("thought"):
            texts.append(str(part.get("text", "")))
    return "".join(texts)


def _expect_dict(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise AdvisorError(f"Unexpected {what} in response: {type(value).__name__}")
    return value

import pytest
import requests

from medcalc.advisor import ERROR_MESSAGE, NO_RESPONSE_MESSAGE, AdvisorError, ClinicalAdvisor
from medcalc.config import AdvisorConfig
from medcalc.registry import REGISTRY


class FakeResponse:
    def __init__(self, body=None, status=200):
        self._body = body
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc:
            raise self.exc
        return self.response


def _advisor(session, api_key="test-key"):
    config = AdvisorConfig(api_key=api_key, model="test-model", api_base="https://example.test/v1/")
    return ClinicalAdvisor(config=config, calculators=REGISTRY.all(), session=session)


def _answer(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def test_ask_returns_service_text():
    session = FakeSession(FakeResponse(_answer("Use the Parkland Formula (Parkland).")))
    assert _advisor(session).ask("burn patient") == "Use the Parkland Formula (Parkland)."

    url, kwargs = session.calls[0]
    assert url == "https://example.test/v1/models/test-model:generateContent"
    assert kwargs["headers"] == {"x-goog-api-key": "test-key"}
    assert kwargs["timeout"] == 30.0
    prompt = kwargs["json"]["contents"][0]["parts"][0]["text"]
    assert "- Parkland Formula (Burns) (Parkland):" in prompt
    assert '"burn patient"' in prompt
    assert kwargs["json"]["generationConfig"] == {
        "temperature": 0.7,
        "maxOutputTokens": 500,
        "thinkingConfig": {"thinkingBudget": 100},
    }


def test_ask_skips_thought_parts():
    body = {"candidates": [{"content": {"parts": [
        {"text": "planning...", "thought": True},
        {"text": "Use MELD."},
    ]}}]}
    assert _advisor(FakeSession(FakeResponse(body))).ask("cirrhosis") == "Use MELD."


def test_ask_blank_query_sends_nothing():
    session = FakeSession(FakeResponse(_answer("x")))
    assert _advisor(session).ask("   ") is None
    assert session.calls == []


def test_ask_empty_answer():
    session = FakeSession(FakeResponse({"candidates": []}))
    assert _advisor(session).ask("anything") == NO_RESPONSE_MESSAGE


@pytest.mark.parametrize("session", [
    FakeSession(FakeResponse({}, status=500)),
    FakeSession(exc=requests.ConnectionError("unreachable")),
    FakeSession(exc=requests.Timeout("slow")),
    FakeSession(FakeResponse(ValueError("not json"))),
    FakeSession(FakeResponse({"error": {"message": "quota exceeded"}})),
    FakeSession(FakeResponse(["not", "an", "object"])),
    FakeSession(FakeResponse({"candidates": ["oops"]})),
    FakeSession(FakeResponse({"candidates": [{"content": "oops"}]})),
    FakeSession(FakeResponse({"candidates": [{"content": {"parts": ["oops"]}}]})),
    FakeSession(FakeResponse({"candidates": "oops"})),
])
def test_ask_failures_become_fixed_message(session):
    assert _advisor(session).ask("anything") == ERROR_MESSAGE


def test_missing_api_key():
    session = FakeSession(FakeResponse(_answer("x")))
    advisor = _advisor(session, api_key=None)
    assert advisor.ask("anything") == ERROR_MESSAGE
    assert session.calls == []
    with pytest.raises(AdvisorError, match="API key"):
        advisor.get_advice("anything")


def test_config_from_env(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "fallback-key")
    monkeypatch.setenv("MEDCALC_ADVISOR_TIMEOUT", "5")
    monkeypatch.delenv("MEDCALC_ADVISOR_MODEL", raising=False)
    monkeypatch.delenv("MEDCALC_ADVISOR_URL", raising=False)
    config = AdvisorConfig.from_env(dotenv=False)
    assert config.api_key == "fallback-key"
    assert config.timeout == 5.0
    assert config.endpoint.endswith("/models/gemini-3-flash-preview:generateContent")

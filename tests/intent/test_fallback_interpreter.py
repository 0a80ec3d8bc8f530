import json
from unittest.mock import MagicMock

import pytest
from lms_assistant.config import settings
from lms_assistant.intent.interpreter import interpret
from lms_assistant.intent.llm import FallbackError, OpenAIFallback, sanitize_payload
from lms_assistant.intent.types import AnalysisResult, ExtractedEntities


class StubFallback:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def classify(self, message, hint=None):
        self.calls.append((message, hint))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fallback_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "FALLBACK_ENABLED", True)


def _search_result(confidence: float) -> AnalysisResult:
    return AnalysisResult(
        intent="search_courses",
        entities=ExtractedEntities(search_term="weather"),
        confidence=confidence,
    )


def _mock_client(content: str) -> MagicMock:
    client = MagicMock()
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    client.chat.completions.create.return_value = response
    return client


def test_confident_rule_result_skips_fallback(fallback_enabled) -> None:
    stub = StubFallback(result=_search_result(0.99))

    interpretation = interpret("Find Python courses", fallback=stub)

    assert interpretation.source_of_intent == "rule_only"
    assert interpretation.result.intent == "search_courses"
    assert interpretation.flags == []
    assert stub.calls == []


def test_disabled_fallback_is_skipped() -> None:
    stub = StubFallback(result=_search_result(0.9))

    interpretation = interpret("What is the weather", fallback=stub)

    assert interpretation.result.is_unknown
    assert interpretation.flags == ["fallback_skipped"]
    assert stub.calls == []


def test_missing_fallback_is_skipped(fallback_enabled) -> None:
    interpretation = interpret("What is the weather")
    assert interpretation.flags == ["fallback_skipped"]


def test_fallback_result_used_when_better(fallback_enabled) -> None:
    stub = StubFallback(result=_search_result(0.6))

    interpretation = interpret("What is the weather", fallback=stub)

    assert interpretation.source_of_intent == "llm_fallback"
    assert interpretation.result.intent == "search_courses"
    message, hint = stub.calls[0]
    assert message == "What is the weather"
    assert hint.is_unknown


def test_fallback_not_better_keeps_rule(fallback_enabled) -> None:
    stub = StubFallback(result=AnalysisResult.unknown())

    interpretation = interpret("What is the weather", fallback=stub)

    assert interpretation.result.is_unknown
    assert interpretation.flags == ["fallback_not_better"]


def test_fallback_failure_keeps_rule(fallback_enabled) -> None:
    stub = StubFallback(error=FallbackError("boom"))

    interpretation = interpret("What is the weather", fallback=stub)

    assert interpretation.result.is_unknown
    assert interpretation.source_of_intent == "rule_only"
    assert interpretation.flags == ["fallback_failed"]


def test_sanitize_rejects_unregistered_intent() -> None:
    payload = {"intent": "order_pizza", "entities": {"query": "x"}, "confidence": 0.9}
    assert sanitize_payload(payload) == AnalysisResult.unknown()


def test_sanitize_requires_entities_and_confidence() -> None:
    assert sanitize_payload({"intent": "search_courses", "entities": {}, "confidence": 0.9}).is_unknown
    assert sanitize_payload(
        {"intent": "search_courses", "entities": {"searchTerm": "x"}, "confidence": 0}
    ).is_unknown


def test_sanitize_clamps_and_normalizes() -> None:
    result = sanitize_payload(
        {
            "intent": "bulk_enroll_course",
            "entities": {
                "emails": ["A@X.com", "b@x.com"],
                "courseName": "Excel",
                "mood": "happy",
            },
            "confidence": 3,
        }
    )

    assert result.intent == "bulk_enroll_course"
    assert result.confidence == 1.0
    assert result.entities.emails == ["a@x.com", "b@x.com"]
    assert result.entities.as_dict() == {
        "emails": ["a@x.com", "b@x.com"],
        "courseName": "Excel",
    }


def test_openai_fallback_parses_json() -> None:
    client = _mock_client(
        json.dumps(
            {
                "intent": "search_courses",
                "entities": {"searchTerm": "weather"},
                "confidence": 0.55,
            }
        )
    )

    result = OpenAIFallback(client=client, model="test-model").classify("What is the weather")

    assert result.intent == "search_courses"
    assert result.entities.search_term == "weather"
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["response_format"] == {"type": "json_object"}
    assert "What is the weather" in kwargs["messages"][1]["content"]


def test_openai_fallback_wraps_bad_json() -> None:
    client = _mock_client("not json")

    with pytest.raises(FallbackError):
        OpenAIFallback(client=client).classify("What is the weather")


def test_openai_fallback_rejects_non_object() -> None:
    client = _mock_client("[1, 2]")

    with pytest.raises(FallbackError):
        OpenAIFallback(client=client).classify("What is the weather")

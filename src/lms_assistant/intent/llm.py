from __future__ import annotations

import json
from typing import Any

from openai import OpenAI, OpenAIError

from lms_assistant.config import settings

from .rules import INTENT_NAMES
from .types import UNKNOWN_INTENT, AnalysisResult, ExtractedEntities


class FallbackError(RuntimeError):
    """The fallback classifier could not produce a usable answer."""


_SYSTEM_PROMPT = (
    "You classify administrative commands for a learning-management platform. "
    "Output strict JSON only (no prose). Pick exactly one intent from the list; "
    'use "unknown" with confidence 0 when nothing fits. Copy emails, course, '
    "learning plan and session names verbatim from the message."
)

_TEMPLATE = (
    "{\n"
    '  "intent": "<one of the intents>",\n'
    '  "entities": {"email": "...", "emails": [], "courseName": "...", '
    '"learningPlanName": "...", "sessionName": "...", "searchTerm": "..."},\n'
    '  "confidence": 0.0\n'
    "}"
)


def _build_messages(message: str, hint: AnalysisResult | None) -> list[dict[str, str]]:
    hint_json = json.dumps(hint.to_dict()) if hint else "{}"
    user_prompt = (
        f'Message: "{message}"\n'
        f"Intents: {', '.join(INTENT_NAMES + (UNKNOWN_INTENT,))}\n"
        "Rule-based hint:\n"
        f"{hint_json}\n"
        "Return JSON exactly:\n"
        f"{_TEMPLATE}"
    )
    return [
        {"role": "system", "content": _SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]


def _clamp(value: Any) -> float:
    try:
        return max(0.0, min(1.0, float(value)))
    except (TypeError, ValueError):
        return 0.0


def sanitize_payload(payload: dict[str, Any]) -> AnalysisResult:
    """Coerce a free-form classifier payload into a valid result.

    Unregistered intents, non-positive confidence, or no usable entities all
    collapse to ``unknown`` so the zero-confidence invariant holds.
    """
    intent = str(payload.get("intent", UNKNOWN_INTENT) or UNKNOWN_INTENT)
    confidence = _clamp(payload.get("confidence", 0.0))
    raw_entities = payload.get("entities", {})
    entities = (
        ExtractedEntities.from_dict(raw_entities)
        if isinstance(raw_entities, dict)
        else ExtractedEntities()
    )
    if entities.emails is not None:
        if isinstance(entities.emails, list):
            entities.emails = [str(e).lower() for e in entities.emails] or None
        else:
            entities.emails = None

    if intent not in INTENT_NAMES or confidence <= 0.0 or entities.is_empty():
        return AnalysisResult.unknown()
    return AnalysisResult(intent=intent, entities=entities, confidence=confidence)


class OpenAIFallback:
    """Looser classification through a chat model, used below rule confidence."""

    def __init__(self, client: OpenAI | None = None, model: str | None = None) -> None:
        self._client = client
        self.model = model or settings.LLM_MODEL

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(
                api_key=settings.OPENAI_API_KEY,
                base_url=settings.OPENAI_BASE_URL,
                organization=settings.OPENAI_ORG,
            )
        return self._client

    def classify(self, message: str, hint: AnalysisResult | None = None) -> AnalysisResult:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                temperature=settings.TEMPERATURE,
                max_tokens=settings.MAX_OUTPUT_TOKENS,
                response_format={"type": "json_object"},
                messages=_build_messages(message or "", hint),
            )
            content = response.choices[0].message.content or "{}"
            payload = json.loads(content)
        except (OpenAIError, json.JSONDecodeError) as err:
            raise FallbackError(f"Fallback classification failed: {err}") from err

        if not isinstance(payload, dict):
            raise FallbackError("Fallback classifier returned a non-object payload")
        return sanitize_payload(payload)

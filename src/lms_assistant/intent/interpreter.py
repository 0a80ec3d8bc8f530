from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from lms_assistant.config import settings
from lms_assistant.logging import get_logger

from .analyzer import IntentAnalyzer, default_analyzer
from .llm import FallbackError
from .types import AnalysisResult

logger = get_logger(__name__)


class FallbackClassifier(Protocol):
    def classify(
        self, message: str, hint: AnalysisResult | None = None
    ) -> AnalysisResult: ...


@dataclass
class Interpretation:
    result: AnalysisResult
    source_of_intent: str = "rule_only"  # "rule_only"|"llm_fallback"
    flags: list[str] = field(default_factory=list)


def _needs_fallback(result: AnalysisResult) -> bool:
    return result.is_unknown or result.confidence < settings.FALLBACK_MIN_CONFIDENCE


def interpret(
    message: str,
    fallback: FallbackClassifier | None = None,
    reference_date: date | None = None,
    analyzer: IntentAnalyzer | None = None,
) -> Interpretation:
    rule_result = (analyzer or default_analyzer).analyze(message, reference_date)
    if not _needs_fallback(rule_result):
        return Interpretation(result=rule_result)
    if fallback is None or not settings.FALLBACK_ENABLED:
        return Interpretation(result=rule_result, flags=["fallback_skipped"])

    try:
        llm_result = fallback.classify(message, hint=rule_result)
    except FallbackError as err:
        logger.warning(f"Fallback classifier failed, keeping rule result: {err}")
        return Interpretation(result=rule_result, flags=["fallback_failed"])

    if llm_result.confidence > rule_result.confidence:
        return Interpretation(result=llm_result, source_of_intent="llm_fallback")
    return Interpretation(result=rule_result, flags=["fallback_not_better"])

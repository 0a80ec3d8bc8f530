"""Priority-ordered resolution of free text into an intent."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from lms_assistant.config import settings
from lms_assistant.logging import get_logger

from .rules import DEFAULT_REGISTRY
from .types import AnalysisResult, ExtractionContext, IntentRule

logger = get_logger(__name__)


def resolve(
    text: str,
    rules: Iterable[IntentRule],
    ctx: ExtractionContext | None = None,
    short_circuit: float | None = None,
) -> AnalysisResult:
    """Greedy first-sufficiently-good match over ``rules`` in order.

    A rule is a candidate when one of its patterns matches, its extractor
    returns entities, and those entities pass its required-field check. A
    candidate replaces the running best only with strictly higher confidence,
    so ties go to the earlier rule. Scanning stops as soon as the running best
    exceeds ``short_circuit`` (``settings.SHORT_CIRCUIT_CONFIDENCE`` when
    omitted); later rules are never consulted.
    """
    if short_circuit is None:
        short_circuit = settings.SHORT_CIRCUIT_CONFIDENCE
    if not isinstance(text, str) or not text.strip():
        return AnalysisResult.unknown()

    ctx = ctx or ExtractionContext()
    best = AnalysisResult.unknown()
    for rule in rules:
        if not rule.matches(text):
            continue
        entities = rule.extract(text, ctx)
        if entities is None:
            logger.debug(f"{rule.name}: surface matched, extractor declined")
            continue
        if rule.confidence > best.confidence and rule.required(entities):
            if entities.is_empty():
                continue
            best = AnalysisResult(
                intent=rule.name, entities=entities, confidence=rule.confidence
            )
            logger.debug(f"{rule.name}: accepted at {rule.confidence:.2f}")
        if best.confidence > short_circuit:
            break
    return best


class IntentAnalyzer:
    """Holds an immutable rule table and the thresholds used to scan it."""

    def __init__(
        self,
        rules: Sequence[IntentRule] | None = None,
        short_circuit: float | None = None,
        reference_date: date | None = None,
    ) -> None:
        self.rules: tuple[IntentRule, ...] = tuple(
            DEFAULT_REGISTRY if rules is None else rules
        )
        # None defers to settings on every call
        self.short_circuit = short_circuit
        self.reference_date = reference_date

    @property
    def intent_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)

    def analyze(self, message: str, reference_date: date | None = None) -> AnalysisResult:
        ctx = ExtractionContext(reference_date=reference_date or self.reference_date)
        result = resolve(message, self.rules, ctx, self.short_circuit)
        logger.debug(f"Analyzed -> {result.intent} ({result.confidence:.2f})")
        return result


default_analyzer = IntentAnalyzer()


def analyze(message: str, reference_date: date | None = None) -> AnalysisResult:
    return default_analyzer.analyze(message, reference_date=reference_date)

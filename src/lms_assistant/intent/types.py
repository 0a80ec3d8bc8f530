from __future__ import annotations

import re
from dataclasses import dataclass, fields
from datetime import date
from typing import Any, Callable, Literal

ResourceType = Literal["course", "learning_plan", "ilt_session"]
Action = Literal["enroll", "unenroll", "bulk_enroll", "bulk_unenroll", "mark_attendance"]
AssignmentType = Literal["mandatory", "required", "recommended", "optional"]

UNKNOWN_INTENT = "unknown"

RESOURCE_TYPES: tuple[str, ...] = ("course", "learning_plan", "ilt_session")
ACTIONS: tuple[str, ...] = (
    "enroll",
    "unenroll",
    "bulk_enroll",
    "bulk_unenroll",
    "mark_attendance",
)
ASSIGNMENT_TYPES: tuple[str, ...] = ("mandatory", "required", "recommended", "optional")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


@dataclass
class ExtractedEntities:
    email: str | None = None
    emails: list[str] | None = None
    user_id: str | None = None
    course_id: str | None = None
    course_name: str | None = None
    learning_plan_name: str | None = None
    session_id: str | None = None
    session_name: str | None = None
    resource_type: ResourceType | None = None
    resource_name: str | None = None
    action: Action | None = None
    assignment_type: AssignmentType | None = None
    start_validity: str | None = None  # YYYY-MM-DD
    end_validity: str | None = None  # YYYY-MM-DD
    start_date: str | None = None  # ILT session, YYYY-MM-DD
    end_date: str | None = None  # ILT session, YYYY-MM-DD
    team_name: str | None = None
    search_term: str | None = None
    job_id: str | None = None
    offset: int | None = None
    load_more: bool | None = None
    is_bulk: bool | None = None
    query: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Sparse camelCase view; fields left at None are omitted."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[_camel(f.name)] = list(value) if isinstance(value, list) else value
        return out

    def is_empty(self) -> bool:
        return not self.as_dict()

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(_camel(f.name) for f in fields(cls))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExtractedEntities:
        """Build from camelCase (or snake_case) keys, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            attr = _snake(str(key))
            if attr in known and value is not None and value != "":
                kwargs[attr] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class ExtractionContext:
    # Anchor for relative dates ("tomorrow", dates without a year). None keeps
    # such expressions unresolved instead of reading the wall clock.
    reference_date: date | None = None


@dataclass(frozen=True)
class IntentRule:
    name: str
    patterns: tuple[re.Pattern[str], ...]
    confidence: float
    extract: Callable[[str, ExtractionContext], ExtractedEntities | None]
    required: Callable[[ExtractedEntities], bool]

    def __post_init__(self) -> None:
        if not 0.0 < self.confidence <= 1.0:
            raise ValueError(f"confidence for {self.name} must be in (0, 1]")
        if not self.patterns:
            raise ValueError(f"rule {self.name} needs at least one pattern")

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)


@dataclass(frozen=True)
class AnalysisResult:
    intent: str
    entities: ExtractedEntities
    confidence: float

    @classmethod
    def unknown(cls) -> AnalysisResult:
        return cls(intent=UNKNOWN_INTENT, entities=ExtractedEntities(), confidence=0.0)

    @property
    def is_unknown(self) -> bool:
        return self.intent == UNKNOWN_INTENT

    def to_dict(self) -> dict[str, Any]:
        return {
            "intent": self.intent,
            "entities": self.entities.as_dict(),
            "confidence": self.confidence,
        }

"""Natural-language date parsing for ILT session scheduling.

Enrollment validity dates are strict ISO only (see ``extractors``); session
scheduling accepts looser phrasing and normalizes it to ``YYYY-MM-DD``. Every
relative expression is anchored on an injected reference date, never the
wall clock, so the same text and reference always parse the same way.
"""

from __future__ import annotations

import re
from datetime import date

import pendulum

from .types import ExtractionContext

_MONTHS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_WEEKDAYS: dict[str, int] = {
    "monday": pendulum.MONDAY,
    "tuesday": pendulum.TUESDAY,
    "wednesday": pendulum.WEDNESDAY,
    "thursday": pendulum.THURSDAY,
    "friday": pendulum.FRIDAY,
    "saturday": pendulum.SATURDAY,
    "sunday": pendulum.SUNDAY,
}

_MONTH_RE = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
_WEEKDAY_RE = r"(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)"
_ORD = r"(?:st|nd|rd|th)?"

# Order matters: longer, more specific shapes first so finditer prefers them.
_DATE_PATTERNS: tuple[tuple[str, str], ...] = (
    ("iso", r"\b(\d{4})-(\d{1,2})-(\d{1,2})\b"),
    ("us_slash", r"\b(\d{1,2})/(\d{1,2})/(\d{4})\b"),
    ("month_day", rf"\b({_MONTH_RE})\.?\s+(\d{{1,2}}){_ORD}(?:,?\s+(\d{{4}}))?\b"),
    ("day_month", rf"\b(\d{{1,2}}){_ORD}\s+(?:of\s+)?({_MONTH_RE})\.?(?:,?\s+(\d{{4}}))?\b"),
    ("today", r"\b(today)\b"),
    ("tomorrow", r"\b(tomorrow)\b"),
    ("next_weekday", rf"\bnext\s+({_WEEKDAY_RE})\b"),
    ("next_week", r"\b(next\s+week)\b"),
    ("in_days", r"\bin\s+(\d{1,3})\s+(days?|weeks?)\b"),
)

_COMPILED: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (kind, re.compile(pattern, re.IGNORECASE)) for kind, pattern in _DATE_PATTERNS
)

DATE_EXPRESSION = re.compile(
    "|".join(f"(?:{pattern})" for _, pattern in _DATE_PATTERNS), re.IGNORECASE
)


def _month_number(token: str) -> int | None:
    key = token.lower().rstrip(".")
    if key in _MONTHS:
        return _MONTHS[key]
    return _MONTHS.get(key[:3])


def _build(year: int, month: int, day: int) -> str | None:
    try:
        return pendulum.date(year, month, day).to_date_string()
    except ValueError:
        return None


def _without_year(month: int, day: int, reference: date | None) -> str | None:
    if reference is None:
        return None
    floor = _anchor(reference).to_date_string()
    # Feb 29 can be up to eight years out (2097 -> 2104)
    for year in range(reference.year, reference.year + 9):
        candidate = _build(year, month, day)
        if candidate is not None and candidate >= floor:
            return candidate
    return None


def _anchor(reference: date) -> pendulum.Date:
    return pendulum.date(reference.year, reference.month, reference.day)


def _parse_match(kind: str, match: re.Match[str], reference: date | None) -> str | None:
    groups = match.groups()
    if kind == "iso":
        return _build(int(groups[0]), int(groups[1]), int(groups[2]))
    if kind == "us_slash":
        return _build(int(groups[2]), int(groups[0]), int(groups[1]))
    if kind in {"month_day", "day_month"}:
        if kind == "month_day":
            month_token, day_token, year_token = groups
        else:
            day_token, month_token, year_token = groups
        month = _month_number(month_token)
        if month is None:
            return None
        if year_token:
            return _build(int(year_token), month, int(day_token))
        return _without_year(month, int(day_token), reference)

    if reference is None:
        return None
    anchor = _anchor(reference)
    if kind == "today":
        return anchor.to_date_string()
    if kind == "tomorrow":
        return anchor.add(days=1).to_date_string()
    if kind == "next_weekday":
        return anchor.next(_WEEKDAYS[groups[0].lower()]).to_date_string()
    if kind == "next_week":
        return anchor.add(weeks=1).to_date_string()
    if kind == "in_days":
        amount = int(groups[0])
        if groups[1].lower().startswith("week"):
            return anchor.add(weeks=amount).to_date_string()
        return anchor.add(days=amount).to_date_string()
    return None


def parse_natural_date(expr: str, reference_date: date | None = None) -> str | None:
    """Parse a single date expression into ``YYYY-MM-DD``.

    Returns None for unparseable text, impossible calendar dates, and
    expressions that need a reference date when none is given.
    """
    text = (expr or "").strip()
    if not text:
        return None
    for kind, pattern in _COMPILED:
        match = pattern.fullmatch(text)
        if match:
            return _parse_match(kind, match, reference_date)
    return None


def find_date_expressions(text: str) -> list[str]:
    return [m.group(0) for m in DATE_EXPRESSION.finditer(text or "")]


def extract_session_dates(
    text: str, ctx: ExtractionContext | None = None
) -> tuple[str | None, str | None]:
    """First two parseable dates in the text as ``(start, end)``."""
    reference = ctx.reference_date if ctx else None
    parsed: list[str] = []
    for expr in find_date_expressions(text):
        value = parse_natural_date(expr, reference)
        if value is not None:
            parsed.append(value)
        if len(parsed) == 2:
            break
    start = parsed[0] if parsed else None
    end = parsed[1] if len(parsed) > 1 else None
    return start, end

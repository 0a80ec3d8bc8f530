from __future__ import annotations

import re
from typing import Iterable

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

_FILLER_WORDS: tuple[str, ...] = ("please", "now", "immediately", "today", "asap")

_STOPWORDS: set[str] = {"the", "a", "an", "in", "to", "for", "with", "as"}

_TRAILING_FILLER_RE = re.compile(
    r"(?:[\s,]+(?:" + "|".join(_FILLER_WORDS) + r"))+\s*[.!?]*$", re.IGNORECASE
)
_TRAILING_PUNCT_RE = re.compile(r"[\s.!?,;:]+$")
# Clauses that follow a resource name in enrollment commands
_TRAILING_CLAUSE_RE = re.compile(
    r"\s+(?:with|as|from|starting|until|valid|effective|due)\b.*$", re.IGNORECASE
)

_QUOTED_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r'"([^"]+)"'),
    re.compile(r"\[([^\]]+)\]"),
    re.compile(r"(?:^|(?<=\s))'([^']+)'(?=$|[\s.,!?])"),
)

_COURSE_KEYWORD_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\bcourse\s+(?:info|details|information)\s+(?:about\s+|for\s+|on\s+)?(.+)",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:in|to|for|from|into|out\s+of|about|is)\s+(?:the\s+)?(?:course|training)\s+"
        r"(?:(?:named|called|titled)\s+)?(.+)",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:course|training)\s+(?:named|called|titled)\s+(.+)", re.IGNORECASE),
    re.compile(r"\b(?:course|training)\s+(.+)", re.IGNORECASE),
)

_LP_KEYWORD = r"(?:learning\s+plan|learning\s+path|\blp\b)"

_LEARNING_PLAN_KEYWORD_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        _LP_KEYWORD + r"\s+(?:info|details|information)\s+(?:about\s+|for\s+|on\s+)?(.+)",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:in|to|for|from|into|out\s+of|about)\s+(?:the\s+)?" + _LP_KEYWORD
        + r"\s+(?:(?:named|called|titled)\s+)?(.+)",
        re.IGNORECASE,
    ),
    re.compile(_LP_KEYWORD + r"\s+(?:named|called|titled)\s+(.+)", re.IGNORECASE),
    re.compile(_LP_KEYWORD + r"\s+(.+)", re.IGNORECASE),
    re.compile(r"^\s*(?:plan\s+)?info\s+(.+)", re.IGNORECASE),
)

_SESSION_KEYWORD = r"(?:(?:ilt|classroom|instructor[- ]led)\s+)?session"

_SESSION_KEYWORD_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b" + _SESSION_KEYWORD + r"\s+(?:named|called|titled)\s+(.+)", re.IGNORECASE),
    re.compile(
        r"\b(?:in|to|for|from|into|out\s+of|about)\s+(?:the\s+)?" + _SESSION_KEYWORD + r"\s+(.+)",
        re.IGNORECASE,
    ),
    re.compile(r"\b" + _SESSION_KEYWORD + r"\s+(?:info|details|information)\s+(.+)", re.IGNORECASE),
)
# Session names end before the course they belong to or their schedule
_SESSION_TAIL_RE = re.compile(
    r"(?:^|\s+)(?:for|in|of)\s+(?:the\s+)?(?:course|training)\b.*$"
    r"|\s+(?:on|at|from|starting|between)\s+.*$",
    re.IGNORECASE,
)

_ASSIGNMENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?:assignment\s+type|\bas)\s+(mandatory|required|recommended|optional)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?:with|using)\s+assignment\s+type\s+(mandatory|required|recommended|optional)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?:make\s+it|set\s+as|mark\s+as|assign\s+as)\s+(mandatory|required|recommended|optional)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(mandatory|required|recommended|optional)\s+assignment", re.IGNORECASE),
)

_ISO = r"(\d{4}-\d{2}-\d{2})\b"

_START_VALIDITY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?:start\s+(?:validity|date)|\bfrom|\bbeginning|\bstarting|\bstarts?)\s+(?:on\s+)?" + _ISO,
        re.IGNORECASE,
    ),
    re.compile(r"(?:valid\s+from|effective\s+from|active\s+from)\s+" + _ISO, re.IGNORECASE),
)

_END_VALIDITY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?:end\s+(?:validity|date)|\bto|\buntil|\bthrough|\bexpires?)\s+(?:on\s+)?" + _ISO,
        re.IGNORECASE,
    ),
    re.compile(r"(?:valid\s+until|expires\s+on|valid\s+through)\s+" + _ISO, re.IGNORECASE),
)

_TEAM_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(marketing|sales|hr|engineering|finance|support|admin|management)\s+team\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(developers|managers|admins|analysts)\b", re.IGNORECASE),
)

_JOB_ID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(job_[A-Za-z0-9]+(?:_[A-Za-z0-9]+)*)\b"),
    re.compile(r"\bjob\s+(?:id[:\s]+)?#?(\d+)\b", re.IGNORECASE),
)

_OFFSET_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\boffset[:\s]+(\d+)\b", re.IGNORECASE),
    re.compile(r"\bstarting\s+(?:at|from)\s+(?:#|number\s+)?(\d+)\b", re.IGNORECASE),
    re.compile(r"\bskip(?:ping)?\s+(?:the\s+first\s+)?(\d+)\b", re.IGNORECASE),
)


def _identifier_patterns(keyword: str) -> tuple[re.Pattern[str], ...]:
    return (
        re.compile(rf"(?:\b{keyword}\s+)?\bid[:\s]+(\d+)\b", re.IGNORECASE),
        re.compile(rf"(?:\b{keyword}\s+)?#(\d+)\b", re.IGNORECASE),
        re.compile(rf"\b{keyword}\s+(\d+)\b", re.IGNORECASE),
    )


_USER_ID_PATTERNS = _identifier_patterns("user")
_COURSE_ID_PATTERNS = _identifier_patterns(r"(?:course|training)")
_SESSION_ID_PATTERNS = _identifier_patterns(r"(?:ilt\s+)?session")


def _first_group(patterns: Iterable[re.Pattern[str]], text: str) -> str | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match and match.group(1):
            return match.group(1)
    return None


def clean_resource_name(raw: str | None, *, cut_clauses: bool = True) -> str | None:
    """Trim a captured resource name; None if nothing usable remains."""
    if raw is None:
        return None
    name = raw.strip()
    if cut_clauses:
        name = _TRAILING_CLAUSE_RE.sub("", name)
    name = _TRAILING_FILLER_RE.sub("", name)
    name = _TRAILING_PUNCT_RE.sub("", name)
    name = name.strip().strip("\"'[]").strip()
    if len(name) < 2 or name.lower() in _STOPWORDS:
        return None
    return name


def _cascade(
    text: str,
    patterns: Iterable[re.Pattern[str]],
    tail: re.Pattern[str] | None = None,
) -> str | None:
    for pattern in patterns:
        match = pattern.search(text)
        if not match:
            continue
        candidate = match.group(1)
        if tail is not None:
            candidate = tail.sub("", candidate)
        name = clean_resource_name(candidate)
        if name is not None:
            return name
    return None


def extract_email(text: str) -> str | None:
    match = EMAIL_RE.search(text or "")
    return match.group(0) if match else None


def extract_multiple_emails(text: str) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for match in EMAIL_RE.finditer(text or ""):
        email = match.group(0).lower()
        if email not in seen:
            seen.add(email)
            out.append(email)
    return out


def extract_quoted(text: str) -> str | None:
    return _cascade(text or "", _QUOTED_PATTERNS)


def extract_course_name(text: str) -> str | None:
    return _cascade(text or "", _QUOTED_PATTERNS + _COURSE_KEYWORD_PATTERNS)


def extract_learning_plan_name(text: str) -> str | None:
    return _cascade(text or "", _QUOTED_PATTERNS + _LEARNING_PLAN_KEYWORD_PATTERNS)


def extract_session_name(text: str) -> str | None:
    name = _cascade(
        text or "", _QUOTED_PATTERNS + _SESSION_KEYWORD_PATTERNS, tail=_SESSION_TAIL_RE
    )
    # A bare number after "session" is an id, not a name
    if name is not None and name.lstrip("#").isdigit():
        return None
    return name


def extract_assignment_type(text: str) -> str | None:
    value = _first_group(_ASSIGNMENT_PATTERNS, text or "")
    return value.lower() if value else None


def extract_start_validity(text: str) -> str | None:
    return _first_group(_START_VALIDITY_PATTERNS, text or "")


def extract_end_validity(text: str) -> str | None:
    return _first_group(_END_VALIDITY_PATTERNS, text or "")


def parse_team_reference(text: str) -> dict[str, str]:
    value = _first_group(_TEAM_PATTERNS, text or "")
    return {"team_name": value} if value else {}


def extract_user_id(text: str) -> str | None:
    return _first_group(_USER_ID_PATTERNS, text or "")


def extract_course_id(text: str) -> str | None:
    return _first_group(_COURSE_ID_PATTERNS, text or "")


def extract_session_id(text: str) -> str | None:
    return _first_group(_SESSION_ID_PATTERNS, text or "")


def extract_job_id(text: str) -> str | None:
    return _first_group(_JOB_ID_PATTERNS, text or "")


def extract_offset(text: str) -> int | None:
    value = _first_group(_OFFSET_PATTERNS, text or "")
    return int(value) if value else None


def clean_search_term(raw: str | None) -> str | None:
    if raw is None:
        return None
    term = _TRAILING_FILLER_RE.sub("", raw.strip())
    term = _TRAILING_PUNCT_RE.sub("", term).strip().strip("\"'[]").strip()
    if not term or term.lower() in _STOPWORDS:
        return None
    return term

from __future__ import annotations

import re
from typing import Callable

from .dates import extract_session_dates
from .extractors import (
    clean_resource_name,
    clean_search_term,
    extract_assignment_type,
    extract_course_id,
    extract_course_name,
    extract_email,
    extract_end_validity,
    extract_job_id,
    extract_learning_plan_name,
    extract_multiple_emails,
    extract_offset,
    extract_session_id,
    extract_session_name,
    extract_start_validity,
    extract_user_id,
    parse_team_reference,
)
from .types import ExtractedEntities, ExtractionContext, IntentRule
from .validation import requirement_for

Extractor = Callable[[str, ExtractionContext], ExtractedEntities | None]

_ENROLL = r"\b(?:bulk\s+)?(?:enroll|add|assign|register|sign\s+up)\b"
_UNENROLL = r"\b(?:bulk\s+)?(?:unenroll|un-enroll|remove|drop|cancel|withdraw|deregister)\b"
_INTO = r"(?:in|into|to|for|on)"
_OUT_OF = r"(?:from|out\s+of)"
_COURSE = r"(?:course|training)"
_LP = r"(?:learning\s+plan|learning\s+path|\blp\b)"
_SESSION = r"(?:(?:ilt|classroom|instructor[- ]led)\s+)?session"


def _p(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


def _split(
    forms: tuple[re.Pattern[str], ...], text: str
) -> tuple[str, str] | None:
    """(user part, resource part) from the first form that matches."""
    for form in forms:
        match = form.search(text)
        if match:
            return match.group(1).strip(), match.group(2).strip()
    return None


def _user_reference(user_part: str) -> str | None:
    # Plain names are passed through for the caller to resolve
    return extract_email(user_part) or clean_resource_name(user_part, cut_clauses=False)


def _validity(text: str) -> dict[str, str | None]:
    return {
        "assignment_type": extract_assignment_type(text),
        "start_validity": extract_start_validity(text),
        "end_validity": extract_end_validity(text),
    }


# -- job status / pagination --------------------------------------------------

_JOB_STATUS_PATTERNS = _p(
    r"\b(?:check|get|show|what(?:'s|\s+is))\s+(?:the\s+)?status\s+(?:of|for)\b",
    r"\bjob\s+status\b",
    r"\bstatus\s+(?:of|for)\s+job\b",
    r"^\s*job_[A-Za-z0-9_]+\s*\??\s*$",
)


def _extract_job_status(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    return ExtractedEntities(job_id=extract_job_id(text))


_LOAD_MORE_PATTERNS = _p(
    r"\b(?:load|show|get|see|fetch|display)\s+more\b",
    r"\bmore\s+enrollments\b",
    r"\bnext\s+page\s+of\s+enrollments\b",
)


def _extract_load_more(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    email = extract_email(text)
    return ExtractedEntities(
        email=email,
        user_id=None if email else extract_user_id(text),
        load_more=True,
        offset=extract_offset(text),
    )


# -- bulk ----------------------------------------------------------------------


def _bulk(
    forms: tuple[re.Pattern[str], ...],
    resource_type: str,
    action: str,
) -> Extractor:
    def extract(text: str, ctx: ExtractionContext) -> ExtractedEntities | None:
        parts = _split(forms, text)
        if parts is None:
            return None
        user_part, resource_part = parts
        emails = extract_multiple_emails(user_part)
        team_name = parse_team_reference(user_part).get("team_name")
        if len(emails) < 2 and not team_name:
            # Single recipient: leave it to the singular rule
            return None

        entities = ExtractedEntities(
            emails=emails or None,
            team_name=team_name,
            resource_type=resource_type,  # type: ignore[arg-type]
            action=action,  # type: ignore[arg-type]
            is_bulk=True,
        )
        if resource_type == "ilt_session":
            entities.session_id = extract_session_id(text)
            entities.session_name = None if entities.session_id else extract_session_name(text)
        else:
            name = clean_resource_name(resource_part, cut_clauses=action == "bulk_enroll")
            if resource_type == "course":
                entities.course_name = name
            else:
                entities.learning_plan_name = name
        if action == "bulk_enroll":
            for key, value in _validity(text).items():
                setattr(entities, key, value)
        return entities

    return extract


_BULK_UNENROLL_COURSE_FORMS = _p(
    _UNENROLL + r"\s+(.+?)\s+" + _OUT_OF + r"\s+(?:the\s+)?" + _COURSE + r"\s+(.+)",
)
_BULK_UNENROLL_LP_FORMS = _p(
    _UNENROLL + r"\s+(.+?)\s+" + _OUT_OF + r"\s+(?:the\s+)?" + _LP + r"\s+(.+)",
)
_BULK_ENROLL_SESSION_FORMS = _p(
    _ENROLL + r"\s+(.+?)\s+" + _INTO + r"\s+(?:the\s+|an?\s+)?" + _SESSION + r"\b\s*(.*)",
)
_BULK_ENROLL_COURSE_FORMS = _p(
    _ENROLL + r"\s+(.+?)\s+" + _INTO + r"\s+(?:the\s+)?" + _COURSE + r"\s+(.+)",
)
_BULK_ENROLL_LP_FORMS = _p(
    _ENROLL + r"\s+(.+?)\s+" + _INTO + r"\s+(?:the\s+)?" + _LP + r"\s+(.+)",
)


# -- unenrollment ---------------------------------------------------------------

_UNENROLL_SESSION_FORMS = _p(
    _UNENROLL + r"\s+(.+?)\s+" + _OUT_OF + r"\s+(?:the\s+|an?\s+)?" + _SESSION + r"\b\s*(.*)",
)


def _extract_unenroll_session(text: str, ctx: ExtractionContext) -> ExtractedEntities | None:
    parts = _split(_UNENROLL_SESSION_FORMS, text)
    if parts is None:
        return None
    session_id = extract_session_id(text)
    return ExtractedEntities(
        email=_user_reference(parts[0]),
        session_id=session_id,
        session_name=None if session_id else extract_session_name(text),
        resource_type="ilt_session",
        action="unenroll",
    )


_UNENROLL_COURSE_FORMS = _p(
    _UNENROLL + r"\s+(.+?)\s+" + _OUT_OF + r"\s+(?:the\s+)?" + _COURSE + r"\s+(.+)",
    r"\b(?:course\s+unenrollment|remove\s+from\s+course)\s+(.+?)\s+" + _OUT_OF + r"\s+(.+)",
)


def _extract_unenroll_course(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    parts = _split(_UNENROLL_COURSE_FORMS, text)
    if parts is not None:
        email = _user_reference(parts[0])
        course_name = clean_resource_name(parts[1], cut_clauses=False)
    else:
        email = extract_email(text)
        course_name = extract_course_name(text)
    return ExtractedEntities(
        email=email,
        course_name=course_name,
        resource_type="course",
        action="unenroll",
    )


_UNENROLL_LP_FORMS = _p(
    _UNENROLL + r"\s+(.+?)\s+" + _OUT_OF + r"\s+(?:the\s+)?" + _LP + r"\s+(.+)",
    r"\b(?:lp\s+unenrollment|remove\s+from\s+lp)\s+(.+?)\s+" + _OUT_OF + r"\s+(.+)",
)


def _extract_unenroll_learning_plan(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    parts = _split(_UNENROLL_LP_FORMS, text)
    if parts is not None:
        email = _user_reference(parts[0])
        plan_name = clean_resource_name(parts[1], cut_clauses=False)
    else:
        email = extract_email(text)
        plan_name = extract_learning_plan_name(text)
    return ExtractedEntities(
        email=email,
        learning_plan_name=plan_name,
        resource_type="learning_plan",
        action="unenroll",
    )


# -- enrollment checks -----------------------------------------------------------

_CHECK_ENROLLMENT_RE = re.compile(
    r"^\s*(?:check\s+(?:if|whether)\s+|verify\s+(?:if|whether)\s+|is\s+|has\s+|did\s+|does\s+)"
    r"(.+?)\s+(?:enrolled|taking|completed|finished|registered|assigned)\s+"
    r"(?:in\s+|to\s+|for\s+|on\s+)?(?:the\s+)?"
    r"(" + _COURSE + r"|" + _LP + r"|" + _SESSION + r")\s+(.+)",
    re.IGNORECASE,
)


def _extract_check_enrollment(text: str, ctx: ExtractionContext) -> ExtractedEntities | None:
    match = _CHECK_ENROLLMENT_RE.search(text)
    if match is None:
        return None
    keyword = match.group(2).lower()
    name = clean_resource_name(match.group(3))
    entities = ExtractedEntities(
        email=extract_email(match.group(1)),
        resource_name=name,
    )
    if "session" in keyword:
        entities.resource_type = "ilt_session"
        entities.session_name = name
    elif keyword in ("course", "training"):
        entities.resource_type = "course"
        entities.course_name = name
    else:
        entities.resource_type = "learning_plan"
        entities.learning_plan_name = name
    return entities


# -- enrollment ------------------------------------------------------------------

_ENROLL_SESSION_FORMS = _BULK_ENROLL_SESSION_FORMS
_SESSION_COURSE_RE = re.compile(
    r"\b(?:for|in|of)\s+(?:the\s+)?" + _COURSE + r"\s+(.+)", re.IGNORECASE
)


def _session_course(text: str) -> tuple[str | None, str | None]:
    """(course id, course name) for phrases like "session for course 2420"."""
    match = _SESSION_COURSE_RE.search(text)
    if match is None:
        return None, None
    name = clean_resource_name(match.group(1))
    if name is not None and name.isdigit():
        return name, None
    return None, name


def _extract_enroll_session(text: str, ctx: ExtractionContext) -> ExtractedEntities | None:
    parts = _split(_ENROLL_SESSION_FORMS, text)
    if parts is None:
        return None
    session_id = extract_session_id(text)
    course_id, course_name = _session_course(parts[1])
    return ExtractedEntities(
        email=_user_reference(parts[0]),
        session_id=session_id,
        session_name=None if session_id else extract_session_name(text),
        course_id=course_id,
        course_name=course_name,
        resource_type="ilt_session",
        action="enroll",
    )


_ENROLL_LP_FORMS = _p(
    _ENROLL + r"\s+(.+?)\s+" + _INTO + r"\s+(?:the\s+)?" + _LP + r"\s+(.+)",
    r"\blp\s+(?:enrollment|assign(?:ment)?)\s+(.+?)\s+(?:to|in)\s+(.+)",
)


def _extract_enroll_learning_plan(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    parts = _split(_ENROLL_LP_FORMS, text)
    if parts is not None:
        email = _user_reference(parts[0])
        plan_name = clean_resource_name(parts[1])
    else:
        email = extract_email(text)
        plan_name = extract_learning_plan_name(text)
    return ExtractedEntities(
        email=email,
        learning_plan_name=plan_name,
        resource_type="learning_plan",
        action="enroll",
        **_validity(text),  # type: ignore[arg-type]
    )


_ENROLL_COURSE_FORMS = _p(
    _ENROLL + r"\s+(.+?)\s+" + _INTO + r"\s+(?:the\s+)?" + _COURSE + r"\s+(.+)",
    r"\bcourse\s+(?:enrollment|assign(?:ment)?)\s+(.+?)\s+(?:to|in)\s+(.+)",
)


def _extract_enroll_course(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    parts = _split(_ENROLL_COURSE_FORMS, text)
    if parts is not None:
        email = _user_reference(parts[0])
        course_name = clean_resource_name(parts[1])
    else:
        email = extract_email(text)
        course_name = extract_course_name(text)
    return ExtractedEntities(
        email=email,
        course_name=course_name,
        resource_type="course",
        action="enroll",
        **_validity(text),  # type: ignore[arg-type]
    )


# -- ILT sessions ------------------------------------------------------------------

_ATTENDANCE_PATTERNS = _p(
    r"\bmark\s+(.+?)\s+(?:as\s+)?(?:attended|present|absent)\b",
    r"\b(?:mark|record|take|log)\s+attendance\b",
)


def _extract_attendance(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    session_id = extract_session_id(text)
    return ExtractedEntities(
        email=extract_email(text),
        session_id=session_id,
        session_name=None if session_id else extract_session_name(text),
        resource_type="ilt_session",
        action="mark_attendance",
    )


_CREATE_SESSION_PATTERNS = _p(
    r"\b(?:create|schedule|set\s+up|add|plan|organi[sz]e)\s+(?:a\s+|an\s+)?(?:new\s+)?"
    + _SESSION
    + r"\b",
)
_QUOTED = r"(?:\"([^\"]+)\"|'([^']+)'|\[([^\]]+)\])"
_CREATE_SESSION_NAME_RES = (
    re.compile(_SESSION + r"\s+(?:named\s+|called\s+|titled\s+)?" + _QUOTED, re.IGNORECASE),
    re.compile(
        _SESSION
        + r"\s+(?:named\s+|called\s+|titled\s+)?(?!(?:for|in|of|on|at|from)\b)(.+?)"
        r"(?=\s+(?:for|in|of)\s+(?:the\s+)?" + _COURSE + r"\b"
        r"|\s+(?:on|from|starting|between|at)\s+|\s*$)",
        re.IGNORECASE,
    ),
)
_CREATE_SESSION_COURSE_RES = (
    re.compile(r"\b" + _COURSE + r"\s+" + _QUOTED, re.IGNORECASE),
    re.compile(
        r"\b(?:for|in|of)\s+(?:the\s+)?" + _COURSE + r"\s+(.+?)"
        r"(?=\s+(?:on|from|starting|between|at|with|by)\s+|\s*$)",
        re.IGNORECASE,
    ),
)


def _first_capture(regexes: tuple[re.Pattern[str], ...], text: str) -> str | None:
    for regex in regexes:
        match = regex.search(text)
        if match:
            value = next((g for g in match.groups() if g), None)
            cleaned = clean_resource_name(value, cut_clauses=False)
            if cleaned is not None:
                return cleaned
    return None


def _extract_create_session(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    course_ref = _first_capture(_CREATE_SESSION_COURSE_RES, text)
    start_date, end_date = extract_session_dates(text, ctx)
    return ExtractedEntities(
        session_name=_first_capture(_CREATE_SESSION_NAME_RES, text),
        course_id=course_ref if course_ref and course_ref.isdigit() else None,
        course_name=course_ref if course_ref and not course_ref.isdigit() else None,
        start_date=start_date,
        end_date=end_date,
        resource_type="ilt_session",
    )


# -- listings --------------------------------------------------------------------------

_COURSE_ENROLLMENTS_PATTERNS = _p(
    r"\bwho\s+(?:is|are)\s+(?:enrolled|taking|registered|assigned)\b",
    r"\b(?:enrollments?|enrolled\s+users|learners|users|students|participants)\s+"
    r"(?:for|in|of|on)\s+(?:the\s+)?" + _COURSE + r"\b",
    r"\blist\s+(?:all\s+)?(?:users|learners|students|participants)\s+(?:in|of|for)\b",
)
_ENROLLED_IN_RE = re.compile(
    r"\b(?:enrolled|taking|registered|assigned)\s+(?:in|to|for)\s+(?:the\s+)?"
    r"(?:" + _COURSE + r"\s+)?(.+)",
    re.IGNORECASE,
)


def _extract_course_enrollments(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    course_id = extract_course_id(text)
    course_name = extract_course_name(text)
    if course_name is None:
        match = _ENROLLED_IN_RE.search(text)
        course_name = clean_resource_name(match.group(1)) if match else None
    if course_name is not None and course_name.lstrip("#").isdigit():
        course_id = course_id or course_name.lstrip("#")
        course_name = None
    return ExtractedEntities(
        course_id=course_id,
        course_name=course_name,
        resource_type="course",
    )


_USER_ENROLLMENTS_PATTERNS = _p(
    r"\buser\s+enrollments?\b",
    r"\b(?:show|get|list|view|display|check|fetch)\s+(?:all\s+)?(?:the\s+)?(?:user\s+)?enrollments?\b",
    r"\benrollments?\s+(?:for|of)\b",
    r"\bwhat\s+(?:courses|learning\s+plans|trainings|sessions)\s+(?:is|does|has)\b",
)


def _extract_user_enrollments(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    email = extract_email(text)
    return ExtractedEntities(
        email=email,
        user_id=None if email else extract_user_id(text),
    )


# -- search --------------------------------------------------------------------------------

_EMAIL_ONLY = r"^\s*[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\s*$"

_SEARCH_USERS_PATTERNS = _p(
    r"\b(?:find|search(?:\s+for)?|look\s*up|get)\s+user\b",
    r"\buser\s+(?:info|details|information|profile)\b",
    r"\bwho\s+is\b",
    _EMAIL_ONLY,
)
_USER_TERM_RE = re.compile(
    r"\b(?:(?:find|search(?:\s+for)?|look\s*up|get)\s+user|user\s+(?:info|details|information|profile)"
    r"|who\s+is)\s+(?:for\s+)?(.+)",
    re.IGNORECASE,
)


def _extract_search_users(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    match = _USER_TERM_RE.search(text)
    term = clean_search_term(match.group(1)) if match else clean_search_term(text)
    if term is None:
        return ExtractedEntities()
    return ExtractedEntities(
        email=extract_email(term),
        search_term=term,
        user_id=term if term.isdigit() else extract_user_id(text),
    )


_SESSIONS_WORD = r"(?:(?:ilt|classroom|instructor[- ]led)\s+)?sessions"
_SEARCH_SESSIONS_PATTERNS = _p(
    r"\b(?:find|search|list|show|get|look\s+for)\s+(?:for\s+)?(?:all\s+)?(?:the\s+)?"
    r"(?:available\s+|upcoming\s+)?" + _SESSIONS_WORD + r"\b",
    _SESSIONS_WORD + r"\s+(?:for|of|in)\s+(?:the\s+)?" + _COURSE + r"\b",
)
_SESSION_TERM_RE = re.compile(
    r"\bsessions?\s+(?:about|on|named|called|matching)\s+(.+)", re.IGNORECASE
)


def _extract_search_sessions(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    course_id, course_name = _session_course(text)
    match = _SESSION_TERM_RE.search(text)
    return ExtractedEntities(
        search_term=clean_search_term(match.group(1)) if match else None,
        course_id=course_id,
        course_name=course_name,
        resource_type="ilt_session",
    )


def _search_forms(keyword: str) -> tuple[re.Pattern[str], ...]:
    plural = keyword + r"s?\b"
    return _p(
        r"\b(?:find|search|look)\s+(?:for\s+)?(.+?)\s+" + plural,
        r"\b" + plural + r"\s+(?:about|for|on|related\s+to)\s+(.+)",
        r"\b(?:find|search|look\s+for)\s+(?:for\s+)?(?:a\s+|the\s+)?" + plural
        + r"\s+(?:named\s+|called\s+|about\s+)?(.+)",
    )


def _search(forms: tuple[re.Pattern[str], ...]) -> Extractor:
    def extract(text: str, ctx: ExtractionContext) -> ExtractedEntities:
        for form in forms:
            match = form.search(text)
            if match:
                term = clean_search_term(match.group(1))
                if term is not None:
                    return ExtractedEntities(search_term=term)
        return ExtractedEntities()

    return extract


_SEARCH_LP_FORMS = _search_forms(_LP)
_SEARCH_COURSE_FORMS = _search_forms(_COURSE)


# -- info / help ------------------------------------------------------------------------------

_SESSION_INFO_PATTERNS = _p(
    r"\b" + _SESSION + r"\s+(?:info|details|information)\b",
    r"\btell\s+me\s+about\s+(?:the\s+)?" + _SESSION + r"\b",
)


def _extract_session_info(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    session_id = extract_session_id(text)
    return ExtractedEntities(
        session_id=session_id,
        session_name=None if session_id else extract_session_name(text),
        resource_type="ilt_session",
    )


_COURSE_INFO_PATTERNS = _p(
    r"\bcourse\s+(?:info|details|information)\b",
    r"\btell\s+me\s+about\s+(?:the\s+)?course\b",
    r"\bwhat\s+is\s+(?:the\s+)?course\b",
    r"\b(?:describe|details\s+(?:of|for|about))\s+(?:the\s+)?course\b",
)


def _extract_course_info(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    return ExtractedEntities(
        course_id=extract_course_id(text),
        course_name=extract_course_name(text),
        resource_type="course",
    )


_LP_INFO_PATTERNS = _p(
    _LP + r"\s+(?:info|details|information)\b",
    r"\btell\s+me\s+about\s+(?:the\s+)?" + _LP,
    r"^\s*(?:plan\s+)?info\s+\S",
)


def _extract_learning_plan_info(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    return ExtractedEntities(
        learning_plan_name=extract_learning_plan_name(text),
        resource_type="learning_plan",
    )


_HELP_PATTERNS = _p(
    r"^\s*how\s+(?:to|do\s+i|can\s+i|should\s+i|does)\b",
    r"^\s*help\b",
    r"\bhelp\s+(?:me\s+)?(?:with|on|about)\b",
    r"\btroubleshoot",
    r"\bwhat\s+are\s+the\s+steps\b",
    r"\bguide\s+(?:to|for|on)\b",
)


def _extract_help(text: str, ctx: ExtractionContext) -> ExtractedEntities:
    return ExtractedEntities(query=text.strip() or None)


# -- registry ---------------------------------------------------------------------------------


def _rule(
    name: str,
    patterns: tuple[re.Pattern[str], ...],
    confidence: float,
    extract: Extractor,
) -> IntentRule:
    return IntentRule(
        name=name,
        patterns=patterns,
        confidence=confidence,
        extract=extract,
        required=requirement_for(name),
    )


def build_registry() -> tuple[IntentRule, ...]:
    """The rule table in priority order.

    Order is part of the contract: unenrollment precedes enrollment, bulk
    precedes singular, and pagination/job tracking precede the generic
    enrollment listing whose surface they share.
    """
    return (
        _rule("check_job_status", _JOB_STATUS_PATTERNS, 0.98, _extract_job_status),
        _rule("load_more_enrollments", _LOAD_MORE_PATTERNS, 0.97, _extract_load_more),
        _rule(
            "bulk_unenroll_course",
            _BULK_UNENROLL_COURSE_FORMS,
            0.97,
            _bulk(_BULK_UNENROLL_COURSE_FORMS, "course", "bulk_unenroll"),
        ),
        _rule(
            "bulk_unenroll_learning_plan",
            _BULK_UNENROLL_LP_FORMS,
            0.97,
            _bulk(_BULK_UNENROLL_LP_FORMS, "learning_plan", "bulk_unenroll"),
        ),
        _rule(
            "unenroll_user_from_ilt_session",
            _UNENROLL_SESSION_FORMS,
            0.98,
            _extract_unenroll_session,
        ),
        _rule(
            "unenroll_user_from_course",
            _UNENROLL_COURSE_FORMS,
            0.98,
            _extract_unenroll_course,
        ),
        _rule(
            "unenroll_user_from_learning_plan",
            _UNENROLL_LP_FORMS,
            0.98,
            _extract_unenroll_learning_plan,
        ),
        _rule(
            "check_specific_enrollment",
            (_CHECK_ENROLLMENT_RE,),
            0.90,
            _extract_check_enrollment,
        ),
        _rule(
            "bulk_enroll_ilt_session",
            _BULK_ENROLL_SESSION_FORMS,
            0.96,
            _bulk(_BULK_ENROLL_SESSION_FORMS, "ilt_session", "bulk_enroll"),
        ),
        _rule(
            "bulk_enroll_course",
            _BULK_ENROLL_COURSE_FORMS,
            0.96,
            _bulk(_BULK_ENROLL_COURSE_FORMS, "course", "bulk_enroll"),
        ),
        _rule(
            "bulk_enroll_learning_plan",
            _BULK_ENROLL_LP_FORMS,
            0.96,
            _bulk(_BULK_ENROLL_LP_FORMS, "learning_plan", "bulk_enroll"),
        ),
        _rule(
            "enroll_user_in_ilt_session",
            _ENROLL_SESSION_FORMS,
            0.95,
            _extract_enroll_session,
        ),
        _rule(
            "enroll_user_in_learning_plan",
            _ENROLL_LP_FORMS,
            0.95,
            _extract_enroll_learning_plan,
        ),
        _rule("enroll_user_in_course", _ENROLL_COURSE_FORMS, 0.92, _extract_enroll_course),
        _rule("mark_session_attendance", _ATTENDANCE_PATTERNS, 0.93, _extract_attendance),
        _rule("create_ilt_session", _CREATE_SESSION_PATTERNS, 0.92, _extract_create_session),
        _rule(
            "get_course_enrollments",
            _COURSE_ENROLLMENTS_PATTERNS,
            0.88,
            _extract_course_enrollments,
        ),
        _rule(
            "get_user_enrollments",
            _USER_ENROLLMENTS_PATTERNS,
            0.88,
            _extract_user_enrollments,
        ),
        _rule("search_users", _SEARCH_USERS_PATTERNS, 0.80, _extract_search_users),
        _rule(
            "search_ilt_sessions",
            _SEARCH_SESSIONS_PATTERNS,
            0.91,
            _extract_search_sessions,
        ),
        _rule(
            "search_learning_plans",
            _SEARCH_LP_FORMS,
            0.90,
            _search(_SEARCH_LP_FORMS),
        ),
        _rule(
            "search_courses",
            _SEARCH_COURSE_FORMS,
            0.90,
            _search(_SEARCH_COURSE_FORMS),
        ),
        _rule("get_session_info", _SESSION_INFO_PATTERNS, 0.85, _extract_session_info),
        _rule("get_course_info", _COURSE_INFO_PATTERNS, 0.85, _extract_course_info),
        _rule(
            "get_learning_plan_info",
            _LP_INFO_PATTERNS,
            0.85,
            _extract_learning_plan_info,
        ),
        _rule("docebo_help", _HELP_PATTERNS, 0.75, _extract_help),
    )


DEFAULT_REGISTRY: tuple[IntentRule, ...] = build_registry()

INTENT_NAMES: tuple[str, ...] = tuple(rule.name for rule in DEFAULT_REGISTRY)

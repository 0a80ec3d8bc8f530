from __future__ import annotations

from typing import Callable

from .types import ExtractedEntities

Requirement = Callable[[ExtractedEntities], bool]


def _has_user(e: ExtractedEntities) -> bool:
    return bool(e.email or e.user_id)


def _has_course(e: ExtractedEntities) -> bool:
    return bool(e.course_name or e.course_id)


def _has_session(e: ExtractedEntities) -> bool:
    return bool(e.session_id or e.session_name)


def _has_group(e: ExtractedEntities) -> bool:
    return len(e.emails or []) > 1 or bool(e.team_name)


REQUIRED_FIELDS: dict[str, Requirement] = {
    "check_job_status": lambda e: bool(e.job_id),
    "load_more_enrollments": _has_user,
    "bulk_unenroll_course": lambda e: _has_group(e) and bool(e.course_name),
    "bulk_unenroll_learning_plan": lambda e: _has_group(e) and bool(e.learning_plan_name),
    "unenroll_user_from_ilt_session": lambda e: bool(e.email) and _has_session(e),
    "unenroll_user_from_course": lambda e: bool(e.email and e.course_name),
    "unenroll_user_from_learning_plan": lambda e: bool(e.email and e.learning_plan_name),
    "check_specific_enrollment": lambda e: bool(e.email and e.resource_name),
    "bulk_enroll_ilt_session": lambda e: _has_group(e) and _has_session(e),
    "bulk_enroll_course": lambda e: _has_group(e) and bool(e.course_name),
    "bulk_enroll_learning_plan": lambda e: _has_group(e) and bool(e.learning_plan_name),
    "enroll_user_in_ilt_session": lambda e: bool(e.email) and (_has_session(e) or _has_course(e)),
    "enroll_user_in_learning_plan": lambda e: bool(e.email and e.learning_plan_name),
    "enroll_user_in_course": lambda e: bool(e.email and e.course_name),
    "mark_session_attendance": lambda e: bool(e.email) and _has_session(e),
    "create_ilt_session": _has_course,
    "get_course_enrollments": _has_course,
    "get_user_enrollments": _has_user,
    "search_users": lambda e: bool(e.email or e.search_term or e.user_id),
    "search_ilt_sessions": lambda e: bool(e.search_term or e.course_name or e.course_id),
    "search_learning_plans": lambda e: bool(e.search_term),
    "search_courses": lambda e: bool(e.search_term),
    "get_session_info": _has_session,
    "get_course_info": _has_course,
    "get_learning_plan_info": lambda e: bool(e.learning_plan_name),
    "docebo_help": lambda e: bool(e.query),
}


def _accept_any(_: ExtractedEntities) -> bool:
    return True


def requirement_for(intent: str) -> Requirement:
    return REQUIRED_FIELDS.get(intent, _accept_any)


def validate_entities(intent: str, entities: ExtractedEntities) -> bool:
    return requirement_for(intent)(entities)

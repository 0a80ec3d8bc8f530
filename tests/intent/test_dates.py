from datetime import date

import pytest
from lms_assistant.intent.dates import (
    extract_session_dates,
    find_date_expressions,
    parse_natural_date,
)
from lms_assistant.intent.types import ExtractionContext

# A Wednesday
REFERENCE = date(2025, 1, 15)


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("2025-03-10", "2025-03-10"),
        ("2025-3-7", "2025-03-07"),
        ("3/10/2025", "2025-03-10"),
        ("March 10, 2026", "2026-03-10"),
        ("10th of March 2026", "2026-03-10"),
        ("Sept 3rd 2025", "2025-09-03"),
    ],
)
def test_absolute_dates(expr: str, expected: str) -> None:
    assert parse_natural_date(expr) == expected
    assert parse_natural_date(expr, REFERENCE) == expected


@pytest.mark.parametrize("expr", ["2025-02-30", "2/30/2025", "February 30, 2025", "someday", ""])
def test_unparseable_or_impossible_dates(expr: str) -> None:
    assert parse_natural_date(expr, REFERENCE) is None


def test_year_less_date_rolls_forward() -> None:
    assert parse_natural_date("March 10", REFERENCE) == "2025-03-10"
    assert parse_natural_date("Jan 15", REFERENCE) == "2025-01-15"
    assert parse_natural_date("January 10", REFERENCE) == "2026-01-10"


@pytest.mark.parametrize(
    "expr, reference, expected",
    [
        ("Feb 29", REFERENCE, "2028-02-29"),
        ("February 29", date(2024, 1, 10), "2024-02-29"),
        ("29th of February", date(2024, 3, 1), "2028-02-29"),
        ("Feb 29", date(2097, 3, 1), "2104-02-29"),
    ],
)
def test_leap_day_without_year_finds_next_leap_year(
    expr: str, reference: date, expected: str
) -> None:
    assert parse_natural_date(expr, reference) == expected


def test_impossible_day_without_year_stays_unset() -> None:
    assert parse_natural_date("Feb 30", REFERENCE) is None
    assert parse_natural_date("April 31", REFERENCE) is None


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("today", "2025-01-15"),
        ("tomorrow", "2025-01-16"),
        ("next monday", "2025-01-20"),
        ("next Wednesday", "2025-01-22"),
        ("next week", "2025-01-22"),
        ("in 3 days", "2025-01-18"),
        ("in 2 weeks", "2025-01-29"),
    ],
)
def test_relative_dates(expr: str, expected: str) -> None:
    assert parse_natural_date(expr, REFERENCE) == expected


@pytest.mark.parametrize("expr", ["tomorrow", "next friday", "in 5 days", "March 10"])
def test_relative_dates_need_reference(expr: str) -> None:
    assert parse_natural_date(expr) is None


def test_find_date_expressions() -> None:
    text = "Create a session for course Excel from 2025-03-10 to March 12"
    assert find_date_expressions(text) == ["2025-03-10", "March 12"]


def test_extract_session_dates() -> None:
    ctx = ExtractionContext(reference_date=REFERENCE)
    text = "Schedule a session for course Excel from March 3 to March 5"
    assert extract_session_dates(text, ctx) == ("2025-03-03", "2025-03-05")


def test_extract_session_dates_single_and_missing() -> None:
    ctx = ExtractionContext(reference_date=REFERENCE)
    assert extract_session_dates("Schedule a session tomorrow", ctx) == ("2025-01-16", None)
    assert extract_session_dates("Schedule a session tomorrow") == (None, None)
    assert extract_session_dates("Schedule a session", ctx) == (None, None)

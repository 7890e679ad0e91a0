"""Unit tests for exercise log date helpers."""

from datetime import date

import pytest

from app.exercises.dates import format_log_date, parse_log_date, parse_query_date, parse_strict_iso_date


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2024, 1, 15), "Mon Jan 15 2024"),
        (date(2024, 1, 5), "Fri Jan 05 2024"),
        (date(2024, 2, 29), "Thu Feb 29 2024"),
        (date(2023, 12, 31), "Sun Dec 31 2023"),
    ],
)
def test_format_log_date(value, expected):
    assert format_log_date(value) == expected


def test_parse_log_date_reads_stored_format():
    assert parse_log_date("Sat Jan 20 2024") == date(2024, 1, 20)


def test_parse_log_date_ignores_weekday_name():
    """The weekday is derived data; the calendar date comes from month/day/year."""
    assert parse_log_date("Mon Jan 20 2024") == date(2024, 1, 20)


@pytest.mark.parametrize("value", ["2024-02-29", "2024-01-10", "1999-12-31"])
def test_parse_strict_iso_date_accepts_real_dates(value):
    assert parse_strict_iso_date(value).isoformat() == value


@pytest.mark.parametrize(
    "value",
    [
        "2024-02-30",
        "2023-02-29",
        "2024-13-01",
        "2024-1-10",
        "20240110",
        "2024-01-10T00:00:00",
        "Jan 10 2024",
        " 2024-01-10",
        "",
    ],
)
def test_parse_strict_iso_date_rejects(value):
    with pytest.raises(ValueError):
        parse_strict_iso_date(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-10", date(2024, 1, 10)),
        ("2024-01-10T18:45:00", date(2024, 1, 10)),
        ("Jan 10 2024", date(2024, 1, 10)),
        ("Wed Jan 10 2024", date(2024, 1, 10)),
    ],
)
def test_parse_query_date_is_lenient(value, expected):
    assert parse_query_date(value) == expected


@pytest.mark.parametrize("value", ["abc", "banana", "2024-13-45"])
def test_parse_query_date_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_query_date(value)

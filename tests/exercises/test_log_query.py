"""Unit tests for the exercise log query engine."""

from dataclasses import dataclass
from datetime import date

import pytest

from app.exercises.dates import format_log_date
from app.exercises.errors import InvalidDateFormatError
from app.exercises.log_query import parse_limit, query_log


@dataclass
class Entry:
    description: str
    duration: float
    date: str


def _entry(description: str, day: date) -> Entry:
    return Entry(description=description, duration=30.0, date=format_log_date(day))


@pytest.fixture
def log() -> list[Entry]:
    """A log spanning several months, stored out of date order."""
    return [
        _entry("jan-15", date(2024, 1, 15)),
        _entry("jan-05", date(2024, 1, 5)),
        _entry("jan-20", date(2024, 1, 20)),
        _entry("jan-10", date(2024, 1, 10)),
        _entry("feb-01", date(2024, 2, 1)),
        _entry("dec-31", date(2023, 12, 31)),
        _entry("jan-21", date(2024, 1, 21)),
        _entry("jan-09", date(2024, 1, 9)),
    ]


def _descriptions(entries: list[Entry]) -> list[str]:
    return [e.description for e in entries]


class TestDateRange:
    def test_inclusive_range_sorted_ascending(self, log):
        result = query_log(log, from_date="2024-01-10", to_date="2024-01-20")

        assert _descriptions(result.log) == ["jan-10", "jan-15", "jan-20"]
        assert result.count == 3

    def test_bounds_apply_to_whole_days(self, log):
        """A time on the bound date still includes entries from that whole day."""
        result = query_log(log, from_date="2024-01-10T18:00:00", to_date="2024-01-20T00:30:00")

        assert _descriptions(result.log) == ["jan-10", "jan-15", "jan-20"]

    def test_from_only(self, log):
        result = query_log(log, from_date="2024-01-20")

        assert _descriptions(result.log) == ["jan-20", "jan-21", "feb-01"]

    def test_to_only(self, log):
        result = query_log(log, to_date="2024-01-05")

        assert _descriptions(result.log) == ["dec-31", "jan-05"]

    def test_no_bounds_returns_whole_log_sorted(self, log):
        result = query_log(log)

        assert _descriptions(result.log) == [
            "dec-31",
            "jan-05",
            "jan-09",
            "jan-10",
            "jan-15",
            "jan-20",
            "jan-21",
            "feb-01",
        ]
        assert result.count == len(log)

    def test_empty_strings_are_no_bounds(self, log):
        result = query_log(log, from_date="", to_date="")

        assert result.count == len(log)

    def test_lenient_bound_formats(self, log):
        result = query_log(log, from_date="Jan 10 2024", to_date="Sat Jan 20 2024")

        assert _descriptions(result.log) == ["jan-10", "jan-15", "jan-20"]

    def test_empty_range(self, log):
        result = query_log(log, from_date="2024-03-01", to_date="2024-03-31")

        assert result.log == []
        assert result.count == 0

    def test_stored_order_is_not_mutated(self, log):
        before = _descriptions(log)

        query_log(log, from_date="2024-01-01", limit="2")

        assert _descriptions(log) == before

    def test_same_day_entries_keep_log_order(self):
        day = date(2024, 1, 10)
        entries = [
            _entry("later-day", date(2024, 1, 11)),
            _entry("first", day),
            _entry("second", day),
            _entry("third", day),
        ]

        result = query_log(entries)

        assert _descriptions(result.log) == ["first", "second", "third", "later-day"]


class TestLimit:
    def test_limit_keeps_earliest_and_count_ignores_limit(self, log):
        result = query_log(log, from_date="2024-01-05", to_date="2024-01-20", limit="2")

        assert result.count == 5
        assert _descriptions(result.log) == ["jan-05", "jan-09"]

    def test_limit_zero_returns_empty_log_with_count(self, log):
        result = query_log(log, limit="0")

        assert result.log == []
        assert result.count == len(log)

    def test_limit_larger_than_matches(self, log):
        result = query_log(log, limit=100)

        assert len(result.log) == len(log)

    @pytest.mark.parametrize("limit", ["abc", "-1", -3, "2.5", "", None])
    def test_invalid_limit_means_no_limit(self, log, limit):
        result = query_log(log, limit=limit)

        assert len(result.log) == len(log)
        assert result.count == len(log)


class TestInvalidDates:
    def test_invalid_from(self, log):
        with pytest.raises(InvalidDateFormatError) as exc_info:
            query_log(log, from_date="abc")

        assert exc_info.value.parameter == "from"

    def test_invalid_to(self, log):
        with pytest.raises(InvalidDateFormatError) as exc_info:
            query_log(log, to_date="2024-13-45")

        assert exc_info.value.parameter == "to"

    def test_from_is_checked_first(self, log):
        with pytest.raises(InvalidDateFormatError) as exc_info:
            query_log(log, from_date="abc", to_date="banana")

        assert exc_info.value.parameter == "from"
        assert exc_info.value.message == "Invalid date format."


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2", 2),
        (" 3 ", 3),
        ("0", 0),
        (7, 7),
        ("abc", None),
        ("-1", None),
        (-1, None),
        ("2.5", None),
        ("1_0", None),
        ("\u0663", None),
        (True, None),
        (None, None),
        (2.0, None),
    ],
)
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected

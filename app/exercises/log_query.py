"""Exercise log query engine.

Computes the filter -> sort -> count -> limit pipeline over a user's log in
memory. The stored log is never reordered: a new list is always returned.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Generic, Protocol, TypeVar

from loguru import logger

from app.exercises.dates import parse_log_date, parse_query_date
from app.exercises.errors import InvalidDateFormatError

END_OF_DAY = time(23, 59, 59, 999000)
_DIGITS_ONLY = re.compile(r"[0-9]+")


class DatedEntry(Protocol):
    date: str


EntryT = TypeVar("EntryT", bound=DatedEntry)


@dataclass(frozen=True)
class LogQueryResult(Generic[EntryT]):
    """Result of a log query.

    count is the number of matched entries before the limit was applied.
    """

    log: list[EntryT]
    count: int


def parse_limit(raw: Any) -> int | None:
    """Parse a limit parameter.

    Anything that is not a non-negative integer means "no limit".
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        limit = raw
    elif isinstance(raw, str):
        digits = raw.strip()
        if not _DIGITS_ONLY.fullmatch(digits):
            return None
        limit = int(digits)
    else:
        return None
    return limit if limit >= 0 else None


def _parse_bound(parameter: str, value: str | None) -> date | None:
    if value is None or value == "":
        return None
    try:
        return parse_query_date(value)
    except ValueError as e:
        logger.debug(f"Rejecting {parameter}={value!r}: {e}")
        raise InvalidDateFormatError(parameter, value) from e


def query_log(
    entries: Sequence[EntryT],
    from_date: str | None = None,
    to_date: str | None = None,
    limit: Any = None,
) -> LogQueryResult[EntryT]:
    """Filter, sort and cap an exercise log.

    Args:
        entries: Full log in stored order
        from_date: Optional lower bound, inclusive from the start of that day
        to_date: Optional upper bound, inclusive until 23:59:59.999 of that day
        limit: Optional cap; invalid or negative values are ignored

    Returns:
        LogQueryResult with the earliest matching entries first

    Raises:
        InvalidDateFormatError: If from_date or to_date is not a date
    """
    lower = _parse_bound("from", from_date)
    upper = _parse_bound("to", to_date)

    lower_bound = datetime.combine(lower, time.min) if lower else None
    upper_bound = datetime.combine(upper, END_OF_DAY) if upper else None

    dated: list[tuple[datetime, EntryT]] = []
    for entry in entries:
        entry_at = datetime.combine(parse_log_date(entry.date), time.min)
        if lower_bound is not None and entry_at < lower_bound:
            continue
        if upper_bound is not None and entry_at > upper_bound:
            continue
        dated.append((entry_at, entry))

    # list.sort is stable, so entries on the same day keep their log order
    dated.sort(key=lambda pair: pair[0])
    matched = [entry for _, entry in dated]
    count = len(matched)

    parsed_limit = parse_limit(limit)
    if parsed_limit is not None:
        matched = matched[:parsed_limit]

    return LogQueryResult(log=matched, count=count)

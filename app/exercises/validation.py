"""Validation layer for exercise creation input.

Every field is checked independently and all failures are reported together.
Nothing is auto-fixed: a rejected field is never replaced by a default, with
the single exception of an omitted date, which becomes today's date.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Any

from app.exercises.dates import format_log_date, parse_strict_iso_date
from app.exercises.errors import (
    DateError,
    DescriptionError,
    DurationError,
    DurationErrorReason,
    ExerciseValidationError,
    FieldError,
)

_DIGITS_ONLY = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ValidatedExercise:
    """Normalized exercise input, ready to be appended to a log."""

    description: str
    duration: float
    date: str


def _check_description(description: Any) -> FieldError | None:
    if not isinstance(description, str) or not description:
        return DescriptionError()
    if _DIGITS_ONLY.fullmatch(description):
        return DescriptionError()
    return None


def _parse_duration(duration: Any) -> float | None:
    """Parse a duration into a finite float, or None if it is not a number."""
    if duration is None or isinstance(duration, bool):
        return None
    if not isinstance(duration, int | float | str):
        return None
    try:
        parsed = float(duration.strip() if isinstance(duration, str) else duration)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def validate_exercise_input(
    description: Any,
    duration: Any,
    date_value: Any = None,
    today: Callable[[], date] = date.today,
) -> ValidatedExercise:
    """Validate raw exercise input.

    Args:
        description: Raw description
        duration: Raw duration (number or numeric string)
        date_value: Optional YYYY-MM-DD string; None or "" means today
        today: Clock used when the date is omitted

    Returns:
        ValidatedExercise with the date in stored format

    Raises:
        ExerciseValidationError: With one FieldError per rejected field
    """
    errors: list[FieldError] = []

    description_error = _check_description(description)
    if description_error:
        errors.append(description_error)

    parsed_duration = _parse_duration(duration)
    if parsed_duration is None:
        errors.append(DurationError(DurationErrorReason.REQUIRED))
    elif parsed_duration <= 0:
        errors.append(DurationError(DurationErrorReason.NOT_POSITIVE))

    exercise_date: date | None = None
    if date_value is None or date_value == "":
        exercise_date = today()
    elif not isinstance(date_value, str):
        errors.append(DateError())
    else:
        try:
            exercise_date = parse_strict_iso_date(date_value)
        except ValueError:
            errors.append(DateError())

    if errors:
        raise ExerciseValidationError(errors)

    # Both are set whenever no error was collected
    assert parsed_duration is not None
    assert exercise_date is not None
    return ValidatedExercise(
        description=description,
        duration=parsed_duration,
        date=format_log_date(exercise_date),
    )

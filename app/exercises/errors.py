"""Domain errors for the exercise tracker.

Field-level errors describe a single rejected input field. They are never
raised on their own: the validator collects them into an
ExerciseValidationError so every failing field is reported at once.
"""

from __future__ import annotations

from enum import StrEnum

USERNAME_REQUIRED = "Username is required."
USER_ALREADY_EXISTS = "User already exists."
USER_NOT_FOUND = "User not found."
DESCRIPTION_REQUIRED = "Description must be a string and is required."
DURATION_REQUIRED = "Duration must be a number and is required."
DURATION_NOT_POSITIVE = "Duration must be greater than zero."
DATE_INVALID = "Date must be a valid date in YYYY-MM-DD format."
INVALID_DATE_FORMAT = "Invalid date format."
SERVER_ERROR = "Internal server error."


class TrackerError(Exception):
    """Base exception for all exercise tracker errors."""

    message: str = SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class FieldError(Exception):
    """A rejected exercise input field."""

    field: str = ""
    message: str = ""

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DescriptionError(FieldError):
    field = "description"
    message = DESCRIPTION_REQUIRED


class DurationErrorReason(StrEnum):
    REQUIRED = "required"
    NOT_POSITIVE = "not_positive"


class DurationError(FieldError):
    field = "duration"

    def __init__(self, reason: DurationErrorReason) -> None:
        self.reason = reason
        message = DURATION_REQUIRED if reason == DurationErrorReason.REQUIRED else DURATION_NOT_POSITIVE
        super().__init__(message)


class DateError(FieldError):
    field = "date"
    message = DATE_INVALID


class ExerciseValidationError(TrackerError):
    """Raised when exercise input fails validation.

    Carries every field error found, keyed by field name.
    """

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))

    def as_dict(self) -> dict[str, str]:
        return {e.field: e.message for e in self.errors}


class InvalidDateFormatError(TrackerError):
    """Raised when a log query `from`/`to` parameter is not a date."""

    message = INVALID_DATE_FORMAT

    def __init__(self, parameter: str, value: str) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__()


class UsernameRequiredError(TrackerError):
    message = USERNAME_REQUIRED


class UserNotFoundError(TrackerError):
    message = USER_NOT_FOUND

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__()


class UsernameTakenError(TrackerError):
    message = USER_ALREADY_EXISTS

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__()

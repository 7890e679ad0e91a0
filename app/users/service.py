"""Exercise tracker use cases.

Combines the user store, the exercise validator and the log query engine.
The store is injected, so the service never reaches for a global session.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any

from loguru import logger

from app.db.models import User
from app.exercises.errors import UsernameRequiredError, UserNotFoundError
from app.exercises.log_query import query_log
from app.exercises.schemas import ExerciseSchema, UserLogResponse, UserSchema
from app.exercises.validation import validate_exercise_input
from app.users.repository import UserRepository


def _to_log_response(user: User, log: list, count: int) -> UserLogResponse:
    return UserLogResponse(
        username=user.username,
        id=user.id,
        count=count,
        log=[ExerciseSchema.model_validate(entry) for entry in log],
    )


class ExerciseTrackerService:
    """Service for users and their exercise logs."""

    def __init__(self, store: UserRepository, today: Callable[[], date] = date.today) -> None:
        self.store = store
        self.today = today

    def _get_user_or_raise(self, user_id: str) -> User:
        user = self.store.find_user_by_id(user_id)
        if user is None:
            logger.warning(f"User not found: id={user_id}")
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> list[UserSchema]:
        return [UserSchema.model_validate(user) for user in self.store.find_all_users()]

    def create_user(self, username: Any) -> UserLogResponse:
        """Create a user with an empty log.

        Raises:
            UsernameRequiredError: If username is missing, not a string or blank
            UsernameTakenError: If the username already exists
        """
        if not isinstance(username, str) or not username.strip():
            raise UsernameRequiredError()

        user = self.store.insert_user(username)
        return _to_log_response(user, list(user.log), len(user.log))

    def add_exercise(
        self,
        user_id: str,
        description: Any,
        duration: Any,
        date_value: Any = None,
    ) -> UserLogResponse:
        """Validate an exercise and append it to the user's log.

        Input is validated before the user is looked up, so invalid input never
        reaches the store.

        Raises:
            ExerciseValidationError: If any field is invalid
            UserNotFoundError: If the user does not exist
        """
        exercise = validate_exercise_input(description, duration, date_value, today=self.today)
        user = self._get_user_or_raise(user_id)
        user = self.store.append_exercise_and_save(user, exercise)
        return _to_log_response(user, list(user.log), len(user.log))

    def get_logs(
        self,
        user_id: str,
        from_date: str | None = None,
        to_date: str | None = None,
        limit: Any = None,
    ) -> UserLogResponse:
        """Get a user's log filtered by date range and capped by limit.

        Raises:
            UserNotFoundError: If the user does not exist
            InvalidDateFormatError: If from_date or to_date is not a date
        """
        user = self._get_user_or_raise(user_id)
        result = query_log(user.log, from_date=from_date, to_date=to_date, limit=limit)
        logger.debug(
            f"Log query for user id={user_id}: from={from_date} to={to_date} limit={limit} "
            f"matched={result.count} returned={len(result.log)}"
        )
        return _to_log_response(user, result.log, result.count)

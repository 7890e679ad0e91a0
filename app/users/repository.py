"""Repository for user and exercise log persistence.

Plain fetch/save access: query semantics live in app.exercises.log_query.
"""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.models import Exercise, User
from app.exercises.errors import UsernameTakenError
from app.exercises.validation import ValidatedExercise


class UserRepository:
    """Store for users and their exercise logs, bound to one session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_all_users(self) -> list[User]:
        return list(self.session.execute(select(User).order_by(User.created_at, User.id)).scalars().all())

    def find_user_by_username(self, username: str) -> User | None:
        return self.session.execute(select(User).where(User.username == username)).scalar_one_or_none()

    def find_user_by_id(self, user_id: str) -> User | None:
        return self.session.get(User, user_id)

    def insert_user(self, username: str) -> User:
        """Insert a new user with an empty log.

        Raises:
            UsernameTakenError: If the username already exists, including when
                a concurrent insert wins the unique constraint
        """
        if self.find_user_by_username(username) is not None:
            raise UsernameTakenError(username)

        user = User(username=username)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Unique constraint rejected username={username!r}: {e}")
            raise UsernameTakenError(username) from e
        except Exception:
            self.session.rollback()
            raise

        logger.info(f"Created user id={user.id} username={username!r}")
        return user

    def append_exercise_and_save(self, user: User, exercise: ValidatedExercise) -> User:
        """Append one exercise to the user's log in a single transaction."""
        entry = Exercise(
            description=exercise.description,
            duration=exercise.duration,
            date=exercise.date,
        )
        user.log.append(entry)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info(f"Appended exercise to user id={user.id}: log length={len(user.log)}")
        return user

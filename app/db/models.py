from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all database models."""


class User(Base):
    """User table.

    Stores:
    - id: User ID (string UUID format)
    - username: Unique username
    - created_at: Timestamp when user was created
    - log: Exercises in insertion order
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    username: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    log: Mapped[list[Exercise]] = relationship(
        "Exercise",
        back_populates="user",
        order_by="Exercise.id",
        lazy="selectin",
    )


class Exercise(Base):
    """Exercise log entry.

    The autoincrement id is the log position: a user's log is always loaded
    ordered by it, so stored order is insertion order.

    - date: canonical descriptive date string, e.g. "Mon Jan 15 2024"
    """

    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String, ForeignKey("users.id"), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[str] = mapped_column(String, nullable=False)

    user: Mapped[User] = relationship("User", back_populates="log")

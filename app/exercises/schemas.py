"""Exercise tracker API schemas (Pydantic).

Identifiers are serialized as `_id` to keep the wire format existing
clients rely on.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExerciseSchema(BaseModel):
    """Exercise log entry for API responses."""

    model_config = ConfigDict(from_attributes=True)

    description: str
    duration: float
    date: str


class UserSchema(BaseModel):
    """Full user record, as returned by the user listing."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    log: list[ExerciseSchema]


class UserLogResponse(BaseModel):
    """User with a (possibly filtered) log and its match count."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(alias="_id")
    count: int
    log: list[ExerciseSchema]


class CreateUserRequest(BaseModel):
    username: Any = None


class CreateExerciseRequest(BaseModel):
    """Raw exercise input. Values are checked by the exercise validator, not here."""

    description: Any = None
    duration: Any = None
    date: Any = None

"""Exercise tracker API routes.

Users and their exercise logs, mounted under /api.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies.tracker import get_tracker_service, read_payload
from app.exercises.schemas import CreateExerciseRequest, CreateUserRequest, UserLogResponse, UserSchema
from app.users.service import ExerciseTrackerService

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users", response_model=list[UserSchema])
def list_users(service: ExerciseTrackerService = Depends(get_tracker_service)) -> list[UserSchema]:
    return service.list_users()


@router.post("/users", response_model=UserLogResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: dict[str, Any] = Depends(read_payload),
    service: ExerciseTrackerService = Depends(get_tracker_service),
) -> UserLogResponse:
    """Create a user with an empty exercise log.

    Returns 400 if the username is missing and 409 if it is already taken.
    """
    request = CreateUserRequest.model_validate(payload)
    return service.create_user(request.username)


@router.post("/users/{user_id}/exercises", response_model=UserLogResponse, status_code=status.HTTP_201_CREATED)
def add_exercise(
    user_id: str,
    payload: dict[str, Any] = Depends(read_payload),
    service: ExerciseTrackerService = Depends(get_tracker_service),
) -> UserLogResponse:
    """Append an exercise to a user's log.

    Returns 400 with a field -> message map when the input is invalid, and 404
    if the user does not exist. The response carries the full log.
    """
    request = CreateExerciseRequest.model_validate(payload)
    return service.add_exercise(user_id, request.description, request.duration, request.date)


@router.get("/users/{user_id}/logs", response_model=UserLogResponse)
def get_logs(
    user_id: str,
    from_date: str | None = Query(default=None, alias="from"),
    to_date: str | None = Query(default=None, alias="to"),
    limit: str | None = Query(default=None),
    service: ExerciseTrackerService = Depends(get_tracker_service),
) -> UserLogResponse:
    """Get a user's exercise log.

    `from`/`to` bound the log by date (inclusive), `limit` caps the number of
    entries returned. `count` is the number of matches before the cap.
    """
    return service.get_logs(user_id, from_date=from_date, to_date=to_date, limit=limit)

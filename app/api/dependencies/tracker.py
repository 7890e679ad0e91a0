from __future__ import annotations

from typing import Any

from fastapi import Depends, Request
from loguru import logger
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.users.repository import UserRepository
from app.users.service import ExerciseTrackerService


def get_tracker_service(db: Session = Depends(get_db)) -> ExerciseTrackerService:
    """Build the tracker service around a store bound to the request session."""
    return ExerciseTrackerService(UserRepository(db))


async def read_payload(request: Request) -> dict[str, Any]:
    """Read a request body sent either as JSON or as a form.

    Bodies that are missing or cannot be decoded read as empty, so the field
    validators report the missing values.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as e:
            logger.debug(f"Ignoring malformed JSON body on {request.url.path}: {e}")
            return {}
        return body if isinstance(body, dict) else {}
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return dict(form)
    return {}

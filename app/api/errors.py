"""Exception handlers mapping tracker errors to `{"error": ...}` payloads."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.exercises.errors import (
    SERVER_ERROR,
    ExerciseValidationError,
    InvalidDateFormatError,
    TrackerError,
    UsernameRequiredError,
    UsernameTakenError,
    UserNotFoundError,
)

STATUS_BY_ERROR: dict[type[TrackerError], int] = {
    ExerciseValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidDateFormatError: status.HTTP_400_BAD_REQUEST,
    UsernameRequiredError: status.HTTP_400_BAD_REQUEST,
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    UsernameTakenError: status.HTTP_409_CONFLICT,
}


async def tracker_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, TrackerError)
    status_code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(exc, ExerciseValidationError):
        detail: str | dict[str, str] = exc.as_dict()
    else:
        detail = exc.message
    logger.info(f"{request.method} {request.url.path} rejected with {status_code}: {exc}")
    return JSONResponse(status_code=status_code, content={"error": detail})


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": SERVER_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TrackerError, tracker_error_handler)
    app.add_exception_handler(Exception, server_error_handler)

"""Exception handlers that turn failures into JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fitness_tracker.domain.errors import (
    AccountNotFound,
    AuthenticationRequired,
    EmailAlreadyExists,
    FitnessTrackerError,
    InvalidCredentials,
    InvalidPreferences,
    InvalidProfile,
    InvalidToken,
    WorkoutPlanNotFound,
)

_logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[FitnessTrackerError], int] = {
    AuthenticationRequired: status.HTTP_401_UNAUTHORIZED,
    InvalidToken: status.HTTP_403_FORBIDDEN,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    AccountNotFound: status.HTTP_404_NOT_FOUND,
    WorkoutPlanNotFound: status.HTTP_404_NOT_FOUND,
    EmailAlreadyExists: status.HTTP_409_CONFLICT,
    InvalidProfile: status.HTTP_400_BAD_REQUEST,
    InvalidPreferences: status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: FitnessTrackerError) -> int:
    """Return the HTTP status for a service error."""
    for error_type in type(exc).__mro__:
        if error_type in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


def register_exception_handlers(app: FastAPI, *, expose_errors: bool) -> None:
    """Install handlers for service, validation and unexpected errors."""

    @app.exception_handler(FitnessTrackerError)
    async def handle_service_error(
        request: Request, exc: FitnessTrackerError
    ) -> JSONResponse:
        return JSONResponse(status_code=status_for(exc), content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Validation Error",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        _logger.exception(
            "Unhandled error", extra={"path": request.url.path, "method": request.method}
        )
        content: dict[str, object] = {"message": "Internal Server Error"}
        if expose_errors:
            content["error"] = f"{type(exc).__name__}: {exc}"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
        )

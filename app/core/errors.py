# app/core/errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(AppError):
    """Bad user input. Raised before any write reaches the store."""
    status_code = 422


class ConflictError(ValidationError):
    """Input clashes with existing data (e.g. an email already registered)."""
    status_code = status.HTTP_409_CONFLICT


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PersistenceError(AppError):
    """The backing store failed. Never retried automatically."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    msg = errors[0].get("msg", "Invalid request")
    # Pydantic antepone "Value error, " a los ValueError de los validadores
    return msg.removeprefix("Value error, ")


async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, PersistenceError):
        logger.error("Persistence failure on %s %s: %s", request.method, request.url.path, exc.detail)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": _first_validation_message(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

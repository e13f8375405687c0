"""Application error taxonomy and the FastAPI handlers that render it."""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base error carrying an HTTP status and a client-safe message."""

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}


class ValidationError(AppError):
    status = HTTPStatus.BAD_REQUEST
    default_message = "Invalid request"


class AuthError(AppError):
    status = HTTPStatus.UNAUTHORIZED
    default_message = "Unauthorized"


class NotFoundError(AppError):
    status = HTTPStatus.NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    status = HTTPStatus.CONFLICT
    default_message = "Conflict"


class InternalError(AppError):
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Server error"


def handle_app_error(_request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content=exc.to_dict())


def handle_request_validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return handle_app_error(_request, ValidationError("Invalid request body"))


def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled %s on %s %s", type(exc).__name__, request.method, request.url.path)
    return handle_app_error(request, InternalError())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

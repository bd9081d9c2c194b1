"""
Error taxonomy and the request error boundary.

Services raise the exceptions defined here instead of
``fastapi.HTTPException`` so they stay independent of the transport.
Each exception carries the HTTP status it should produce.  The
function ``map_error`` turns any failure into a ``(status, message)``
pair, and ``register_error_handlers`` installs the single boundary
that applies it to every route, so endpoints never catch errors
themselves.

Every failure response has the shape ``{"message": "<text>"}``.
"""

import logging
from typing import Optional, Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

GENERIC_ERROR_MESSAGE = "Unexpected error"

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base for all service-layer errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """A request payload field is missing, has the wrong type or is empty."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"'{field}' {reason}")


class BadRequestError(ServiceError):
    """The request body could not be read as a JSON object."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """A lookup by primary key matched no row."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageError(ServiceError):
    """The store failed to execute a statement.

    ``original`` keeps the driver exception; the message is the
    driver's own text.
    """

    def __init__(self, message: str, original: Optional[BaseException] = None) -> None:
        self.original = original
        super().__init__(message)


class ConflictError(StorageError):
    """A uniqueness or foreign-key constraint rejected the statement.

    Reported as 500 like any other storage failure; callers that need to
    tell the two apart can still catch this class.
    """


def map_error(exc: BaseException) -> Tuple[int, str]:
    """Return the HTTP status and message text for a failure."""
    if isinstance(exc, ServiceError):
        return exc.status_code, exc.message or GENERIC_ERROR_MESSAGE
    message = str(exc)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, message or GENERIC_ERROR_MESSAGE


def error_response(exc: BaseException) -> JSONResponse:
    status_code, message = map_error(exc)
    if status_code >= 500:
        logger.error("Request failed: %s", message, exc_info=exc)
    else:
        logger.info("Request rejected with %s: %s", status_code, message)
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    """Install the error boundary on ``app``.

    Service errors are handled by a FastAPI exception handler.  Bodies
    that are not JSON objects are rejected with 400 instead of FastAPI's
    default 422.  Anything else escaping a route is caught by an HTTP
    middleware and reported as 500.
    """

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(BadRequestError("Request body must be a JSON object"))

    @app.middleware("http")
    async def catch_unexpected_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return error_response(exc)


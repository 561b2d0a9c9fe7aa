"""
Domain errors and the JSON error envelope.

Every failure leaves the API as ``{"error": {"message": ..., "status": ...}}``
with the same status on the HTTP response.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BizTimeError(Exception):
    """Base error carrying a client-facing message and an HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(BizTimeError):
    """A required field is missing or has the wrong type."""

    status_code = 400


class NotFoundError(BizTimeError):
    """No row matched the lookup, update or delete key."""

    status_code = 404


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(BizTimeError)
    async def biztime_error_handler(request: Request, exc: BizTimeError) -> JSONResponse:
        logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(str(exc.detail), exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("%s %s -> malformed request: %s", request.method, request.url.path, exc.errors())
        return error_response("Invalid request.", 400)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response("Internal Server Error", 500)

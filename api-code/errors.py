from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger("echobot.errors")

MESSAGE_REQUIRED_ERROR = "Message parameter is required and cannot be empty."
INTERNAL_SERVER_ERROR = "An internal server error occurred."


class EchoBotError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    status_code = 500
    message = INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ChatValidationError(EchoBotError, ValueError):
    """Raised when the chat message is missing, not a string, or blank."""

    status_code = 400
    message = MESSAGE_REQUIRED_ERROR


class InternalServerError(EchoBotError):
    """Wraps an unexpected failure; the underlying exception is only logged."""

    status_code = 500
    message = INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _echobot_error_handler(request: Request, exc: EchoBotError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(
        "Received bad request on %s: %s", request.url.path, exc.errors()
    )
    return error_response(ChatValidationError.status_code, MESSAGE_REQUIRED_ERROR)


async def _http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return error_response(InternalServerError.status_code, INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EchoBotError, _echobot_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

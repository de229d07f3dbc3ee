"""
Global Exception Handlers

Turns errors raised while serving a request into a uniform ErrorResponse
body. Anything not handled here falls through to the framework's default
500 response.
"""
import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from orderly.modules.users.exceptions import UserServiceError
from orderly.modules.users.schemas import ErrorResponse

logger = logging.getLogger("orderly.errors")


def error_response(code: str, message: str, status: int, headers=None) -> JSONResponse:
    error = ErrorResponse(
        code=code,
        message=message,
        status=status,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=status, content=error.model_dump(mode="json"), headers=headers)


async def handle_user_service_error(request: Request, exc: UserServiceError) -> JSONResponse:
    logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc}")
    return error_response(exc.code, str(exc), exc.status_code)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only the first violation is reported
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    logger.warning(f"VALIDATION_ERROR on {request.method} {request.url.path}: {message}")
    return error_response("VALIDATION_ERROR", message, HTTPStatus.BAD_REQUEST.value)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        code = HTTPStatus(exc.status_code).phrase.upper().replace(" ", "_")
    except ValueError:
        code = "HTTP_ERROR"
    return error_response(code, str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserServiceError, handle_user_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)

"""JSON envelope and exception handlers."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from codetrack.errors import CodetrackError, InternalError, ValidationError

logger = logging.getLogger(__name__)


def envelope(status_code: int, message: str) -> JSONResponse:
    """Build an error response whose body repeats the HTTP status."""
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "message": message},
    )


async def codetrack_error_handler(request: Request, exc: CodetrackError) -> JSONResponse:
    return envelope(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug(f"Rejected payload for {request.url.path}: {exc.errors()}")
    error = ValidationError()
    return envelope(error.status_code, error.message)


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Storage failure on {request.method} {request.url.path}", exc_info=exc)
    error = InternalError()
    return envelope(error.status_code, error.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    messages = {
        status.HTTP_404_NOT_FOUND: "Not found",
        status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
    }
    message = messages.get(exc.status_code, str(exc.detail))
    response = envelope(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Map business, validation and storage errors onto the envelope."""
    app.add_exception_handler(CodetrackError, codetrack_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

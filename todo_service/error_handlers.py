"""
Global exception handlers.

- TodoServiceError → {"error": code, "message": message} with its status
- RequestValidationError → 400 with field-level details
- SQLAlchemyError / Exception → 500, never leaks internal details
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError

from .errors import TodoServiceError, ValidationError, InternalError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_store_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TodoServiceError)
    async def service_error_handler(request: Request, exc: TodoServiceError):
        logger.info(
            f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}"
        )
        headers = None
        if exc.http_status == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(), headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=ValidationError.http_status,
            content=_build_validation_error_response(exc),
        )


def _register_store_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Store failure on {request.url.path}: {exc}", exc_info=True)
        error = InternalError()
        return JSONResponse(status_code=error.http_status, content=error.to_response())


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        error = InternalError()
        return JSONResponse(status_code=error.http_status, content=error.to_response())


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    body = ValidationError().to_response()
    body["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"] if loc != "body"),
            "message": e["msg"],
        }
        for e in exc.errors()
    ]
    return body

# directory_api/api/middlewares/error_handler.py
import logging
from functools import wraps

from flask import Flask
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from directory_api.api.schemas.envelope import fail
from directory_api.core.exceptions import AppError, PersistenceError

logger = logging.getLogger(__name__)


def on_persistence_error(message: str):
    """Rename a PersistenceError raised inside the route after the operation that failed."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except PersistenceError as err:
                raise PersistenceError(message, detail=err.detail or err.message) from err

        return wrapper

    return decorator


def _describe(err: PydanticValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e.get("loc", ()) if p != "__root__")
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    return "; ".join(parts) or "Invalid request body"


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(PersistenceError)
    def handle_persistence_error(err: PersistenceError):
        logger.error("%s: %s", err.message, err.detail)
        return fail(err.message, status=err.status_code, error=err.detail or err.message)

    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        return fail(err.message, status=err.status_code)

    @app.errorhandler(PydanticValidationError)
    def handle_request_validation(err: PydanticValidationError):
        return fail(_describe(err), status=400)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return fail(err.description or err.name, status=err.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("Unhandled error")

        if app.config.get("DEBUG"):
            return fail("Internal server error", status=500, error=str(err))

        return fail("Internal server error", status=500)

"""
HTTP Error Taxonomy & Exception Handlers
"""
from datetime import datetime, timezone
from typing import Optional
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import ORJSONResponse

logger = logging.getLogger(__name__)


class AppError(HTTPException):
    """Base class for errors surfaced to API clients"""
    status_code: int = 500
    default_message: str = "Some error occurred. Please try again."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(status_code=self.status_code, detail=self.message)

    def __str__(self) -> str:
        return self.message


class BadRequestError(AppError):
    status_code = 400
    default_message = "Bad Request"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not Found"


class UpstreamError(AppError):
    """A third-party API call needed to serve the request failed"""
    status_code = 502
    default_message = "Upstream service error"


class StoreError(Exception):
    """Raised by stores when the hosted database rejects an operation"""
    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)


def _error_body(status: int, message: str) -> dict:
    return {
        "timestamp": int(datetime.now(timezone.utc).timestamp() * 1000),
        "status": status,
        "message": message,
    }


async def app_error_handler(request: Request, exc: AppError):
    return ORJSONResponse(status_code=exc.status_code, content=_error_body(exc.status_code, exc.message))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return ORJSONResponse(status_code=500, content=_error_body(500, AppError.default_message))


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error renderers to the application"""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

"""Error taxonomy for mapping operations and its HTTP translation."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class MappingDashboardError(Exception):
    """Base error. Carries a category, an HTTP status and optional extra payload."""

    category = "internal"
    status_code = 500

    def __init__(self, message: str, **extra: Any):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_body(self) -> dict[str, Any]:
        return {"error": self.category, "detail": self.message, **self.extra}


class InvalidInput(MappingDashboardError):
    """Missing or malformed request fields."""

    category = "invalid_input"
    status_code = 400


class NotFound(MappingDashboardError):
    """Referenced report, employee or mapping does not exist."""

    category = "not_found"
    status_code = 404


class Internal(MappingDashboardError):
    """Unexpected failure while scanning or mutating the store."""


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MappingDashboardError)
    async def _handle(request: Request, exc: MappingDashboardError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.category, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(SQLAlchemyError)
    async def _handle_database(request: Request, exc: SQLAlchemyError):
        logger.exception("%s %s hit a database error", request.method, request.url.path, exc_info=exc)
        err = Internal("Database error")
        return JSONResponse(status_code=err.status_code, content=err.to_body())

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from inventory_service.core.logging_config import request_id_of


LOG = logging.getLogger("inventory_service.errors")


class InventoryError(Exception):
    """Base error mapped to a plain-text HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server Error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(InventoryError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str) -> None:
        super().__init__(f"Bad Request: {reason}")


class NotFoundError(InventoryError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class PersistenceError(InventoryError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server Error"


def install_error_handlers(app: FastAPI) -> None:
    """Map domain and storage failures to plain-text responses."""

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):  # type: ignore[override]
        if exc.status_code >= 500:
            LOG.error("request failed path=%s err=%s", request.url.path, exc, extra={"request_id": request_id_of(request)})
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):  # type: ignore[override]
        LOG.error(
            "database error path=%s err=%s",
            request.url.path,
            exc,
            exc_info=exc,
            extra={"request_id": request_id_of(request)},
        )
        return PlainTextResponse(PersistenceError.message, status_code=PersistenceError.status_code)

    @app.exception_handler(OSError)
    async def file_error_handler(request: Request, exc: OSError):  # type: ignore[override]
        LOG.error(
            "file store error path=%s err=%s",
            request.url.path,
            exc,
            exc_info=exc,
            extra={"request_id": request_id_of(request)},
        )
        return PlainTextResponse(PersistenceError.message, status_code=PersistenceError.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):  # type: ignore[override]
        fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
        reason = f"invalid {', '.join(fields)}" if fields else "malformed request"
        return PlainTextResponse(f"Bad Request: {reason}", status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):  # type: ignore[override]
        LOG.error(
            "unhandled exception path=%s err=%s",
            request.url.path,
            exc,
            exc_info=exc,
            extra={"request_id": request_id_of(request)},
        )
        return PlainTextResponse(PersistenceError.message, status_code=PersistenceError.status_code)

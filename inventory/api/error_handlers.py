"""Error Handlers — global exception handlers for the inventory API.

Invariants:
    - InventoryError → exc.http_status with {"error": message}
    - Exception (catch-all) → 500 {"error": "internal error"}, never leaks internal details
    - Validation errors logged at WARNING, everything else at ERROR

Design Decisions:
    - Two-layer handler: domain (InventoryError), catch-all (Exception)
    - Requests through the HTTP middleware get the catch-all body from
      api/middleware.py; this handler covers anything raised outside it
    - No RequestValidationError handler: the devices route reads the raw body and
      validates in core, so FastAPI never validates request data itself
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from inventory.core.errors import InventoryError, ErrorCategory

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal error"


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_inventory_error_handler(app)
    _register_generic_error_handler(app)


def _register_inventory_error_handler(app: FastAPI) -> None:
    """Register inventory domain/infrastructure error handler."""

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        """Handle all inventory domain/infrastructure errors."""
        level = (
            logging.WARNING if exc.category == ErrorCategory.VALIDATION
            else logging.ERROR
        )
        logger.log(
            level,
            f"InventoryError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "device_id": exc.context.device_id,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return internal_error_response()

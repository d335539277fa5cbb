"""HTTP Middleware — request correlation IDs and request logging.

Invariants:
    - Every response carries the request ID header (inbound value reused, else UUID4),
      including 500s rendered for unhandled exceptions
    - request.state.request_id is set before any route runs
    - Every request logged once with method, path, status code, duration
    - Requests and responses otherwise pass through unmodified

Design Decisions:
    - Request ID registered last so it is outermost: the log line sees the ID
    - Unhandled exceptions rendered in the request log middleware: Starlette serves
      the Exception handler outside all user middleware, where no header or log
      line would be added
    - Function middleware via app.middleware("http"): no extra dependency
"""

import logging
import time
import uuid

from fastapi import FastAPI, Request

from inventory.api.error_handlers import internal_error_response

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI, request_id_header: str) -> None:
    """Register request log and request ID middleware on the FastAPI app."""
    _register_request_log_middleware(app)
    _register_request_id_middleware(app, request_id_header)


def _register_request_id_middleware(app: FastAPI, header: str) -> None:

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get(header) or str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers[header] = request_id
        return response


def _register_request_log_middleware(app: FastAPI) -> None:

    @app.middleware("http")
    async def request_log_middleware(request: Request, call_next):
        started = time.perf_counter()
        request_id = getattr(request.state, "request_id", None)
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"Unhandled exception on {request.url.path}: {e}",
                exc_info=True,
                extra={"request_id": request_id},
            )
            response = internal_error_response()
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response

"""
Request logging middleware.

Assigns every request an id (taken from X-Request-ID when present),
exposes it to all loggers through the request context and logs one
summary line per request with its status and duration.
"""

import logging
import time
import uuid
from typing import Callable, FrozenSet, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from hookscore.utils.logging import clear_request_context, get_request_id, set_request_id

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Structured per-request logging.

    Adds X-Request-ID and X-Response-Time headers to every response.
    Health checks are only logged when they fail.
    """

    EXCLUDE_PATHS: FrozenSet[str] = frozenset({
        "/",
        "/docs",
        "/openapi.json",
        "/redoc",
        "/favicon.ico",
    })
    ERROR_ONLY_PATHS: FrozenSet[str] = frozenset({"/health"})

    def _get_request_id(self, request: Request) -> str:
        return (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Request-Id")
            or str(uuid.uuid4())
        )

    def _should_log(self, path: str, status_code: int) -> bool:
        if path in self.EXCLUDE_PATHS:
            return False
        if path in self.ERROR_ONLY_PATHS:
            return status_code >= 400
        return True

    def _get_log_level(self, status_code: int) -> int:
        if status_code >= 500:
            return logging.ERROR
        elif status_code >= 400:
            return logging.WARNING
        return logging.INFO

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = self._get_request_id(request)
        set_request_id(request_id)
        request.state.request_id = request_id

        method = request.method
        path = request.url.path
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start_time) * 1000

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

            if self._should_log(path, response.status_code):
                logger.log(
                    self._get_log_level(response.status_code),
                    f"{method} {path} {response.status_code} ({duration_ms:.2f}ms)",
                    extra={
                        "event": "http_request",
                        "http_method": method,
                        "http_path": path,
                        "http_status": response.status_code,
                        "duration_ms": round(duration_ms, 2),
                    },
                )

            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{method} {path} FAILED ({duration_ms:.2f}ms): {type(exc).__name__}",
                extra={
                    "event": "http_request_error",
                    "http_method": method,
                    "http_path": path,
                    "duration_ms": round(duration_ms, 2),
                    "error_type": type(exc).__name__,
                },
                exc_info=True,
            )
            raise

        finally:
            clear_request_context()


def get_request_id_from_request(request: Request) -> Optional[str]:
    """Request id for use in route handlers."""
    return getattr(request.state, "request_id", None) or get_request_id()

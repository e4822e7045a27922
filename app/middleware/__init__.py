"""Middleware components for the HookScore API."""

from .logging import RequestLoggingMiddleware, get_request_id_from_request

__all__ = [
    "RequestLoggingMiddleware",
    "get_request_id_from_request",
]

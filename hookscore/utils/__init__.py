"""Utility modules for HookScore."""

from .content import detect_content_type, get_preview, sanitize_content
from .logging import (
    DevelopmentFormatter,
    JSONFormatter,
    RequestContextFilter,
    SensitiveDataFilter,
    Timer,
    clear_request_context,
    get_request_id,
    redact_sensitive_data,
    set_request_id,
    setup_logging,
    timed,
)

__all__ = [
    # Content preparation
    "sanitize_content",
    "detect_content_type",
    "get_preview",
    # Logging utilities
    "setup_logging",
    "set_request_id",
    "clear_request_context",
    "get_request_id",
    "Timer",
    "timed",
    "JSONFormatter",
    "DevelopmentFormatter",
    "RequestContextFilter",
    "SensitiveDataFilter",
    "redact_sensitive_data",
]

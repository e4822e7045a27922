"""Utility functions for the HookScore API."""

from .sanitization import (
    COMPILED_INJECTION_PATTERNS,
    contains_injection_attempt,
    sanitize_for_log,
)

__all__ = [
    "sanitize_for_log",
    "contains_injection_attempt",
    "COMPILED_INJECTION_PATTERNS",
]

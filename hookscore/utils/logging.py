"""
Structured logging for HookScore.

Provides:
- JSON single-line logging for production
- Colored human-readable logging for development
- Request id propagation through contextvars
- Redaction of provider API keys and bearer tokens
- Timing helpers
"""

import asyncio
import json
import logging
import re
import sys
import time
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, Pattern

SERVICE_NAME = "hookscore-api"

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

SENSITIVE_PATTERNS: List[Pattern[str]] = [
    re.compile(r'api[_-]?key["\']?\s*[:=]\s*["\']?[\w-]+', re.IGNORECASE),
    re.compile(r'secret["\']?\s*[:=]\s*["\']?[\w-]+', re.IGNORECASE),
    re.compile(r'token["\']?\s*[:=]\s*["\']?[\w.-]+', re.IGNORECASE),
    re.compile(r'bearer\s+[\w.-]+', re.IGNORECASE),
    re.compile(r'authorization["\']?\s*[:=]\s*["\']?[^\s,}]+', re.IGNORECASE),
    re.compile(r'sk-ant-[\w-]+'),  # Anthropic keys
    re.compile(r'sk-(?:proj-)?[A-Za-z0-9_-]{20,}'),  # OpenAI keys
    re.compile(r'AIza[\w-]{30,}'),  # Google API keys
]

REDACTED = "[REDACTED]"

# Standard LogRecord attributes; anything else on a record came from extra={}
EXCLUDED_RECORD_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "request_id", "message", "taskName",
})


def redact_sensitive_data(message: str) -> str:
    """Replace API keys and tokens in a message with [REDACTED]."""
    if not message:
        return message

    result = message
    for pattern in SENSITIVE_PATTERNS:
        result = pattern.sub(REDACTED, result)
    return result


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: v for k, v in record.__dict__.items()
        if k not in EXCLUDED_RECORD_ATTRS and not k.startswith("_")
    }


class RequestContextFilter(logging.Filter):
    """Stamp every record with the current request id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


class SensitiveDataFilter(logging.Filter):
    """Redact secrets from the message and its string arguments."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.msg:
            record.msg = redact_sensitive_data(str(record.msg))
        if record.args:
            record.args = tuple(
                redact_sensitive_data(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )
        return True


class JSONFormatter(logging.Formatter):
    """
    Single-line JSON output:

    {"timestamp": "...", "level": "INFO", "logger": "app.routes.analyze",
     "message": "...", "service": "hookscore-api", "request_id": "...",
     "extra": {...}}
    """

    def __init__(self, service_name: str = SERVICE_NAME):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "request_id": getattr(record, "request_id", "-"),
        }

        if record.levelno >= logging.ERROR:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = _extra_fields(record)
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str, ensure_ascii=False)


class DevelopmentFormatter(logging.Formatter):
    """
    Colored output for local work.

    Format: [timestamp] LEVEL    [req_id] logger - message {extra}
    """

    COLORS: Dict[str, str] = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = self.RESET if color else ""

        request_id = getattr(record, "request_id", "-")
        req_display = request_id[:8] if request_id != "-" else "-"
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]

        formatted = (
            f"{self.DIM}[{timestamp}]{self.RESET} "
            f"{color}{self.BOLD}{record.levelname:8}{reset} "
            f"{self.DIM}[{req_display:>8}]{self.RESET} "
            f"{record.name} - {record.getMessage()}"
        )

        extra = _extra_fields(record)
        if extra:
            formatted += f" {self.DIM}{extra}{self.RESET}"

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted


def setup_logging(
    service_name: str = SERVICE_NAME,
    log_level: Optional[int] = None,
    force_json: bool = False,
) -> logging.Logger:
    """
    Configure the root logger once at startup.

    Level and format come from LoggingSettings unless overridden. JSON is
    used in production or when LOG_FORMAT_JSON is set.

    Args:
        service_name: Name stamped on JSON records
        log_level: Override the configured level
        force_json: Force JSON output in development

    Returns:
        The configured root logger
    """
    from ..config import get_settings

    settings = get_settings()
    level = log_level if log_level is not None else getattr(logging, settings.logging.log_level)
    use_json = force_json or settings.logging.log_format_json or settings.is_production

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RequestContextFilter())
    handler.addFilter(SensitiveDataFilter())

    if use_json:
        handler.setFormatter(JSONFormatter(service_name))
    else:
        handler.setFormatter(DevelopmentFormatter())

    root_logger.addHandler(handler)

    # Third-party chatter
    for noisy in ("uvicorn.access", "httpx", "httpcore", "urllib3", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    root_logger.info(
        "Logging configured",
        extra={
            "log_level": logging.getLevelName(level),
            "format": "json" if use_json else "development",
            "service": service_name,
        },
    )

    return root_logger


def set_request_id(request_id: Optional[str]) -> None:
    request_id_var.set(request_id)


def clear_request_context() -> None:
    request_id_var.set(None)


def get_request_id() -> Optional[str]:
    return request_id_var.get()


class Timer:
    """
    Context manager for timing an operation.

    Usage:
        with Timer("smart_analysis", logger) as timer:
            result = run_smart_analysis(text, content_type)
        timer.elapsed_ms
    """

    def __init__(
        self,
        name: str,
        logger: Optional[logging.Logger] = None,
        log_level: int = logging.DEBUG,
    ):
        self.name = name
        self.logger = logger
        self.log_level = log_level
        self.start_time: Optional[float] = None
        self.elapsed_ms: float = 0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is not None:
            self.elapsed_ms = (time.perf_counter() - self.start_time) * 1000

        if self.logger:
            self.logger.log(
                self.log_level,
                f"{self.name} completed in {self.elapsed_ms:.2f}ms",
                extra={
                    "operation": self.name,
                    "duration_ms": round(self.elapsed_ms, 2),
                    "success": exc_type is None,
                },
            )


def timed(
    name: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
    log_level: int = logging.DEBUG,
) -> Callable:
    """
    Decorator that wraps a sync or async function in a Timer.

    Args:
        name: Operation name (defaults to the function name)
        logger: Logger to use (defaults to the function's module logger)
        log_level: Level to log at
    """
    def decorator(func: Callable) -> Callable:
        operation_name = name or func.__name__
        func_logger = logger or logging.getLogger(func.__module__)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            with Timer(operation_name, func_logger, log_level):
                return await func(*args, **kwargs)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            with Timer(operation_name, func_logger, log_level):
                return func(*args, **kwargs)

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator

"""
Logging Configuration for the Decade Movie Filter

Console and JSON logging, with request tracing for the HTTP API.
"""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO, Union
from contextvars import ContextVar
from pathlib import Path
import traceback
from functools import wraps
import time


# Context variable for request tracing
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        request_id = request_id_var.get()
        if request_id:
            log_data["request_id"] = request_id

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info)
            }

        # Fields passed as extra={"extra_fields": {...}}
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class PrettyFormatter(logging.Formatter):
    """Colored formatter for interactive use."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "") if self.use_color else ""
        reset = self.RESET if color else ""

        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")

        msg = f"{color}{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}{reset}"

        request_id = request_id_var.get()
        if request_id:
            msg = f"[{request_id[:8]}] {msg}"

        if record.exc_info:
            msg += "\n" + "".join(traceback.format_exception(*record.exc_info))

        return msg


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[Union[str, Path]] = None,
    stream: Optional[TextIO] = None
):
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Use JSON format for console logs
        log_file: Optional file path for log output
        stream: Console stream, stderr by default so stdout stays clean
    """
    level_value = logging.getLevelName(level.upper())
    if not isinstance(level_value, int):
        raise ValueError(f"Unknown log level: {level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level_value)

    # Clear existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_stream = stream or sys.stderr
    console_handler = logging.StreamHandler(console_stream)

    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        use_color = hasattr(console_stream, "isatty") and console_stream.isatty()
        console_handler.setFormatter(PrettyFormatter(use_color=use_color))

    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())  # Always JSON for files
        root_logger.addHandler(file_handler)

    logging.debug(f"Logging configured: level={level}, json={json_output}")


def log_execution_time(logger: Optional[logging.Logger] = None):
    """Decorator to log function execution time."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger or logging.getLogger(func.__module__)

            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                _logger.debug(
                    f"{func.__name__} failed after {elapsed * 1000:.1f} ms: {e}",
                    extra={"extra_fields": {"duration_ms": elapsed * 1000}}
                )
                raise

            elapsed = time.perf_counter() - start_time
            _logger.debug(
                f"{func.__name__} completed in {elapsed * 1000:.1f} ms",
                extra={"extra_fields": {"duration_ms": elapsed * 1000}}
            )
            return result

        return wrapper
    return decorator


class RequestLogger:
    """Context manager that tags log records with a request id."""

    def __init__(
        self,
        request_id: str,
        logger: Optional[logging.Logger] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.request_id = request_id
        self.logger = logger or logging.getLogger(__name__)
        self.context = context or {}
        self.start_time = None
        self._request_id_token = None

    def __enter__(self):
        self._request_id_token = request_id_var.set(self.request_id)
        self.start_time = time.perf_counter()
        self.logger.info("Request started", extra={"extra_fields": dict(self.context)})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed = time.perf_counter() - self.start_time
        fields = {**self.context, "duration_ms": elapsed * 1000}

        if exc_type:
            self.logger.error(
                f"Request failed: {exc_val}",
                extra={"extra_fields": fields},
                exc_info=(exc_type, exc_val, exc_tb)
            )
        else:
            self.logger.info("Request completed", extra={"extra_fields": fields})

        request_id_var.reset(self._request_id_token)

        return False  # Don't suppress exceptions


__all__ = [
    "request_id_var",
    "JSONFormatter",
    "PrettyFormatter",
    "setup_logging",
    "log_execution_time",
    "RequestLogger",
]

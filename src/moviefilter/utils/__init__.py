"""Utilities module for the Decade Movie Filter."""

from .logging_config import (
    setup_logging,
    log_execution_time,
    RequestLogger,
    JSONFormatter,
    PrettyFormatter
)

__all__ = [
    "setup_logging",
    "log_execution_time",
    "RequestLogger",
    "JSONFormatter",
    "PrettyFormatter"
]

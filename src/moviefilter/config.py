"""
Configuration for the Decade Movie Filter

Run settings with defaults that can come from the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .data.loader import output_path_for

ENV_LOG_LEVEL = "MOVIEFILTER_LOG_LEVEL"
ENV_JSON_LOGS = "MOVIEFILTER_JSON_LOGS"
ENV_LOG_FILE = "MOVIEFILTER_LOG_FILE"
ENV_CATALOG = "MOVIEFILTER_CATALOG"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    json_output: bool = False
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggingConfig":
        environ = os.environ if environ is None else environ
        log_file = environ.get(ENV_LOG_FILE)
        return cls(
            level=environ.get(ENV_LOG_LEVEL, "INFO"),
            json_output=env_flag(environ.get(ENV_JSON_LOGS)),
            log_file=Path(log_file) if log_file else None
        )


@dataclass
class FilterConfig:
    """Settings for one filter run."""
    decade: int
    input_file: Path
    output_dir: Path
    logging: LoggingConfig

    @property
    def output_file(self) -> Path:
        return output_path_for(self.output_dir, self.decade)


__all__ = [
    "ENV_LOG_LEVEL",
    "ENV_JSON_LOGS",
    "ENV_LOG_FILE",
    "ENV_CATALOG",
    "env_flag",
    "LoggingConfig",
    "FilterConfig",
]

"""
Exceptions for the Decade Movie Filter

Every error is raised where it is detected and propagated unchanged to the
caller. The CLI and API layers map them to exit codes and HTTP statuses.
"""

from pathlib import Path
from typing import Optional, Union


class MovieFilterError(Exception):
    """Base class for all movie filter errors."""


class InvalidDecadeError(MovieFilterError, ValueError):
    """Raised when a value can't be used as the start of a decade."""

    def __init__(self, decade: object, reason: str):
        self.decade = decade
        self.reason = reason
        super().__init__(f"Invalid decade {decade!r}: {reason}")


class EmptyCatalogError(MovieFilterError, ValueError):
    """Raised when a catalog store is built without any movies."""

    def __init__(self, message: str = "The catalog requires at least one movie"):
        super().__init__(message)


class NullStoreError(MovieFilterError, TypeError):
    """Raised when a filter service is built without a catalog store."""

    def __init__(self, message: str = "The catalog store can't be None"):
        super().__init__(message)


class CatalogLoadError(MovieFilterError):
    """Raised when a catalog file can't be read or parsed."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        super().__init__(f"Can't load catalog {self.path}: {message}")


class ResultWriteError(MovieFilterError):
    """Raised when the filtered movies can't be written."""

    def __init__(self, path: Union[str, Path], message: Optional[str] = None):
        self.path = Path(path)
        detail = f": {message}" if message else ""
        super().__init__(f"Can't write filtered movies to {self.path}{detail}")


__all__ = [
    "MovieFilterError",
    "InvalidDecadeError",
    "EmptyCatalogError",
    "NullStoreError",
    "CatalogLoadError",
    "ResultWriteError",
]

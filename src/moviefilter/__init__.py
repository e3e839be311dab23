"""Decade Movie Filter - filter a movie catalog by release decade."""

__version__ = "1.0.0"

from .data import (
    CatalogStore,
    MovieRecord,
    load_catalog,
    write_results,
)
from .errors import (
    MovieFilterError,
    InvalidDecadeError,
    EmptyCatalogError,
    NullStoreError,
    CatalogLoadError,
    ResultWriteError,
)
from .service import FilterService

__all__ = [
    "__version__",
    "CatalogStore",
    "FilterService",
    "MovieRecord",
    "load_catalog",
    "write_results",
    "MovieFilterError",
    "InvalidDecadeError",
    "EmptyCatalogError",
    "NullStoreError",
    "CatalogLoadError",
    "ResultWriteError",
]

"""Decade Movie Filter - Data Module"""

from .decades import (
    FLOOR_ERA,
    DECADE_LENGTH,
    is_not_before_floor_era,
    is_decade_year,
    next_decade,
    decade_range,
    decade_label
)
from .validation import validate
from .movie import MovieRecord
from .catalog_store import CatalogStore
from .loader import (
    MovieDocument,
    load_catalog,
    output_path_for,
    serialize_results,
    write_results
)

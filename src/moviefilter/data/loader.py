"""
Catalog Loading and Result Writing

Reads a movie catalog from JSON or CSV into MovieRecord objects and writes
filtered results back out as JSON.

JSON catalogs are a top-level array of objects::

    [{"title": "Heat", "year": 1995, "genres": ["Crime"], "cast": ["Al Pacino"]}]

CSV catalogs have ``title``, ``year``, ``genres`` and ``cast`` columns, with
genres and cast members separated by ``|``.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from ..errors import CatalogLoadError, ResultWriteError
from ..utils.logging_config import log_execution_time
from .decades import decade_label
from .movie import MovieRecord

logger = logging.getLogger(__name__)

CSV_LIST_SEPARATOR = "|"
REQUIRED_CSV_COLUMNS = ("title", "year")
SUPPORTED_SUFFIXES = (".json", ".csv")


class MovieDocument(BaseModel):
    """Wire schema for one movie in a catalog file."""
    title: str
    year: int
    genres: List[str] = Field(default_factory=list)
    cast: List[str] = Field(default_factory=list)

    @field_validator("genres", "cast", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    def to_record(self) -> MovieRecord:
        return MovieRecord.create(self.title, self.year, self.genres, self.cast)


_CATALOG_ADAPTER = TypeAdapter(List[MovieDocument])


def _split_names(value: str) -> List[str]:
    return [name.strip() for name in value.split(CSV_LIST_SEPARATOR) if name.strip()]


def _read_json(path: Path) -> List[MovieDocument]:
    return _CATALOG_ADAPTER.validate_json(path.read_bytes())


def _read_csv(path: Path) -> List[MovieDocument]:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [column for column in REQUIRED_CSV_COLUMNS if column not in df.columns]
    if missing:
        raise CatalogLoadError(path, f"missing CSV columns: {', '.join(missing)}")

    rows = []
    for row in df.to_dict("records"):
        rows.append({
            "title": row["title"],
            "year": row["year"].strip(),
            "genres": _split_names(row.get("genres", "")),
            "cast": _split_names(row.get("cast", "")),
        })

    return _CATALOG_ADAPTER.validate_python(rows)


@log_execution_time()
def load_catalog(path: Union[str, Path]) -> List[MovieRecord]:
    """
    Load every movie from a catalog file.

    Duplicates are kept; the catalog store collapses them.

    Args:
        path: JSON or CSV catalog file

    Returns:
        Movies in file order

    Raises:
        CatalogLoadError: If the file is missing, has an unsupported
            suffix, can't be parsed, or holds an invalid movie
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in SUPPORTED_SUFFIXES:
        raise CatalogLoadError(
            path, f"unsupported format {suffix or '(none)'!r}, expected one of {SUPPORTED_SUFFIXES}"
        )
    if not path.is_file():
        raise CatalogLoadError(path, "file not found")

    logger.info(f"Loading catalog from {path}")

    try:
        if suffix == ".json":
            documents = _read_json(path)
        else:
            documents = _read_csv(path)
    except ValidationError as e:
        raise CatalogLoadError(path, f"invalid movie data ({e.error_count()} errors)") from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise CatalogLoadError(path, str(e)) from e
    except OSError as e:
        raise CatalogLoadError(path, e.strerror or str(e)) from e

    records = [document.to_record() for document in documents]
    logger.info(f"Loaded {len(records)} movies from {path}")
    return records


def output_path_for(output_dir: Union[str, Path], decade: int) -> Path:
    """File the movies of a decade are written to, e.g. ``1980s-movies.json``."""
    return Path(output_dir) / f"{decade_label(decade)}-movies.json"


def serialize_results(records: Iterable[MovieRecord], indent: Optional[int] = 2) -> str:
    """JSON array of the records, ordered by year then title."""
    ordered = sorted(records, key=MovieRecord.sort_key)
    return json.dumps([record.to_dict() for record in ordered], indent=indent, ensure_ascii=False)


def write_results(records: Iterable[MovieRecord], path: Union[str, Path]) -> Path:
    """
    Write filtered movies to a JSON file, replacing any existing file.

    An empty result writes ``[]``.

    Raises:
        ResultWriteError: If the file or its directory can't be written
    """
    path = Path(path)
    payload = serialize_results(records)

    temp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the destination and swap in, so a failed write never
        # leaves a truncated file at ``path``
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent,
            prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as fh:
            temp_path = Path(fh.name)
            fh.write(payload + "\n")
        os.replace(temp_path, path)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise ResultWriteError(path, e.strerror or str(e)) from e

    logger.info(f"Wrote filtered movies to {path}")
    return path


__all__ = [
    "MovieDocument",
    "load_catalog",
    "output_path_for",
    "serialize_results",
    "write_results",
]

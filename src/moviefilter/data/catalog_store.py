"""
Catalog Store

Holds the full movie catalog and answers decade-scoped lookups.
"""

import logging
from typing import FrozenSet, Iterable, Iterator, List, Optional

from ..errors import EmptyCatalogError
from .decades import DECADE_LENGTH, decade_range
from .movie import MovieRecord
from .validation import validate

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    In-memory, read-only movie catalog.

    The store keeps its own frozen snapshot of the records it was given.
    Duplicates collapse by value equality, and nothing the caller does to
    the original collection afterwards is visible here. Since the snapshot
    never changes, one store can be shared by concurrent readers.
    """

    def __init__(self, records: Optional[Iterable[MovieRecord]]):
        """
        Initialize the store.

        Args:
            records: Movies supported by the application

        Raises:
            EmptyCatalogError: If ``records`` is None or empty
        """
        if records is None:
            raise EmptyCatalogError()

        movies = frozenset(records)
        if not movies:
            raise EmptyCatalogError()

        self._movies: FrozenSet[MovieRecord] = movies
        logger.debug(f"Catalog store created with {len(movies)} unique movies")

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[MovieRecord]:
        return iter(self._movies)

    def __contains__(self, movie: object) -> bool:
        return movie in self._movies

    def find_by_decade(self, decade: int) -> FrozenSet[MovieRecord]:
        """
        Get the movies released during a decade.

        The decade must include the century (e.g. 1980, not 80) and is
        validated first, so a bad value fails instead of returning a
        partial result.

        Args:
            decade: First year of the decade of interest

        Returns:
            Movies with a release year in ``[decade, decade + 10)``;
            empty when none match

        Raises:
            InvalidDecadeError: If ``decade`` is not a supported decade
        """
        validate(decade)

        years = decade_range(decade)
        matches = frozenset(
            movie for movie in self._movies
            if movie.year in years
        )

        logger.debug(f"Found {len(matches)} movies in [{years.start}, {years.stop})")
        return matches

    def decades(self) -> List[int]:
        """Sorted decades that have at least one movie in the catalog."""
        return sorted({movie.year - movie.year % DECADE_LENGTH for movie in self._movies})


__all__ = ["CatalogStore"]

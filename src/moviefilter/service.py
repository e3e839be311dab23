"""
Filter Service

Entry point the CLI and API layers call to filter movies by decade.
"""

import logging
from typing import FrozenSet, List

from .data.catalog_store import CatalogStore
from .data.movie import MovieRecord
from .errors import NullStoreError

logger = logging.getLogger(__name__)


class FilterService:
    """
    Filters the catalog down to the movies released in a given decade.

    Movies have been released for more than a hundred years, so the
    decade includes the century: 1910 covers 1910-1919, 2010 covers
    2010-2019.
    """

    def __init__(self, store: CatalogStore):
        if store is None:
            raise NullStoreError()
        self.store = store

    def filter(self, decade: int) -> FrozenSet[MovieRecord]:
        """
        Get the movies released during a decade.

        Validation happens once, inside the store.

        Args:
            decade: First year of the decade, no earlier than 1900

        Returns:
            Matching movies, possibly empty

        Raises:
            InvalidDecadeError: If ``decade`` is not a supported decade
        """
        movies = self.store.find_by_decade(decade)
        logger.info(f"Filtered {len(movies)} of {len(self.store)} movies for the {decade}s")
        return movies

    def available_decades(self) -> List[int]:
        return self.store.decades()


__all__ = ["FilterService"]

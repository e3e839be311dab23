"""
Movie Record

Immutable value object for one catalog entry.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


def _as_names(field_name: str, values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    # A bare string is iterable but would split into characters
    if isinstance(values, (str, bytes)):
        raise TypeError(f"{field_name} must be a sequence of names, not {type(values).__name__}")
    return tuple(values or ())


@dataclass(frozen=True)
class MovieRecord:
    """
    A single movie in the catalog.

    Equality and hashing cover every field. Genres and cast keep the order
    they were supplied in and are stored as tuples, so a record can be a set
    member and can't be changed after construction.
    """
    title: str
    year: int
    genres: Tuple[str, ...] = field(default_factory=tuple)
    cast: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Copy whatever sequence was passed in so callers can't mutate it later
        object.__setattr__(self, "genres", _as_names("genres", self.genres))
        object.__setattr__(self, "cast", _as_names("cast", self.cast))

    @classmethod
    def create(
        cls,
        title: str,
        year: int,
        genres: Optional[Iterable[str]] = None,
        cast: Optional[Iterable[str]] = None
    ) -> "MovieRecord":
        """Build a record from any iterables of genres and cast members."""
        return cls(
            title=title,
            year=year,
            genres=_as_names("genres", genres),
            cast=_as_names("cast", cast)
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MovieRecord":
        """Build a record from its JSON form."""
        return cls.create(
            title=data["title"],
            year=data["year"],
            genres=data.get("genres"),
            cast=data.get("cast")
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON form of the record."""
        return {
            "title": self.title,
            "year": self.year,
            "genres": list(self.genres),
            "cast": list(self.cast),
        }

    def sort_key(self) -> Tuple[int, str]:
        return (self.year, self.title)


__all__ = ["MovieRecord"]

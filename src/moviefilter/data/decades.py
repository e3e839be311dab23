"""
Decade Arithmetic

Pure helpers that classify years and compute decade boundaries.
"""

# Earliest supported era; movies in the catalog are not expected before it.
FLOOR_ERA = 1900

# Number of years in a decade.
DECADE_LENGTH = 10


def is_not_before_floor_era(year: int) -> bool:
    """Check that a year is not earlier than the supported floor era."""
    return year >= FLOOR_ERA


def is_decade_year(year: int) -> bool:
    """Check whether a year is the first year of a decade (e.g. 2020)."""
    return year % DECADE_LENGTH == 0


def next_decade(year: int) -> int:
    """
    Get the first year of the decade after the given year.

    A decade year moves forward a full decade (2020 -> 2030); any other
    year rounds up (2022 -> 2030, 1999 -> 2000).

    Args:
        year: Any integer year

    Returns:
        Smallest decade year strictly greater than ``year``
    """
    return year - year % DECADE_LENGTH + DECADE_LENGTH


def decade_range(decade: int) -> range:
    """Years covered by the decade starting at ``decade``."""
    return range(decade, next_decade(decade))


def decade_label(decade: int) -> str:
    return f"{decade}s"


__all__ = [
    "FLOOR_ERA",
    "DECADE_LENGTH",
    "is_not_before_floor_era",
    "is_decade_year",
    "next_decade",
    "decade_range",
    "decade_label",
]

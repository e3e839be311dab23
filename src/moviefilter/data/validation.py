"""
Decade Validation

Gatekeeper that turns a raw integer into a decade the catalog can trust.
"""

from ..errors import InvalidDecadeError
from .decades import is_decade_year, is_not_before_floor_era

FLOOR_ERA_REASON = "decade precedes the supported floor era"
NOT_DECADE_REASON = "value does not represent the start of a decade"
NOT_INTEGER_REASON = "decade must be an integer year"


def validate(year: int) -> None:
    """
    Verify a year is the start of a decade no earlier than the floor era.

    Checks run in order and the first failure is reported.

    Args:
        year: Candidate decade, e.g. 1980

    Raises:
        InvalidDecadeError: If the year precedes the floor era or does not
            start a decade
    """
    # bool is an int subclass but never a year
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidDecadeError(year, NOT_INTEGER_REASON)
    if not is_not_before_floor_era(year):
        raise InvalidDecadeError(year, FLOOR_ERA_REASON)
    if not is_decade_year(year):
        raise InvalidDecadeError(year, NOT_DECADE_REASON)


__all__ = [
    "validate",
    "FLOOR_ERA_REASON",
    "NOT_DECADE_REASON",
    "NOT_INTEGER_REASON",
]

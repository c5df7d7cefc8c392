"""Date-code fragment parsing.

Chip date codes print the year as one or two digits followed by a two-digit
week. Every grammar converts those fragments through the functions here so
that century inference and range checks live in a single place.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .errors import DecodeError
from .models import PRODUCTION_WINDOW, Year

# Two-digit years are placed in the 1980s-2000s.
CENTURY_WINDOW: Tuple[int, int] = (1980, 2009)

_ONE_DIGIT = re.compile(r"[0-9]")
_TWO_DIGITS = re.compile(r"[0-9]{2}")


def week(fragment: str) -> int:
    """Parse a two-digit week number (01-53)."""
    if not _TWO_DIGITS.fullmatch(fragment):
        raise DecodeError(f"invalid week: {fragment!r}", field="week", fragment=fragment)
    value = int(fragment)
    if not 1 <= value <= 53:
        raise DecodeError(
            f"week out of range: {fragment!r}", field="week", fragment=fragment
        )
    return value


def raw_year(fragment: str) -> int:
    """Return the literal value of a two-digit year without century inference."""
    if not _TWO_DIGITS.fullmatch(fragment):
        raise DecodeError(f"invalid year: {fragment!r}", field="year", fragment=fragment)
    return int(fragment)


def year_from_two_digits(fragment: str) -> Year:
    """Infer the calendar year of a two-digit fragment inside ``CENTURY_WINDOW``."""
    value = raw_year(fragment)
    matches = _within(CENTURY_WINDOW, (1900 + value, 2000 + value))
    if len(matches) != 1:
        raise DecodeError(
            f"year outside {CENTURY_WINDOW[0]}-{CENTURY_WINDOW[1]}: {fragment!r}",
            field="year",
            fragment=fragment,
        )
    return Year.full(matches[0])


def full_year_from_two_digits(fragment: str) -> int:
    """Same as :func:`year_from_two_digits` but returns the plain integer."""
    return year_from_two_digits(fragment).value


def year_from_one_digit(fragment: str) -> Year:
    """Resolve a single year digit against ``PRODUCTION_WINDOW``.

    The digit becomes a full year when exactly one decade of the window
    fits it; otherwise the digit is kept as is.
    """
    if not _ONE_DIGIT.fullmatch(fragment):
        raise DecodeError(
            f"invalid 1-digit year: {fragment!r}", field="year", fragment=fragment
        )
    value = int(fragment)
    matches = _within(PRODUCTION_WINDOW, (1980 + value, 1990 + value, 2000 + value))
    if not matches:
        raise DecodeError(
            f"year outside {PRODUCTION_WINDOW[0]}-{PRODUCTION_WINDOW[1]}: {fragment!r}",
            field="year",
            fragment=fragment,
        )
    if len(matches) == 1:
        return Year.full(matches[0])
    return Year.digit(value)


def _within(window: Tuple[int, int], years: Iterable[int]) -> List[int]:
    first, last = window
    return [year for year in years if first <= year <= last]


__all__ = [
    "CENTURY_WINDOW",
    "full_year_from_two_digits",
    "raw_year",
    "week",
    "year_from_one_digit",
    "year_from_two_digits",
]

"""Weekday resolution.

Weekdays are canonical integers 1-7, Monday = 1 through Sunday = 7 (ISO
numbering). Names are English and case-insensitive; the full name, the
three-letter abbreviation and any unambiguous prefix of two or more letters
are accepted.
"""

from typing import Any

import numpy as np

from weekdate.weeks.errors import InvalidWeekdayError
from weekdate.weeks.vectors import NullableIntVector, as_items, is_missing

WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
WEEKDAY_ABBREVIATIONS = tuple(name[:3] for name in WEEKDAY_NAMES)
DAYS_IN_WEEK = len(WEEKDAY_NAMES)


def _from_number(value: int, raw: Any) -> int:
    if not 1 <= value <= DAYS_IN_WEEK:
        raise InvalidWeekdayError([f"weekday must be between 1 and {DAYS_IN_WEEK}, got {raw!r}"])
    return value


def _from_name(name: str) -> int:
    key = name.strip().lower()
    if key.isdigit():
        return _from_number(int(key), name)
    if len(key) >= 2:
        matches = [index for index, full in enumerate(WEEKDAY_NAMES, start=1) if full.startswith(key)]
        if len(matches) == 1:
            return matches[0]
    raise InvalidWeekdayError([f"{name!r} is not a recognized weekday name"])


def resolve_weekday(value: Any) -> int:
    """Resolve a weekday name or index to its canonical index.

    Args:
        value: Weekday name ("Monday", "mon", "Tu") or integer 1-7

    Returns:
        Weekday index, 1 = Monday ... 7 = Sunday

    Raises:
        InvalidWeekdayError: If the value is missing, an unknown or ambiguous
            name, or a number outside 1-7
    """
    if is_missing(value):
        raise InvalidWeekdayError(["weekday must not be missing"])
    if isinstance(value, str):
        return _from_name(value)
    if isinstance(value, (bool, np.bool_)):
        raise InvalidWeekdayError([f"weekday must be a name or an integer, got {value!r}"])
    if isinstance(value, (int, np.integer)):
        return _from_number(int(value), value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return _from_number(int(value), value)
    raise InvalidWeekdayError([f"weekday must be a name or an integer, got {value!r}"])


def resolve_weekdays(values: Any) -> list[int | None]:
    """Resolve every element of a collection, keeping missing elements missing."""
    return [None if is_missing(value) else resolve_weekday(value) for value in as_items(values)]


def weekday_name(index: int, abbreviate: bool = False) -> str:
    """Return the capitalized English name (or abbreviation) of a weekday index."""
    names = WEEKDAY_ABBREVIATIONS if abbreviate else WEEKDAY_NAMES
    return names[_from_number(index, index) - 1].capitalize()


def check_weekday_vector(vector: NullableIntVector, field: str) -> None:
    """Ensure every present element of a vector is a weekday index.

    Raises:
        InvalidWeekdayError: If any present element is outside 1-7
    """
    present = vector.present()
    bad = present[(present < 1) | (present > DAYS_IN_WEEK)]
    if bad.size:
        shown = ", ".join(str(int(value)) for value in np.unique(bad)[:5])
        raise InvalidWeekdayError([f"{field} must be between 1 and {DAYS_IN_WEEK}, got {shown}"])

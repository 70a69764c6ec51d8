"""Week arithmetic engine.

Turns (year, week, day, week_start) rows into calendar dates, expressed as
proleptic Gregorian ordinals (0001-01-01 is day 1, as in date.toordinal()).

Week 1 of a year is the first week, beginning on week_start, with at least
four of its days in that year, which is the week containing 4 January. With
a Monday week start this is ISO-8601. The anchor (day 1 of week 1) is the
week_start weekday on or before 4 January, and

    date = anchor + (week - 1) * 7 + (day - 1)

No bounds are placed on week: week 0 and weeks past the end of the year roll
into the neighbouring year through the day arithmetic above.
"""

from __future__ import annotations

from datetime import date

import numpy as np
from loguru import logger

from weekdate.weeks.errors import WeekOverflowError
from weekdate.weeks.vectors import NullableIntVector
from weekdate.weeks.weekdays import DAYS_IN_WEEK, check_weekday_vector

DATE_MIN_ORDINAL = date.min.toordinal()
DATE_MAX_ORDINAL = date.max.toordinal()

# Keeps every intermediate well inside int64
YEAR_LIMIT = 10**12
WEEK_LIMIT = 10**15


def _days_before_year(years: np.ndarray) -> np.ndarray:
    previous = years - 1
    return previous * 365 + previous // 4 - previous // 100 + previous // 400


def _iso_weekday(ordinals: np.ndarray) -> np.ndarray:
    return (ordinals - 1) % DAYS_IN_WEEK + 1


def _anchors(years: np.ndarray, week_start: int | np.ndarray) -> np.ndarray:
    jan4 = _days_before_year(years) + 4
    return jan4 - (_iso_weekday(jan4) - week_start) % DAYS_IN_WEEK


def _check_limit(vector: NullableIntVector, limit: int, field: str) -> None:
    present = vector.present()
    if ((present > limit) | (present < -limit)).any():
        raise WeekOverflowError([f"{field} values must lie within +/-{limit}"])


def anchor_ordinal(year: int, week_start: int) -> int:
    """Return the ordinal of day 1 of week 1 of ``year``.

    Args:
        year: Calendar year
        week_start: Weekday index 1-7 the weeks begin on

    Returns:
        Proleptic Gregorian ordinal of the anchor date
    """
    if abs(year) > YEAR_LIMIT:
        raise WeekOverflowError([f"year values must lie within +/-{YEAR_LIMIT}"])
    return int(_anchors(np.array([year], dtype=np.int64), week_start)[0])


def weeks_in_year(year: int, week_start: int = 1) -> int:
    """Return how many weeks (52 or 53) ``year`` has under ``week_start``."""
    return (anchor_ordinal(year + 1, week_start) - anchor_ordinal(year, week_start)) // DAYS_IN_WEEK


def compute_dates(
    years: NullableIntVector,
    weeks: NullableIntVector,
    days: NullableIntVector,
    week_starts: NullableIntVector,
) -> NullableIntVector:
    """Compute the date of every (year, week, day, week_start) row.

    years, weeks and days must already share one length. week_starts either
    has that length too (a start per row) or length 1 (one start shared by
    the whole batch, which skips the per-start anchor grouping).

    Args:
        years: Calendar years
        weeks: Week numbers, unbounded
        days: Position within the week, 1 = the week_start weekday
        week_starts: Weekday index 1-7 the weeks begin on

    Returns:
        Ordinals, missing wherever any field of the row is missing

    Raises:
        InvalidWeekdayError: If a day or week start is outside 1-7
        WeekOverflowError: If a row leaves the representable date range
    """
    length = len(years)
    if len(weeks) != length or len(days) != length or len(week_starts) not in (1, length):
        raise ValueError(
            f"vectors must be recycled before computing dates, got lengths "
            f"{length}, {len(weeks)}, {len(days)}, {len(week_starts)}"
        )

    check_weekday_vector(days, "day")
    check_weekday_vector(week_starts, "week_start")
    _check_limit(years, YEAR_LIMIT, "year")
    _check_limit(weeks, WEEK_LIMIT, "week")

    missing = years.missing | weeks.missing | days.missing | week_starts.missing
    complete = ~missing
    rows = years.values[complete]

    if len(week_starts) == 1:
        logger.debug(f"Computing {length} dates with shared week start {int(week_starts.values[0])}")
        anchors = _anchors(rows, int(week_starts.values[0]))
    else:
        starts = week_starts.values[complete]
        distinct = np.unique(starts)
        logger.debug(f"Computing {length} dates across {distinct.size} distinct week starts")
        anchors = np.empty_like(rows)
        for start in distinct:
            selected = starts == start
            anchors[selected] = _anchors(rows[selected], int(start))

    ordinals = anchors + (weeks.values[complete] - 1) * DAYS_IN_WEEK + (days.values[complete] - 1)

    outside = (ordinals < DATE_MIN_ORDINAL) | (ordinals > DATE_MAX_ORDINAL)
    if outside.any():
        row = int(np.flatnonzero(complete)[np.argmax(outside)])
        raise WeekOverflowError([
            f"row {row} (year={int(years.values[row])}, week={int(weeks.values[row])}) "
            f"falls outside {date.min.isoformat()}..{date.max.isoformat()}"
        ])

    values = np.zeros(length, dtype=np.int64)
    values[complete] = ordinals
    return NullableIntVector(values=values, missing=missing)


def ordinals_to_dates(ordinals: NullableIntVector) -> list[date | None]:
    """Convert engine output to ``datetime.date`` objects, None where missing."""
    return [None if value is None else date.fromordinal(value) for value in ordinals.to_list()]

"""Week to date conversion functions.

These are vectorized: every argument may be a scalar or a collection, and
shorter arguments are recycled cyclically to the length of the longest one.

Examples:
    >>> get_date(week=53, year=2015)  # 2015 has 53 ISO weeks
    [datetime.date(2015, 12, 28)]
    >>> get_date(week=53, year=2014)  # 2014 does not, so this is 2015-W01-1
    [datetime.date(2014, 12, 29)]
    >>> get_date(week=11, year=2019, day=range(1, 8), start="Sunday")[0]
    datetime.date(2019, 3, 10)
"""

from __future__ import annotations

from datetime import date
from typing import Any

from loguru import logger

from weekdate.weeks.engine import compute_dates, ordinals_to_dates
from weekdate.weeks.labels import WeekLabel, date_to_week
from weekdate.weeks.vectors import NullableIntVector, as_items, as_vector, batch_length, is_missing
from weekdate.weeks.week_start import get_week_start
from weekdate.weeks.weekdays import resolve_weekday, resolve_weekdays


def _resolve_starts(starts: list[Any]) -> NullableIntVector:
    # A single start is resolved once and shared by the whole batch
    if len(starts) == 1:
        value = starts[0]
        return NullableIntVector.from_list([None if is_missing(value) else resolve_weekday(value)], "start")
    return NullableIntVector.from_list(resolve_weekdays(starts), "start")


def get_date(
    week: Any = 1,
    year: Any = None,
    day: Any = 1,
    start: Any = None,
) -> list[date | None]:
    """Convert week numbers to dates.

    Any missing week, year, day or start gives a missing date for that
    element only. Weeks past the end of a year roll into the next year, and
    week 0 or below into the previous one.

    Args:
        week: Week numbers, defaults to 1
        year: Years, defaults to the current year
        day: Position within the week, defaults to 1 (the week start itself)
        start: Weekday name(s) or index(es) the weeks start on, defaults to
            get_week_start()

    Returns:
        One date per element of the recycled input, None where missing

    Raises:
        EmptyInputError: If any argument has zero length
        InvalidWeekdayError: If a day or start is not a weekday
        InvalidInputError: If a week, year or day is not an integer
        WeekOverflowError: If a date leaves the representable range
    """
    if year is None:
        year = date.today().year
    if start is None:
        start = get_week_start()

    arguments = {
        "week": as_items(week),
        "year": as_items(year),
        "day": as_items(day),
        "start": as_items(start),
    }
    length = batch_length(arguments)

    starts = _resolve_starts(arguments["start"])
    if len(starts) > 1:
        starts = starts.recycle(length)

    ordinals = compute_dates(
        years=as_vector(arguments["year"], "year").recycle(length),
        weeks=as_vector(arguments["week"], "week").recycle(length),
        days=as_vector(arguments["day"], "day").recycle(length),
        week_starts=starts,
    )
    logger.debug(f"Converted {length} week(s) to dates")
    return ordinals_to_dates(ordinals)


def get_week(
    week: Any = 1,
    year: Any = None,
    day: Any = 1,
    start: Any = None,
    week_start: Any = None,
) -> list[WeekLabel | None]:
    """Convert week numbers to week labels under ``week_start``.

    The dates are computed with ``start`` and then labelled with
    ``week_start``. When the two differ, or ``start`` varies per element, the
    labels will not carry the input week numbers; they name the same days
    under the output week start.

    Args:
        week: Week numbers, defaults to 1
        year: Years, defaults to the current year
        day: Position within the week, defaults to 1
        start: Week start(s) the input weeks are counted in, defaults to
            week_start
        week_start: Week start of the returned labels, defaults to
            get_week_start()

    Returns:
        One WeekLabel per element of the recycled input, None where missing
    """
    week_start = get_week_start() if week_start is None else resolve_weekday(week_start)
    if start is None:
        start = week_start
    return date_to_week(get_date(week=week, year=year, day=day, start=start), week_start=week_start)

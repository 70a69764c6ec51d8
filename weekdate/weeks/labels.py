"""Week labels and the date to week conversion.

A WeekLabel names one day as (year, week, day) under a week start, using the
same week 1 placement as the engine, so labelling a computed date gives back
the week it was computed from.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

from weekdate.utils.calendar import start_of_week
from weekdate.weeks.engine import anchor_ordinal
from weekdate.weeks.errors import InvalidInputError, WeekOverflowError
from weekdate.weeks.vectors import as_items, is_missing
from weekdate.weeks.week_start import get_week_start
from weekdate.weeks.weekdays import resolve_weekday


@dataclass(frozen=True)
class WeekLabel:
    """One day expressed as a week of a year.

    Attributes:
        year: Year the week belongs to (may differ from the calendar year)
        week: Week number, 1-53
        day: Position within the week, 1 = the week_start weekday
        week_start: Weekday index the week begins on
    """

    year: int
    week: int
    day: int
    week_start: int = 1

    def __str__(self) -> str:
        return f"{self.year:04d}-W{self.week:02d}-{self.day}"

    def to_date(self) -> date:
        return date.fromordinal(anchor_ordinal(self.year, self.week_start) + (self.week - 1) * 7 + (self.day - 1))


def _label(d: date, week_start: int) -> WeekLabel:
    try:
        start = start_of_week(d, week_start)
        year = (start + timedelta(days=3)).year
    except OverflowError as e:
        raise WeekOverflowError([f"week containing {d.isoformat()} leaves the representable date range"]) from e
    week = (start.toordinal() - anchor_ordinal(year, week_start)) // 7 + 1
    return WeekLabel(year=year, week=week, day=(d - start).days + 1, week_start=week_start)


def date_to_week(dates: Any, week_start: Any = None) -> list[WeekLabel | None]:
    """Label dates with their week under a week start.

    Args:
        dates: A date or a collection of dates; missing elements stay missing
        week_start: Weekday name or index, defaults to get_week_start()

    Returns:
        One WeekLabel per date, None where the date is missing

    Raises:
        InvalidWeekdayError: If week_start is not a weekday
        InvalidInputError: If an element is not a date
    """
    week_start = get_week_start() if week_start is None else resolve_weekday(week_start)
    labels: list[WeekLabel | None] = []
    for item in as_items(dates):
        if is_missing(item):
            labels.append(None)
            continue
        if isinstance(item, datetime):
            item = item.date()
        if not isinstance(item, date):
            raise InvalidInputError([f"expected a date, got {type(item).__name__} {item!r}"])
        labels.append(_label(item, week_start))
    return labels

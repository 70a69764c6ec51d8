"""Convert between week numbers and calendar dates under any week start."""

from loguru import logger

# Records stay silent until an application calls setup_logger
logger.disable("weekdate")

from weekdate.weeks.convert import get_date, get_week
from weekdate.weeks.engine import weeks_in_year
from weekdate.weeks.errors import (
    EmptyInputError,
    InvalidInputError,
    InvalidWeekdayError,
    WeekDateError,
    WeekOverflowError,
)
from weekdate.weeks.labels import WeekLabel, date_to_week
from weekdate.weeks.week_start import get_week_start, set_week_start
from weekdate.weeks.weekdays import resolve_weekday

__all__ = [
    "EmptyInputError",
    "InvalidInputError",
    "InvalidWeekdayError",
    "WeekDateError",
    "WeekLabel",
    "WeekOverflowError",
    "date_to_week",
    "get_date",
    "get_week",
    "get_week_start",
    "resolve_weekday",
    "set_week_start",
    "weeks_in_year",
]

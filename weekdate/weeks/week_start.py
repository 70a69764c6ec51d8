"""Process-wide default week start.

The default is read by the conversion functions when a caller omits a week
start. Its initial value comes from settings (WEEKDATE_WEEK_START, Monday
when unset). The arithmetic engine never reads it.
"""

from typing import Any

from loguru import logger

from weekdate.config.settings import settings
from weekdate.weeks.weekdays import resolve_weekday, weekday_name

_week_start: int = settings.week_start


def get_week_start() -> int:
    """Return the default week start (1 = Monday ... 7 = Sunday)."""
    return _week_start


def set_week_start(value: Any) -> int:
    """Change the default week start.

    Args:
        value: Weekday name or index 1-7

    Returns:
        The previous default, so callers can restore it

    Raises:
        InvalidWeekdayError: If the value is not a weekday
    """
    global _week_start
    week_start = resolve_weekday(value)
    previous = _week_start
    _week_start = week_start
    if previous != week_start:
        logger.info(f"Default week start changed from {weekday_name(previous)} to {weekday_name(week_start)}")
    return previous

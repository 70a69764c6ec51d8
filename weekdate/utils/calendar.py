"""Week-window helpers for an arbitrary week start.

Week starts are weekday indexes, 1 = Monday ... 7 = Sunday.
"""

from datetime import date, timedelta


def start_of_week(d: date, week_start: int = 1) -> date:
    """Return the first day of the week containing d."""
    return d - timedelta(days=(d.isoweekday() - week_start) % 7)


def end_of_week(d: date, week_start: int = 1) -> date:
    """Return the last day of the week containing d."""
    return start_of_week(d, week_start) + timedelta(days=6)

"""Root conftest for all tests.

Every test starts from a Monday default week start, whatever the
environment configures, and the previous default is restored afterwards.
"""

import pytest

from weekdate.weeks.week_start import set_week_start


@pytest.fixture(autouse=True)
def monday_week_start():
    """Pin the process-wide default week start to Monday for each test."""
    previous = set_week_start(1)
    yield
    set_week_start(previous)

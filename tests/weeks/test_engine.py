"""Tests for the week arithmetic engine.

Covers week 1 placement, rollover of out-of-range weeks into neighbouring
years, missing propagation and the shared versus per-row week start paths.
"""

from datetime import date

import numpy as np
import pytest

from weekdate.weeks.engine import (
    DATE_MAX_ORDINAL,
    anchor_ordinal,
    compute_dates,
    ordinals_to_dates,
    weeks_in_year,
)
from weekdate.weeks.errors import InvalidWeekdayError, WeekOverflowError
from weekdate.weeks.vectors import NullableIntVector


def _vector(*items: int | None) -> NullableIntVector:
    return NullableIntVector.from_list(list(items))


def _one(year: int, week: int, day: int, week_start: int) -> date | None:
    ordinals = compute_dates(_vector(year), _vector(week), _vector(day), _vector(week_start))
    return ordinals_to_dates(ordinals)[0]


class TestAnchor:
    """Tests for the placement of week 1."""

    @pytest.mark.parametrize("year", range(1990, 2031))
    def test_monday_anchor_matches_iso(self, year):
        assert date.fromordinal(anchor_ordinal(year, 1)) == date.fromisocalendar(year, 1, 1)

    @pytest.mark.parametrize("week_start", range(1, 8))
    def test_anchor_is_the_week_start_weekday(self, week_start):
        assert date.fromordinal(anchor_ordinal(2021, week_start)).isoweekday() == week_start

    @pytest.mark.parametrize("week_start", range(1, 8))
    def test_week_one_contains_january_4(self, week_start):
        anchor = date.fromordinal(anchor_ordinal(2023, week_start))
        assert anchor <= date(2023, 1, 4) <= date.fromordinal(anchor.toordinal() + 6)

    def test_sunday_anchor_2019(self):
        assert date.fromordinal(anchor_ordinal(2019, 7)) == date(2018, 12, 30)


class TestWeeksInYear:
    """Tests for year lengths in weeks."""

    @pytest.mark.parametrize("year", range(1990, 2031))
    def test_monday_matches_iso(self, year):
        assert weeks_in_year(year) == date(year, 12, 28).isocalendar()[1]

    def test_known_years(self):
        assert weeks_in_year(2014) == 52
        assert weeks_in_year(2015) == 53
        assert weeks_in_year(2020) == 53

    def test_depends_on_week_start(self):
        assert weeks_in_year(2014, 1) == 52
        assert weeks_in_year(2014, 7) == 53


class TestKnownDates:
    """Spot checks against hand-verified ISO dates."""

    def test_2015_w04_3(self):
        assert _one(2015, 4, 3, 1) == date(2015, 1, 21)

    def test_jan_1_2012_belongs_to_2011(self):
        assert _one(2011, 52, 7, 1) == date(2012, 1, 1)

    def test_jan_1_2015(self):
        assert _one(2015, 1, 4, 1) == date(2015, 1, 1)

    def test_day_counts_from_the_week_start(self):
        assert _one(2019, 11, 1, 7) == date(2019, 3, 10)
        assert _one(2019, 11, 7, 7) == date(2019, 3, 16)


class TestRollover:
    """Tests for weeks outside the year's range."""

    @pytest.mark.parametrize("week_start", range(1, 7))
    def test_week_53_of_2014_is_week_1_of_2015(self, week_start):
        for day in range(1, 8):
            assert _one(2014, 53, day, week_start) == _one(2015, 1, day, week_start)

    def test_iso_week_53_of_2014(self):
        assert _one(2014, 53, 1, 1) == date(2014, 12, 29)

    def test_sunday_week_53_of_2014_stays_in_2014(self):
        """With Sunday weeks 2014 has 53 weeks, so week 53 is its own last week."""
        assert weeks_in_year(2014, 7) == 53
        assert _one(2014, 53, 1, 7) == date(2014, 12, 28)
        assert _one(2014, 54, 1, 7) == _one(2015, 1, 1, 7)

    @pytest.mark.parametrize("week_start", range(1, 8))
    def test_week_after_last_rolls_forward(self, week_start):
        for year in range(2010, 2031):
            last = weeks_in_year(year, week_start)
            assert _one(year, last + 1, 3, week_start) == _one(year + 1, 1, 3, week_start)

    @pytest.mark.parametrize("week_start", range(1, 8))
    def test_week_0_rolls_back(self, week_start):
        for year in range(2010, 2031):
            last = weeks_in_year(year - 1, week_start)
            assert _one(year, 0, 5, week_start) == _one(year - 1, last, 5, week_start)

    def test_negative_weeks(self):
        assert _one(2015, -1, 1, 1) == date(2014, 12, 15)

    def test_far_future_week(self):
        assert _one(2015, 1 + 53 + 52, 1, 1) == date(2017, 1, 2)


class TestMissingValues:
    """Tests for per-row missing propagation."""

    def test_any_missing_field_blanks_only_that_row(self):
        ordinals = compute_dates(
            _vector(2015, None, 2015, 2015, 2015),
            _vector(1, 1, None, 1, 1),
            _vector(1, 1, 1, None, 1),
            _vector(1, 1, 1, 1, None),
        )
        assert ordinals_to_dates(ordinals) == [date(2014, 12, 29), None, None, None, None]

    def test_missing_shared_week_start_blanks_every_row(self):
        ordinals = compute_dates(_vector(2015, 2016), _vector(1, 1), _vector(1, 1), _vector(None))
        assert ordinals.to_list() == [None, None]


class TestSharedAndPerRowStarts:
    """The shared week start path and the per-row path must agree."""

    def test_identical_results(self):
        years = _vector(*range(2000, 2030))
        weeks = _vector(*[(i * 7) % 55 for i in range(30)])
        days = _vector(*[i % 7 + 1 for i in range(30)])
        for week_start in range(1, 8):
            shared = compute_dates(years, weeks, days, _vector(week_start))
            per_row = compute_dates(years, weeks, days, _vector(*[week_start] * 30))
            assert np.array_equal(shared.values, per_row.values)
            assert np.array_equal(shared.missing, per_row.missing)

    def test_mixed_starts_match_row_by_row(self):
        starts = [1, 7, 3, 7, 1, 5, 2]
        ordinals = compute_dates(
            _vector(*[2019] * 7),
            _vector(*[11] * 7),
            _vector(*[1] * 7),
            _vector(*starts),
        )
        expected = [_one(2019, 11, 1, start) for start in starts]
        assert ordinals_to_dates(ordinals) == expected


class TestErrors:
    """Tests for rejected input."""

    def test_day_out_of_range_fails_the_batch(self):
        with pytest.raises(InvalidWeekdayError):
            compute_dates(_vector(2015, 2015), _vector(1, 2), _vector(1, 8), _vector(1))

    def test_week_start_out_of_range(self):
        with pytest.raises(InvalidWeekdayError):
            compute_dates(_vector(2015), _vector(1), _vector(1), _vector(0))

    def test_before_first_representable_date(self):
        with pytest.raises(WeekOverflowError) as exc_info:
            _one(1, 0, 1, 1)
        assert exc_info.value.code == "OVERFLOW"

    def test_after_last_representable_date(self):
        with pytest.raises(WeekOverflowError, match="row 1"):
            compute_dates(_vector(2015, 9999), _vector(1, 60), _vector(1, 1), _vector(1))

    def test_huge_week_is_rejected_before_arithmetic(self):
        with pytest.raises(WeekOverflowError):
            _one(2015, 10**16, 1, 1)

    def test_most_negative_week_is_rejected(self):
        with pytest.raises(WeekOverflowError):
            _one(2015, -(2**63), 1, 1)

    def test_week_0_of_year_10000_is_representable(self):
        last = weeks_in_year(9999)
        result = _one(10000, 0, 1, 1)
        assert result == _one(9999, last, 1, 1)
        assert result.toordinal() <= DATE_MAX_ORDINAL

    def test_unrecycled_vectors_are_a_programming_error(self):
        with pytest.raises(ValueError, match="recycled"):
            compute_dates(_vector(2015, 2016), _vector(1), _vector(1, 1), _vector(1))

"""
Tests for roster day classification.

Tests the night-shift predicate, scaffold range, lookahead distances and
input errors.
"""

import logging

import pytest
from datetime import date, time, timedelta

import sys
from pathlib import Path

# Add both tests dir and parent dir to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from helpers import shift
from shiftsleep.errors import EmptyRosterError, InvalidRangeError
from shiftsleep.scheduling.day_classifier import DayClassifier, is_night_shift


class TestNightShiftPredicate:
    """Night iff wraps past midnight, starts >= 20:00, or ends <= 08:00."""

    @pytest.mark.parametrize(
        "start,end",
        [
            (time(23, 0), time(7, 0)),  # Wraps
            (time(22, 0), time(6, 0)),
            (time(20, 0), time(23, 30)),  # Late start, same day
            (time(4, 0), time(8, 0)),  # Early end
            (time(0, 0), time(8, 59)),  # End hour 8
            (time(18, 0), time(2, 0)),  # Evening into night
        ],
    )
    def test_night_shifts(self, start, end):
        assert is_night_shift(start, end)

    @pytest.mark.parametrize(
        "start,end",
        [
            (time(9, 0), time(17, 0)),
            (time(7, 0), time(15, 0)),
            (time(12, 0), time(19, 59)),
            (time(6, 0), time(9, 0)),
        ],
    )
    def test_day_shifts(self, start, end):
        assert not is_night_shift(start, end)


class TestClassificationRange:
    """Scaffold days around the display window."""

    def test_default_range_is_min_minus_one_to_max_plus_two(self, night_after_day_off):
        days = DayClassifier(night_after_day_off).classify()

        assert days[0].date == date(2025, 7, 24)
        assert days[-1].date == date(2025, 7, 31)

    def test_dates_are_contiguous(self, night_after_day_off):
        days = DayClassifier(night_after_day_off).classify()

        for before, after in zip(days, days[1:]):
            assert after.date - before.date == timedelta(days=1)

    def test_unsorted_roster(self, night_after_day_off):
        days = DayClassifier(list(reversed(night_after_day_off))).classify()
        assert days[0].date == date(2025, 7, 24)

    def test_explicit_window(self, night_after_day_off):
        classifier = DayClassifier(
            night_after_day_off, start_date=date(2025, 7, 27), end_date=date(2025, 7, 29)
        )
        days = classifier.classify()

        assert [d.date for d in days] == [date(2025, 7, d) for d in range(26, 31)]

    def test_window_ending_before_night_keeps_lookahead(self, night_after_day_off):
        days = DayClassifier(night_after_day_off, end_date=date(2025, 7, 27)).classify()
        until = {d.date.day: d.days_until_next_night_shift for d in days}

        assert days[-1].date == date(2025, 7, 28)
        assert until == {24: 5, 25: 4, 26: 3, 27: 2, 28: 1}

    def test_window_starting_after_roster(self, night_after_day_off):
        days = DayClassifier(
            night_after_day_off, start_date=date(2025, 8, 3), end_date=date(2025, 8, 4)
        ).classify()

        assert [d.date for d in days] == [date(2025, 8, d) for d in (2, 3, 4, 5)]
        assert all(d.day_type == "off" for d in days)
        assert all(d.days_until_next_night_shift is None for d in days)

    def test_inverted_window_raises(self, night_after_day_off):
        with pytest.raises(InvalidRangeError):
            DayClassifier(
                night_after_day_off, start_date=date(2025, 7, 29), end_date=date(2025, 7, 25)
            )

    def test_empty_roster_raises(self):
        with pytest.raises(EmptyRosterError):
            DayClassifier([])


class TestDayTypes:
    def test_types_for_mixed_roster(self, night_after_day_off):
        days = DayClassifier(night_after_day_off).classify()
        types = {d.date.day: d.day_type for d in days}

        assert types == {
            24: "off",
            25: "day",
            26: "day",
            27: "day",
            28: "off",
            29: "night",
            30: "off",
            31: "off",
        }

    def test_shift_attached_only_to_shift_days(self, night_after_day_off):
        days = DayClassifier(night_after_day_off).classify()

        for d in days:
            assert (d.shift is None) == (d.day_type == "off")

    def test_duplicate_date_keeps_first_and_warns(self, caplog):
        day = date(2025, 7, 25)
        roster = [shift(day, "9:00", "17:00"), shift(day, "23:00", "7:00")]

        with caplog.at_level(logging.WARNING):
            days = DayClassifier(roster).classify()

        assert days[1].day_type == "day"
        assert "Multiple shifts" in caplog.text


class TestDaysUntilNextNightShift:
    """Lookahead distances."""

    def test_distances_before_night(self, night_after_day_off):
        days = DayClassifier(night_after_day_off).classify()
        distances = {d.date.day: d.days_until_next_night_shift for d in days}

        assert distances[24] == 5
        assert distances[27] == 2
        assert distances[28] == 1

    def test_night_day_itself_looks_strictly_forward(self, night_after_day_off):
        days = DayClassifier(night_after_day_off).classify()
        night = next(d for d in days if d.day_type == "night")

        assert night.days_until_next_night_shift is None

    def test_never_wraps_backward(self, night_after_day_off):
        days = DayClassifier(night_after_day_off).classify()

        assert days[-1].days_until_next_night_shift is None
        assert days[-2].days_until_next_night_shift is None

    def test_consecutive_nights(self):
        roster = [
            shift(date(2025, 3, 10), "22:00", "6:00"),
            shift(date(2025, 3, 11), "22:00", "6:00"),
        ]
        days = DayClassifier(roster).classify()

        assert [d.days_until_next_night_shift for d in days] == [1, 1, None, None, None]

    def test_no_night_shift_means_no_distances(self, day_shift_week):
        days = DayClassifier(day_shift_week).classify()

        assert all(d.days_until_next_night_shift is None for d in days)

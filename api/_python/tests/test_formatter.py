"""
Tests for schedule text and dict rendering.
"""

import json
from datetime import date, datetime

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shiftsleep.formatter import (
    format_day,
    format_schedule,
    format_window,
    plan_to_dict,
    schedule_to_dict,
)
from shiftsleep.scheduler import generate_schedule
from shiftsleep.types import DayPlan, TimeWindow


def _plan(day: date, *windows: TimeWindow, sleep: TimeWindow) -> DayPlan:
    return DayPlan(date=day, day_type="off", sleep_window=sleep, no_caffeine_windows=windows)


class TestFormatWindow:
    def test_same_day_window_has_no_date(self):
        window = TimeWindow("work", datetime(2025, 7, 25, 9, 0), datetime(2025, 7, 25, 17, 0))
        assert format_window(window, date(2025, 7, 25)) == "work: 09:00 - 17:00"

    def test_window_into_next_day_gets_short_date(self):
        window = TimeWindow("sleep", datetime(2025, 7, 31, 23, 0), datetime(2025, 8, 1, 8, 0))
        assert format_window(window, date(2025, 7, 31)) == "sleep: 23:00 - 08:00 aug 1"

    def test_previous_night_sleep_shows_both_dates(self):
        window = TimeWindow(
            "prior_sleep", datetime(2025, 7, 24, 23, 0), datetime(2025, 7, 25, 8, 0)
        )
        assert format_window(window, date(2025, 7, 25)) == "sleep: jul 24 23:00 - jul 25 08:00"

    def test_labels(self):
        start, end = datetime(2025, 7, 25, 8, 30), datetime(2025, 7, 25, 17, 30)
        assert format_window(TimeWindow("seek_light", start, end), start.date()).startswith(
            "see bright light: "
        )
        assert format_window(TimeWindow("no_caffeine", start, end), start.date()).startswith(
            "no caffeine: "
        )


class TestFormatDay:
    def test_suppressed_windows_are_skipped(self):
        day = date(2025, 7, 27)
        sleep = TimeWindow("sleep", datetime(2025, 7, 28, 1, 0), datetime(2025, 7, 28, 10, 0))
        avoid = TimeWindow(
            "avoid_light", datetime(2025, 7, 28, 0, 0), datetime(2025, 7, 28, 1, 0), suppressed=True
        )
        plan = DayPlan(date=day, day_type="off", sleep_window=sleep, avoid_light_window=avoid)

        assert format_day(plan) == "sleep: 01:00 - 10:00 jul 28"

    def test_blocks_separated_by_blank_line(self):
        first = _plan(
            date(2025, 7, 1),
            sleep=TimeWindow("sleep", datetime(2025, 7, 1, 23, 0), datetime(2025, 7, 2, 8, 0)),
        )
        second = _plan(
            date(2025, 7, 2),
            sleep=TimeWindow("sleep", datetime(2025, 7, 2, 23, 0), datetime(2025, 7, 3, 8, 0)),
        )

        assert format_schedule([first, second]) == (
            "sleep: 23:00 - 08:00 jul 2\n\nsleep: 23:00 - 08:00 jul 3"
        )

    def test_empty_schedule(self):
        assert format_schedule([]) == ""


class TestDictOutput:
    def test_plan_to_dict(self, night_request):
        response = generate_schedule(night_request)
        night = next(p for p in response.days if p.day_type == "night")

        data = plan_to_dict(night)

        assert data["date"] == "2025-07-29"
        assert data["day_type"] == "night"
        sleep = data["items"][-1]
        assert sleep == {
            "type": "sleep",
            "start": "07:30",
            "end": "16:30",
            "start_date": "2025-07-30",
            "end_date": "2025-07-30",
            "suppressed": False,
        }

    def test_schedule_to_dict_is_json_serializable(self, night_request):
        data = schedule_to_dict(generate_schedule(night_request))

        encoded = json.dumps(data)
        assert "schedule_text" in encoded
        assert data["start_date"] == "2025-07-25"
        assert data["end_date"] == "2025-07-30"
        assert data["night_shift_count"] == 1
        assert len(data["days"]) == 6

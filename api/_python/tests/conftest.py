"""
Pytest fixtures for shift schedule tests.
"""

import pytest
from datetime import date, time

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shiftsleep.types import Preferences, ScheduleRequest, ShiftSpec


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def preferences():
    """Baseline 23:00-08:00 sleeper (9h), caffeine advice on, no get-ready time."""
    return Preferences(
        regular_bedtime=time(23, 0),
        regular_wake_time=time(8, 0),
        chronotype="early bird",
        sex="male",
        age=18,
        caffeine_advice=True,
        melatonin_recommended=True,
    )


@pytest.fixture
def day_shift_week():
    """Three 09:00-17:00 day shifts, Jul 25-27 2025, 30 min travel."""
    return [
        ShiftSpec(date(2025, 7, d), time(9, 0), time(17, 0), 30)
        for d in (25, 26, 27)
    ]


@pytest.fixture
def night_after_day_off(day_shift_week):
    """Day shifts Jul 25-27, Jul 28 off, night shift 23:00-07:00 on Jul 29."""
    return day_shift_week + [ShiftSpec(date(2025, 7, 29), time(23, 0), time(7, 0), 30)]


@pytest.fixture
def night_request(preferences, night_after_day_off):
    """ScheduleRequest for the Jul 25-29 roster."""
    return ScheduleRequest(preferences=preferences, shifts=tuple(night_after_day_off))


@pytest.fixture
def request_data():
    """Raw request dict, as posted by the app."""
    return {
        "preferences": {
            "caffeine_advice": "on",
            "use_melatonin": "yes",
            "chronotype": "early bird",
            "sex": "male",
            "age": 18,
            "sleep_pattern": "23:00-8:00",
            "get_ready_time": 30,
        },
        "shifts": [
            {"date": "july 25", "start_time": "9:00", "end_time": "17:00", "travel_time": 30},
            {"date": "july 26", "start_time": "9:00", "end_time": "17:00", "travel_time": 30},
            {"date": "july 27", "start_time": "9:00", "end_time": "17:00", "travel_time": 30},
            {"date": "july 29", "start_time": "23:00", "end_time": "7:00", "travel_time": 30},
        ],
    }

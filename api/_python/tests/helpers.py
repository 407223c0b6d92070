"""
Test helper functions for shift schedule validation.

These functions can be imported by test modules for schedule analysis.
"""

import sys
from datetime import date, time
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shiftsleep.time_math import format_time
from shiftsleep.types import DayPlan, ScheduleResponse, ShiftSpec, TimeWindow


def shift(day: date, start: str, end: str, travel: int = 30) -> ShiftSpec:
    """Build a ShiftSpec from "HH:MM" strings."""
    start_h, start_m = (int(p) for p in start.split(":"))
    end_h, end_m = (int(p) for p in end.split(":"))
    return ShiftSpec(day, time(start_h, start_m), time(end_h, end_m), travel)


def get_plan(response: ScheduleResponse, day: date) -> DayPlan:
    """
    Get the plan for a specific date.

    Raises:
        AssertionError: if the date is not in the schedule
    """
    for plan in response.days:
        if plan.date == day:
            return plan
    raise AssertionError(f"No plan for {day}")


def clock(window: TimeWindow) -> tuple[str, str]:
    """Return a window as ("HH:MM", "HH:MM")."""
    return format_time(window.start.time()), format_time(window.end.time())


def windows_of_kind(response: ScheduleResponse, kind: str) -> list[TimeWindow]:
    """All windows of a kind across the whole schedule."""
    return [w for plan in response.days for w in plan.items if w.kind == kind]

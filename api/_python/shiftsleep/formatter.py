"""
Rendering of day plans.

Formatting is the last, side-effect-free pass. It does not reorder windows,
merge days, or check the arithmetic; the engine is trusted.
"""

from datetime import date
from typing import Any, Iterable

from .time_math import format_short_date, format_time
from .types import DayPlan, ScheduleResponse, TimeWindow

WINDOW_LABELS = {
    "sleep": "sleep",
    "prior_sleep": "sleep",
    "caffeine": "caffeine",
    "no_caffeine": "no caffeine",
    "seek_light": "see bright light",
    "avoid_light": "avoid bright light",
    "nap": "nap",
    "get_ready": "get ready",
    "to_work": "to work",
    "work": "work",
    "from_work": "from work",
}


def format_window(window: TimeWindow, plan_date: date) -> str:
    """
    Format one window as "<label>: HH:MM - HH:MM".

    The short date of the window end is appended when the window runs into a
    later calendar date than the day it is listed under. The previous night's
    sleep carries both dates: "sleep: jul 24 23:00 - jul 25 08:00".
    """
    if window.kind == "prior_sleep":
        return (
            f"{WINDOW_LABELS[window.kind]}: "
            f"{format_short_date(window.start.date())} {format_time(window.start.time())} - "
            f"{format_short_date(window.end.date())} {format_time(window.end.time())}"
        )
    line = (
        f"{WINDOW_LABELS[window.kind]}: "
        f"{format_time(window.start.time())} - {format_time(window.end.time())}"
    )
    if window.ends_after(plan_date):
        line += f" {format_short_date(window.end.date())}"
    return line


def format_day(plan: DayPlan) -> str:
    """Format a day as newline-separated window lines, skipping suppressed windows."""
    return "\n".join(
        format_window(window, plan.date) for window in plan.items if not window.suppressed
    )


def format_schedule(plans: Iterable[DayPlan]) -> str:
    """Format all days as blocks separated by a blank line."""
    blocks = [format_day(plan) for plan in plans]
    return "\n\n".join(block for block in blocks if block)


def window_to_dict(window: TimeWindow) -> dict[str, Any]:
    """Convert a window to a JSON-ready dict."""
    return {
        "type": window.kind,
        "start": format_time(window.start.time()),
        "end": format_time(window.end.time()),
        "start_date": window.start.date().isoformat(),
        "end_date": window.end.date().isoformat(),
        "suppressed": window.suppressed,
    }


def plan_to_dict(plan: DayPlan) -> dict[str, Any]:
    """Convert a day plan to a JSON-ready dict."""
    return {
        "date": plan.date.isoformat(),
        "day_type": plan.day_type,
        "is_recovery": plan.is_recovery,
        "days_until_next_night_shift": plan.days_until_next_night_shift,
        "items": [window_to_dict(w) for w in plan.items],
    }


def schedule_to_dict(response: ScheduleResponse) -> dict[str, Any]:
    """Convert a full response to the JSON body used by the CLI and API."""
    return {
        "schedule_text": format_schedule(response.days),
        "night_shift_count": response.night_shift_count,
        "start_date": response.start_date.isoformat() if response.start_date else None,
        "end_date": response.end_date.isoformat() if response.end_date else None,
        "days": [plan_to_dict(plan) for plan in response.days],
    }

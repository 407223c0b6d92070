"""
Shiftsleep Schedule Generation

Computes day-by-day sleep, light-exposure and caffeine timing for workers
whose rosters mix day shifts, night shifts and days off.

Main scheduler: ShiftScheduleGenerator (classify days, then plan each day)
"""

from .errors import (
    EmptyRosterError,
    InvalidRangeError,
    MalformedDateError,
    MalformedShiftError,
    MalformedTimeError,
    ScheduleInputError,
)
from .formatter import format_schedule, schedule_to_dict
from .policy import DEFAULT_POLICY, SchedulePolicy
from .roster import parse_schedule_request
from .scheduler import (
    ShiftScheduleGenerator,
    generate_schedule,
    generate_schedule_dict,
    generate_schedule_text,
)
from .types import (
    DayClassification,
    DayPlan,
    DayType,
    Preferences,
    ScheduleRequest,
    ScheduleResponse,
    ShiftSpec,
    TimeWindow,
)

__all__ = [
    # Types
    "ShiftSpec",
    "Preferences",
    "DayClassification",
    "DayType",
    "TimeWindow",
    "DayPlan",
    "ScheduleRequest",
    "ScheduleResponse",
    # Policy
    "SchedulePolicy",
    "DEFAULT_POLICY",
    # Scheduler
    "ShiftScheduleGenerator",
    "generate_schedule",
    "generate_schedule_text",
    "generate_schedule_dict",
    "parse_schedule_request",
    "format_schedule",
    "schedule_to_dict",
    # Errors
    "ScheduleInputError",
    "MalformedTimeError",
    "MalformedDateError",
    "MalformedShiftError",
    "EmptyRosterError",
    "InvalidRangeError",
]

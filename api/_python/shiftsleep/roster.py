"""
Request parsing for schedule generation.

Converts the JSON-shaped request used by the CLI and the HTTP handler into
a validated ScheduleRequest. Any malformed record fails the whole request:
silently dropping a shift would make that day look like a day off.
"""

from typing import Any

from .errors import (
    EmptyRosterError,
    InvalidRangeError,
    MalformedShiftError,
    MalformedTimeError,
)
from .time_math import (
    get_current_datetime_in_tz,
    parse_shift_date,
    parse_sleep_pattern,
    parse_time,
)
from .types import Preferences, ScheduleRequest, ShiftSpec

DEFAULT_TIMEZONE = "UTC"

TRUE_WORDS = {"on", "yes", "true"}
FALSE_WORDS = {"off", "no", "false"}


def _require(record: dict, field: str, context: str) -> Any:
    if field not in record or record[field] is None:
        raise MalformedShiftError(f"Missing required field: {context}.{field}")
    return record[field]


def _parse_flag(value: Any, field: str) -> bool:
    """Accept a bool or an "on"/"off", "yes"/"no" string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
    raise MalformedShiftError(f"Invalid value for {field}: {value!r}")


def _parse_minutes(value: Any, field: str) -> int:
    """Non-negative whole minutes. Bools are rejected even though they are ints."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedShiftError(f"{field} must be a non-negative integer, got {value!r}")
    return value


def parse_preferences(data: dict) -> Preferences:
    """
    Parse the preference record.

    Args:
        data: Dict with sleep_pattern ("23:00-8:00") and optional chronotype,
            caffeine_advice, use_melatonin, sex, age, get_ready_time

    Returns:
        Preferences
    """
    if not isinstance(data, dict):
        raise MalformedShiftError("preferences must be an object")

    bedtime, wake_time = parse_sleep_pattern(_require(data, "sleep_pattern", "preferences"))
    if bedtime == wake_time:
        raise MalformedTimeError(f"Sleep pattern has zero length: {data['sleep_pattern']!r}")

    age = data.get("age")
    if age is not None:
        age = _parse_minutes(age, "preferences.age")

    return Preferences(
        regular_bedtime=bedtime,
        regular_wake_time=wake_time,
        chronotype=data.get("chronotype", "intermediate"),
        sex=data.get("sex"),
        age=age,
        caffeine_advice=_parse_flag(data.get("caffeine_advice", True), "caffeine_advice"),
        melatonin_recommended=_parse_flag(data.get("use_melatonin", False), "use_melatonin"),
        get_ready_minutes=_parse_minutes(data.get("get_ready_time", 0), "get_ready_time"),
    )


def parse_shift(data: dict, reference_year: int) -> ShiftSpec:
    """Parse one roster entry."""
    if not isinstance(data, dict):
        raise MalformedShiftError(f"Shift must be an object, got {data!r}")

    shift_date = parse_shift_date(_require(data, "date", "shift"), reference_year)
    start_time = parse_time(_require(data, "start_time", "shift"))
    end_time = parse_time(_require(data, "end_time", "shift"))
    if start_time == end_time:
        raise MalformedShiftError(f"Shift on {shift_date} starts and ends at the same time")

    return ShiftSpec(
        date=shift_date,
        start_time=start_time,
        end_time=end_time,
        travel_minutes=_parse_minutes(data.get("travel_time", 0), "travel_time"),
    )


def parse_schedule_request(data: dict, reference_year: int | None = None) -> ScheduleRequest:
    """
    Parse and validate a full request.

    Args:
        data: Request dict with "preferences", "shifts", and optional
            "timezone", "start_date", "end_date"
        reference_year: Year for dates written without one (defaults to the
            current year in the request timezone)

    Returns:
        ScheduleRequest ready for the generator

    Raises:
        ScheduleInputError: for any malformed field
    """
    if not isinstance(data, dict):
        raise MalformedShiftError("Request must be an object")

    preferences = parse_preferences(_require(data, "preferences", "request"))

    shifts_data = _require(data, "shifts", "request")
    if not isinstance(shifts_data, list):
        raise MalformedShiftError("shifts must be a list")
    if not shifts_data:
        raise EmptyRosterError("Roster contains no shifts")

    if reference_year is None:
        tz_name = data.get("timezone") or DEFAULT_TIMEZONE
        reference_year = get_current_datetime_in_tz(tz_name).year

    shifts = tuple(parse_shift(item, reference_year) for item in shifts_data)

    start_date = end_date = None
    if data.get("start_date") is not None:
        start_date = parse_shift_date(data["start_date"], reference_year)
    if data.get("end_date") is not None:
        end_date = parse_shift_date(data["end_date"], reference_year)
    if start_date is not None and end_date is not None and start_date > end_date:
        raise InvalidRangeError(f"start_date {start_date} is after end_date {end_date}")

    return ScheduleRequest(
        preferences=preferences,
        shifts=shifts,
        start_date=start_date,
        end_date=end_date,
    )

"""
Clock-time arithmetic for shift schedules.

All clock times are minute-precision `datetime.time` values. Arithmetic is
modular over a 24-hour day, so adding or subtracting minutes always wraps
back into [00:00, 24:00).
"""

import re
from datetime import date, datetime, time

import pytz

from .errors import MalformedDateError, MalformedTimeError

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")

MONTH_ABBREVIATIONS = [
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
]

MONTH_NAMES = {
    "january": 1, "february": 2, "march": 3, "april": 4, "may": 5, "june": 6,
    "july": 7, "august": 8, "september": 9, "october": 10, "november": 11,
    "december": 12,
}
MONTH_NAMES.update({abbr: i + 1 for i, abbr in enumerate(MONTH_ABBREVIATIONS)})
MONTH_NAMES["sept"] = 9


def parse_time(time_str: str) -> time:
    """
    Parse an "H:MM" or "HH:MM" string to a time object.

    Raises:
        MalformedTimeError: if the string is not a valid 24-hour clock time
    """
    if not isinstance(time_str, str):
        raise MalformedTimeError(f"Invalid time: {time_str!r}")

    match = _TIME_PATTERN.match(time_str.strip())
    if not match:
        raise MalformedTimeError(f"Invalid time format: {time_str!r}")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise MalformedTimeError(f"Time out of range: {time_str!r}")
    return time(hour, minute)


def time_to_minutes(t: time) -> int:
    """Convert time to minutes since midnight."""
    return t.hour * 60 + t.minute


def minutes_to_time(minutes: int) -> time:
    """Convert minutes since midnight to time (handles wrap-around)."""
    minutes = minutes % MINUTES_PER_DAY
    return time(minutes // 60, minutes % 60)


def format_time(t: time) -> str:
    """Format time as zero-padded "HH:MM"."""
    return f"{t.hour:02d}:{t.minute:02d}"


def add_minutes(t: time, minutes: int) -> time:
    """Add minutes to a clock time, wrapping past midnight."""
    return minutes_to_time(time_to_minutes(t) + minutes)


def subtract_minutes(t: time, minutes: int) -> time:
    """Subtract minutes from a clock time, wrapping before midnight."""
    return minutes_to_time(time_to_minutes(t) - minutes)


def minutes_between(start: time, end: time) -> int:
    """
    Minutes from start to end, assuming end follows start.

    If end is numerically earlier it is taken to fall on the following day,
    so the result is always in [0, 1440).
    """
    return (time_to_minutes(end) - time_to_minutes(start)) % MINUTES_PER_DAY


def format_short_date(d: date) -> str:
    """Format a date as "jul 29"."""
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day}"


def parse_sleep_pattern(pattern: str) -> tuple[time, time]:
    """
    Parse a "HH:MM-HH:MM" sleep pattern into (bedtime, wake_time).

    Args:
        pattern: Habitual sleep on days off, e.g. "23:00-8:00"

    Returns:
        Tuple of (bedtime, wake_time)
    """
    if not isinstance(pattern, str) or pattern.count("-") != 1:
        raise MalformedTimeError(f"Invalid sleep pattern: {pattern!r}")

    bed_str, wake_str = pattern.split("-")
    return parse_time(bed_str), parse_time(wake_str)


def parse_shift_date(value: object, reference_year: int) -> date:
    """
    Resolve a shift date.

    Accepts a date object, an ISO "YYYY-MM-DD" string, or a year-less
    "july 25" / "jul 25" string which is placed in reference_year.

    Raises:
        MalformedDateError: if the value cannot be resolved to a calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise MalformedDateError(f"Invalid date: {value!r}")

    text = value.strip().lower()

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    parts = text.replace(",", " ").split()
    if len(parts) != 2 or parts[0] not in MONTH_NAMES or not parts[1].isdigit():
        raise MalformedDateError(f"Invalid date format: {value!r}")

    try:
        return date(reference_year, MONTH_NAMES[parts[0]], int(parts[1]))
    except ValueError as e:
        raise MalformedDateError(f"Invalid date: {value!r} ({e})") from e


def get_current_datetime_in_tz(tz_name: str) -> datetime:
    """
    Get current datetime in the specified timezone.

    Used to pick the year for roster dates written without one, so a roster
    entered late on Dec 31 in Auckland still lands in the user's year.

    Args:
        tz_name: IANA timezone name (e.g., "America/Los_Angeles")

    Returns:
        Current datetime in the specified timezone (naive, for local comparisons)
    """
    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError as e:
        raise MalformedDateError(f"Unknown timezone: {tz_name!r}") from e

    now_utc = datetime.now(pytz.UTC)
    now_local = now_utc.astimezone(tz)
    return now_local.replace(tzinfo=None)

"""
Input-contract errors for schedule generation.

Every error here means the caller handed in a bad roster or preference
record. They are raised before any day is planned, so a failed run never
produces a partial schedule.
"""


class ScheduleInputError(ValueError):
    """Base class for invalid schedule input."""


class MalformedTimeError(ScheduleInputError):
    """A clock time or sleep pattern could not be parsed."""


class MalformedDateError(ScheduleInputError):
    """A shift date (or the timezone used to resolve it) is invalid."""


class MalformedShiftError(ScheduleInputError):
    """A shift or preference record is missing a field or has a bad value."""


class EmptyRosterError(ScheduleInputError):
    """The roster contains no shifts."""


class InvalidRangeError(ScheduleInputError):
    """The display window ends before it starts."""

"""
Data structures for shift-work schedule generation.

Inputs (ShiftSpec, Preferences) are immutable. DayClassification is derived
once per run, and each DayPlan is built once and never mutated.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Literal

from .time_math import minutes_between

DayType = Literal[
    "day",  # Worked shift that is not a night shift
    "night",  # Worked night shift (see DayClassifier for the predicate)
    "off",  # No shift
]

WindowKind = Literal[
    "sleep",
    "prior_sleep",  # Night before the first displayed day
    "caffeine",
    "no_caffeine",
    "seek_light",
    "avoid_light",
    "nap",
    "get_ready",
    "to_work",
    "work",
    "from_work",
]


@dataclass(frozen=True)
class ShiftSpec:
    """Single worked shift."""

    date: date
    start_time: time
    end_time: time
    travel_minutes: int  # One-way commute

    @property
    def spans_midnight(self) -> bool:
        """True if the shift ends on the following calendar day."""
        return self.end_time < self.start_time

    @property
    def duration_minutes(self) -> int:
        return minutes_between(self.start_time, self.end_time)


@dataclass(frozen=True)
class Preferences:
    """Personal parameters from the preference record."""

    regular_bedtime: time  # Habitual bedtime on days off
    regular_wake_time: time  # Habitual wake time on days off
    chronotype: str = "intermediate"
    sex: str | None = None
    age: int | None = None
    caffeine_advice: bool = True  # False = emit no caffeine windows at all
    melatonin_recommended: bool = False
    get_ready_minutes: int = 0

    @property
    def regular_sleep_minutes(self) -> int:
        """Baseline sleep duration, reused after night shifts."""
        return minutes_between(self.regular_bedtime, self.regular_wake_time)


@dataclass(frozen=True)
class DayClassification:
    """One calendar day of the roster after classification."""

    date: date
    shift: ShiftSpec | None
    day_type: DayType
    days_until_next_night_shift: int | None  # None if no later night shift

    @property
    def is_night(self) -> bool:
        return self.day_type == "night"


@dataclass(frozen=True)
class TimeWindow:
    """
    A recommended window anchored to real calendar dates.

    Start and end are naive local datetimes so a window knows whether it
    runs past midnight. A suppressed window was computed but should not be
    shown (see ScheduleEngine for when that happens).
    """

    kind: WindowKind
    start: datetime
    end: datetime
    suppressed: bool = False

    @property
    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)

    def ends_after(self, day: date) -> bool:
        """True if the window ends on a later calendar date than `day`."""
        return self.end.date() > day


@dataclass(frozen=True)
class DayPlan:
    """All recommendations for one displayed calendar day."""

    date: date
    day_type: DayType
    sleep_window: TimeWindow
    is_recovery: bool = False
    days_until_next_night_shift: int | None = None

    prior_sleep_window: TimeWindow | None = None  # First displayed day only
    caffeine_window: TimeWindow | None = None  # During-shift caffeine on night days
    no_caffeine_windows: tuple[TimeWindow, ...] = ()
    seek_light_window: TimeWindow | None = None
    avoid_light_window: TimeWindow | None = None
    nap_window: TimeWindow | None = None
    get_ready_window: TimeWindow | None = None
    work_window: TimeWindow | None = None
    commute_windows: tuple[TimeWindow, ...] = ()  # (to_work, from_work)

    @property
    def items(self) -> list[TimeWindow]:
        """Every window of the day in chronological order (stable on ties)."""
        windows = [
            self.prior_sleep_window,
            self.caffeine_window,
            self.nap_window,
            self.seek_light_window,
            self.get_ready_window,
            *self.commute_windows[:1],
            self.work_window,
            *self.no_caffeine_windows,
            *self.commute_windows[1:],
            self.avoid_light_window,
            self.sleep_window,
        ]
        present = [w for w in windows if w is not None]
        return sorted(present, key=lambda w: w.start)


@dataclass(frozen=True)
class ScheduleRequest:
    """Parsed input: preference record plus roster."""

    preferences: Preferences
    shifts: tuple[ShiftSpec, ...]
    start_date: date | None = None  # Optional explicit display window
    end_date: date | None = None


@dataclass
class ScheduleResponse:
    """Output of a schedule run."""

    days: list[DayPlan] = field(default_factory=list)
    night_shift_count: int = 0

    @property
    def start_date(self) -> date | None:
        return self.days[0].date if self.days else None

    @property
    def end_date(self) -> date | None:
        return self.days[-1].date if self.days else None

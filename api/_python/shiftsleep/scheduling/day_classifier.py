"""
Day classifier for roster-based scheduling.

Turns a roster into one DayClassification per calendar day:
- NIGHT: a shift that wraps past midnight, starts late, or ends early
- DAY: any other shift
- OFF: no shift

The classified range is the display window plus one scaffold day on each
side. The scaffold days are never displayed; they give the first day a
"yesterday" and the last day a "tomorrow". Shifts outside the display
window still count toward days_until_next_night_shift.
"""

import logging
from datetime import date, time, timedelta
from typing import Iterable

from ..errors import EmptyRosterError, InvalidRangeError
from ..policy import DEFAULT_POLICY, SchedulePolicy
from ..types import DayClassification, DayType, ShiftSpec

logger = logging.getLogger(__name__)


def is_night_shift(
    start_time: time, end_time: time, policy: SchedulePolicy = DEFAULT_POLICY
) -> bool:
    """
    Night-shift predicate, on whole hours.

    A shift is a night shift if it crosses midnight (end hour before start
    hour), starts at or after 20:00, or ends at or before 08:00.
    """
    start_hour = start_time.hour
    end_hour = end_time.hour
    return (
        end_hour < start_hour
        or start_hour >= policy.night_start_hour
        or end_hour <= policy.night_end_hour
    )


class DayClassifier:
    """
    Classify every day of a roster.

    Classification is done once, up front. The days-until-next-night lookup
    is precomputed here so the planner never scans ahead.
    """

    def __init__(
        self,
        shifts: Iterable[ShiftSpec],
        start_date: date | None = None,
        end_date: date | None = None,
        policy: SchedulePolicy = DEFAULT_POLICY,
    ):
        """
        Initialize classifier.

        Args:
            shifts: Roster entries, in input order
            start_date: First displayed day (defaults to earliest shift)
            end_date: Last displayed day (defaults to the day after the latest shift)
            policy: Clock constants
        """
        self.shifts = tuple(shifts)
        if not self.shifts:
            raise EmptyRosterError("Roster contains no shifts")

        shift_dates = [s.date for s in self.shifts]
        self.start_date = start_date if start_date is not None else min(shift_dates)
        self.end_date = end_date if end_date is not None else max(shift_dates) + timedelta(days=1)

        if self.start_date > self.end_date:
            raise InvalidRangeError(
                f"Display window is inverted: {self.start_date} > {self.end_date}"
            )

        self.policy = policy

    def classify(self) -> tuple[DayClassification, ...]:
        """
        Classify every day from start_date - 1 through end_date + 1.

        The lookahead is computed over the whole roster, so a night shift
        after end_date still moves the sleep of the displayed days before it.

        Returns:
            Immutable tuple of DayClassification in date order; the first and
            last entries are scaffold days
        """
        shifts_by_date = self._index_shifts()

        first = self.start_date - timedelta(days=1)
        last = self.end_date + timedelta(days=1)
        span_first = min(first, min(shifts_by_date))
        span_last = max(last, max(shifts_by_date))
        total_days = (span_last - span_first).days + 1
        dates = [span_first + timedelta(days=i) for i in range(total_days)]

        day_types: list[DayType] = []
        for d in dates:
            shift = shifts_by_date.get(d)
            if shift is None:
                day_types.append("off")
            elif is_night_shift(shift.start_time, shift.end_time, self.policy):
                day_types.append("night")
            else:
                day_types.append("day")

        # Single backward pass: distance to the nearest strictly later night day
        days_until: list[int | None] = [None] * len(dates)
        next_night: int | None = None
        for i in range(len(dates) - 1, -1, -1):
            if next_night is not None:
                days_until[i] = next_night - i
            if day_types[i] == "night":
                next_night = i

        offset = (first - span_first).days
        shown = range(offset, offset + (last - first).days + 1)
        classifications = tuple(
            DayClassification(
                date=dates[i],
                shift=shifts_by_date.get(dates[i]),
                day_type=day_types[i],
                days_until_next_night_shift=days_until[i],
            )
            for i in shown
        )

        shown_types = [c.day_type for c in classifications]
        logger.debug(
            "Classified %d days (%s to %s): %d day, %d night, %d off",
            len(classifications),
            first,
            last,
            shown_types.count("day"),
            shown_types.count("night"),
            shown_types.count("off"),
        )
        return classifications

    def _index_shifts(self) -> dict[date, ShiftSpec]:
        """Map date -> shift. The first shift listed for a date wins."""
        by_date: dict[date, ShiftSpec] = {}
        for shift in self.shifts:
            if shift.date in by_date:
                logger.warning(
                    "Multiple shifts on %s; keeping the first (%s-%s)",
                    shift.date,
                    by_date[shift.date].start_time,
                    by_date[shift.date].end_time,
                )
                continue
            by_date[shift.date] = shift
        return by_date

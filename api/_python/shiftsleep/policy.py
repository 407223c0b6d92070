"""
Tunable clock constants for schedule generation.

These values are practical policy, not outputs of a circadian model. They
are kept together here so the engine's control flow never hard-codes a
clock time.

Transition days delay sleep in two steps ahead of a night shift:
- 2 days out: sleep 01:00-10:00, caffeine until 19:00
- 1 day out: sleep 03:00-12:00, caffeine until 18:00

Night-shift days get a 3h nap ending 1h before the shift, a caffeine-free
stretch before the nap, and 3.5h of caffeine from the end of the nap.
"""

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class SchedulePolicy:
    """Clock constants and durations used by the classifier and engine."""

    # Night-shift predicate (hours)
    night_start_hour: int = 20  # Starts at or after this hour
    night_end_hour: int = 8  # Ends at or before this hour

    # Pre-night transition sleep
    two_days_out_bedtime: time = time(1, 0)
    two_days_out_wake: time = time(10, 0)
    one_day_out_bedtime: time = time(3, 0)
    one_day_out_wake: time = time(12, 0)

    # Caffeine cutoffs
    caffeine_end_two_days_out: time = time(19, 0)
    caffeine_end_one_day_out: time = time(18, 0)
    caffeine_end_day_shift: time = time(14, 0)
    caffeine_cutoff_before_sleep_minutes: int = 8 * 60
    off_day_before_night_caffeine_start: time = time(10, 0)
    recovery_no_caffeine_before_wake_minutes: int = 60

    # Light exposure
    seek_light_after_wake_minutes: int = 30
    seek_light_cutoff: time = time(17, 30)
    avoid_light_before_bed_minutes: int = 60
    night_light_margin_minutes: int = 30

    # Night-shift nap and caffeine
    nap_minutes: int = 180
    nap_end_before_shift_minutes: int = 60
    pre_nap_no_caffeine_start: time = time(12, 0)
    pre_nap_caffeine_buffer_minutes: int = 60
    # (shift start hour, cutoff) pairs
    pre_nap_cutoffs: tuple[tuple[int, time], ...] = (
        (23, time(21, 0)),
        (22, time(20, 0)),
    )
    shift_caffeine_minutes: int = 210

    def pre_nap_cutoff(self, start_hour: int) -> time | None:
        """Fixed pre-nap caffeine cutoff for a shift starting at `start_hour`, if any."""
        return dict(self.pre_nap_cutoffs).get(start_hour)


DEFAULT_POLICY = SchedulePolicy()

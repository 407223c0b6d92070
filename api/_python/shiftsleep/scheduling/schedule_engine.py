"""
Schedule engine for roster-based planning.

Plans each displayed day from the precomputed classifications:
- Sleep window (night shift > recovery > 2 days out > 1 day out > regular)
- Caffeine and no-caffeine windows
- Light seeking / avoidance
- Night-shift nap, work and commute windows

The engine is a pure function of (preferences, classifications, policy).
Every window is placed on real calendar dates so midnight crossings are
explicit rather than inferred at display time.
"""

import logging
from dataclasses import replace
from datetime import date, datetime, time, timedelta
from typing import Sequence

from ..policy import DEFAULT_POLICY, SchedulePolicy
from ..time_math import minutes_between, subtract_minutes, time_to_minutes
from ..types import DayClassification, DayPlan, Preferences, TimeWindow, WindowKind

logger = logging.getLogger(__name__)

MIDNIGHT = time(0, 0)


def _window(
    kind: WindowKind, start: datetime, end: datetime, suppressed: bool = False
) -> TimeWindow:
    return TimeWindow(kind=kind, start=start, end=end, suppressed=suppressed)


def _clock_window(
    kind: WindowKind, day: date, start: time, end: time, suppressed: bool = False
) -> TimeWindow:
    """Window starting on `day` at `start`, ending at the next occurrence of `end`."""
    start_dt = datetime.combine(day, start)
    end_dt = start_dt + timedelta(minutes=minutes_between(start, end))
    return _window(kind, start_dt, end_dt, suppressed)


class ScheduleEngine:
    """
    Turn classified days into per-day plans.

    The first and last classifications are scaffold days: they are read as
    yesterday/tomorrow context but never planned.
    """

    def __init__(self, preferences: Preferences, policy: SchedulePolicy = DEFAULT_POLICY):
        self.preferences = preferences
        self.policy = policy

    def plan_days(self, classifications: Sequence[DayClassification]) -> tuple[DayPlan, ...]:
        """
        Plan every displayed day.

        Args:
            classifications: Output of DayClassifier.classify()

        Returns:
            One DayPlan per day, excluding the two scaffold days
        """
        plans = tuple(
            self.plan_day(classifications, index)
            for index in range(1, len(classifications) - 1)
        )
        logger.debug(
            "Planned %d days (%d recovery)",
            len(plans),
            sum(1 for p in plans if p.is_recovery),
        )
        return plans

    def plan_day(self, classifications: Sequence[DayClassification], index: int) -> DayPlan:
        """Plan the day at `index`, using the previous day as lookbehind."""
        today = classifications[index]
        yesterday = classifications[index - 1] if index > 0 else None

        prior_sleep = None
        if index == 1:
            prior_sleep = replace(
                self.sleep_window(classifications[0], None), kind="prior_sleep"
            )

        if today.is_night:
            return self._plan_night_day(today, prior_sleep)
        return self._plan_regular_day(today, yesterday, prior_sleep)

    # ------------------------------------------------------------------
    # Sleep
    # ------------------------------------------------------------------

    def sleep_times(
        self, today: DayClassification, yesterday: DayClassification | None
    ) -> tuple[time, time]:
        """
        Bedtime and wake time for the night after `today`, by precedence.

        1. Night shift: shift end + travel, for the regular sleep duration
        2. Recovery (yesterday was a night shift): regular times
        3. Two days before a night shift: first delay
        4. One day before a night shift: second delay
        5. Regular times
        """
        prefs = self.preferences
        policy = self.policy

        if today.is_night:
            shift = today.shift
            bedtime = (
                datetime.combine(today.date, shift.end_time)
                + timedelta(minutes=shift.travel_minutes)
            ).time()
            wake = (
                datetime.combine(today.date, bedtime)
                + timedelta(minutes=prefs.regular_sleep_minutes)
            ).time()
            return bedtime, wake

        if yesterday is not None and yesterday.is_night:
            return prefs.regular_bedtime, prefs.regular_wake_time

        if today.days_until_next_night_shift == 2:
            return policy.two_days_out_bedtime, policy.two_days_out_wake
        if today.days_until_next_night_shift == 1:
            return policy.one_day_out_bedtime, policy.one_day_out_wake

        return prefs.regular_bedtime, prefs.regular_wake_time

    def sleep_window(
        self, today: DayClassification, yesterday: DayClassification | None
    ) -> TimeWindow:
        """Sleep window placed on calendar dates."""
        if today.is_night:
            bedtime_dt = self._shift_end(today) + timedelta(minutes=today.shift.travel_minutes)
            wake_dt = bedtime_dt + timedelta(minutes=self.preferences.regular_sleep_minutes)
            return _window("sleep", bedtime_dt, wake_dt)

        bedtime, wake = self.sleep_times(today, yesterday)
        # Bedtime before the wake time on the clock (01:00 vs 10:00) is already tomorrow
        if time_to_minutes(bedtime) > time_to_minutes(wake):
            start_day = today.date
        else:
            start_day = today.date + timedelta(days=1)
        return _clock_window("sleep", start_day, bedtime, wake)

    def activity_wake_time(
        self, today: DayClassification, yesterday: DayClassification | None
    ) -> time:
        """
        Wake time the day's activities are keyed off.

        Two days before a night shift, a day-shift worker still gets up at the
        regular time; only that night's bedtime moves.
        """
        if today.day_type == "day" and today.days_until_next_night_shift == 2:
            return self.preferences.regular_wake_time
        return self.sleep_times(today, yesterday)[1]

    # ------------------------------------------------------------------
    # Day shifts and days off
    # ------------------------------------------------------------------

    def _plan_regular_day(
        self,
        today: DayClassification,
        yesterday: DayClassification | None,
        prior_sleep: TimeWindow | None,
    ) -> DayPlan:
        is_recovery = yesterday is not None and yesterday.is_night
        sleep = self.sleep_window(today, yesterday)
        wake = self.activity_wake_time(today, yesterday)

        caffeine = None
        no_caffeine: tuple[TimeWindow, ...] = ()
        if self.preferences.caffeine_advice:
            if is_recovery:
                no_caffeine = self._recovery_no_caffeine(yesterday, sleep)
            else:
                caffeine = self._caffeine_window(today, wake, sleep)
                if not caffeine.suppressed and caffeine.end < sleep.start:
                    no_caffeine = (_window("no_caffeine", caffeine.end, sleep.start),)

        # After a night shift the day starts when the post-shift sleep ends
        light_wake = self.sleep_window(yesterday, None).end.time() if is_recovery else wake
        seek_light, avoid_light = self._daytime_light(today.date, light_wake, sleep)
        get_ready, commute, work = self._work_windows(today)

        return DayPlan(
            date=today.date,
            day_type=today.day_type,
            sleep_window=sleep,
            is_recovery=is_recovery,
            days_until_next_night_shift=today.days_until_next_night_shift,
            prior_sleep_window=prior_sleep,
            caffeine_window=caffeine,
            no_caffeine_windows=no_caffeine,
            seek_light_window=seek_light,
            avoid_light_window=avoid_light,
            get_ready_window=get_ready,
            work_window=work,
            commute_windows=commute,
        )

    def _caffeine_window(
        self, today: DayClassification, wake: time, sleep: TimeWindow
    ) -> TimeWindow:
        policy = self.policy
        days_until = today.days_until_next_night_shift

        if today.day_type == "off" and days_until == 1:
            start = policy.off_day_before_night_caffeine_start
        else:
            start = wake

        if days_until == 2:
            end = policy.caffeine_end_two_days_out
        elif days_until == 1:
            end = policy.caffeine_end_one_day_out
        elif today.day_type == "day":
            end = policy.caffeine_end_day_shift
        else:
            end = subtract_minutes(sleep.start.time(), policy.caffeine_cutoff_before_sleep_minutes)

        # A cutoff at or before the start would wrap into a ~24h window
        suppressed = time_to_minutes(end) <= time_to_minutes(start)
        return _clock_window("caffeine", today.date, start, end, suppressed)

    def _recovery_no_caffeine(
        self, yesterday: DayClassification, sleep: TimeWindow
    ) -> tuple[TimeWindow, ...]:
        """No caffeine from shortly before waking from the post-shift sleep until bedtime."""
        post_shift_sleep = self.sleep_window(yesterday, None)
        start = post_shift_sleep.end - timedelta(
            minutes=self.policy.recovery_no_caffeine_before_wake_minutes
        )
        if start >= sleep.start:
            return ()
        return (_window("no_caffeine", start, sleep.start),)

    def _daytime_light(
        self, day: date, wake: time, sleep: TimeWindow
    ) -> tuple[TimeWindow, TimeWindow]:
        """
        Seek light after waking until the late-afternoon cutoff; avoid it
        in the hour before bed.

        Windows that degenerate are returned flagged as suppressed:
        - seek light starting at or after the cutoff
        - avoid light starting exactly at midnight
        """
        policy = self.policy

        seek_start = datetime.combine(day, wake) + timedelta(
            minutes=policy.seek_light_after_wake_minutes
        )
        seek_end = seek_start + timedelta(
            minutes=minutes_between(seek_start.time(), policy.seek_light_cutoff)
        )
        seek_suppressed = time_to_minutes(seek_start.time()) >= time_to_minutes(
            policy.seek_light_cutoff
        )
        seek_light = _window("seek_light", seek_start, seek_end, seek_suppressed)

        avoid_start = sleep.start - timedelta(minutes=policy.avoid_light_before_bed_minutes)
        avoid_light = _window(
            "avoid_light", avoid_start, sleep.start, avoid_start.time() == MIDNIGHT
        )
        return seek_light, avoid_light

    # ------------------------------------------------------------------
    # Night shifts
    # ------------------------------------------------------------------

    def _plan_night_day(
        self, today: DayClassification, prior_sleep: TimeWindow | None
    ) -> DayPlan:
        policy = self.policy
        shift = today.shift
        shift_start = self._shift_start(today)
        sleep = self.sleep_window(today, None)

        nap_end = shift_start - timedelta(minutes=policy.nap_end_before_shift_minutes)
        nap_start = nap_end - timedelta(minutes=policy.nap_minutes)
        nap = _window("nap", nap_start, nap_end)

        caffeine = None
        no_caffeine: tuple[TimeWindow, ...] = ()
        if self.preferences.caffeine_advice:
            cutoff = policy.pre_nap_cutoff(shift.start_time.hour)
            if cutoff is None:
                cutoff = (
                    nap_start - timedelta(minutes=policy.pre_nap_caffeine_buffer_minutes)
                ).time()
            # Early night shifts put the cutoff before noon; that window would wrap
            pre_nap_suppressed = time_to_minutes(cutoff) <= time_to_minutes(
                policy.pre_nap_no_caffeine_start
            )
            pre_nap = _clock_window(
                "no_caffeine",
                today.date,
                policy.pre_nap_no_caffeine_start,
                cutoff,
                pre_nap_suppressed,
            )

            caffeine = _window(
                "caffeine",
                nap_end,
                nap_end + timedelta(minutes=policy.shift_caffeine_minutes),
            )
            no_caffeine = (pre_nap,)
            if caffeine.end < sleep.start:
                no_caffeine += (_window("no_caffeine", caffeine.end, sleep.start),)

        margin = timedelta(minutes=policy.night_light_margin_minutes)
        seek_light = _window("seek_light", shift_start - margin, shift_start + margin)

        get_ready, commute, work = self._work_windows(today)

        return DayPlan(
            date=today.date,
            day_type=today.day_type,
            sleep_window=sleep,
            days_until_next_night_shift=today.days_until_next_night_shift,
            prior_sleep_window=prior_sleep,
            caffeine_window=caffeine,
            no_caffeine_windows=no_caffeine,
            seek_light_window=seek_light,
            nap_window=nap,
            get_ready_window=get_ready,
            work_window=work,
            commute_windows=commute,
        )

    # ------------------------------------------------------------------
    # Work and commute
    # ------------------------------------------------------------------

    def _shift_start(self, today: DayClassification) -> datetime:
        return datetime.combine(today.date, today.shift.start_time)

    def _shift_end(self, today: DayClassification) -> datetime:
        shift = today.shift
        return self._shift_start(today) + timedelta(minutes=shift.duration_minutes)

    def _work_windows(
        self, today: DayClassification
    ) -> tuple[TimeWindow | None, tuple[TimeWindow, ...], TimeWindow | None]:
        """
        Get-ready, commute and work windows for a shift day.

        Returns:
            Tuple of (get_ready, (to_work, from_work), work); empty for days off
        """
        shift = today.shift
        if shift is None:
            return None, (), None

        start = self._shift_start(today)
        end = self._shift_end(today)
        travel = timedelta(minutes=shift.travel_minutes)
        work = _window("work", start, end)

        commute: tuple[TimeWindow, ...] = ()
        if shift.travel_minutes > 0:
            commute = (
                _window("to_work", start - travel, start),
                _window("from_work", end, end + travel),
            )

        get_ready = None
        if self.preferences.get_ready_minutes > 0:
            leave = start - travel
            get_ready = _window(
                "get_ready",
                leave - timedelta(minutes=self.preferences.get_ready_minutes),
                leave,
            )

        return get_ready, commute, work

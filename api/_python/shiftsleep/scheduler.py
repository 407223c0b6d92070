"""
Roster-based schedule generation.

Builds a day-by-day sleep, light and caffeine plan for a shift worker.

Architecture:
1. DayClassifier labels every day (day / night / off) and precomputes the
   distance to the next night shift
2. ScheduleEngine plans each displayed day from those labels
3. formatter renders the plans as text or JSON-ready dicts

The two passes never overlap: all days are classified before any day is
planned.
"""

import logging
from typing import Any

from .formatter import format_schedule, schedule_to_dict
from .policy import DEFAULT_POLICY, SchedulePolicy
from .roster import parse_schedule_request
from .scheduling.day_classifier import DayClassifier
from .scheduling.schedule_engine import ScheduleEngine
from .types import ScheduleRequest, ScheduleResponse

logger = logging.getLogger(__name__)


class ShiftScheduleGenerator:
    """
    Generate a schedule for a roster.

    Stateless between calls; the same request always yields the same plans.
    """

    def __init__(self, policy: SchedulePolicy = DEFAULT_POLICY):
        self.policy = policy

    def generate_schedule(self, request: ScheduleRequest) -> ScheduleResponse:
        """
        Generate the per-day plans for a request.

        Args:
            request: Parsed ScheduleRequest

        Returns:
            ScheduleResponse with one DayPlan per displayed day
        """
        classifier = DayClassifier(
            request.shifts,
            start_date=request.start_date,
            end_date=request.end_date,
            policy=self.policy,
        )
        classifications = classifier.classify()

        engine = ScheduleEngine(request.preferences, self.policy)
        plans = engine.plan_days(classifications)

        night_shift_count = sum(1 for plan in plans if plan.day_type == "night")
        logger.debug(
            "Generated schedule %s to %s with %d night shift(s)",
            classifier.start_date,
            classifier.end_date,
            night_shift_count,
        )

        return ScheduleResponse(days=list(plans), night_shift_count=night_shift_count)


def generate_schedule(request: ScheduleRequest) -> ScheduleResponse:
    """Convenience wrapper using the default policy."""
    return ShiftScheduleGenerator().generate_schedule(request)


def generate_schedule_text(data: dict, reference_year: int | None = None) -> str:
    """Parse a request dict and return the formatted schedule text."""
    request = parse_schedule_request(data, reference_year)
    return format_schedule(generate_schedule(request).days)


def generate_schedule_dict(data: dict, reference_year: int | None = None) -> dict[str, Any]:
    """Parse a request dict and return the JSON-ready response body."""
    request = parse_schedule_request(data, reference_year)
    return schedule_to_dict(generate_schedule(request))

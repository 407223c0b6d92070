"""
Roster Scheduling Layer.

Classifies roster days, then plans each day's recommendations.

Modules:
- day_classifier: Classify each calendar day as day shift, night shift or off
- schedule_engine: Plan sleep, caffeine, light, nap and work windows per day
"""

from .day_classifier import DayClassifier, is_night_shift
from .schedule_engine import ScheduleEngine

__all__ = [
    "DayClassifier",
    "ScheduleEngine",
    "is_night_shift",
]

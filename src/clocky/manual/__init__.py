from .advanceable_clock import AdvanceableClock
from .advanceable_time import AdvanceableTime
from .manual_clock import ManualClock

__all__ = [
    "AdvanceableClock",
    "AdvanceableTime",
    "ManualClock",
]

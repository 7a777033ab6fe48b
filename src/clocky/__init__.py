"""
clocky — controllable, deterministic clocks for testing time-dependent code.

Public API re-exported from one place:

    from clocky import AdvanceableClock, AdvanceableTime, ManualClock
"""

from clocky.manual import AdvanceableClock, AdvanceableTime, ManualClock
from clocky.platform.errors.clocky_error import (
    ClockyError,
    InvalidArgumentError,
    NegativeDurationError,
    NullArgumentError,
)
from clocky.platform.time.system_clock import SystemClock
from clocky.ports import Clock, InstantSource, local_now
from clocky.shared_kernel.primitives import EPOCH, SYSTEM_DEFAULT_ZONE, system_default_zone

__all__ = [
    "EPOCH",
    "SYSTEM_DEFAULT_ZONE",
    "AdvanceableClock",
    "AdvanceableTime",
    "Clock",
    "ClockyError",
    "InstantSource",
    "InvalidArgumentError",
    "ManualClock",
    "NegativeDurationError",
    "NullArgumentError",
    "SystemClock",
    "local_now",
    "system_default_zone",
]

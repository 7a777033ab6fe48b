"""
Shared Kernel primitives.

Validation entry points for the three host types every clock consumes
(instant, duration, zone), re-exported so components import them from one place:

    from clocky.shared_kernel.primitives import require_instant, resolve_zone
"""

from .duration import require_duration, require_non_negative_duration
from .instant import EPOCH, epoch_millis, require_instant
from .zone import SYSTEM_DEFAULT_ZONE, resolve_zone, system_default_zone

__all__ = [
    "EPOCH",
    "SYSTEM_DEFAULT_ZONE",
    "epoch_millis",
    "require_duration",
    "require_instant",
    "require_non_negative_duration",
    "resolve_zone",
    "system_default_zone",
]

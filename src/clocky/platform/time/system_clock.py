from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo

from clocky.shared_kernel.primitives import SYSTEM_DEFAULT_ZONE, epoch_millis, resolve_zone


@dataclass(frozen=True, slots=True)
class SystemClock:
    """
    SystemClock — platform Clock implementation: "now" from the system wall clock.

    Production counterpart of the controlled clocks; returns
    `datetime.now(timezone.utc)` and carries a zone for local date-time conversion.

    Related:
      - src/clocky/ports/clock.py
      - src/clocky/manual/advanceable_clock.py
    """

    zone_id: tzinfo = field(default=SYSTEM_DEFAULT_ZONE, hash=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "zone_id", resolve_zone(self.zone_id, argument="zone_id"))

    @classmethod
    def utc(cls) -> SystemClock:
        return cls(timezone.utc)

    def now(self) -> datetime:
        """
        Return current timezone-aware UTC datetime.

        Args:
            None.
        Returns:
            datetime: Current UTC datetime.
        Assumptions:
            System clock is reasonably synchronized; it may step backward.
        Raises:
            None.
        Side Effects:
            Reads system wall clock.
        """
        return datetime.now(timezone.utc)

    def now_millis(self) -> int:
        return epoch_millis(self.now())

    def zone(self) -> tzinfo:
        return self.zone_id

    def with_zone(self, zone_id: tzinfo) -> SystemClock:
        if zone_id is not None and zone_id == self.zone_id:
            return self
        return SystemClock(zone_id)

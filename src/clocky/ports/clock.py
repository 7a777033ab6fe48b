from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Callable, Protocol, runtime_checkable

InstantSource = Callable[[], datetime]


@runtime_checkable
class Clock(Protocol):
    """
    Clock — port providing "now" plus the zone consumers use to derive local date-time.

    Related:
      - src/clocky/manual/advanceable_clock.py
      - src/clocky/manual/manual_clock.py
      - src/clocky/platform/time/system_clock.py
    """

    def now(self) -> datetime:
        """
        Return current instant.

        Args:
            None.
        Returns:
            datetime: Timezone-aware instant.
        Assumptions:
            Controlled implementations never move backward.
        Raises:
            None.
        Side Effects:
            None.
        """
        ...

    def now_millis(self) -> int:
        """Return `now()` as whole milliseconds since the epoch."""
        ...

    def zone(self) -> tzinfo:
        """Return zone used to convert instants into local date-time."""
        ...

    def with_zone(self, zone_id: tzinfo) -> Clock:
        """
        Return clock reporting the same instants in another zone.

        Args:
            zone_id: Target zone.
        Returns:
            Clock: `self` when zone is unchanged, otherwise a new clock.
        Assumptions:
            Receiver is never mutated.
        Raises:
            NullArgumentError: If `zone_id` is None.
        Side Effects:
            None.
        """
        ...


def local_now(clock: Clock) -> datetime:
    """
    Return clock's current instant expressed in the clock's own zone.

    Args:
        clock: Any Clock implementation.
    Returns:
        datetime: Same instant as `clock.now()` with `tzinfo=clock.zone()`.
    Assumptions:
        `clock.now()` returns timezone-aware datetime.
    Raises:
        ValueError: If clock source yields a naive datetime.
    Side Effects:
        Invokes clock source once.
    """
    instant = clock.now()
    if instant.tzinfo is None:
        raise ValueError("Clock.now() returned naive datetime")
    return instant.astimezone(clock.zone())

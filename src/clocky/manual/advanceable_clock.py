from __future__ import annotations

import logging
from datetime import datetime, timedelta, tzinfo
from threading import Lock

from clocky.shared_kernel.primitives import (
    SYSTEM_DEFAULT_ZONE,
    epoch_millis,
    require_instant,
    require_non_negative_duration,
    resolve_zone,
)

log = logging.getLogger(__name__)


class AdvanceableClock:
    """
    AdvanceableClock — self-contained clock that progresses only when explicitly advanced.

    Owns its instant directly, so progression cannot be shared with other clocks built
    independently; use `AdvanceableTime` with `ManualClock` for that.

    Related:
      - src/clocky/ports/clock.py
      - src/clocky/manual/advanceable_time.py
    """

    __slots__ = ("_instant", "_lock", "_zone_id")

    def __init__(
        self,
        initial_instant: datetime,
        zone_id: tzinfo = SYSTEM_DEFAULT_ZONE,  # type: ignore[assignment]
    ) -> None:
        """
        Initialize clock at `initial_instant` in zone `zone_id`.

        Args:
            initial_instant: Timezone-aware starting point in time.
            zone_id: Zone consumers use for local date-time; host local zone when omitted.
        Returns:
            None.
        Assumptions:
            Zone never changes for this instance, see `with_zone`.
        Raises:
            NullArgumentError: If `initial_instant` or `zone_id` is None.
            InvalidArgumentError: If either argument has the wrong type or is naive.
        Side Effects:
            Reads local zone settings when `zone_id` is omitted.
        """
        self._instant = require_instant(initial_instant, argument="initial_instant")
        self._zone_id = resolve_zone(zone_id, argument="zone_id")
        self._lock = Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._instant

    def now_millis(self) -> int:
        return epoch_millis(self.now())

    def zone(self) -> tzinfo:
        return self._zone_id

    def with_zone(self, zone_id: tzinfo) -> AdvanceableClock:
        """
        Return this clock when `zone_id` is unchanged, else a copy at the current instant.

        The copy is independent: advancing one does not move the other.
        """
        if zone_id is not None and zone_id == self._zone_id:
            return self
        return AdvanceableClock(self.now(), zone_id)

    def advance(self, delta: timedelta) -> None:
        """
        Move clock forward by `delta`.

        Args:
            delta: Non-negative duration; zero is a no-op.
        Returns:
            None.
        Assumptions:
            Concurrent advances are serialized, none is lost.
        Raises:
            NullArgumentError: If `delta` is None.
            InvalidArgumentError: If `delta` is not a timedelta.
            NegativeDurationError: If `delta` is negative.
            OverflowError: If the result leaves the datetime range.
        Side Effects:
            Mutates current instant; state is unchanged when an error is raised.
        """
        checked = require_non_negative_duration(delta, argument="delta")
        with self._lock:
            self._instant = self._instant + checked
            advanced = self._instant
        log.debug("advanceable clock advanced delta=%s instant=%s", checked, advanced.isoformat())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdvanceableClock):
            return NotImplemented
        # Snapshot each side under its own lock only.
        return self.now() == other.now() and self._zone_id == other._zone_id

    def __hash__(self) -> int:
        # Zone is left out: dateutil tzlocal instances are unhashable.
        return hash(self.now())

    def __repr__(self) -> str:
        return f"AdvanceableClock({self.now().isoformat()}, zone_id={self._zone_id!r})"

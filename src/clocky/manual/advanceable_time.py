from __future__ import annotations

import logging
from datetime import datetime, timedelta
from threading import Lock

from clocky.shared_kernel.primitives import require_instant, require_non_negative_duration

log = logging.getLogger(__name__)


class AdvanceableTime:
    """
    AdvanceableTime — thread-safe container of one instant that only moves forward on request.

    Intended to back one or more `ManualClock` views; advancing the container is observed
    by every clock built from it.

    Related:
      - src/clocky/manual/manual_clock.py
      - src/clocky/manual/advanceable_clock.py
    """

    __slots__ = ("_instant", "_lock")

    def __init__(self, initial_instant: datetime) -> None:
        """
        Initialize container with its starting instant.

        Args:
            initial_instant: Timezone-aware starting point in time.
        Returns:
            None.
        Assumptions:
            Instant is stored normalized to UTC.
        Raises:
            NullArgumentError: If `initial_instant` is None.
            InvalidArgumentError: If `initial_instant` is not a timezone-aware datetime.
        Side Effects:
            None.
        """
        self._instant = require_instant(initial_instant, argument="initial_instant")
        self._lock = Lock()

    def read(self) -> datetime:
        """
        Return current instant.

        Args:
            None.
        Returns:
            datetime: Current UTC instant.
        Assumptions:
            Value reflects every advance completed before the call.
        Raises:
            None.
        Side Effects:
            None.
        """
        with self._lock:
            return self._instant

    def advance(self, delta: timedelta) -> None:
        """
        Move current instant forward by `delta`.

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
        log.debug("advanceable time advanced delta=%s instant=%s", checked, advanced.isoformat())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdvanceableTime):
            return NotImplemented
        return self.read() == other.read()

    def __hash__(self) -> int:
        return hash(self.read())

    def __repr__(self) -> str:
        return f"AdvanceableTime({self.read().isoformat()})"

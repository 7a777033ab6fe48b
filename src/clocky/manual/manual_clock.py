from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from clocky.platform.errors.clocky_error import InvalidArgumentError, NullArgumentError
from clocky.ports.clock import InstantSource
from clocky.shared_kernel.primitives import SYSTEM_DEFAULT_ZONE, epoch_millis, resolve_zone

from .advanceable_time import AdvanceableTime


@dataclass(frozen=True, slots=True)
class ManualClock:
    """
    ManualClock — read-through clock over a caller-owned time source.

    The clock never advances by itself and never mutates its source; time moves when
    the backing `AdvanceableTime` is advanced or the source callable starts returning
    a later instant. One source may drive several clocks, e.g. one per zone.

    Equality compares `source` and `zone_id`. Callables compare by identity, so two
    clocks over the same `AdvanceableTime` are equal while clocks over two distinct
    containers are not, even when both hold the same instant.

    Related:
      - src/clocky/manual/advanceable_time.py
      - src/clocky/ports/clock.py
    """

    source: InstantSource | AdvanceableTime
    zone_id: tzinfo = field(default=SYSTEM_DEFAULT_ZONE, hash=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """
        Validate source and zone, unwrapping `AdvanceableTime` into its `read` method.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Clock keeps a non-owning reference to the container.
        Raises:
            NullArgumentError: If `source` or `zone_id` is None.
            InvalidArgumentError: If `source` is not callable or `zone_id` is not a tzinfo.
        Side Effects:
            Reads local zone settings when `zone_id` is omitted.
        """
        source = self.source
        if source is None:
            raise NullArgumentError(argument="source")
        if isinstance(source, AdvanceableTime):
            source = source.read
        if not callable(source):
            raise InvalidArgumentError(
                f"source must be callable or AdvanceableTime, got {type(source).__name__}",
                argument="source",
                value=source,
            )
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "zone_id", resolve_zone(self.zone_id, argument="zone_id"))

    def now(self) -> datetime:
        """Invoke source and return its instant unchanged; nothing is cached."""
        return self.source()  # type: ignore[operator]

    def now_millis(self) -> int:
        return epoch_millis(self.now())

    def zone(self) -> tzinfo:
        return self.zone_id

    def with_zone(self, zone_id: tzinfo) -> ManualClock:
        """Return this clock when `zone_id` is unchanged, else a clock sharing the same source."""
        if zone_id is not None and zone_id == self.zone_id:
            return self
        return ManualClock(self.source, zone_id)

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo

import pytest

from clocky.platform.errors.clocky_error import (
    InvalidArgumentError,
    NegativeDurationError,
    NullArgumentError,
)
from clocky.shared_kernel.primitives import (
    EPOCH,
    SYSTEM_DEFAULT_ZONE,
    epoch_millis,
    require_duration,
    require_instant,
    require_non_negative_duration,
    resolve_zone,
    system_default_zone,
)


class _NoOffsetZone(tzinfo):
    """tzinfo that reports no offset, leaving datetimes effectively naive."""

    def utcoffset(self, dt: datetime | None) -> timedelta | None:
        return None

    def dst(self, dt: datetime | None) -> timedelta | None:
        return None

    def tzname(self, dt: datetime | None) -> str | None:
        return None


def test_require_instant_normalizes_to_utc() -> None:
    plus_two = datetime(2026, 7, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    normalized = require_instant(plus_two, argument="instant")

    assert normalized == datetime(2026, 7, 1, 12, 0, tzinfo=timezone.utc)
    assert normalized.tzinfo is timezone.utc


def test_require_instant_rejects_naive_and_offsetless_values() -> None:
    """
    Verify instants must denote exactly one point in time.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        tzinfo whose utcoffset() is None is as ambiguous as no tzinfo.
    Raises:
        AssertionError: If ambiguous datetime is accepted.
    Side Effects:
        None.
    """
    with pytest.raises(InvalidArgumentError):
        require_instant(datetime(2026, 1, 1), argument="instant")
    with pytest.raises(InvalidArgumentError):
        require_instant(datetime(2026, 1, 1, tzinfo=_NoOffsetZone()), argument="instant")
    with pytest.raises(InvalidArgumentError):
        require_instant("2026-01-01T00:00:00Z", argument="instant")
    with pytest.raises(NullArgumentError):
        require_instant(None, argument="instant")


def test_epoch_millis_projection() -> None:
    assert epoch_millis(EPOCH) == 0
    assert epoch_millis(EPOCH + timedelta(seconds=10)) == 10_000
    assert epoch_millis(EPOCH - timedelta(milliseconds=1, microseconds=1)) == -2
    assert epoch_millis(datetime(1970, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))) == 0


def test_duration_validation() -> None:
    assert require_duration(timedelta(seconds=-1), argument="delta") == timedelta(seconds=-1)
    assert require_non_negative_duration(timedelta(0), argument="delta") == timedelta(0)

    with pytest.raises(NegativeDurationError) as exc_info:
        require_non_negative_duration(timedelta(microseconds=-1), argument="delta")
    assert exc_info.value.details == {"argument": "delta", "value": timedelta(microseconds=-1)}

    with pytest.raises(InvalidArgumentError):
        require_duration(1.5, argument="delta")
    with pytest.raises(NullArgumentError):
        require_duration(None, argument="delta")


def test_resolve_zone() -> None:
    assert resolve_zone(timezone.utc, argument="zone_id") is timezone.utc
    assert resolve_zone(SYSTEM_DEFAULT_ZONE, argument="zone_id") == system_default_zone()
    assert repr(SYSTEM_DEFAULT_ZONE) == "SYSTEM_DEFAULT_ZONE"

    with pytest.raises(NullArgumentError):
        resolve_zone(None, argument="zone_id")
    with pytest.raises(InvalidArgumentError):
        resolve_zone("UTC", argument="zone_id")

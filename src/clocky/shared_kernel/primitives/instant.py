from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Final

from clocky.platform.errors.clocky_error import InvalidArgumentError, NullArgumentError

EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND: Final[timedelta] = timedelta(milliseconds=1)


def require_instant(value: Any, *, argument: str) -> datetime:
    """
    Validate an instant argument and normalize it to UTC.

    Args:
        value: Candidate instant.
        argument: Argument name used in error details.
    Returns:
        datetime: Timezone-aware datetime in UTC, same point in time as `value`.
    Assumptions:
        Naive datetimes are ambiguous and never denote an instant.
    Raises:
        NullArgumentError: If `value` is None.
        InvalidArgumentError: If `value` is not a timezone-aware datetime.
    Side Effects:
        None.
    """
    if value is None:
        raise NullArgumentError(argument=argument)
    if not isinstance(value, datetime):
        raise InvalidArgumentError(
            f"{argument} must be a datetime, got {type(value).__name__}",
            argument=argument,
            value=value,
        )
    # tzinfo may be set while utcoffset() still returns None.
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidArgumentError(
            f"{argument} must be timezone-aware (naive datetime is forbidden)",
            argument=argument,
            value=value,
        )
    return value.astimezone(timezone.utc)


def epoch_millis(instant: datetime) -> int:
    """
    Millisecond-epoch projection of an instant, rounded toward negative infinity.

    Args:
        instant: Timezone-aware datetime.
    Returns:
        int: Whole milliseconds elapsed since 1970-01-01T00:00:00Z.
    Assumptions:
        Instants before the epoch yield negative values.
    Raises:
        TypeError: If `instant` is naive.
    Side Effects:
        None.
    """
    return (instant - EPOCH) // _ONE_MILLISECOND

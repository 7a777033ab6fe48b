from __future__ import annotations

from datetime import tzinfo
from typing import Any, Final

from dateutil import tz

from clocky.platform.errors.clocky_error import InvalidArgumentError, NullArgumentError


class _SystemDefaultZone:
    """Marker for an omitted zone argument; resolved when a clock is constructed."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "SYSTEM_DEFAULT_ZONE"


SYSTEM_DEFAULT_ZONE: Final = _SystemDefaultZone()


def system_default_zone() -> tzinfo:
    """
    Return the host's local zone, following its DST rules.

    Args:
        None.
    Returns:
        tzinfo: `dateutil.tz.tzlocal()` bound to the current TZ setting.
    Assumptions:
        Two `tzlocal()` instances compare equal while the host TZ setting is unchanged.
    Raises:
        None.
    Side Effects:
        Reads local zone settings.
    """
    return tz.tzlocal()


def resolve_zone(value: Any, *, argument: str) -> tzinfo:
    """
    Validate a zone argument, substituting the local zone for `SYSTEM_DEFAULT_ZONE`.

    Args:
        value: Candidate zone or the `SYSTEM_DEFAULT_ZONE` marker.
        argument: Argument name used in error details.
    Returns:
        tzinfo: Concrete zone.
    Assumptions:
        Explicit None is a caller error, never a request for the default.
    Raises:
        NullArgumentError: If `value` is None.
        InvalidArgumentError: If `value` is not a tzinfo.
    Side Effects:
        Reads local zone settings when the marker is passed.
    """
    if value is SYSTEM_DEFAULT_ZONE:
        return system_default_zone()
    if value is None:
        raise NullArgumentError(argument=argument)
    if not isinstance(value, tzinfo):
        raise InvalidArgumentError(
            f"{argument} must be a tzinfo, got {type(value).__name__}",
            argument=argument,
            value=value,
        )
    return value

from __future__ import annotations

from datetime import timedelta
from typing import Any

from clocky.platform.errors.clocky_error import (
    InvalidArgumentError,
    NegativeDurationError,
    NullArgumentError,
)

_ZERO = timedelta(0)


def require_duration(value: Any, *, argument: str) -> timedelta:
    """
    Validate that an argument is a `timedelta`.

    Args:
        value: Candidate duration.
        argument: Argument name used in error details.
    Returns:
        timedelta: The same value.
    Assumptions:
        Sign is not checked here.
    Raises:
        NullArgumentError: If `value` is None.
        InvalidArgumentError: If `value` is not a timedelta.
    Side Effects:
        None.
    """
    if value is None:
        raise NullArgumentError(argument=argument)
    if not isinstance(value, timedelta):
        raise InvalidArgumentError(
            f"{argument} must be a timedelta, got {type(value).__name__}",
            argument=argument,
            value=value,
        )
    return value


def require_non_negative_duration(value: Any, *, argument: str) -> timedelta:
    """
    Validate an advancement delta. Zero is allowed.

    Raises:
        NegativeDurationError: If `value` is negative.
    """
    delta = require_duration(value, argument=argument)
    if delta < _ZERO:
        raise NegativeDurationError(argument=argument, value=delta)
    return delta

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping


@dataclass(eq=False, slots=True)
class ClockyError(Exception):
    """
    ClockyError — base error for clock construction and advancement.

    Carries a stable machine-readable `code` callers may branch on and `details`
    naming the rejected argument.

    Related:
      - src/clocky/shared_kernel/primitives/instant.py
      - src/clocky/shared_kernel/primitives/duration.py
      - src/clocky/shared_kernel/primitives/zone.py
    """

    code: str
    message: str
    details: Mapping[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(ClockyError, ValueError):
    """
    InvalidArgumentError — an argument has the wrong type or an unusable value.

    Related:
      - src/clocky/shared_kernel/primitives/instant.py
      - src/clocky/shared_kernel/primitives/zone.py
    """

    default_code: ClassVar[str] = "invalid_argument"

    def __init__(self, message: str, *, argument: str, value: Any = None) -> None:
        """
        Initialize error naming the offending argument.

        Args:
            message: Human-readable failure description.
            argument: Name of the rejected argument.
            value: Optional rejected value, kept as-is in details.
        Returns:
            None.
        Assumptions:
            Subclasses override `default_code` only.
        Raises:
            None.
        Side Effects:
            None.
        """
        details: dict[str, Any] = {"argument": argument}
        if value is not None:
            details["value"] = value
        super().__init__(code=self.default_code, message=message, details=details)


class NullArgumentError(InvalidArgumentError):
    """Required argument was `None`."""

    default_code: ClassVar[str] = "null_argument"

    def __init__(self, *, argument: str) -> None:
        super().__init__(f"{argument} may not be None", argument=argument)


class NegativeDurationError(InvalidArgumentError):
    """Advance was requested with a negative duration; time may not run backward."""

    default_code: ClassVar[str] = "negative_duration"

    def __init__(self, *, argument: str, value: Any) -> None:
        super().__init__(f"{argument} may not be negative", argument=argument, value=value)

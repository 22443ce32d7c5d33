"""Exception classes for cursorscan.

A failed match is never an exception: scanning primitives report "no match"
by returning the input cursor unchanged. The exceptions here cover the two
situations where the caller has to hear about a problem:

- arguments that cannot be bound to any form of a primitive
- a runaway ``scan_while_excluding`` loop stopped by ``ScanConfig.step_limit``
"""

from __future__ import annotations


class ScanError(Exception):
    """Base exception for all cursorscan errors.

    Subclass this for specific error categories.
    """

    pass


class ScanSignatureError(ScanError, TypeError):
    """Arguments do not fit any call form of a scanning primitive.

    Raised before any element is inspected, e.g. when the end boundary is
    missing, a pattern cursor comes without its pattern end, or a scanner
    is not callable.
    """

    def __init__(self, function: str, message: str) -> None:
        """Initialize signature error.

        Args:
            function: Name of the primitive that was called (e.g., "scan")
            message: Description of the binding problem
        """
        self.function = function
        self.message = message
        super().__init__(f"{function}(): {message}")


class StepLimitExceeded(ScanError):
    """A bounded-loop primitive took more steps than the configured limit.

    Raised by ``scan_while_excluding`` when ``ScanConfig.step_limit`` is set
    and the loop has not found a match or the boundary within that many
    single-element steps.
    """

    def __init__(self, function: str, limit: int, position: object | None = None) -> None:
        """Initialize step limit error.

        Args:
            function: Name of the looping primitive
            limit: The configured step limit
            position: Cursor where the loop was stopped (optional)
        """
        self.function = function
        self.limit = limit
        self.position = position

        where = f" at {position!r}" if position is not None else ""
        super().__init__(f"{function}(): exceeded step limit of {limit}{where}")

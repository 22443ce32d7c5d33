"""Composite combinators: scanners built from other scanners.

A scanner is any callable ``(first, last) -> cursor`` that returns ``first``
unchanged when it does not match. ``scan_excluding`` and
``scan_while_excluding`` only ever ask their scanner "did you move?", so any
primitive, user-defined function, or composite works as the inner scanner.

Primitives that need more than ``(first, last)`` become scanners with
``bind``:

    >>> from cursorscan import bind, bounds, scan, scan_while_excluding
    >>> first, last = bounds("value */ rest")
    >>> stop = scan_while_excluding(first, last, bind(scan, pattern="*/"))
    >>> stop.index
    6

"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from cursorscan.algorithms._binding import is_cursor, record, unpack_source
from cursorscan.config import get_scan_config
from cursorscan.errors import ScanSignatureError, StepLimitExceeded
from cursorscan.profiling import get_scan_accumulator

logger = logging.getLogger(__name__)


class BoundScanner:
    """A scanning function with its trailing arguments attached.

    Calling ``BoundScanner(scan, "x")(first, last)`` is
    ``scan(first, last, "x")``. Instances are immutable and safe to share.

    """

    __slots__ = ("_args", "_function", "_kwargs")

    def __init__(self, function: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        if not callable(function):
            raise ScanSignatureError("bind", f"scanner must be callable, got {type(function).__name__}")
        self._function = function
        self._args = args
        self._kwargs = kwargs

    @property
    def function(self) -> Callable[..., Any]:
        return self._function

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    @property
    def kwargs(self) -> dict[str, Any]:
        return dict(self._kwargs)

    def __call__(self, first: Any, last: Any, /) -> Any:
        return self._function(first, last, *self._args, **self._kwargs)

    def __repr__(self) -> str:
        name = getattr(self._function, "__name__", repr(self._function))
        parts = [repr(a) for a in self._args]
        parts.extend(f"{k}={v!r}" for k, v in self._kwargs.items())
        return f"bind({name}, {', '.join(parts)})" if parts else f"bind({name})"


def bind(function: Callable[..., Any], *args: Any, **kwargs: Any) -> BoundScanner:
    """Attach trailing arguments to a scanning function.

    Example:
        >>> semicolon = bind(scan, ";")
        >>> block_comment_end = bind(scan, pattern="*/")
        >>> digit = bind(scan_if, str.isdigit)
        >>> not_digit = bind(scan_excluding, digit)
    """
    return BoundScanner(function, *args, **kwargs)


def _bind_scanner(function: str, first: Any, args: tuple[Any, ...]) -> tuple[Any, Any, Any]:
    first, last, rest = unpack_source(function, first, args)
    if len(rest) != 1:
        raise ScanSignatureError(function, f"expected exactly one scanner, got {len(rest)} arguments")
    scanner = rest[0]
    if not callable(scanner):
        raise ScanSignatureError(function, f"scanner must be callable, got {type(scanner).__name__}")
    return first, last, scanner


def _run_scanner(function: str, scanner: Any, first: Any, last: Any) -> Any:
    result = scanner(first, last)
    if not is_cursor(result):
        raise ScanSignatureError(function, f"scanner must return a cursor, got {type(result).__name__}")
    return result


def scan_excluding(first: Any, *args: Any) -> Any:
    """Advance by one element only if ``scanner`` does not match here.

    Forms: ``scan_excluding(first, last, scanner)`` and
    ``scan_excluding(seq, scanner)``.

    Turns "does X match at this position" into "skip one element unless X
    matches", the building block for consuming filler up to a delimiter.

    Returns:
        ``first`` advanced by one, or ``first`` unchanged when ``scanner``
        matched or ``first == last``.

    Raises:
        ScanSignatureError: If ``scanner`` returns something other than a
            cursor.
    """
    first, last, scanner = _bind_scanner("scan_excluding", first, args)
    if first == last or _run_scanner("scan_excluding", scanner, first, last) != first:
        result = first
    else:
        result = first.advance()

    if get_scan_config().trace:
        logger.debug(
            "scan_excluding: %s (scanner=%r)",
            "stayed" if result == first else "advanced one element",
            scanner,
        )
    return record("scan_excluding", first, result)


def scan_while_excluding(first: Any, *args: Any) -> Any:
    """Skip elements one at a time until ``scanner`` matches or input runs out.

    Forms: ``scan_while_excluding(first, last, scanner)`` and
    ``scan_while_excluding(seq, scanner)``.

    The returned cursor is the first position at which ``scanner`` matches,
    or ``last``. The match itself is not consumed.

    Raises:
        ScanSignatureError: If ``scanner`` returns something other than a
            cursor.
        StepLimitExceeded: If ``ScanConfig.step_limit`` is set and more
            elements than that would be skipped.
    """
    first, last, scanner = _bind_scanner("scan_while_excluding", first, args)
    config = get_scan_config()
    limit = config.step_limit

    start = first
    steps = 0
    while first != last and _run_scanner("scan_while_excluding", scanner, first, last) == first:
        if limit is not None and steps >= limit:
            raise StepLimitExceeded("scan_while_excluding", limit, first)
        first = first.advance()
        steps += 1

    if config.trace:
        logger.debug(
            "scan_while_excluding: skipped %d element(s), stopped %s (scanner=%r)",
            steps,
            "at boundary" if first == last else "at match",
            scanner,
        )

    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_steps(steps)
    return record("scan_while_excluding", start, first)


__all__ = [
    "BoundScanner",
    "bind",
    "scan_excluding",
    "scan_while_excluding",
]

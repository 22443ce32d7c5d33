"""Elementary scanning primitives: scan, scan_not, scan_if, scan_if_not.

Each primitive looks at the element(s) under the cursor and returns either
the cursor advanced past a match or the cursor unchanged. ``first == last``
is never a match, and the element under ``first`` is never read in that case.

Call forms shared by all four:

    primitive(first, last, ...)     # explicit cursor / boundary pair
    primitive(seq, ...)             # whole sequence, returns a SeqCursor into seq

Forms specific to ``scan`` and ``scan_not``:

    scan(first, last, value, comparison=None, projection=None)
    scan(first, last, pattern_first, pattern_last,
         comparison=None, projection=None, pattern_projection=None)
    scan(first, last, pattern=iterable, comparison=None, ...)

A ``None`` option means the default (``equal_to`` / ``identity``), so
``scan(first, last, "h", None, str.lower)`` skips the comparison slot.

Example:
    >>> from cursorscan import bounds, scan, scan_if
    >>> first, last = bounds("Hello, world!")
    >>> scan(first, last, "H").index
    1
    >>> scan(first, last, pattern="Hello").index
    5
    >>> scan_if(first, last, str.isdigit).index
    0
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from cursorscan.algorithms._binding import (
    bind_options,
    is_cursor,
    record,
    resolve_callable,
    unpack_source,
)
from cursorscan.cursor import STREAM_END, SeqCursor, StreamCursor
from cursorscan.errors import ScanSignatureError
from cursorscan.matching import equal_to, identity, mismatch

# Distinguishes "no pattern keyword" from any real pattern, including None
_NO_PATTERN: Any = object()

_VALUE_OPTIONS = ("comparison", "projection")
_PATTERN_OPTIONS = ("comparison", "projection", "pattern_projection")
_PREDICATE_OPTIONS = ("projection",)

# A bound match: returns the cursor past the match, or None for no match
_Matcher = Callable[[], Any]


def _bind_scan(
    function: str,
    first: Any,
    args: tuple[Any, ...],
    pattern: Any,
    keywords: dict[str, Any],
) -> tuple[Any, Any, _Matcher]:
    first, last, rest = unpack_source(function, first, args)

    if pattern is not _NO_PATTERN:
        if rest and not callable(rest[0]):
            raise ScanSignatureError(function, "got both a positional value and pattern=")
        if is_cursor(pattern):
            raise ScanSignatureError(function, "pass a pattern cursor positionally, followed by its end")
        if not isinstance(pattern, Iterable):
            raise ScanSignatureError(function, f"pattern must be iterable, got {type(pattern).__name__}")
        options = bind_options(function, _PATTERN_OPTIONS, rest, keywords)
        return first, last, _pattern_matcher(function, first, last, pattern, _NO_PATTERN, options)

    if not rest:
        raise ScanSignatureError(function, "missing the value or pattern to match")

    if is_cursor(rest[0]):
        if len(rest) < 2:
            raise ScanSignatureError(function, "pattern cursor given without its pattern end")
        options = bind_options(function, _PATTERN_OPTIONS, rest[2:], keywords)
        return first, last, _pattern_matcher(function, first, last, rest[0], rest[1], options)

    value = rest[0]
    options = bind_options(function, _VALUE_OPTIONS, rest[1:], keywords)
    comparison = resolve_callable(function, "comparison", options["comparison"], equal_to)
    projection = resolve_callable(function, "projection", options["projection"], identity)

    def match_value() -> Any:
        if comparison(projection(first.read()), value):
            return first.advance()
        return None

    return first, last, match_value


def _pattern_matcher(
    function: str,
    first: Any,
    last: Any,
    pattern_first: Any,
    pattern_last: Any,
    options: dict[str, Any],
) -> _Matcher:
    """Bind a sub-sequence match.

    ``pattern_last`` is _NO_PATTERN when ``pattern_first`` is a whole iterable; the
    cursor pair for it is only built when the match runs, so a single-pass
    iterable is untouched when the source is already exhausted.
    """
    comparison = resolve_callable(function, "comparison", options["comparison"], equal_to)
    projection = resolve_callable(function, "projection", options["projection"], identity)
    pattern_projection = resolve_callable(
        function, "pattern_projection", options["pattern_projection"], identity
    )

    def match_pattern() -> Any:
        pfirst, plast = pattern_first, pattern_last
        if plast is _NO_PATTERN:
            if isinstance(pfirst, Sequence):
                pfirst, plast = SeqCursor(pfirst, 0), SeqCursor(pfirst, len(pfirst))
            else:
                pfirst, plast = StreamCursor(pfirst), STREAM_END
        source_stop, pattern_stop = mismatch(
            first, last, pfirst, plast, comparison, projection, pattern_projection
        )
        return source_stop if pattern_stop == plast else None

    return match_pattern


def scan(
    first: Any,
    *args: Any,
    pattern: Iterable[Any] = _NO_PATTERN,
    comparison: Callable[[Any, Any], Any] | None = None,
    projection: Callable[[Any], Any] | None = None,
    pattern_projection: Callable[[Any], Any] | None = None,
) -> Any:
    """Advance past the value or pattern at the cursor.

    Single element: advance by one if ``comparison(projection(element), value)``
    holds. Sub-sequence: advance by the pattern's length if every pattern
    element matches the source in order; a pattern longer than the remaining
    source never matches, and an empty pattern matches with zero length.

    Args:
        first: Start cursor, or a whole sequence
        *args: ``last`` (cursor form), then ``value`` or
            ``pattern_first, pattern_last``, then positional options
        pattern: Pattern as any iterable, single-pass ones included
        comparison: Binary relation, default ``equal_to``
        projection: Applied to source elements, default ``identity``
        pattern_projection: Applied to pattern elements, default ``identity``

    Returns:
        The cursor past the match, or ``first`` unchanged.

    Raises:
        ScanSignatureError: If the arguments fit no call form.
    """
    keywords = {
        "comparison": comparison,
        "projection": projection,
        "pattern_projection": pattern_projection,
    }
    first, last, match = _bind_scan("scan", first, args, pattern, keywords)
    if first == last:
        return record("scan", first, first)
    stop = match()
    return record("scan", first, first if stop is None else stop)


def scan_not(
    first: Any,
    *args: Any,
    pattern: Iterable[Any] = _NO_PATTERN,
    comparison: Callable[[Any, Any], Any] | None = None,
    projection: Callable[[Any], Any] | None = None,
    pattern_projection: Callable[[Any], Any] | None = None,
) -> Any:
    """Advance by one element unless the value or pattern is at the cursor.

    The exact complement of ``scan`` for the same arguments, except that a
    successful ``scan_not`` always moves exactly one element, even when part
    of a pattern matched before the mismatch.

    Returns:
        ``first`` advanced by one, or ``first`` unchanged.

    Raises:
        ScanSignatureError: If the arguments fit no call form.
    """
    keywords = {
        "comparison": comparison,
        "projection": projection,
        "pattern_projection": pattern_projection,
    }
    first, last, match = _bind_scan("scan_not", first, args, pattern, keywords)
    if first == last or match() is not None:
        return record("scan_not", first, first)
    return record("scan_not", first, first.advance())


def _bind_predicate(function: str, first: Any, args: tuple[Any, ...], projection: Any) -> tuple[Any, Any, Any, Any]:
    first, last, rest = unpack_source(function, first, args)
    if not rest:
        raise ScanSignatureError(function, "missing the predicate")
    predicate = rest[0]
    if not callable(predicate):
        raise ScanSignatureError(function, f"predicate must be callable, got {type(predicate).__name__}")
    options = bind_options(function, _PREDICATE_OPTIONS, rest[1:], {"projection": projection})
    return first, last, predicate, resolve_callable(function, "projection", options["projection"], identity)


def scan_if(first: Any, *args: Any, projection: Callable[[Any], Any] | None = None) -> Any:
    """Advance by one if ``predicate(projection(element))`` is true.

    Forms: ``scan_if(first, last, predicate, projection=None)`` and
    ``scan_if(seq, predicate, projection=None)``.
    """
    first, last, predicate, project = _bind_predicate("scan_if", first, args, projection)
    if first == last or not predicate(project(first.read())):
        return record("scan_if", first, first)
    return record("scan_if", first, first.advance())


def scan_if_not(first: Any, *args: Any, projection: Callable[[Any], Any] | None = None) -> Any:
    """Advance by one if ``predicate(projection(element))`` is false.

    Forms mirror ``scan_if``.
    """
    first, last, predicate, project = _bind_predicate("scan_if_not", first, args, projection)
    if first == last or predicate(project(first.read())):
        return record("scan_if_not", first, first)
    return record("scan_if_not", first, first.advance())


__all__ = [
    "scan",
    "scan_if",
    "scan_if_not",
    "scan_not",
]

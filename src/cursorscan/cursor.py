"""Cursors and boundaries for scanning.

A cursor is a position in a sequence; a boundary is whatever the cursor is
compared against with ``==`` to detect that no elements are left.

Cursors:
    SeqCursor: immutable position in any ``Sequence``; re-referenceable, so
        a saved copy stays valid after a lookahead fails.
    StreamCursor: single-pass position over any iterable; ``advance()``
        consumes the iterator. Only suitable for the pattern side of a
        sub-sequence match.

Boundaries:
    end(seq): a SeqCursor one past the last element (homogeneous boundary).
    UNREACHABLE: never reached; the caller guarantees a match stops the scan.
    Terminator(value): reached at the first element equal to value.
    STREAM_END: reached when a StreamCursor runs out.

Heterogeneous boundaries subclass ``Sentinel``. Cursors return
NotImplemented when compared with anything but their own kind, so Python
falls back to ``Sentinel.__eq__``, which asks ``reached(cursor)``.

Example:
    >>> from cursorscan.cursor import bounds
    >>> first, last = bounds("abc")
    >>> (first + 3) == last
    True
    >>> first.advance().read()
    'b'

Thread Safety:
    SeqCursor and the sentinels are immutable and safe to share.
    StreamCursor is not; use one per thread.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

_T = TypeVar("_T")

# Marks an exhausted StreamCursor (None is a legitimate element)
_EXHAUSTED: Any = object()


class SeqCursor(Generic[_T]):
    """Immutable position in a sequence.

    Two cursors are equal when they index the *same* sequence object at the
    same offset. Comparing by identity keeps equality O(1) regardless of the
    sequence length.

    Attributes:
        seq: The sequence being scanned (never copied)
        index: Offset of the current element, ``len(seq)`` at the end

    Examples:
        >>> c = SeqCursor("Hello")
        >>> (c + 1).read()
        'e'
        >>> (c + 5) - c
        5

    """

    __slots__ = ("_index", "_seq")

    def __init__(self, seq: Sequence[_T], index: int = 0) -> None:
        self._seq = seq
        self._index = index

    @property
    def seq(self) -> Sequence[_T]:
        return self._seq

    @property
    def index(self) -> int:
        return self._index

    def read(self) -> _T:
        """Return the current element.

        Raises:
            IndexError: If the cursor is at or past the end of the sequence.
        """
        if self._index >= len(self._seq):
            raise IndexError(f"read past the end of a sequence of length {len(self._seq)}")
        return self._seq[self._index]

    def advance(self, n: int = 1) -> SeqCursor[_T]:
        """Return a cursor n elements forward."""
        return SeqCursor(self._seq, self._index + n)

    def __add__(self, n: object) -> SeqCursor[_T]:
        if not isinstance(n, int):
            return NotImplemented
        return SeqCursor(self._seq, self._index + n)

    __radd__ = __add__

    def __sub__(self, other: object) -> Any:
        if isinstance(other, SeqCursor):
            if other._seq is not self._seq:
                raise ValueError("cannot measure distance between cursors over different sequences")
            return self._index - other._index
        if isinstance(other, int):
            return SeqCursor(self._seq, self._index - other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SeqCursor):
            return self._seq is other._seq and self._index == other._index
        return NotImplemented

    def __hash__(self) -> int:
        return hash((id(self._seq), self._index))

    def __repr__(self) -> str:
        return f"SeqCursor(index={self._index}, length={len(self._seq)})"


class StreamCursor(Generic[_T]):
    """Single-pass position over an iterable.

    Holds one element of lookahead. ``advance()`` pulls the next element and
    returns the same object, so every earlier copy moves with it. Equal to
    ``STREAM_END`` once the iterable is exhausted.

    """

    __slots__ = ("_head", "_iterator")

    def __init__(self, iterable: Iterable[_T]) -> None:
        self._iterator = iter(iterable)
        self._head: Any = next(self._iterator, _EXHAUSTED)

    @property
    def exhausted(self) -> bool:
        return self._head is _EXHAUSTED

    def read(self) -> _T:
        if self._head is _EXHAUSTED:
            raise IndexError("read past the end of a stream")
        return self._head

    def advance(self) -> StreamCursor[_T]:
        if self._head is not _EXHAUSTED:
            self._head = next(self._iterator, _EXHAUSTED)
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StreamCursor):
            return self is other
        return NotImplemented

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        state = "exhausted" if self.exhausted else f"at={self._head!r}"
        return f"StreamCursor({state})"


class Sentinel:
    """Boundary of a different type than the cursor it bounds.

    Subclasses implement ``reached(cursor)``. ``cursor == sentinel`` and
    ``cursor != sentinel`` both route here through Python's reflected
    comparison.
    """

    __slots__ = ()

    def reached(self, cursor: Any) -> bool:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sentinel):
            return self is other
        return self.reached(other)

    __hash__ = object.__hash__


class _Unreachable(Sentinel):
    __slots__ = ()

    def reached(self, cursor: Any) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNREACHABLE"


class _StreamEnd(Sentinel):
    __slots__ = ()

    def reached(self, cursor: Any) -> bool:
        return isinstance(cursor, StreamCursor) and cursor.exhausted

    def __repr__(self) -> str:
        return "STREAM_END"


class Terminator(Sentinel):
    """Boundary reached at the first element equal to ``value``.

    The terminating element itself is not part of the scanned range, like
    the NUL of a C string. The sequence must contain the terminator; a
    cursor that runs off the end raises the sequence's IndexError.

    Example:
        >>> from cursorscan import begin, scan_while_excluding, scan, bind
        >>> text = "key=value\\0garbage"
        >>> stop = scan_while_excluding(begin(text), Terminator("\\0"), bind(scan, "#"))
        >>> stop.index
        9

    """

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def reached(self, cursor: Any) -> bool:
        return cursor.read() == self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Terminator):
            return self._value == other._value
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((Terminator, self._value))

    def __repr__(self) -> str:
        return f"Terminator({self._value!r})"


UNREACHABLE: Sentinel = _Unreachable()
STREAM_END: Sentinel = _StreamEnd()


def begin(seq: Sequence[_T]) -> SeqCursor[_T]:
    """Cursor at the first element of seq."""
    return SeqCursor(seq, 0)


def end(seq: Sequence[_T]) -> SeqCursor[_T]:
    """Cursor one past the last element of seq."""
    return SeqCursor(seq, len(seq))


def bounds(seq: Sequence[_T]) -> tuple[SeqCursor[_T], SeqCursor[_T]]:
    """Return the (begin, end) cursor pair covering all of seq."""
    return SeqCursor(seq, 0), SeqCursor(seq, len(seq))


def distance(first: SeqCursor[Any], last: SeqCursor[Any]) -> int:
    """Number of elements between two cursors over the same sequence."""
    return last - first


def span(first: SeqCursor[_T], last: SeqCursor[_T]) -> Sequence[_T]:
    """Return the elements between two cursors.

    This is how a lexer recovers the lexeme a primitive consumed::

        stop = scan_while_excluding(first, last, bind(scan, '"'))
        literal = span(first, stop)

    Returns:
        ``seq[first.index:last.index]``; a str for str sources, a memoryview
        (no copy) for memoryview sources.

    Raises:
        ValueError: If the cursors index different sequences.
    """
    if first.seq is not last.seq:
        raise ValueError("cannot take a span between cursors over different sequences")
    return first.seq[first.index : last.index]


__all__ = [
    "STREAM_END",
    "UNREACHABLE",
    "SeqCursor",
    "Sentinel",
    "StreamCursor",
    "Terminator",
    "begin",
    "bounds",
    "distance",
    "end",
    "span",
]

"""Protocols defining the cursor and scanner contracts.

Cursors and scanners are duck-typed: anything with the right shape works,
no base class required. These protocols name that shape so type checkers
(ty, mypy) can verify call sites, and so the primitives can tell a cursor
argument apart from a whole sequence at runtime.

Thread Safety:
    Protocols are purely structural — no runtime state.
"""

from __future__ import annotations

from typing import Protocol, Self, TypeVar, runtime_checkable

_T_co = TypeVar("_T_co", covariant=True)
_C = TypeVar("_C")
_S_contra = TypeVar("_S_contra", contravariant=True)


@runtime_checkable
class ForwardCursor(Protocol[_T_co]):
    """Contract for a position in a sequence.

    Provided by: SeqCursor, StreamCursor, or any user-defined cursor
    Required by: every scanning primitive

    A cursor must also compare with ``==`` against its boundary. Cursors used
    on the source side of a sub-sequence match must stay valid after a copy
    is advanced (``SeqCursor`` is immutable, so this always holds for it).
    """

    def read(self) -> _T_co:
        """Return the element at this position."""
        ...

    def advance(self) -> Self:
        """Return the cursor one element forward."""
        ...


class Scanner(Protocol[_C, _S_contra]):
    """Contract for a composable matching unit.

    Any callable ``(first, last) -> cursor`` that returns ``first`` unchanged
    when it does not match. Primitives that need extra arguments become
    scanners through ``cursorscan.bind``.
    """

    def __call__(self, first: _C, last: _S_contra, /) -> _C: ...


__all__ = [
    "ForwardCursor",
    "Scanner",
]

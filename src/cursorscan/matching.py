"""Shared matching contract for the scanning primitives.

Defaults for the trailing ``comparison`` and ``projection`` parameters, plus
``mismatch``, the longest-common-prefix walk every sub-sequence match is
built on.

Example:
    >>> from cursorscan import bounds, mismatch
    >>> first, last = bounds("Hello, world!")
    >>> pfirst, plast = bounds("Help")
    >>> stop, pstop = mismatch(first, last, pfirst, plast)
    >>> stop.index, pstop.index
    (3, 3)
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any, TypeVar

_C1 = TypeVar("_C1")
_C2 = TypeVar("_C2")
_T = TypeVar("_T")

equal_to: Callable[[Any, Any], bool] = operator.eq


def identity(value: _T) -> _T:
    """Projection that returns its argument unchanged."""
    return value


def negate(predicate: Callable[[Any], Any]) -> Callable[[Any], bool]:
    """Return the logical complement of a unary predicate.

    ``scan_if(first, last, negate(p))`` behaves exactly like
    ``scan_if_not(first, last, p)``.
    """

    def negated(value: Any) -> bool:
        return not predicate(value)

    negated.__name__ = f"not_{getattr(predicate, '__name__', 'predicate')}"
    return negated


def mismatch(
    first1: _C1,
    last1: Any,
    first2: _C2,
    last2: Any,
    comparison: Callable[[Any, Any], Any] = equal_to,
    projection1: Callable[[Any], Any] = identity,
    projection2: Callable[[Any], Any] = identity,
) -> tuple[_C1, _C2]:
    """Walk two sequences in step until one ends or a pair fails to compare.

    Each element is projected by its own side's projection before
    ``comparison`` runs. Neither cursor is read once it equals its boundary.

    Args:
        first1: Start of the first sequence
        last1: Boundary of the first sequence
        first2: Start of the second sequence (may be single-pass)
        last2: Boundary of the second sequence
        comparison: Binary relation deciding whether two elements match
        projection1: Transform applied to elements of the first sequence
        projection2: Transform applied to elements of the second sequence

    Returns:
        The pair of cursors at the first mismatching position, or where
        either sequence ran out.

    Complexity: O(min(n1, n2))
    """
    while first1 != last1 and first2 != last2:
        if not comparison(projection1(first1.read()), projection2(first2.read())):  # type: ignore[attr-defined]
            break
        first1 = first1.advance()  # type: ignore[attr-defined]
        first2 = first2.advance()  # type: ignore[attr-defined]
    return first1, first2


__all__ = [
    "equal_to",
    "identity",
    "mismatch",
    "negate",
]

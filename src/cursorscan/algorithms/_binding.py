"""Argument binding shared by the scanning primitives.

Every primitive accepts its source as either ``(first, last, ...)`` or a
whole sequence ``(seq, ...)``, and its trailing options (comparison,
projection, ...) positionally or by keyword. Binding happens before any
element is read; arguments that fit no form raise ScanSignatureError.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from cursorscan.cursor import SeqCursor
from cursorscan.errors import ScanSignatureError
from cursorscan.profiling import get_scan_accumulator
from cursorscan.protocols import ForwardCursor


def is_cursor(value: Any) -> bool:
    # SeqCursor fast path skips the runtime Protocol check
    return type(value) is SeqCursor or isinstance(value, ForwardCursor)


def unpack_source(function: str, first: Any, args: tuple[Any, ...]) -> tuple[Any, Any, tuple[Any, ...]]:
    """Split the leading source arguments from the rest.

    Returns:
        (first, last, remaining positional arguments)
    """
    if is_cursor(first):
        if not args:
            raise ScanSignatureError(function, "missing end boundary after the start cursor")
        return first, args[0], args[1:]
    if isinstance(first, Sequence):
        return SeqCursor(first, 0), SeqCursor(first, len(first)), args
    raise ScanSignatureError(function, f"expected a cursor or a sequence, got {type(first).__name__}")


def bind_options(
    function: str,
    names: tuple[str, ...],
    positional: tuple[Any, ...],
    keywords: dict[str, Any],
) -> dict[str, Any]:
    """Merge positional trailing options into their keyword slots.

    A keyword left as None means "use the default". Keywords whose name is
    not in ``names`` must be None.
    """
    if len(positional) > len(names):
        raise ScanSignatureError(
            function,
            f"takes at most {len(names)} trailing options ({', '.join(names)}), got {len(positional)}",
        )
    for name, value in keywords.items():
        if name not in names and value is not None:
            raise ScanSignatureError(function, f"{name} does not apply to this form")
    bound = {name: keywords.get(name) for name in names}
    for name, value in zip(names, positional):
        if bound[name] is not None:
            raise ScanSignatureError(function, f"got multiple values for {name}")
        bound[name] = value
    return bound


def resolve_callable(function: str, name: str, value: Any, default: Callable[..., Any]) -> Callable[..., Any]:
    """Return value, or default when value is None; reject non-callables."""
    if value is None:
        return default
    if not callable(value):
        raise ScanSignatureError(function, f"{name} must be callable, got {type(value).__name__}")
    return value


def record(function: str, first: Any, result: Any) -> Any:
    """Report a call to the active ScanAccumulator, if any, and return result."""
    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_call(function, result != first)
    return result

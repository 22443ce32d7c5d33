"""
cursorscan — Composable scanning primitives for hand-written lexers

Each primitive looks at the element(s) under a cursor and returns the cursor
advanced past a match, or unchanged. "No match" is never an exception, so
primitives chain and nest freely. Zero runtime dependencies.

Quick Start:
    >>> from cursorscan import bounds, scan, scan_if, span
    >>> first, last = bounds("Programs must be written for people to read")
    >>> pos = scan(first, last, "P")
    >>> pos = scan(pos, last, pattern="rograms m")
    >>> pos = scan_if(pos, last, lambda c: c == "u")
    >>> span(first, pos)
    'Programs mu'

Composition:
    >>> from cursorscan import bind, scan_while_excluding
    >>> source = 'say "hi" now'
    >>> open_quote = scan_while_excluding(source, bind(scan, '"'))
    >>> open_quote.index
    4

Installation:
    pip install cursorscan
"""

from cursorscan.algorithms import (
    BoundScanner,
    bind,
    scan,
    scan_excluding,
    scan_if,
    scan_if_not,
    scan_not,
    scan_while_excluding,
)
from cursorscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from cursorscan.cursor import (
    STREAM_END,
    UNREACHABLE,
    SeqCursor,
    Sentinel,
    StreamCursor,
    Terminator,
    begin,
    bounds,
    distance,
    end,
    span,
)
from cursorscan.errors import ScanError, ScanSignatureError, StepLimitExceeded
from cursorscan.matching import equal_to, identity, mismatch, negate
from cursorscan.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from cursorscan.protocols import ForwardCursor, Scanner

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Elementary primitives
    "scan",
    "scan_not",
    "scan_if",
    "scan_if_not",
    # Composite combinators
    "scan_excluding",
    "scan_while_excluding",
    "bind",
    "BoundScanner",
    # Cursors and boundaries
    "SeqCursor",
    "StreamCursor",
    "Sentinel",
    "Terminator",
    "UNREACHABLE",
    "STREAM_END",
    "begin",
    "end",
    "bounds",
    "distance",
    "span",
    # Matching contract
    "equal_to",
    "identity",
    "mismatch",
    "negate",
    # Protocols
    "ForwardCursor",
    "Scanner",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "profiled_scan",
    "get_scan_accumulator",
    # Errors
    "ScanError",
    "ScanSignatureError",
    "StepLimitExceeded",
]

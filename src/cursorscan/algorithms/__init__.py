"""Scanning algorithms.

- elementary: scan, scan_not, scan_if, scan_if_not
- composite: scan_excluding, scan_while_excluding, bind
"""

from __future__ import annotations

from cursorscan.algorithms.composite import (
    BoundScanner,
    bind,
    scan_excluding,
    scan_while_excluding,
)
from cursorscan.algorithms.elementary import (
    scan,
    scan_if,
    scan_if_not,
    scan_not,
)

__all__ = [
    "BoundScanner",
    "bind",
    "scan",
    "scan_excluding",
    "scan_if",
    "scan_if_not",
    "scan_not",
    "scan_while_excluding",
]

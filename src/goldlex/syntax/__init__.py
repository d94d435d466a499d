"""Scanning infrastructure for gold expressions.

Exports:
    Cursor: Immutable source position tracker
    ParseResult: Scanned value paired with the cursor after it
    SegmentSuffix: Silver/copper digits scanned after a notation letter
    scan_*: Single-pass primitive scanners

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor, ParseResult
from .primitives import (
    SegmentSuffix,
    scan_digits,
    scan_fraction,
    scan_integer,
    scan_notation,
    scan_segment,
    scan_segment_suffix,
    scan_sign,
)

__all__ = [
    "Cursor",
    "ParseResult",
    "SegmentSuffix",
    "scan_digits",
    "scan_fraction",
    "scan_integer",
    "scan_notation",
    "scan_segment",
    "scan_segment_suffix",
    "scan_sign",
]

"""Gold formatting.

Exports:
    GoldFormatter: Callback wrapper for the two formatter input shapes
    DEFAULT_GOLD_FORMATTER: Canonical "[-]1,234g 05s 06c" formatter
    format_segments: The canonical segment rendering
    create_segment_formatter: Canonical rendering with another grouping locale

Requires Babel.
"""

from .formatter import (
    DEFAULT_GOLD_FORMATTER,
    GoldFormatter,
    InstanceCallback,
    SegmentsCallback,
    create_segment_formatter,
    format_segments,
    group_gold,
)
from .locale_utils import get_babel_locale, normalize_locale

__all__ = [
    "DEFAULT_GOLD_FORMATTER",
    "GoldFormatter",
    "InstanceCallback",
    "SegmentsCallback",
    "create_segment_formatter",
    "format_segments",
    "get_babel_locale",
    "group_gold",
    "normalize_locale",
]

"""Text offsets, ranges and source extents."""

from dscstyle.text.text import (
    ZERO,
    LineIndex,
    SourceExtent,
    TextRange,
    TextSize,
    slice_text_range,
)

__all__ = [
    "ZERO",
    "LineIndex",
    "SourceExtent",
    "TextRange",
    "TextSize",
    "slice_text_range",
]

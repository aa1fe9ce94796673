from bisect import bisect_right
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        """Create a TextSize from an integer."""
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


ZERO: Final[TextSize] = TextSize(0)
"""Constant representing a TextSize of zero."""


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by TextSize offsets.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        """Create a TextRange from start and end TextSizes."""
        return TextRange(start.value, end.value)

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset.value, offset.value + length.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        """Get the start offset as a TextSize."""
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        """Get the end offset as a TextSize."""
        return TextSize(self._end)

    def len(self) -> TextSize:
        """Get the length of the range as a TextSize."""
        return TextSize(self._end - self._start)

    def is_empty(self) -> bool:
        """Check if the range is empty."""
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def contains_range(self, other: "TextRange") -> bool:
        """Check if the range fully contains another range."""
        return self._start <= other._start and other._end <= self._end

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self._start, other._start), max(self._end, other._end))

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]


class LineIndex:
    """Maps string offsets to 1-based line/column positions.

    Only `\\n` starts a new line; a `\\r` before it counts as a column of the
    previous line, the same way PowerShell reports extents.
    """

    __slots__ = ("_line_starts", "_length")

    def __init__(self, source: str) -> None:
        starts = [0]
        for index, ch in enumerate(source):
            if ch == "\n":
                starts.append(index + 1)
        self._line_starts = tuple(starts)
        self._length = len(source)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_col(self, offset: int) -> tuple[int, int]:
        if offset < 0 or offset > self._length:
            raise ValueError(f"Offset {offset} is outside of the source text")
        line = bisect_right(self._line_starts, offset) - 1
        return line + 1, offset - self._line_starts[line] + 1


@dataclass(frozen=True, slots=True)
class SourceExtent:
    """Contiguous span of script text plus its location.

    Lines and columns are 1-based; the end position points just past the last
    character of the span.
    """

    range: TextRange
    text: str
    start_line: int
    start_column: int
    end_line: int
    end_column: int
    file: str | None = None

    @staticmethod
    def of(
        source: str,
        range: TextRange,
        *,
        index: LineIndex | None = None,
        file: str | None = None,
    ) -> "SourceExtent":
        resolved = index if index is not None else LineIndex(source)
        start_line, start_column = resolved.line_col(range.start.value)
        end_line, end_column = resolved.line_col(range.end.value)
        return SourceExtent(
            range=range,
            text=slice_text_range(source, range),
            start_line=start_line,
            start_column=start_column,
            end_line=end_line,
            end_column=end_column,
            file=file,
        )

    @property
    def start_offset(self) -> int:
        return self.range.start.value

    @property
    def end_offset(self) -> int:
        return self.range.end.value

    def __str__(self) -> str:
        return self.text

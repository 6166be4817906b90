"""Source location tracking for diagnostics.

Provides SourceLocation dataclass for translating buffer offsets into
line/column positions, e.g. to point a validation message at the math span
that produced it.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for diagnostics.

    All line/column positions are 1-indexed. Offsets are 0-indexed absolute
    positions in the buffer, with ``end_offset`` exclusive.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in the buffer
        end_offset: Absolute end offset in the buffer
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Note file path (optional)

    Examples:
            >>> loc = SourceLocation.from_offsets("a\\n$x$", 2, 5)
            >>> str(loc)
            '2:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for messages.

        Returns:
            Formatted string like "note.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )

    @classmethod
    def from_offsets(
        cls,
        buffer: str,
        start: int,
        end: int,
        *,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Build a location from half-open buffer offsets.

        Offsets are clamped to the buffer, so stale spans still produce a
        usable (if inaccurate) location.

        Args:
            buffer: Text the offsets refer to
            start: Start offset (inclusive)
            end: End offset (exclusive)
            source_file: Optional file path for display

        Returns:
            SourceLocation covering ``buffer[start:end]``
        """
        start = min(max(start, 0), len(buffer))
        end = min(max(end, start), len(buffer))
        lineno, col = _line_col(buffer, start)
        end_lineno, end_col = _line_col(buffer, end)
        return cls(
            lineno=lineno,
            col_offset=col,
            offset=start,
            end_offset=end,
            end_lineno=end_lineno,
            end_col_offset=end_col,
            source_file=source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location."""
        return cls(lineno=0, col_offset=0)


def _line_col(buffer: str, offset: int) -> tuple[int, int]:
    """Return 1-indexed (line, column) for an offset already within bounds."""
    lineno = buffer.count("\n", 0, offset) + 1
    line_start = buffer.rfind("\n", 0, offset) + 1
    return lineno, offset - line_start + 1

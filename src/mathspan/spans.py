"""Math span data model.

A MathSpan records one embedded math expression found in a text buffer:
its trimmed LaTeX payload, its half-open offsets, and whether it was
written with the single (inline) or doubled (block) delimiter.

Spans are created by the scanner on every call and never mutated. Mutation
operators return new buffers, so any span computed against an older buffer
must be discarded and the buffer re-scanned.

Thread Safety:
    MathSpan is frozen and safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass

from mathspan.location import SourceLocation


@dataclass(frozen=True, slots=True)
class MathSpan:
    """A located math sub-expression within a text buffer.

    Attributes:
        latex: Payload between the delimiters, trimmed of surrounding whitespace
        start: Offset of the opening delimiter (inclusive)
        end: Offset just past the closing delimiter (exclusive)
        is_inline: True for single-delimiter spans, False for block spans
        raw: ``buffer[start:end]``, delimiters included

    Example:
        >>> span = scan("Area: $\\pi r^2$")[0]
        >>> (span.start, span.end, span.latex)
        (6, 15, '\\\\pi r^2')

    """

    latex: str
    start: int
    end: int
    is_inline: bool
    raw: str

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def delimiter(self) -> str:
        """The marker that opens and closes this span."""
        return self.raw[:1] if self.is_inline else self.raw[:2]

    def contains(self, offset: int) -> bool:
        """Whether ``offset`` touches this span, boundaries included.

        A caret sitting on either delimiter counts as inside, so activating
        the boundary glyph of a rendered expression still finds its source.
        """
        return self.start <= offset <= self.end

    def location(self, buffer: str, *, source_file: str | None = None) -> SourceLocation:
        """Line/column location of this span within ``buffer``."""
        return SourceLocation.from_offsets(
            buffer, self.start, self.end, source_file=source_file
        )

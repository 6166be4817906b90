"""Note statistics derived from a scan.

Feeds note-list metadata (word and math counts) without a second pass over
the text with different delimiter rules: math is counted exactly as the
scanner sees it.
"""

from __future__ import annotations

from dataclasses import dataclass

from mathspan.scanner import scan


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Counts for one note buffer."""

    word_count: int
    math_count: int
    inline_count: int
    block_count: int


def document_stats(buffer: str) -> DocumentStats:
    """Count whitespace-separated words and math spans in ``buffer``.

    Example:
        >>> document_stats("Let $x$ be\\n$$x^2$$")
        DocumentStats(word_count=4, math_count=2, inline_count=1, block_count=1)

    """
    spans = scan(buffer)
    inline_count = sum(1 for span in spans if span.is_inline)
    return DocumentStats(
        word_count=len(buffer.split()),
        math_count=len(spans),
        inline_count=inline_count,
        block_count=len(spans) - inline_count,
    )

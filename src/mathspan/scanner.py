"""Math span scanner and position locator.

Finds embedded math in raw note text without parsing the surrounding
markdown:

1. Block spans: shortest runs between doubled delimiters (``$$...$$``).
   They may cross newlines and may contain single delimiters.
2. Inline spans: shortest runs between single delimiters (``$...$``)
   that stay on one line.
3. Any inline match lying entirely inside a block span is dropped, so the
   ``$b$`` in ``$$a + $b$ + c$$`` is part of the block, not a second span.
4. Survivors are merged and ordered by start offset.

An opening marker with no closing partner simply produces no span. Both
functions are total: any string yields a list (possibly empty) and any
offset yields a span or None.

Complexity: O(blocks * inlines) for the containment check, which is fine
for editor-sized documents.

Thread Safety:
    Pure functions over immutable input. Compiled patterns are cached per
    delimiter in a module dict; concurrent first use at worst compiles twice.

"""

from __future__ import annotations

import re

from mathspan.config import get_math_config
from mathspan.spans import MathSpan

# delimiter -> (block pattern, inline pattern)
_PATTERNS: dict[str, tuple[re.Pattern[str], re.Pattern[str]]] = {}


def _patterns(delimiter: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    cached = _PATTERNS.get(delimiter)
    if cached is None:
        d = re.escape(delimiter)
        block = re.compile(rf"{d}{d}(.*?){d}{d}", re.DOTALL)
        inline = re.compile(rf"{d}([^{d}\n]*?){d}")
        cached = _PATTERNS[delimiter] = (block, inline)
    return cached


def scan(buffer: str) -> list[MathSpan]:
    """Return every math span in ``buffer``, ordered by start offset.

    Args:
        buffer: Raw document text

    Returns:
        List of MathSpan, ascending by ``start``. Empty when the buffer
        holds no complete span.

    Example:
        >>> [s.latex for s in scan("Inline $x$ and block $$y = mx + b$$.")]
        ['x', 'y = mx + b']

    """
    if not buffer:
        return []

    block_re, inline_re = _patterns(get_math_config().delimiter)

    blocks = [
        MathSpan(
            latex=match.group(1).strip(),
            start=match.start(),
            end=match.end(),
            is_inline=False,
            raw=match.group(0),
        )
        for match in block_re.finditer(buffer)
    ]

    spans = list(blocks)
    for match in inline_re.finditer(buffer):
        start, end = match.start(), match.end()
        # Block delimiters consume any single delimiters they contain
        if any(block.start <= start and end <= block.end for block in blocks):
            continue
        spans.append(
            MathSpan(
                latex=match.group(1).strip(),
                start=start,
                end=end,
                is_inline=True,
                raw=match.group(0),
            )
        )

    spans.sort(key=lambda span: span.start)
    return spans


def locate(buffer: str, offset: int) -> MathSpan | None:
    """Return the span containing ``offset``, or None.

    Both boundaries are inclusive: an offset equal to ``span.start`` or
    ``span.end`` is inside. When two adjacent spans share a boundary
    offset, the earlier span wins.

    Args:
        buffer: Raw document text
        offset: Caret or click offset into ``buffer``

    Returns:
        The first containing MathSpan, or None when the offset is in prose.

    """
    for span in scan(buffer):
        if span.contains(offset):
            return span
    return None


__all__ = ["scan", "locate"]

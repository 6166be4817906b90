"""Pure buffer mutations for math spans.

Every operator takes the buffer as an argument and returns a new one; the
input string and any MathSpan passed in are left alone. Offsets held in
spans scanned from the old buffer are stale afterwards: re-scan before
reusing them. Staleness is not detected here.

Formatting:
    ========  ==========================  ==============================
    kind      insert                      replace
    ========  ==========================  ==============================
    inline    ``$latex$``                 ``$latex$``
    block     ``\\n$$\\nlatex\\n$$\\n``   ``$$\\nlatex\\n$$``
    ========  ==========================  ==============================

Replacement normalizes block spans onto three lines whatever their original
internal whitespace; inline replacement adds no surrounding whitespace.

Offsets are clamped to ``[0, len(buffer)]`` so no input raises.

"""

from __future__ import annotations

from dataclasses import dataclass

from mathspan.config import get_math_config
from mathspan.scanner import locate
from mathspan.spans import MathSpan


@dataclass(frozen=True, slots=True)
class EditResult:
    """New buffer plus the caret offset that should follow the edit."""

    buffer: str
    cursor: int


def _clamp(offset: int, buffer: str) -> int:
    return min(max(offset, 0), len(buffer))


def wrap(latex: str, is_inline: bool) -> str:
    """Surround ``latex`` with the delimiters used by replace().

    Example:
        >>> wrap("x^2", True)
        '$x^2$'
        >>> wrap("x^2", False)
        '$$\\nx^2\\n$$'

    """
    config = get_math_config()
    if is_inline:
        return f"{config.delimiter}{latex}{config.delimiter}"
    return f"{config.block_delimiter}\n{latex}\n{config.block_delimiter}"


def _insertion_text(latex: str, is_inline: bool) -> str:
    if is_inline:
        return wrap(latex, True)
    return f"\n{wrap(latex, False)}\n"


def insert(buffer: str, position: int, latex: str, is_inline: bool = True) -> EditResult:
    """Splice a new math span into ``buffer`` at ``position``.

    Block spans are padded with a newline on each side so they start and
    end on their own lines. The returned cursor lands immediately after the
    inserted construct.

    Args:
        buffer: Current document text
        position: Insertion offset (clamped to the buffer)
        latex: Payload for the new span
        is_inline: Single (True) or doubled (False) delimiters

    Returns:
        EditResult with the new buffer and ``position + len(inserted)``.

    Example:
        >>> insert("Hello world", 6, "x^2", True)
        EditResult(buffer='Hello $x^2$world', cursor=11)

    """
    position = _clamp(position, buffer)
    text = _insertion_text(latex, is_inline)
    return EditResult(
        buffer=buffer[:position] + text + buffer[position:],
        cursor=position + len(text),
    )


def replace(buffer: str, span: MathSpan, new_latex: str) -> str:
    """Replace ``buffer[span.start:span.end]`` with a re-wrapped payload.

    The span's inline/block kind is kept. Characters outside the span's
    range are never touched.

    Args:
        buffer: Document text the span was scanned from
        span: Span to replace (must be fresh for ``buffer``)
        new_latex: Payload to write between the delimiters

    Returns:
        New buffer.

    """
    start = _clamp(span.start, buffer)
    end = max(start, _clamp(span.end, buffer))
    return buffer[:start] + wrap(new_latex, span.is_inline) + buffer[end:]


def append(buffer: str, latex: str, is_inline: bool = True) -> str:
    """Add a new math span at the very end of ``buffer``."""
    return insert(buffer, len(buffer), latex, is_inline).buffer


def insert_or_replace(
    buffer: str,
    position: int,
    latex: str,
    is_inline: bool = True,
) -> EditResult:
    """Commit ``latex`` at a caret position, editing in place when possible.

    If the caret touches an existing span, that span is replaced (keeping
    its own inline/block kind, ``is_inline`` is ignored) and the cursor is
    placed just after the replacement. Otherwise a new span is inserted.

    Example:
        >>> insert_or_replace("See $a$ here", 5, "b")
        EditResult(buffer='See $b$ here', cursor=7)

    """
    existing = locate(buffer, position)
    if existing is None:
        return insert(buffer, position, latex, is_inline)
    return EditResult(
        buffer=replace(buffer, existing, latex),
        cursor=existing.start + len(wrap(latex, existing.is_inline)),
    )


__all__ = [
    "EditResult",
    "append",
    "insert",
    "insert_or_replace",
    "replace",
    "wrap",
]

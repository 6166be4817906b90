"""Editing-session state machine for round-trip math editing.

An EditingSession tracks one in-progress edit: either of a span that
already exists in the host buffer, or of a brand-new expression that has
not been inserted yet.

States and transitions::

    Idle    --start()-->   Editing
    Editing --update()-->  Editing   (live latex only)
    Editing --commit()-->  Idle      (returns the new buffer)
    Editing --cancel()-->  Idle      (buffer untouched)
    Idle    --cancel()-->  Idle

Each transition swaps in a new frozen SessionState; nothing is mutated in
place. Starting while already editing discards the previous session's
uncommitted latex (last start wins).

Commit semantics:
    - Session started on a located span: that exact span is replaced.
    - Otherwise (toolbar insert, or no span at the offset): the expression
      is appended to the end of the buffer. This is the degraded path for
      callers without caret context; editors that know the caret should
      use ``mutations.insert_or_replace`` instead.

The session never validates. Whatever latex is committed is written
verbatim; the UI layer runs ``validate`` and disables its commit action.

Thread Safety:
    Not thread-safe. One session belongs to one document view.

"""

from __future__ import annotations

from dataclasses import dataclass, replace

from mathspan.config import get_math_config
from mathspan.mutations import append
from mathspan.mutations import replace as replace_span
from mathspan.protocols import Announcer, Priority
from mathspan.scanner import locate
from mathspan.spans import MathSpan
from mathspan.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Anchor:
    """Display coordinate for placing the edit surface. Opaque to the engine."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class SessionState:
    """Snapshot of an editing session.

    Attributes:
        is_editing: False while idle
        latex: Live value being edited
        anchor: Where the host UI should show the editor
        is_inline: Kind of span being edited or created
        original_expression: Span a commit will replace; None for a new
            expression, which commit appends instead

    """

    is_editing: bool = False
    latex: str = ""
    anchor: Anchor = Anchor()
    is_inline: bool = True
    original_expression: MathSpan | None = None


IDLE = SessionState()


class EditingSession:
    """Caller-owned holder for the current math edit.

    Args:
        announcer: Optional screen-reader announcer told about start,
            commit and cancel.

    Example:
        >>> session = EditingSession()
        >>> note = "The formula $x^2$ is known."
        >>> session.start("x^2", Anchor(120, 48), True, buffer=note, offset=14)
        >>> session.update("a^2 + b^2")
        >>> session.commit(note)
        'The formula $a^2 + b^2$ is known.'

    """

    def __init__(self, announcer: Announcer | None = None) -> None:
        self._announcer = announcer
        self._state = IDLE

    def __repr__(self) -> str:
        return f"EditingSession({self._state!r})"

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_editing(self) -> bool:
        return self._state.is_editing

    @property
    def latex(self) -> str:
        return self._state.latex

    @property
    def anchor(self) -> Anchor:
        return self._state.anchor

    @property
    def is_inline(self) -> bool:
        return self._state.is_inline

    @property
    def original_expression(self) -> MathSpan | None:
        return self._state.original_expression

    def start(
        self,
        latex: str,
        anchor: Anchor | None = None,
        is_inline: bool = True,
        buffer: str | None = None,
        offset: int | None = None,
    ) -> None:
        """Enter Editing.

        When both ``buffer`` and ``offset`` are given and a span sits at the
        offset, it becomes the original expression and its own latex and
        kind replace the caller's hints. Otherwise the caller's ``latex``
        and ``is_inline`` are used as given.

        Args:
            latex: Initial value (hint when a span is located)
            anchor: Display position for the edit surface
            is_inline: Kind of expression (hint when a span is located)
            buffer: Current document text, if known
            offset: Caret or click offset into ``buffer``, if known
        """
        if self._state.is_editing:
            logger.debug("Discarding uncommitted session for new start")

        original = None
        if buffer is not None and offset is not None:
            original = locate(buffer, offset)

        if original is not None:
            latex, is_inline = original.latex, original.is_inline
            logger.debug(
                "Editing existing %s span [%d, %d)",
                "inline" if is_inline else "block",
                original.start,
                original.end,
            )
        else:
            logger.debug("Editing new %s expression", "inline" if is_inline else "block")

        self._state = SessionState(
            is_editing=True,
            latex=latex,
            anchor=anchor if anchor is not None else Anchor(),
            is_inline=is_inline,
            original_expression=original,
        )
        self._announce(
            "Editing math expression" if original is not None else "Inserting math expression"
        )

    def update(self, latex: str) -> None:
        """Replace the live latex. Ignored while idle."""
        if not self._state.is_editing:
            return
        self._state = replace(self._state, latex=latex)

    def commit(self, buffer: str, new_latex: str | None = None) -> str:
        """Write the edit into ``buffer`` and return to Idle.

        Args:
            buffer: Current document text. For a located span this must be
                the same text the session was started with.
            new_latex: Value to commit; defaults to the live latex

        Returns:
            The new buffer, or ``buffer`` unchanged when no session is active.
        """
        state = self._state
        if not state.is_editing:
            logger.warning("commit() with no active math session; buffer unchanged")
            return buffer

        latex = state.latex if new_latex is None else new_latex
        if state.original_expression is not None:
            result = replace_span(buffer, state.original_expression, latex)
            message = "Math expression updated"
        else:
            result = append(buffer, latex, state.is_inline)
            message = "Math expression inserted"

        self._state = IDLE
        logger.debug("Committed math session (%d -> %d chars)", len(buffer), len(result))
        self._announce(message)
        return result

    def cancel(self) -> None:
        """Discard the session. Safe to call when already idle."""
        if not self._state.is_editing:
            return
        self._state = IDLE
        logger.debug("Cancelled math session")
        self._announce("Math editing cancelled")

    def _announce(self, message: str, priority: Priority = "polite") -> None:
        if self._announcer is None or not get_math_config().announce_transitions:
            return
        try:
            self._announcer.announce(message, priority)
        except Exception:
            # Announcer faults never escape a transition
            logger.warning("Announcer failed for %r", message, exc_info=True)


__all__ = ["IDLE", "Anchor", "EditingSession", "SessionState"]

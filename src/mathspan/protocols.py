"""Protocols for mathspan collaborators.

Defines the narrow interfaces the editing engine consumes from the
surrounding UI. Implementations are injected, never looked up globally.
"""

from __future__ import annotations

from typing import Literal, Protocol

Priority = Literal["polite", "assertive"]


class Announcer(Protocol):
    """Protocol for screen-reader announcements.

    Typically backed by an ARIA live region in the host page. The editing
    session reports start, commit and cancel through it.

    """

    def announce(self, message: str, priority: Priority = "polite") -> None:
        """Queue ``message`` for assistive technology.

        Args:
            message: Human-readable status text
            priority: ``"polite"`` waits for idle; ``"assertive"`` interrupts
        """
        ...

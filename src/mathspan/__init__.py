"""
mathspan — Math span tracking and round-trip editing for markdown notes

Locates ``$inline$`` and ``$$block$$`` math inside raw note text, maps a
caret or click offset back to the span that produced a rendered formula,
and writes an edited formula back without touching anything around it.
Markdown rendering itself is left to whatever renderer the host uses.

Quick Start:
    >>> from mathspan import scan, locate, replace
    >>> note = "Pythagoras: $a^2 + b^2 = c^2$."
    >>> span = locate(note, 15)
    >>> span.latex
    'a^2 + b^2 = c^2'
    >>> replace(note, span, "c = \\\\sqrt{a^2 + b^2}")
    'Pythagoras: $c = \\\\sqrt{a^2 + b^2}$.'

Editing sessions:
    >>> from mathspan import EditingSession
    >>> session = EditingSession()
    >>> session.start("", is_inline=False)     # toolbar "insert block"
    >>> session.update("E = mc^2")
    >>> session.commit("Energy:")
    'Energy:\\n$$\\nE = mc^2\\n$$\\n'

Installation:
    pip install mathspan             # zero runtime dependencies
    pip install mathspan[test]       # + pytest and hypothesis
"""

from mathspan.config import (
    MathConfig,
    get_math_config,
    math_config_context,
    reset_math_config,
    set_math_config,
)
from mathspan.errors import ConfigError, MathSpanError
from mathspan.location import SourceLocation
from mathspan.mutations import EditResult, append, insert, insert_or_replace, replace, wrap
from mathspan.protocols import Announcer
from mathspan.scanner import locate, scan
from mathspan.session import IDLE, Anchor, EditingSession, SessionState
from mathspan.shortcuts import MATH_SHORTCUTS, expand_shortcut
from mathspan.spans import MathSpan
from mathspan.stats import DocumentStats, document_stats
from mathspan.validation import ValidationResult, validate

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Data model
    "MathSpan",
    "EditResult",
    "ValidationResult",
    # Scanning
    "scan",
    "locate",
    # Validation
    "validate",
    # Mutation
    "insert",
    "replace",
    "append",
    "wrap",
    "insert_or_replace",
    # Editing session
    "EditingSession",
    "SessionState",
    "Anchor",
    "IDLE",
    "Announcer",
    # Configuration (ContextVar-based)
    "MathConfig",
    "get_math_config",
    "set_math_config",
    "reset_math_config",
    "math_config_context",
    # Errors
    "MathSpanError",
    "ConfigError",
    # Location
    "SourceLocation",
    # Extras
    "DocumentStats",
    "document_stats",
    "MATH_SHORTCUTS",
    "expand_shortcut",
    "__version__",
]

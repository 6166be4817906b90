"""Shallow structural validation for math payloads.

A fast pre-commit sanity check, not a LaTeX grammar. Rules are checked in
order and the first failure wins:

1. Blank input -> ``"empty expression"``
2. Brace balance -> ``"unmatched closing brace"`` / ``"unmatched opening brace"``
3. Smell tests -> ``"invalid syntax"``: a command whose opening brace never
   closes, or a pair of span delimiters nested inside the payload.

The heuristics can over-reject (a literal, non-math ``$`` pair) and
under-reject (unbalanced ``\\left``/``\\right``); strictness is kept as is.
A balanced, delimiter-free, non-blank expression is always accepted.

Results are returned, never raised. The mutation operators do not consult
the validator; blocking an invalid commit is the calling UI's decision.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mathspan.config import get_math_config

EMPTY_EXPRESSION = "empty expression"
UNMATCHED_CLOSING_BRACE = "unmatched closing brace"
UNMATCHED_OPENING_BRACE = "unmatched opening brace"
INVALID_SYNTAX = "invalid syntax"

_OPEN_COMMAND = re.compile(r"\\[a-zA-Z]+\s*\{[^}]*\Z")


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validate().

    Attributes:
        valid: Whether the payload passed every check
        error: Reason string for the first failed check, None when valid

    """

    valid: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.valid


_VALID = ValidationResult(valid=True)


def validate(latex: str) -> ValidationResult:
    """Check a candidate math payload for structural well-formedness.

    Args:
        latex: Payload without surrounding delimiters

    Returns:
        ValidationResult; falsy when invalid, with ``error`` set.

    Example:
        >>> validate("x^2 + y^2")
        ValidationResult(valid=True, error=None)
        >>> validate("\\\\frac{x}{y").error
        'unmatched opening brace'

    """
    if not latex.strip():
        return ValidationResult(False, EMPTY_EXPRESSION)

    depth = 0
    for char in latex:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                return ValidationResult(False, UNMATCHED_CLOSING_BRACE)
    if depth != 0:
        return ValidationResult(False, UNMATCHED_OPENING_BRACE)

    d = re.escape(get_math_config().delimiter)
    if _OPEN_COMMAND.search(latex) or re.search(rf"{d}.*{d}", latex):
        return ValidationResult(False, INVALID_SYNTAX)

    return _VALID


__all__ = [
    "EMPTY_EXPRESSION",
    "INVALID_SYNTAX",
    "UNMATCHED_CLOSING_BRACE",
    "UNMATCHED_OPENING_BRACE",
    "ValidationResult",
    "validate",
]

"""Typed-word shortcuts for math input.

Maps words a user types in the math editor to the LaTeX they expand to.
Templates use ``#@`` for the selection/first slot and ``#?`` for further
placeholders, as understood by common math-field widgets.

Example:
    >>> expand_shortcut("alpha")
    '\\\\alpha'
    >>> expand_shortcut("frac")
    '\\\\frac{#@}{#?}'
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

_GREEK = (
    "alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta",
    "iota", "kappa", "lambda", "mu", "nu", "xi", "pi", "rho", "sigma",
    "tau", "phi", "chi", "psi", "omega",
)

_SHORTCUTS: dict[str, str] = {name: f"\\{name}" for name in _GREEK}
_SHORTCUTS.update({
    # Operators
    "sum": r"\sum",
    "prod": r"\prod",
    "int": r"\int",
    "oint": r"\oint",
    "lim": r"\lim",
    "inf": r"\infty",
    "infty": r"\infty",
    "partial": r"\partial",
    "nabla": r"\nabla",
    # Functions
    "frac": r"\frac{#@}{#?}",
    "sqrt": r"\sqrt{#@}",
    "cbrt": r"\sqrt[3]{#@}",
    "sin": r"\sin",
    "cos": r"\cos",
    "tan": r"\tan",
    "log": r"\log",
    "ln": r"\ln",
    "exp": r"\exp",
    # Arrows
    "to": r"\to",
    "rightarrow": r"\rightarrow",
    "leftarrow": r"\leftarrow",
    "leftrightarrow": r"\leftrightarrow",
    "Rightarrow": r"\Rightarrow",
    "Leftarrow": r"\Leftarrow",
    "Leftrightarrow": r"\Leftrightarrow",
    # Relations
    "leq": r"\leq",
    "geq": r"\geq",
    "neq": r"\neq",
    "approx": r"\approx",
    "equiv": r"\equiv",
    "propto": r"\propto",
    "in": r"\in",
    "notin": r"\notin",
    "subset": r"\subset",
    "supset": r"\supset",
    "subseteq": r"\subseteq",
    "supseteq": r"\supseteq",
    # Sets
    "emptyset": r"\emptyset",
    "cup": r"\cup",
    "cap": r"\cap",
    "union": r"\cup",
    "intersection": r"\cap",
    # Logic
    "land": r"\land",
    "lor": r"\lor",
    "lnot": r"\lnot",
    "forall": r"\forall",
    "exists": r"\exists",
    # Misc
    "pm": r"\pm",
    "mp": r"\mp",
    "cdot": r"\cdot",
    "times": r"\times",
    "div": r"\div",
    "ast": r"\ast",
    "star": r"\star",
    "circ": r"\circ",
    "bullet": r"\bullet",
    "oplus": r"\oplus",
    "ominus": r"\ominus",
    "otimes": r"\otimes",
    "oslash": r"\oslash",
})

MATH_SHORTCUTS: Mapping[str, str] = MappingProxyType(_SHORTCUTS)


def expand_shortcut(word: str) -> str | None:
    """Return the LaTeX for ``word``, or None if it is not a shortcut.

    Lookup is case-sensitive (``Rightarrow`` and ``rightarrow`` differ).
    """
    return MATH_SHORTCUTS.get(word)


__all__ = ["MATH_SHORTCUTS", "expand_shortcut"]

"""Find every formula in a note and report where it lives."""

from mathspan import scan, validate

note = """# Kinematics

Displacement is $s = ut + \\frac{1}{2}at^2$ for constant $a$.

$$
v^2 = u^2 + 2as
$$

Broken: $\\frac{1}{2$ and an unterminated $ sign.
"""

for span in scan(note):
    kind = "inline" if span.is_inline else "block"
    result = validate(span.latex)
    status = "ok" if result else result.error
    print(f"{span.location(note)}  {kind:6}  {span.latex!r}  [{status}]")

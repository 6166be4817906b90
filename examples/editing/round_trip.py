"""Click a rendered formula, edit it, commit it back in place."""

from mathspan import Anchor, EditingSession, insert_or_replace, validate

note = "The area of a circle is $\\pi r^2$ and its perimeter is $2\\pi r$."


class PrintAnnouncer:
    def announce(self, message: str, priority: str = "polite") -> None:
        print(f"[aria-live={priority}] {message}")


session = EditingSession(PrintAnnouncer())

# Renderer reports a click on the first formula at caret offset 26
session.start("\\pi r^2", Anchor(140, 32), True, buffer=note, offset=26)
session.update("\\pi r^{2}")

if validate(session.latex):
    note = session.commit(note)
print(note)

# Toolbar insert with caret context: edits in place when the caret is on math
result = insert_or_replace(note, len(note), "A = \\pi r^2", is_inline=False)
print(result.buffer)
print("cursor ->", result.cursor)

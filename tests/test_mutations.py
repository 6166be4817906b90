"""Tests for mathspan.mutations — pure insert/replace operators."""

from mathspan import (
    EditResult,
    MathConfig,
    append,
    insert,
    insert_or_replace,
    math_config_context,
    replace,
    scan,
    wrap,
)


class TestWrap:
    def test_inline(self) -> None:
        assert wrap("x^2", True) == "$x^2$"

    def test_block(self) -> None:
        assert wrap("x^2", False) == "$$\nx^2\n$$"

    def test_follows_configured_delimiter(self) -> None:
        with math_config_context(MathConfig(delimiter="%")):
            assert wrap("x", True) == "%x%"
            assert wrap("x", False) == "%%\nx\n%%"


class TestInsert:
    """insert() splices a new span and reports the follow-on cursor."""

    def test_inline_at_position(self) -> None:
        result = insert("Hello world", 6, "x^2", True)
        assert result == EditResult(buffer="Hello $x^2$world", cursor=11)

    def test_block_at_position(self) -> None:
        result = insert("Hello world", 6, "x^2", False)
        inserted = "\n$$\nx^2\n$$\n"

        assert result.buffer == "Hello \n$$\nx^2\n$$\nworld"
        assert result.cursor == 6 + len(inserted) == 17

    def test_at_beginning(self) -> None:
        result = insert("world", 0, "\\alpha")
        assert result.buffer == "$\\alpha$world"
        assert result.cursor == 8

    def test_at_end(self) -> None:
        result = insert("Hello", 5, "\\alpha")
        assert result.buffer == "Hello$\\alpha$"
        assert result.cursor == len(result.buffer)

    def test_into_empty_buffer(self) -> None:
        assert insert("", 0, "", True) == EditResult(buffer="$$", cursor=2)

    def test_position_is_clamped(self) -> None:
        assert insert("abc", 99, "x") == EditResult(buffer="abc$x$", cursor=6)
        assert insert("abc", -5, "x") == EditResult(buffer="$x$abc", cursor=3)

    def test_inserted_span_is_scannable(self) -> None:
        result = insert("Intro text", 5, "\\int_0^1 f", False)
        (span,) = scan(result.buffer)
        assert span.latex == "\\int_0^1 f"
        assert span.is_inline is False


class TestReplace:
    """replace() rewrites exactly one span."""

    def test_inline(self) -> None:
        content = "This is $\\alpha$ math."
        (span,) = scan(content)
        assert replace(content, span, "\\beta") == "This is $\\beta$ math."

    def test_block(self) -> None:
        content = "Block: $$\\alpha$$ end."
        (span,) = scan(content)
        assert replace(content, span, "\\beta") == "Block: $$\n\\beta\n$$ end."

    def test_block_is_normalized(self) -> None:
        content = "A\n$$\n     x   \n\n$$\nB"
        (span,) = scan(content)
        assert replace(content, span, "y") == "A\n$$\ny\n$$\nB"

    def test_sequential_replacements_rescan(self) -> None:
        content = "First $\\alpha$ and second $\\beta$."
        first = scan(content)[0]
        content = replace(content, first, "\\delta")
        assert content == "First $\\delta$ and second $\\beta$."

        second = scan(content)[1]
        content = replace(content, second, "\\gamma")
        assert content == "First $\\delta$ and second $\\gamma$."

    def test_does_not_touch_surroundings(self) -> None:
        content = "pre $old$ post"
        (span,) = scan(content)
        result = replace(content, span, "brand new")

        assert result.startswith(content[: span.start])
        assert result.endswith(content[span.end :])

    def test_inputs_are_untouched(self) -> None:
        content = "x $a$ y"
        (span,) = scan(content)
        before = (span.latex, span.start, span.end, span.raw)

        replace(content, span, "b")

        assert content == "x $a$ y"
        assert (span.latex, span.start, span.end, span.raw) == before


class TestAppend:
    def test_inline(self) -> None:
        assert append("Hello world", "x^2") == "Hello world$x^2$"

    def test_block(self) -> None:
        assert append("Energy:", "E = mc^2", False) == "Energy:\n$$\nE = mc^2\n$$\n"


class TestInsertOrReplace:
    """Caret-aware commit: edit in place when the caret touches a span."""

    def test_replaces_span_under_caret(self) -> None:
        result = insert_or_replace("See $a$ here", 5, "b")
        assert result == EditResult(buffer="See $b$ here", cursor=7)

    def test_keeps_existing_kind(self) -> None:
        result = insert_or_replace("A $$x$$ B", 3, "y", is_inline=True)
        assert result.buffer == "A $$\ny\n$$ B"
        assert result.cursor == 2 + len("$$\ny\n$$")

    def test_inserts_when_no_span(self) -> None:
        result = insert_or_replace("Hello world", 6, "x^2")
        assert result == insert("Hello world", 6, "x^2")

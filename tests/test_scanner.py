"""Tests for mathspan.scanner — span discovery and position lookup."""

from hypothesis import given, settings
from hypothesis import strategies as st

from mathspan import MathConfig, locate, math_config_context, scan
from mathspan.spans import MathSpan


@st.composite
def separated_spans(draw: st.DrawFn) -> str:
    """Inline and block spans with at least one prose character between them."""
    inline = st.text(alphabet="abx^{} ", min_size=1, max_size=6).map(lambda s: f"${s}$")
    block = st.text(alphabet="abx^{}\n ", max_size=6).map(lambda s: f"$$\n{s}\n$$")
    pieces = draw(st.lists(st.one_of(inline, block), min_size=1, max_size=5))
    prose = st.text(alphabet="ab x\n", min_size=1, max_size=5)
    return draw(prose) + "".join(piece + draw(prose) for piece in pieces)

# =========================================================================
# scan
# =========================================================================


class TestScanInline:
    """Single-delimiter spans."""

    def test_extracts_inline_expressions(self) -> None:
        content = "This is $\\alpha$ and $\\beta$ math."
        spans = scan(content)

        assert spans == [
            MathSpan(latex="\\alpha", start=8, end=16, is_inline=True, raw="$\\alpha$"),
            MathSpan(latex="\\beta", start=21, end=28, is_inline=True, raw="$\\beta$"),
        ]

    def test_payload_is_trimmed(self) -> None:
        (span,) = scan("$  x + 1  $")
        assert span.latex == "x + 1"
        assert span.raw == "$  x + 1  $"

    def test_inline_does_not_span_newline(self) -> None:
        assert scan("a $x\ny$ b") == []

    def test_unterminated_marker_yields_nothing(self) -> None:
        assert scan("This costs $5 today") == []

    def test_adjacent_spans_are_independent(self) -> None:
        spans = scan("$a$$b$")
        assert [(s.latex, s.start, s.end) for s in spans] == [("a", 0, 3), ("b", 3, 6)]
        assert all(s.is_inline for s in spans)


class TestScanBlock:
    """Double-delimiter spans and their precedence over inline ones."""

    def test_extracts_block_expression(self) -> None:
        content = "Here is block math:\n$$\\frac{a}{b}$$\nEnd."
        (span,) = scan(content)

        assert span.is_inline is False
        assert span.latex == "\\frac{a}{b}"
        assert (span.start, span.end) == (20, 35)
        assert span.raw == "$$\\frac{a}{b}$$"

    def test_block_spans_newlines(self) -> None:
        content = "Intro\n$$\n\\sum_{i=1}^n i\n$$\nOutro"
        (span,) = scan(content)

        assert span.is_inline is False
        assert span.latex == "\\sum_{i=1}^n i"
        assert content[span.start : span.end] == "$$\n\\sum_{i=1}^n i\n$$"

    def test_block_consumes_nested_inline(self) -> None:
        spans = scan("text $$a + $b$ + c$$ end")

        assert len(spans) == 1
        assert spans[0].is_inline is False
        assert spans[0].latex == "a + $b$ + c"
        assert (spans[0].start, spans[0].end) == (5, 20)

    def test_block_precedence_with_commands(self) -> None:
        spans = scan("Test $$\\alpha + $\\beta$ + \\gamma$$ end.")
        assert len(spans) == 1
        assert spans[0].latex == "\\alpha + $\\beta$ + \\gamma"

    def test_mixed_inline_and_block(self) -> None:
        spans = scan("Inline $x$ and block $$y = mx + b$$ math.")

        assert [(s.latex, s.is_inline) for s in spans] == [
            ("x", True),
            ("y = mx + b", False),
        ]


class TestScanGeneral:
    """Ordering and degenerate input."""

    def test_empty_buffer(self) -> None:
        assert scan("") == []

    def test_no_math(self) -> None:
        assert scan("This is just regular text with no math expressions.") == []

    def test_sorted_by_start(self) -> None:
        spans = scan("Second $$block$$ first $inline$ third $another$.")

        assert len(spans) == 3
        assert spans[0].start < spans[1].start < spans[2].start
        assert [s.is_inline for s in spans] == [False, True, True]

    def test_raw_matches_buffer_slice(self) -> None:
        content = "a $x$ b $$y$$ c $z$"
        for span in scan(content):
            assert content[span.start : span.end] == span.raw
            assert span.start < span.end

    def test_custom_delimiter(self) -> None:
        with math_config_context(MathConfig(delimiter="%")):
            spans = scan("rate %x% and %%y%% but $z$")

        assert [(s.latex, s.is_inline) for s in spans] == [("x", True), ("y", False)]
        assert spans[1].delimiter == "%%"


# =========================================================================
# locate
# =========================================================================


class TestLocate:
    """Offset-to-span lookup."""

    content = "Start $\\alpha$ middle $$\\beta$$ end $\\gamma$."

    def test_inside_inline(self) -> None:
        span = locate(self.content, 10)
        assert span is not None
        assert span.latex == "\\alpha"
        assert span.is_inline is True

    def test_inside_block(self) -> None:
        span = locate(self.content, 25)
        assert span is not None
        assert span.latex == "\\beta"
        assert span.is_inline is False

    def test_outside_returns_none(self) -> None:
        assert locate(self.content, 0) is None
        assert locate(self.content, 18) is None

    def test_boundaries_are_inclusive(self) -> None:
        for span in scan(self.content):
            assert locate(self.content, span.start) == span
            assert locate(self.content, span.end) == span

    @given(buffer=separated_spans())
    @settings(max_examples=100)
    def test_both_boundaries_find_their_own_span(self, buffer: str) -> None:
        spans = scan(buffer)
        assert spans
        for span in spans:
            assert locate(buffer, span.start) == span
            assert locate(buffer, span.end) == span

    def test_shared_boundary_prefers_earlier_span(self) -> None:
        located = locate("$a$$b$", 3)
        assert located is not None
        assert located.latex == "a"

    def test_out_of_range_offsets(self) -> None:
        assert locate(self.content, -1) is None
        assert locate(self.content, len(self.content) + 10) is None

    def test_empty_buffer(self) -> None:
        assert locate("", 0) is None

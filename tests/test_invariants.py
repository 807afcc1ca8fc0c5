"""Property-based tests for parser and renderer invariants.

Uses Hypothesis to check, over generated input:
- Block spans are contiguous and cover the whole buffer
- Inline spans tile their paragraph
- Parsing and rendering never raise on any text
- Canonical documents render back to their exact source
"""

from __future__ import annotations

import io
import string

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from md2md import Heading, Paragraph, cleanup, parse, render, render_text

# Markdown-heavy alphabet so generated text hits every grammar
_MARKDOWN_CHARS = "ab #=-[]()<>!`@:/\"' \t\n\r"

_markdown_text = st.text(alphabet=_MARKDOWN_CHARS, max_size=200) | st.text(max_size=100)

_LETTERS = string.ascii_letters + string.digits

# --- Canonical document strategy -------------------------------------------

_word = st.text(alphabet=_LETTERS + ",.", min_size=1, max_size=8)
_phrase = st.text(alphabet=_LETTERS + " ", max_size=10)
_destination = st.text(alphabet=_LETTERS + "/:.", min_size=1, max_size=12)
_title = st.none() | st.text(alphabet=_LETTERS + " ", max_size=8)


def _title_suffix(title: str | None) -> str:
    return "" if title is None else f' "{title}"'


_inline_link = st.builds(
    lambda text, dest, title: f"[{text}]({dest}{_title_suffix(title)})",
    _phrase,
    _destination,
    _title,
)
_ref_link = st.builds(lambda text, ident: f"[{text}][{ident}]", _phrase, _phrase)
_image = st.builds(
    lambda alt, dest, title: f"![{alt}]({dest}{_title_suffix(title)})",
    _phrase,
    _destination,
    _title,
)
_url_autolink = _destination.map(lambda rest: f"<https://{rest}>")
_email_autolink = st.builds(
    lambda local, domain: f"<mailto:{local}@{domain}>",
    st.text(alphabet=_LETTERS + ".", min_size=1, max_size=6),
    st.text(alphabet=_LETTERS + ".", min_size=1, max_size=6),
)
_code = st.text(alphabet=_LETTERS + " ", min_size=1, max_size=8).map(lambda c: f"`{c}`")

_piece = st.one_of(
    _word, _word, _word, _inline_link, _ref_link, _image, _url_autolink, _email_autolink, _code
)
_line = st.lists(_piece, min_size=1, max_size=5).map(" ".join)
_lines = st.lists(_line, min_size=1, max_size=3).map("\n".join)

_atx_heading = st.builds(lambda level, text: "#" * level + " " + text, st.integers(1, 6), _line)
_setext_heading = st.builds(
    lambda text, char, width: f"{text}\n{char * width}",
    _lines,
    st.sampled_from("=-"),
    st.integers(1, 12),
)
_block = st.one_of(_lines, _atx_heading, _setext_heading)


@st.composite
def canonical_documents(draw: st.DrawFn) -> str:
    """Documents built only from constructs that render back verbatim."""
    blocks = draw(st.lists(_block, min_size=1, max_size=5))
    out = draw(st.sampled_from(["", "\n", "\n\n"]))
    for i, block in enumerate(blocks):
        if i:
            out += "\n" * draw(st.integers(2, 3))
        out += block
    return out + draw(st.sampled_from(["", "\n", "\n\n"]))


# --- Properties ---------------------------------------------------------------


class TestBlockInvariants:
    """Structural guarantees of the block segmenter."""

    @given(_markdown_text)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_blocks_cover_source(self, source: str) -> None:
        doc = parse(source)
        pos = 0
        for block in doc.children:
            assert block.location.offset == pos
            assert block.location.end_offset > pos
            pos = block.location.end_offset
        assert pos == len(source)

    @given(_markdown_text)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_inline_spans_are_contiguous(self, source: str) -> None:
        doc = parse(source)
        for block in doc.children:
            if not isinstance(block, (Paragraph, Heading)) or not block.children:
                continue
            pos = block.children[0].location.offset
            assert pos >= block.location.offset
            for node in block.children:
                assert node.location.offset == pos
                pos = node.location.end_offset
            assert pos <= block.location.end_offset
            if isinstance(block, Paragraph):
                assert pos == block.location.end_offset


class TestNeverRaises:
    """Any text is accepted by cleanup, the parser and both renderers."""

    @given(_markdown_text)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_full_pipeline(self, source: str) -> None:
        doc = parse(cleanup(source))
        assert isinstance(render(doc, "html"), str)
        assert isinstance(render(doc, "markdown"), str)


class TestCanonicalRoundTrip:
    """render_text(parse(x)) reproduces canonical x exactly."""

    @given(canonical_documents())
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_round_trip(self, source: str) -> None:
        buf = io.StringIO()
        render_text(parse(source), buf)
        assert buf.getvalue() == source

    @given(canonical_documents())
    @settings(max_examples=100)
    def test_cleanup_is_identity(self, source: str) -> None:
        assert cleanup(source) == source

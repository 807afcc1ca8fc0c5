"""Tests for the Parser class and its mixin contracts."""

from __future__ import annotations

from md2md.parser import Parser
from md2md.parsing import ParserHost
from md2md.parsing.source_nav import compute_line_starts


class TestParser:
    def test_satisfies_host_protocol(self) -> None:
        """The composed parser provides everything the mixins require."""
        assert isinstance(Parser("x"), ParserHost)

    def test_parse_returns_tuple(self) -> None:
        blocks = Parser("# a\n\nb").parse()
        assert isinstance(blocks, tuple)
        assert len(blocks) == 3

    def test_empty_source(self) -> None:
        assert Parser("").parse() == ()

    def test_source_file_on_nodes(self) -> None:
        (block,) = Parser("text", source_file="doc.md").parse()
        assert block.location.source_file == "doc.md"
        assert block.children[0].location.source_file == "doc.md"


class TestSourceNavigation:
    def test_line_starts(self) -> None:
        assert compute_line_starts("ab\n\ncd\n") == [0, 3, 4, 7]

    def test_line_col(self) -> None:
        parser = Parser("ab\ncd")
        assert parser._line_col(0) == (1, 1)
        assert parser._line_col(4) == (2, 2)
        assert parser._line_col(5) == (2, 3)

    def test_line_end(self) -> None:
        parser = Parser("ab\ncd")
        assert parser._line_end(0) == 2
        assert parser._line_end(3) == 5

    def test_location_span(self) -> None:
        loc = Parser("ab\ncd")._location(1, 4)
        assert (loc.lineno, loc.col_offset, loc.end_lineno, loc.end_col_offset) == (1, 2, 2, 2)
        assert (loc.offset, loc.end_offset) == (1, 4)

"""Tests for AST serialization (to_dict, from_dict, to_json, from_json)."""

import json

import pytest

from md2md import parse
from md2md.location import SourceLocation
from md2md.nodes import Document, InlineTarget, Link, RefTarget, Text
from md2md.serialization import from_dict, from_json, to_dict, to_json

_LOC = SourceLocation(lineno=1, col_offset=1)

_SAMPLE = (
    "Title\n=====\n\n"
    "Some `code`, a [link](https://x.y \"T\") and ![img][ref].\n"
    "<mailto:a@b.c> <https://e.f>\n\n"
    "## Next ##\n"
)


class TestToDict:
    """Tests for to_dict()."""

    def test_type_discriminator(self) -> None:
        data = to_dict(Text(location=_LOC, content="hi"))
        assert data["_type"] == "Text"
        assert data["content"] == "hi"
        assert data["location"]["_type"] == "SourceLocation"

    def test_targets_serialized(self) -> None:
        link = Link(location=_LOC, children=(), target=RefTarget("r"))
        assert to_dict(link)["target"] == {"_type": "RefTarget", "identifier": "r"}

    def test_children_are_lists(self) -> None:
        data = to_dict(parse("a\nb"))
        assert isinstance(data["children"], list)
        assert [c["_type"] for c in data["children"][0]["children"]] == [
            "Text",
            "SoftBreak",
            "Text",
        ]


class TestRoundTrip:
    """from_dict(to_dict(x)) and from_json(to_json(x)) reproduce the AST."""

    def test_dict_round_trip(self) -> None:
        doc = parse(_SAMPLE, source_file="sample.md")
        assert from_dict(to_dict(doc)) == doc

    def test_json_round_trip(self) -> None:
        doc = parse(_SAMPLE)
        assert from_json(to_json(doc)) == doc

    def test_inline_target_round_trip(self) -> None:
        link = Link(location=_LOC, children=(), target=InlineTarget("u"), title="t")
        assert from_dict(to_dict(link)) == link

    def test_json_is_deterministic(self) -> None:
        doc = parse(_SAMPLE)
        assert to_json(doc) == to_json(parse(_SAMPLE))
        raw = to_json(doc, indent=2)
        assert raw == json.dumps(json.loads(raw), sort_keys=True, indent=2)


class TestErrors:
    """Malformed serialized data."""

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"content": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type: 'Table'"):
            from_dict({"_type": "Table"})

    def test_from_json_requires_document(self) -> None:
        raw = json.dumps(to_dict(Text(location=_LOC, content="x")))
        with pytest.raises(ValueError, match="Expected Document, got Text"):
            from_json(raw)

    def test_document_type(self) -> None:
        assert isinstance(from_json(to_json(parse(""))), Document)

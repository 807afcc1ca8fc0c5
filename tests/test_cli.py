"""Tests for the md2md command line front end."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

from md2md import __version__
from md2md.cli import (
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_USAGE_ERROR,
    main,
)
from md2md.errors import ParseError


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("md2md")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _convert(tmp_path: Path, source: bytes, *args: str) -> tuple[int, bytes]:
    src = tmp_path / "in.md"
    dst = tmp_path / "out"
    src.write_bytes(source)
    code = main(["-i", str(src), "-o", str(dst), *args])
    return code, dst.read_bytes() if dst.exists() else b""


class TestFormats:
    """Each output format."""

    def test_markdown_default(self, tmp_path: Path) -> None:
        code, out = _convert(tmp_path, b"#Hello\tWorld\r\n")
        assert code == EXIT_SUCCESS
        assert out == b"# Hello  World\n"

    def test_html(self, tmp_path: Path) -> None:
        code, out = _convert(tmp_path, b"foo\n\nbar", "-t", "html")
        assert code == EXIT_SUCCESS
        assert out == b"<p>foo</p>\n<p>bar</p>"

    def test_json(self, tmp_path: Path) -> None:
        code, out = _convert(tmp_path, b"# T\n", "--format", "json")
        assert code == EXIT_SUCCESS
        data = json.loads(out)
        assert data["_type"] == "Document"
        assert data["children"][0]["_type"] == "Heading"
        assert data["children"][0]["location"]["source_file"].endswith("in.md")

    def test_tab_width(self, tmp_path: Path) -> None:
        code, out = _convert(tmp_path, b"a\tb", "-w", "2")
        assert code == EXIT_SUCCESS
        assert out == b"a b"

    def test_undecodable_bytes_survive(self, tmp_path: Path) -> None:
        code, out = _convert(tmp_path, b"caf\xe9 \xff")
        assert code == EXIT_SUCCESS
        assert out == b"caf\xe9 \xff"

    def test_undecodable_bytes_in_url(self, tmp_path: Path) -> None:
        code, out = _convert(tmp_path, b"[a](x\xff)", "-t", "html")
        assert code == EXIT_SUCCESS
        assert out == b'<p><a href="x%FF">a</a></p>'

    def test_utf8_bom_stripped(self, tmp_path: Path) -> None:
        code, out = _convert(tmp_path, b"\xef\xbb\xbfText")
        assert code == EXIT_SUCCESS
        assert out == b"Text"


class TestStdio:
    """``-`` selects stdin/stdout."""

    def test_stdin_to_stdout(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"<a@b.c>")))
        code = main(["-i", "-", "-o", "-", "-t", "html"])
        assert code == EXIT_SUCCESS
        assert capsys.readouterr().out == '<p><a href="mailto:a@b.c">mailto:a@b.c</a></p>'


class TestErrors:
    """Exit codes and messages for failures."""

    def test_missing_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        missing = tmp_path / "missing.md"
        code = main(["-i", str(missing), "-o", str(tmp_path / "out.md")])
        assert code == EXIT_FILE_ERROR
        assert f"cannot read {missing}" in capsys.readouterr().err

    def test_unwritable_output(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = tmp_path / "in.md"
        src.write_text("x")
        target = tmp_path / "no" / "such" / "dir" / "out.md"
        code = main(["-i", str(src), "-o", str(target)])
        assert code == EXIT_FILE_ERROR
        assert "cannot open" in capsys.readouterr().err

    def test_parse_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def fail(source: str, **kwargs: object) -> None:
            raise ParseError("stuck", lineno=1, col_offset=1, offset=0)

        monkeypatch.setattr("md2md.cli.parse", fail)
        code, _ = _convert(tmp_path, b"x")
        assert code == EXIT_PARSING_ERROR
        assert "cannot parse" in capsys.readouterr().err

    def test_write_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def fail(*args: object) -> None:
            raise OSError(28, "No space left on device")

        monkeypatch.setattr("md2md.cli._write", fail)
        code, _ = _convert(tmp_path, b"x")
        assert code == EXIT_RENDERING_ERROR
        assert "No space left on device" in capsys.readouterr().err

    @pytest.mark.parametrize("width", ["0", "-3", "four"])
    def test_bad_tab_width(self, tmp_path: Path, width: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-i", "a", "-o", "b", "-w", width])
        assert exc_info.value.code == EXIT_USAGE_ERROR

    def test_bad_format(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-i", "a", "-o", "b", "-t", "rst"])
        assert exc_info.value.code == EXIT_USAGE_ERROR

    def test_missing_arguments(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == EXIT_USAGE_ERROR


class TestMisc:
    """Version and logging flags."""

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_verbose_logs_summary(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code, _ = _convert(tmp_path, b"# T\n\nx", "-v")
        assert code == EXIT_SUCCESS
        assert logging.getLogger("md2md").level == logging.INFO
        assert "INFO: Converted" in capsys.readouterr().err

    def test_very_verbose_enables_debug(self, tmp_path: Path) -> None:
        _convert(tmp_path, b"x", "-vv")
        assert logging.getLogger("md2md").level == logging.DEBUG

"""Command-line front end for md2md.

Usage:
    md2md -i INPUT -o OUTPUT [-w TAB_WIDTH] [-t {markdown,html,json}] [-v]

INPUT is read as UTF-8 (undecodable bytes survive via ``surrogateescape``),
normalized with cleanup(), parsed, and written to OUTPUT in the selected
format. ``-`` reads stdin or writes stdout.

Exit codes:
    0   success
    2   usage error (bad arguments)
    4   input could not be read or output could not be opened
    6   parse error
    7   render or write error
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from md2md import __version__, parse
from md2md.config import DEFAULT_TAB_WIDTH
from md2md.errors import ParseError, RenderError
from md2md.nodes import Document
from md2md.normalize import cleanup
from md2md.renderers.html import HtmlRenderer
from md2md.renderers.text import TextRenderer
from md2md.serialization import to_json
from md2md.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 2
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

FORMATS = ("markdown", "html", "json")

_STDIO = "-"


def _tab_width(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid tab width: {value!r}") from None
    if width < 1:
        raise argparse.ArgumentTypeError(f"tab width must be at least 1, got {width}")
    return width


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2md",
        description="Convert PHP Markdown Extra Extended documents to canonical Markdown, HTML or a JSON AST.",
    )
    parser.add_argument("-i", "--input", required=True, help="input file ('-' for stdin)")
    parser.add_argument("-o", "--output", required=True, help="output file ('-' for stdout)")
    parser.add_argument(
        "-w",
        "--tab-width",
        type=_tab_width,
        default=DEFAULT_TAB_WIDTH,
        help=f"tab stop width used when expanding tabs (default: {DEFAULT_TAB_WIDTH})",
    )
    parser.add_argument(
        "-t",
        "--format",
        choices=FORMATS,
        default="markdown",
        help="output format (default: markdown)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress to stderr (-vv for debug output)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(path: str) -> str:
    if path == _STDIO:
        data = sys.stdin.buffer.read()
    else:
        with open(path, "rb") as f:
            data = f.read()
    return data.decode("utf-8", errors="surrogateescape")


def _open_output(path: str) -> TextIO:
    if path == _STDIO:
        return sys.stdout
    return open(path, "w", encoding="utf-8", errors="surrogateescape", newline="")


def _write(doc: Document, output_format: str, stream: TextIO) -> None:
    match output_format:
        case "html":
            HtmlRenderer().write(doc, stream)
        case "json":
            stream.write(to_json(doc, indent=2))
            stream.write("\n")
        case _:
            TextRenderer().write(doc, stream)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


def main(argv: list[str] | None = None) -> int:
    """Run the command line front end.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG if args.verbose > 1 else logging.INFO)

    source_file = None if args.input == _STDIO else args.input

    try:
        raw = _read_input(args.input)
    except OSError as e:
        print(f"Error: cannot read {args.input}: {_describe(e)}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        doc = parse(cleanup(raw, args.tab_width), source_file=source_file)
    except ParseError as e:
        print(f"Error: cannot parse {args.input}: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR

    try:
        stream = _open_output(args.output)
    except OSError as e:
        print(f"Error: cannot open {args.output}: {_describe(e)}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        if stream is sys.stdout:
            _write(doc, args.format, stream)
            stream.flush()
        else:
            with stream:
                _write(doc, args.format, stream)
    except (OSError, RenderError) as e:
        cause = _describe(e) if isinstance(e, OSError) else str(e)
        print(f"Error: cannot write {args.output}: {cause}", file=sys.stderr)
        return EXIT_RENDERING_ERROR

    logger.info(
        "Converted %s to %s (%d blocks, format=%s)",
        args.input,
        args.output,
        len(doc.children),
        args.format,
    )
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

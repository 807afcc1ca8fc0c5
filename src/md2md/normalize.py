"""Text normalization applied before parsing.

cleanup() brings arbitrary input into the shape the block segmenter
expects: no byte-order mark, no SUB control characters, ``\\n`` line
endings only, spaces instead of tabs, and truly empty blank lines.

Example:
    >>> from md2md.normalize import cleanup
    >>> cleanup("\\ufeffa\\tb\\r\\n   \\r\\nc")
    'a   b\\n\\nc'
"""

import re

from md2md.config import DEFAULT_TAB_WIDTH

# Leading BOM, either decoded (U+FEFF) or mis-decoded as Latin-1 bytes
_BOM_PATTERN = re.compile("^(?:\ufeff|ï»¿)")

_SUB_PATTERN = re.compile("\x1a+")

_LINE_ENDING_PATTERN = re.compile(r"\r\n?")

_SPACE_ONLY_LINE_PATTERN = re.compile(r"^ +$", re.MULTILINE)


def detab(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Expand tabs to spaces using tab-stop arithmetic.

    Each tab is padded to the next multiple of ``tab_width`` columns. The
    column count restarts at every newline.

    Raises:
        ValueError: If tab_width is less than 1
    """
    if tab_width < 1:
        msg = f"tab_width must be a positive integer, got {tab_width!r}"
        raise ValueError(msg)
    if "\t" not in text:
        return text
    return text.expandtabs(tab_width)


def cleanup(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Normalize raw Markdown text for parsing.

    Steps, in order:
    1. strip a leading byte-order mark and every ``\\x1a`` character
    2. turn ``\\r\\n`` and lone ``\\r`` into ``\\n``
    3. expand tabs (see detab())
    4. empty out lines made only of spaces

    Never fails on text input.

    Args:
        text: Raw document text
        tab_width: Tab stop width in columns

    Returns:
        Normalized text

    Raises:
        ValueError: If tab_width is less than 1
    """
    text = _BOM_PATTERN.sub("", text, count=1)
    text = _SUB_PATTERN.sub("", text)
    text = _LINE_ENDING_PATTERN.sub("\n", text)
    text = detab(text, tab_width)
    return _SPACE_ONLY_LINE_PATTERN.sub("", text)


__all__ = ["cleanup", "detab"]

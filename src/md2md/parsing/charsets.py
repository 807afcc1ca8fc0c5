"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from md2md.parsing.charsets import HORIZONTAL_WHITESPACE

    if char in HORIZONTAL_WHITESPACE:  # O(1) lookup
        ...
"""

# Characters that end a plain text run in the inline span parser
TEXT_STOP_CHARS: frozenset[str] = frozenset("\n[]<>!")

# Spaces and tabs (never newlines)
HORIZONTAL_WHITESPACE: frozenset[str] = frozenset(" \t")

# Whitespace swallowed by a soft break after its newline
SOFT_BREAK_WHITESPACE: frozenset[str] = frozenset(" \t\r\n")

# ASCII whitespace
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Characters that, right after a newline, end a paragraph
BLOCK_TERMINATOR_CHARS: frozenset[str] = frozenset("\n=-#")

# Setext underline characters and the heading level each one yields
SETEXT_UNDERLINE_LEVELS: dict[str, int] = {"=": 1, "-": 2}

# Quote characters accepted around inline link titles
TITLE_QUOTES: frozenset[str] = frozenset("\"'")

# URL schemes recognized inside <...> autolinks (matched case-insensitively)
AUTOLINK_SCHEMES: tuple[str, ...] = ("https", "http", "ftp", "dict")

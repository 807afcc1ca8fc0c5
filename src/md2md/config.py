"""ContextVar-based parse configuration for md2md.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown instance (or per parse() call) and read by
the parser and its mixins.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # High-level API
    md = Markdown(tab_width=2)
    html = md("# Hello")  # Sets config internally via ContextVar

    # Direct parser usage (advanced)
    from md2md.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(max_nesting=8))
    try:
        parser = Parser(source)
        blocks = parser.parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(max_nesting=8)):
        blocks = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_TAB_WIDTH = 4
DEFAULT_MAX_NESTING = 32


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    source_file is per-call state and stays on the Parser instance.

    Attributes:
        tab_width: Tab stop width used by cleanup() before parsing
        max_nesting: Deepest bracket/parenthesis nesting the link and image
            grammars will balance. Deeper input is treated as unbalanced
            (and therefore as literal text), which also bounds recursion
            when link text is parsed for inline markup.

    """

    tab_width: int = DEFAULT_TAB_WIDTH
    max_nesting: int = DEFAULT_MAX_NESTING

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            msg = f"tab_width must be a positive integer, got {self.tab_width!r}"
            raise ValueError(msg)
        if self.max_nesting < 1:
            msg = f"max_nesting must be a positive integer, got {self.max_nesting!r}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "tab_width": 8,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tab_width
            8

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(max_nesting=4)):
        ...     blocks = Parser("[[[[[x]]]]]").parse()
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_MAX_NESTING",
    "DEFAULT_TAB_WIDTH",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]

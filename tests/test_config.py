"""Tests for ContextVar-based configuration."""

import threading
from dataclasses import FrozenInstanceError

import pytest

from md2md.config import (
    DEFAULT_MAX_NESTING,
    DEFAULT_TAB_WIDTH,
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from md2md.parser import Parser


class TestParseConfig:
    """Tests for the ParseConfig dataclass."""

    def test_defaults(self) -> None:
        config = ParseConfig()
        assert config.tab_width == DEFAULT_TAB_WIDTH == 4
        assert config.max_nesting == DEFAULT_MAX_NESTING == 32

    def test_frozen(self) -> None:
        config = ParseConfig()
        with pytest.raises(FrozenInstanceError):
            config.tab_width = 8  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["tab_width", "max_nesting"])
    def test_rejects_non_positive(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            ParseConfig(**{field: 0})

    def test_from_dict(self) -> None:
        config = ParseConfig.from_dict({"tab_width": 8, "unknown_key": "ignored"})
        assert config == ParseConfig(tab_width=8)

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVar:
    """Tests for get/set/reset and the context manager."""

    def teardown_method(self) -> None:
        reset_parse_config()

    def test_default_config(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(max_nesting=4))
        assert get_parse_config().max_nesting == 4
        reset_parse_config()
        assert get_parse_config().max_nesting == DEFAULT_MAX_NESTING

    def test_context_manager_restores(self) -> None:
        outer = ParseConfig(tab_width=2)
        set_parse_config(outer)
        with parse_config_context(ParseConfig(tab_width=8)):
            assert get_parse_config().tab_width == 8
        assert get_parse_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError), parse_config_context(ParseConfig(max_nesting=2)):
            raise RuntimeError("boom")
        assert get_parse_config() == ParseConfig()

    def test_parser_reads_config_at_construction(self) -> None:
        with parse_config_context(ParseConfig(max_nesting=5)):
            parser = Parser("x")
        assert parser._max_nesting == 5

    def test_thread_isolation(self) -> None:
        """A config set in one thread is invisible to another."""
        seen: dict[str, int] = {}
        ready = threading.Event()
        done = threading.Event()

        def configured() -> None:
            with parse_config_context(ParseConfig(max_nesting=7)):
                ready.set()
                done.wait(timeout=5)
                seen["configured"] = get_parse_config().max_nesting

        def default() -> None:
            ready.wait(timeout=5)
            seen["default"] = get_parse_config().max_nesting
            done.set()

        threads = [threading.Thread(target=configured), threading.Thread(target=default)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen == {"configured": 7, "default": DEFAULT_MAX_NESTING}

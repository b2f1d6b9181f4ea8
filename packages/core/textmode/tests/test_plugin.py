"""Tests for plugin setup and the mode registry."""

import logging
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from textmode import (
    TEXT_MODE_NAME,
    Environment,
    Mode,
    ModeNotFoundError,
    ModeRegistry,
    PluginOptions,
    TextMode,
    setup,
)


class TestSetup:
    def test_adds_text_mode_to_environment(self):
        env = Environment()
        setup(env)
        assert isinstance(env.modes.get("text"), TextMode)

    def test_returns_registered_instance(self):
        env = Environment()
        mode = setup(env)
        assert env.modes.get(TEXT_MODE_NAME) is mode

    def test_accepts_plugin_options(self):
        env = Environment()
        setup(env, PluginOptions())
        assert "text" in env.modes

    def test_accepts_mapping_options(self):
        env = Environment()
        setup(env, {"unknown": "ignored"})
        assert "text" in env.modes

    def test_each_setup_creates_new_instance(self):
        env = Environment()
        first = setup(env)
        second = setup(env)
        assert first is not second
        assert env.modes.get("text") is second

    def test_logs_registration(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="textmode.plugin"):
            setup(Environment())
        assert "Registered 'text' mode" in caplog.text

    async def test_registered_mode_reads_files(self, tmp_path: Path):
        env = Environment()
        setup(env)
        path = tmp_path / "page.md"
        path.write_text("---\ntitle: Hello\n---\nWorld", encoding="utf-8")
        record = await env.modes.get("text").read_file(path)
        assert record["title"] == "Hello"
        assert record["body"] == "World"


class TestModeRegistry:
    def test_empty(self):
        registry = ModeRegistry()
        assert len(registry) == 0
        assert registry.names() == []

    def test_set_and_get(self):
        registry = ModeRegistry()
        mode = TextMode()
        registry.set("text", mode)
        assert registry.get("text") is mode
        assert "text" in registry

    def test_names_sorted(self):
        registry = ModeRegistry()
        registry.set("text", TextMode())
        registry.set("markdown", AsyncMock(spec=Mode))
        assert registry.names() == ["markdown", "text"]

    def test_get_missing_raises(self):
        registry = ModeRegistry()
        with pytest.raises(ModeNotFoundError, match="binary"):
            registry.get("binary")

    def test_get_missing_is_lookup_error(self):
        with pytest.raises(LookupError):
            ModeRegistry().get("binary")

    def test_replaces_existing_mode(self, caplog):
        registry = ModeRegistry()
        registry.set("text", TextMode())
        replacement = TextMode()
        with caplog.at_level(logging.DEBUG, logger="textmode.environment"):
            registry.set("text", replacement)
        assert registry.get("text") is replacement
        assert len(registry) == 1
        assert "Replacing mode 'text'" in caplog.text

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_raises(self, name):
        with pytest.raises(ValueError):
            ModeRegistry().set(name, TextMode())

    def test_non_mode_raises(self):
        with pytest.raises(TypeError):
            ModeRegistry().set("text", object())  # type: ignore[arg-type]

    def test_repr(self):
        registry = ModeRegistry()
        assert repr(registry) == "ModeRegistry(0 modes)"
        registry.set("text", TextMode())
        assert repr(registry) == "ModeRegistry(1 mode)"
        assert repr(Environment()) == "Environment(modes=ModeRegistry(0 modes))"

    def test_environments_do_not_share_modes(self):
        first = Environment()
        second = Environment()
        setup(first)
        assert "text" in first.modes
        assert "text" not in second.modes

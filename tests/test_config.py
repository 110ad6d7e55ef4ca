"""Tests for settings loading (config.py) and logging setup (logging.py)."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from scxctl.config import LoaderSettings, load_settings
from scxctl.exceptions import ConfigurationError
from scxctl.logging import configure_logging


class TestDefaults:
    def test_defaults_target_system_loader(self) -> None:
        settings = LoaderSettings()
        assert settings.bus == "system"
        assert settings.bus_name == "org.scx.Loader"
        assert settings.object_path == "/org/scx/Loader"
        assert settings.interface == "org.scx.Loader"
        assert settings.timeout_seconds == 30.0
        assert settings.log_level == "WARNING"


class TestEnvironment:
    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCXCTL_BUS", "session")
        monkeypatch.setenv("SCXCTL_TIMEOUT_SECONDS", "2.5")
        settings = load_settings()
        assert settings.bus == "session"
        assert settings.timeout_seconds == 2.5

    def test_log_level_is_normalised(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCXCTL_LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path: Path) -> None:
        # conftest chdirs into tmp_path
        (tmp_path / ".env").write_text("SCXCTL_BUS_NAME=org.example.Loader\n", encoding="utf-8")
        assert load_settings().bus_name == "org.example.Loader"


class TestOverrides:
    def test_override_wins_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCXCTL_BUS", "session")
        assert load_settings(bus="system").bus == "system"

    def test_none_override_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCXCTL_BUS", "session")
        assert load_settings(bus=None).bus == "session"


class TestValidation:
    @pytest.mark.parametrize(
        ("var", "value"),
        [
            ("SCXCTL_BUS", "starship"),
            ("SCXCTL_TIMEOUT_SECONDS", "0"),
            ("SCXCTL_OBJECT_PATH", "org/scx/Loader"),
            ("SCXCTL_LOG_LEVEL", "chatty"),
        ],
    )
    def test_invalid_values(
        self, monkeypatch: pytest.MonkeyPatch, var: str, value: str,
    ) -> None:
        monkeypatch.setenv(var, value)
        with pytest.raises(ConfigurationError, match="Invalid scxctl configuration") as exc_info:
            load_settings()
        assert exc_info.value.hint == "Check the SCXCTL_* environment variables."


class TestConfigureLogging:
    def test_sets_root_level(self) -> None:
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_warning(self) -> None:
        configure_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_plain_handler_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import sys

        monkeypatch.setitem(sys.modules, "rich.logging", None)
        configure_logging("INFO")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert type(handlers[0]) is logging.StreamHandler

"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest

from confpath import ConfigLoader
from confpath.config import Settings, configure_logging
from confpath.observability.logging import get_logger, reset_logging, setup_logging


def _events(err: str) -> list[dict]:
    return [json.loads(line) for line in err.strip().splitlines() if line]


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should render JSON lines to stderr."""
        setup_logging(level="INFO", format="json")
        get_logger("confpath.test").info("test_message", path="/cfg/app")

        record = _events(capsys.readouterr().err)[-1]
        assert record["event"] == "test_message"
        assert record["path"] == "/cfg/app"
        assert record["level"] == "info"
        assert record["logger"] == "confpath.test"

    def test_setup_console_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should configure console format for development."""
        setup_logging(level="DEBUG", format="console")
        get_logger("confpath.test").debug("test_message")

        assert "test_message" in capsys.readouterr().err

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="WARNING", format="json")
        get_logger("confpath.test").info("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_reconfigure_replaces_handler(self) -> None:
        setup_logging(level="INFO", format="json")
        setup_logging(level="DEBUG", format="console")

        root = logging.getLogger("confpath")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_reset_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="DEBUG", format="json")
        reset_logging()
        get_logger("confpath.test").debug("after_reset")

        captured = capsys.readouterr()
        assert "after_reset" not in captured.err
        assert "after_reset" not in captured.out


class TestConfigureLogging:
    """Tests for configure_logging from settings."""

    def test_uses_settings_level_and_format(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(Settings(log_level="DEBUG", log_format="json"))
        get_logger("confpath.test").debug("from_settings")

        assert _events(capsys.readouterr().err)[-1]["event"] == "from_settings"

    def test_reads_environment_settings(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CONFPATH_LOG_LEVEL", "error")
        monkeypatch.setenv("CONFPATH_LOG_FORMAT", "json")
        configure_logging()

        get_logger("confpath.test").warning("filtered")
        get_logger("confpath.test").error("shown")

        events = _events(capsys.readouterr().err)
        assert [event["event"] for event in events] == ["shown"]


class TestLoaderLogging:
    """Tests for log events emitted during resolution."""

    def test_silent_without_configuration(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Lookups print nothing unless logging is configured."""
        (tmp_path / "app.json").write_text('{"port": 8080}')
        config = ConfigLoader(tmp_path)
        config.register_namespace("db", tmp_path)

        assert config.get("app.port") == 8080
        assert config.get("missing:app.port", 1) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_unresolvable_key_logged(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging(level="DEBUG", format="json")
        config = ConfigLoader(tmp_path)

        assert config.get("missing:app.port", 1) == 1

        events = _events(capsys.readouterr().err)
        assert any(
            event["event"] == "config_key_unresolvable" and event["key"] == "missing:app.port"
            for event in events
        )

    def test_failed_load_logged(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "app.json").write_text("{broken")
        setup_logging(level="DEBUG", format="json")
        config = ConfigLoader(tmp_path)

        assert config.get("app.port", 1) == 1

        failed = [
            event
            for event in _events(capsys.readouterr().err)
            if event["event"] == "config_file_load_failed"
        ]
        assert failed
        assert failed[0]["error_type"] == "ConfigFileLoadError"
        assert failed[0]["logger"] == "confpath.files"

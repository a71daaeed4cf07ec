"""Shared test fixtures for the confpath test suite."""

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from confpath.config import get_settings
from confpath.observability.logging import reset_logging


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache and confpath log handlers around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    reset_logging()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that change config resolution."""
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("CONFPATH_CONFIG_FILE", raising=False)
    monkeypatch.delenv("CONFPATH_ENV_VAR", raising=False)
    monkeypatch.delenv("CONFPATH_EXTENSIONS", raising=False)
    monkeypatch.delenv("CONFPATH_MODULE_ATTRIBUTE", raising=False)
    monkeypatch.delenv("CONFPATH_ENV_REQUIRES_OVERRIDE", raising=False)
    monkeypatch.delenv("CONFPATH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CONFPATH_LOG_FORMAT", raising=False)


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    """Create a temporary root directory for config files."""
    root = tmp_path / "cfg"
    root.mkdir()
    return root


@pytest.fixture
def write_config(config_root: Path) -> Callable[[str, dict[str, Any]], Path]:
    """Factory fixture to create Python config files below config_root.

    Usage:
        def test_something(write_config):
            write_config("default/app.py", {"port": 8080})
    """

    def _write_config(relative_path: str, data: dict[str, Any]) -> Path:
        file_path = config_root / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if file_path.suffix == ".json":
            file_path.write_text(json.dumps(data))
        else:
            file_path.write_text(f"default = {data!r}\n")
        return file_path

    return _write_config

"""TOML loader for confpath's own settings file."""

import os
from pathlib import Path
from typing import Any

from confpath.files import load_toml

SETTINGS_FILE_ENV = "CONFPATH_CONFIG_FILE"


def get_settings_file() -> Path | None:
    """Get the settings file path from CONFPATH_CONFIG_FILE.

    Returns None if the variable is not set.
    """
    settings_file = os.environ.get(SETTINGS_FILE_ENV)
    if not settings_file:
        return None
    return Path(settings_file)


def load_settings_file() -> dict[str, Any]:
    """Load the settings TOML file named by CONFPATH_CONFIG_FILE.

    Settings may sit at the top level or under a ``[confpath]`` table.

    Returns:
        Settings dictionary, empty when no file is configured

    Raises:
        FileNotFoundError: If the configured file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    settings_file = get_settings_file()
    if settings_file is None:
        return {}

    if not settings_file.is_file():
        raise FileNotFoundError(
            f"Settings file not found: {settings_file}. "
            f"Fix or unset {SETTINGS_FILE_ENV}."
        )

    data = load_toml(settings_file)
    section = data.get("confpath")
    if isinstance(section, dict):
        return section
    return data

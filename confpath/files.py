"""Config file loading with a per-loader cache.

Config files are Python modules exporting a mapping, JSON documents or TOML
documents. Paths are given without extension; the first supported extension
that exists on disk is loaded.
"""

import json
import runpy
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from confpath.errors import ConfigFileLoadError, ConfigFileNotFoundError
from confpath.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".py", ".json", ".toml")
DEFAULT_MODULE_ATTRIBUTE = "default"


def resolve_file(path: str | Path, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> Path:
    """Find the file on disk for an extension-less config path.

    An existing file at exactly ``path`` wins over extension lookup.

    Raises:
        ConfigFileNotFoundError: If no candidate file exists
    """
    file_path = Path(path)
    if file_path.is_file():
        return file_path

    for extension in extensions:
        candidate = file_path.with_name(file_path.name + extension)
        if candidate.is_file():
            return candidate

    raise ConfigFileNotFoundError(path)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with file_path.open("rb") as f:
        return tomllib.load(f)


def load_json(file_path: Path) -> Any:
    """Load a JSON file."""
    with file_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_module(file_path: Path, attribute: str = DEFAULT_MODULE_ATTRIBUTE) -> Any:
    """Execute a Python config file and return one of its module globals.

    The file is run from source on every call; it is neither added to
    sys.modules nor compiled to a cached .pyc.

    Raises:
        ConfigFileLoadError: If the module exits or does not define the attribute
    """
    try:
        module_globals = runpy.run_path(str(file_path), run_name=f"confpath:{file_path.stem}")
    except SystemExit as e:
        raise ConfigFileLoadError(file_path, f"module called exit({e.code!r})") from e

    if attribute not in module_globals:
        raise ConfigFileLoadError(file_path, f"module has no '{attribute}' attribute")
    return module_globals[attribute]


def load_config_file(
    path: str | Path,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    module_attribute: str = DEFAULT_MODULE_ATTRIBUTE,
) -> Mapping[str, Any]:
    """Load the configuration mapping stored at an extension-less path.

    Args:
        path: Config file path, with or without extension
        extensions: Extensions tried in order when path itself is not a file
        module_attribute: Attribute holding the config in Python config files

    Returns:
        The configuration mapping

    Raises:
        ConfigFileNotFoundError: If no file exists for the path
        ConfigFileLoadError: If the file cannot be parsed or does not hold a mapping
    """
    file_path = resolve_file(path, extensions)
    suffix = file_path.suffix.lower()

    try:
        if suffix == ".py":
            data = load_module(file_path, module_attribute)
        elif suffix == ".json":
            data = load_json(file_path)
        elif suffix == ".toml":
            data = load_toml(file_path)
        else:
            raise ConfigFileLoadError(file_path, f"unsupported file type '{suffix}'")
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigFileLoadError(file_path, str(e)) from e

    if not isinstance(data, Mapping):
        raise ConfigFileLoadError(
            file_path, f"expected a mapping, got {type(data).__name__}"
        )

    return data


class FileCache:
    """Loaded config files keyed by resolved path.

    Entries are never invalidated. A path that fails to load is cached as an
    empty mapping.
    """

    def __init__(
        self,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        module_attribute: str = DEFAULT_MODULE_ATTRIBUTE,
    ) -> None:
        self._extensions = tuple(extensions)
        self._module_attribute = module_attribute
        self._entries: dict[str, Mapping[str, Any]] = {}

    def load(self, path: str) -> Mapping[str, Any]:
        """Return the config at path, loading it on first access."""
        if path in self._entries:
            return self._entries[path]

        try:
            config = load_config_file(path, self._extensions, self._module_attribute)
        except ConfigFileNotFoundError:
            logger.debug("config_file_missing", path=path)
            config = {}
        except Exception as e:
            # Python config files may raise anything while executing
            logger.debug(
                "config_file_load_failed",
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            config = {}
        else:
            logger.debug("config_file_loaded", path=path, key_count=len(config))

        self._entries[path] = config
        return config

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

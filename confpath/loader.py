"""Namespaced, layered config resolution.

ConfigLoader resolves keys such as ``"db:connections/main.host"``:

1. The key is parsed into namespace ``db``, directory ``connections`` and
   key path ``main.host``, where ``main`` names the config file.
2. The file is looked up below the namespace's default directory, its
   override directory and, when an environment mode is set, as
   ``main.<env>`` below the override directory.
3. The three files are merged one level deep, later files winning.
4. ``host`` is looked up in the merged mapping.

Any failure other than registering a duplicate namespace resolves to the
caller's default.
"""

import os
from typing import Any

from confpath.config import Settings, get_settings
from confpath.errors import ConfigPathError
from confpath.files import FileCache
from confpath.keys import ParsedKey, parse_key
from confpath.merge import shallow_merge
from confpath.namespaces import Namespace, NamespaceRegistry
from confpath.observability.logging import get_logger
from confpath.paths import CandidatePaths, identify_paths
from confpath.walker import find_value

logger = get_logger(__name__)


class ConfigLoader:
    """Resolves dotted config keys against layered config files."""

    def __init__(
        self,
        default_path: str | os.PathLike[str],
        override_path: str | os.PathLike[str] | None = None,
        *,
        environment: str | None = None,
        settings: Settings | None = None,
        treat_falsy_as_missing: bool = True,
    ) -> None:
        """Initialize loader with the "default" namespace.

        Args:
            default_path: Directory of default config files
            override_path: Directory of config overrides and environment overlays
            environment: Fixed environment mode. When None, the mode is read
                from the environment variable named by ``settings.env_var``
                on every lookup.
            settings: Settings to use instead of get_settings()
            treat_falsy_as_missing: Return the default for resolved values
                that are falsy (False, 0, "", empty containers)
        """
        self._settings = settings or get_settings()
        self._environment = environment
        self._treat_falsy_as_missing = treat_falsy_as_missing
        self._namespaces = NamespaceRegistry(default_path, override_path)
        self._cache = FileCache(
            extensions=self._settings.extensions,
            module_attribute=self._settings.module_attribute,
        )

    @property
    def namespaces(self) -> NamespaceRegistry:
        return self._namespaces

    @property
    def cache(self) -> FileCache:
        return self._cache

    @property
    def environment(self) -> str | None:
        """Current environment mode, or None when unset."""
        if self._environment is not None:
            return self._environment or None
        return os.environ.get(self._settings.env_var) or None

    def register_namespace(
        self,
        name: str,
        default_path: str | os.PathLike[str],
        override_path: str | os.PathLike[str] | None = None,
    ) -> Namespace:
        """Register a config namespace.

        Args:
            name: Namespace name
            default_path: Directory of the namespace's config files
            override_path: Directory of the namespace's config overrides

        Raises:
            NamespaceExistsError: If the name is already registered; use
                override_namespace() to replace it
        """
        return self._namespaces.register(name, default_path, override_path)

    def override_namespace(
        self,
        name: str,
        default_path: str | os.PathLike[str],
        override_path: str | os.PathLike[str] | None = None,
    ) -> Namespace:
        """Replace a config namespace, registering it if absent."""
        return self._namespaces.override(name, default_path, override_path)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value.

        Args:
            key: Config key, ``[namespace:][dir/]file.key[.key...]``
            default: Returned when the key does not resolve

        Returns:
            The config value, or default
        """
        try:
            parsed = parse_key(key, self._namespaces)
        except ConfigPathError as e:
            logger.debug("config_key_unresolvable", key=key, error=e.message)
            return default

        values = self._merge(self._paths_for(parsed))
        return find_value(
            parsed.lookup_keys,
            values,
            default,
            skip_falsy=self._treat_falsy_as_missing,
        )

    def _paths_for(self, parsed: ParsedKey) -> CandidatePaths:
        return identify_paths(
            parsed,
            self._namespaces[parsed.namespace],
            environment=self.environment,
            env_requires_override=self._settings.env_requires_override,
        )

    def _merge(self, paths: CandidatePaths) -> dict[str, Any]:
        return shallow_merge(*(self._cache.load(path) for path in paths.layers()))

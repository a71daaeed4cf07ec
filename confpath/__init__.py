"""confpath: namespaced, layered configuration lookup.

Usage:
    from confpath import ConfigLoader

    config = ConfigLoader("config/default", "config/override")
    config.register_namespace("db", "config/db/default", "config/db/override")

    port = config.get("app.port", 8080)
    host = config.get("db:connections/main.host")
"""

from confpath.errors import (
    ConfigFileError,
    ConfigFileLoadError,
    ConfigFileNotFoundError,
    ConfigPathError,
    MalformedKeyError,
    NamespaceExistsError,
    NamespaceNotRegisteredError,
)
from confpath.loader import ConfigLoader
from confpath.namespaces import Namespace

__all__ = [
    "ConfigFileError",
    "ConfigFileLoadError",
    "ConfigFileNotFoundError",
    "ConfigLoader",
    "ConfigPathError",
    "MalformedKeyError",
    "Namespace",
    "NamespaceExistsError",
    "NamespaceNotRegisteredError",
]

"""Exception hierarchy for configuration resolution.

All exceptions inherit from ConfigPathError, which keeps the message and
exposes the structured context (namespace, key, path) as attributes.
Only NamespaceExistsError is expected to reach callers of ConfigLoader;
the others are converted to default values inside ConfigLoader.get.
"""

from pathlib import Path


class ConfigPathError(Exception):
    """Base exception for all configuration resolution errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NamespaceExistsError(ConfigPathError):
    """Raised when registering a namespace name that is already taken."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(
            f"Namespace '{namespace}' already exists. Use 'override_namespace()' instead."
        )


class NamespaceNotRegisteredError(ConfigPathError):
    """Raised when a key references an unknown namespace prefix."""

    def __init__(self, namespace: str, key: str) -> None:
        self.namespace = namespace
        self.key = key
        super().__init__(f"Namespace '{namespace}' not registered (key: '{key}')")


class MalformedKeyError(ConfigPathError):
    """Raised when a key cannot be split into file name and key path."""

    def __init__(self, key: object, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Malformed config key {key!r}: {reason}")


class ConfigFileError(ConfigPathError):
    """Base exception for config file loading errors."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = str(path)
        super().__init__(message)


class ConfigFileNotFoundError(ConfigFileError):
    """No file exists for the path with any supported extension."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f"Configuration file not found: {path}")


class ConfigFileLoadError(ConfigFileError):
    """A config file exists but could not be parsed or has no usable export."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Failed to load configuration file {path}: {reason}")

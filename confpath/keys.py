"""Config key parsing.

A key has the form ``[namespace:]dir/sub/file.key1.key2``. Parsing splits it
into the namespace, the directory segments and the dotted key segments, whose
first element names the config file.
"""

from collections.abc import Container
from dataclasses import dataclass

from confpath.errors import MalformedKeyError, NamespaceNotRegisteredError
from confpath.namespaces import DEFAULT_NAMESPACE

NAMESPACE_SEPARATOR = ":"
PATH_SEPARATOR = "/"
KEY_SEPARATOR = "."


@dataclass(frozen=True)
class ParsedKey:
    """A config key split into its parts."""

    namespace: str
    file_path: tuple[str, ...]
    keys: tuple[str, ...]

    @property
    def file_name(self) -> str:
        return self.keys[0]

    @property
    def lookup_keys(self) -> tuple[str, ...]:
        """Key segments inside the config file."""
        return self.keys[1:]


def parse_key(key: str, namespaces: Container[str]) -> ParsedKey:
    """Split a config key into namespace, file path and key segments.

    Args:
        key: Config key, e.g. ``"db:connections/main.host"``
        namespaces: Registered namespace names

    Returns:
        ParsedKey for the key

    Raises:
        MalformedKeyError: If the key is not a string, is empty or has no file name
        NamespaceNotRegisteredError: If the namespace prefix is unknown
    """
    if not isinstance(key, str):
        raise MalformedKeyError(key, "key must be a string")
    if not key:
        raise MalformedKeyError(key, "key is empty")

    namespace = DEFAULT_NAMESPACE
    remainder = key

    if key.find(NAMESPACE_SEPARATOR) > 0:
        namespace, remainder = key.split(NAMESPACE_SEPARATOR, 1)
        if namespace not in namespaces:
            raise NamespaceNotRegisteredError(namespace, key)

    file_path: tuple[str, ...] = ()
    if remainder.find(PATH_SEPARATOR) > 0:
        *directories, remainder = remainder.split(PATH_SEPARATOR)
        file_path = tuple(directories)

    keys = tuple(remainder.split(KEY_SEPARATOR))
    if not keys[0]:
        raise MalformedKeyError(key, "missing file name")

    return ParsedKey(namespace=namespace, file_path=file_path, keys=keys)

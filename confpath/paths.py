"""Candidate config file paths for a parsed key."""

import os
from dataclasses import dataclass

from confpath.keys import ParsedKey
from confpath.namespaces import Namespace


@dataclass(frozen=True)
class CandidatePaths:
    """Files merged for one lookup, lowest precedence first.

    Paths are extension-less; the file loader resolves the extension.
    """

    default: str
    override: str | None = None
    env: str | None = None

    def layers(self) -> list[str]:
        """Present paths in merge order."""
        return [path for path in (self.default, self.override, self.env) if path]


def join_path(base: str, *parts: str) -> str:
    """Join path segments below base and normalise the result.

    Every part is treated as relative to base, so a leading separator in a
    part never discards the base directory.
    """
    relative = [part.strip("/\\") for part in parts]
    return os.path.normpath(os.path.join(base, *[part for part in relative if part]))


def identify_paths(
    parsed: ParsedKey,
    namespace: Namespace,
    environment: str | None = None,
    env_requires_override: bool = True,
) -> CandidatePaths:
    """Compute default, override and environment file paths for a key.

    Args:
        parsed: Parsed config key; its first key segment is the file name
        namespace: Namespace the key belongs to
        environment: Environment mode (e.g. "production"), or None
        env_requires_override: Only build the environment path when the
            namespace has an override directory. When False, the
            environment file is looked up in the override directory if
            there is one, otherwise beside the default file.

    Returns:
        CandidatePaths for the key
    """
    file_name = parsed.file_name
    directory = parsed.file_path

    default = join_path(namespace.default_path, *directory, file_name)

    override = None
    if namespace.override_path:
        override = join_path(namespace.override_path, *directory, file_name)

    env = None
    if environment:
        env_base = namespace.override_path
        if not env_base and not env_requires_override:
            env_base = namespace.default_path
        if env_base:
            env = join_path(env_base, *directory, f"{file_name}.{environment}")

    return CandidatePaths(default=default, override=override, env=env)

"""Namespace registry.

A namespace binds a name to a default directory and an optional override
directory. The registry always holds the "default" namespace.
"""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from confpath.errors import NamespaceExistsError
from confpath.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_NAMESPACE = "default"


class Namespace(BaseModel):
    """Directories that config files of one namespace are resolved against."""

    model_config = ConfigDict(frozen=True)

    default_path: str = Field(description="Base directory for baseline config files")
    override_path: str | None = Field(
        default=None,
        description="Base directory for overrides and environment overlays",
    )

    @field_validator("default_path", "override_path", mode="before")
    @classmethod
    def coerce_path(cls, value: object) -> object:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value


class NamespaceRegistry:
    """Mapping of namespace names to Namespace bindings."""

    def __init__(
        self,
        default_path: str | os.PathLike[str],
        override_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self._namespaces: dict[str, Namespace] = {
            DEFAULT_NAMESPACE: Namespace(
                default_path=default_path, override_path=override_path
            ),
        }

    def register(
        self,
        name: str,
        default_path: str | os.PathLike[str],
        override_path: str | os.PathLike[str] | None = None,
    ) -> Namespace:
        """Register a new namespace.

        Raises:
            NamespaceExistsError: If the name is already registered
        """
        if name in self._namespaces:
            raise NamespaceExistsError(name)

        namespace = Namespace(default_path=default_path, override_path=override_path)
        self._namespaces[name] = namespace

        logger.debug(
            "namespace_registered",
            namespace=name,
            default_path=namespace.default_path,
            override_path=namespace.override_path,
        )
        return namespace

    def override(
        self,
        name: str,
        default_path: str | os.PathLike[str],
        override_path: str | os.PathLike[str] | None = None,
    ) -> Namespace:
        """Replace or insert a namespace."""
        namespace = Namespace(default_path=default_path, override_path=override_path)
        self._namespaces[name] = namespace

        logger.debug(
            "namespace_overridden",
            namespace=name,
            default_path=namespace.default_path,
            override_path=namespace.override_path,
        )
        return namespace

    def get(self, name: str) -> Namespace | None:
        return self._namespaces.get(name)

    def __getitem__(self, name: str) -> Namespace:
        return self._namespaces[name]

    def names(self) -> list[str]:
        return list(self._namespaces)

    def __contains__(self, name: object) -> bool:
        return name in self._namespaces

    def __len__(self) -> int:
        return len(self._namespaces)

"""Settings model for confpath itself."""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from confpath.config.loader import load_settings_file

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class SettingsFileSource(PydanticBaseSettingsSource):
    """Settings read from the TOML file named by CONFPATH_CONFIG_FILE.

    The file is read once per Settings instantiation.
    """

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self._values = load_settings_file()

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = self._values.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return {
            name: value
            for name, value in self._values.items()
            if name in self.settings_cls.model_fields
        }


class Settings(BaseSettings):
    """Settings for config resolution and logging.

    Configuration is loaded in this order:
    1. Model defaults (in code)
    2. TOML file named by CONFPATH_CONFIG_FILE
    3. CONFPATH_* environment variables
    4. Constructor arguments
    """

    model_config = SettingsConfigDict(
        env_prefix="CONFPATH_",
        case_sensitive=False,
        extra="ignore",
    )

    env_var: str = Field(
        default="APP_ENV",
        min_length=1,
        description="Environment variable holding the environment mode",
    )
    extensions: list[str] = Field(
        default_factory=lambda: [".py", ".json", ".toml"],
        description="Config file extensions, tried in order",
    )
    module_attribute: str = Field(
        default="default",
        min_length=1,
        description="Attribute holding the config in Python config files",
    )
    env_requires_override: bool = Field(
        default=True,
        description="Only apply environment overlays for namespaces with an override path",
    )
    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(default="console", description="Log output format")

    @field_validator("extensions")
    @classmethod
    def dotted_extensions(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value if ext]

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority order (highest first): init args, env vars, TOML file."""
        return (
            init_settings,
            env_settings,
            SettingsFileSource(settings_cls),
        )

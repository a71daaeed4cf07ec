"""Settings for confpath.

Usage:
    from confpath.config import configure_logging, get_settings

    settings = get_settings()
    env_var = settings.env_var

    configure_logging()  # applies settings.log_level / settings.log_format
"""

from functools import lru_cache

from confpath.config.settings import Settings
from confpath.observability.logging import setup_logging


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Settings are loaded in this order:
    1. Model defaults (in code)
    2. TOML file named by CONFPATH_CONFIG_FILE
    3. CONFPATH_* environment variables

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload settings.
    """
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload settings."""
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Enable confpath log output using the log_level and log_format settings.

    Without this call (or a handler attached by the application) confpath
    emits nothing.
    """
    settings = settings or get_settings()
    setup_logging(level=settings.log_level, format=settings.log_format)


__all__ = ["configure_logging", "get_settings", "reload_settings", "Settings"]

"""Centralized library settings loaded from environment variables.

All configuration is defined once here. Other modules should import
``get_settings()`` rather than calling ``os.getenv()`` directly.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library-wide configuration backed by environment variables.

    Field names are **lowercased** versions of the env-var names without
    the ``ESQUERY_`` prefix. ``pydantic-settings`` maps them automatically
    (case-insensitive).

    Example::

        settings = Settings()  # reads .env + real env
        field = settings.default_sort_field
    """

    model_config = SettingsConfigDict(
        env_prefix="ESQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- Sorting -----------------------------------------------------------

    default_sort_field: str = "_score"
    """Field sorted on by ``DefaultSorter``. Empty string disables it."""

    default_sort_order: str = "desc"
    """Order used by ``DefaultSorter``."""

    # -- Operational -------------------------------------------------------

    log_level: str = "INFO"
    """Root log level applied by ``configure_logging()``."""


def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    Uses a module-level singleton so the ``.env`` file is read at most
    once per process.

    Returns:
        The global ``Settings`` object.
    """
    return _settings


_settings = Settings()

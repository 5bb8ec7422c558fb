"""Runtime configuration settings for agents-link.

This module uses Pydantic Settings for configuration that can be
overridden via environment variables. This provides:
- Type validation
- Environment variable support (AGENTS_LINK_ prefix)
- Default values
- Easy testing via monkeypatched environment

There is intentionally no configuration file: the source and target paths
are fixed constants (see agents_link.config.paths).
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AgentsLinkSettings(BaseSettings):
    """Settings controlling how targets are materialized and logged.

    Can be overridden via environment variables with AGENTS_LINK_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="AGENTS_LINK_")

    force_copy: bool = Field(
        default=False,
        description="Always write managed copies instead of attempting symlinks",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for the agents_link logger",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}. Options: {', '.join(LOG_LEVELS)}")
        return level


def get_settings() -> AgentsLinkSettings:
    """Load settings from the current environment.

    Settings are read on every call so values loaded from .env (or set by
    tests) after import are picked up.

    Returns:
        Fresh settings instance
    """
    return AgentsLinkSettings()

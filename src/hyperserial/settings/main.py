import logging
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HyperserialSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HYPERSERIAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Base log level used by setup_logging() (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Console output format: structured JSON lines or a plain text line format"
    )
    tracing_enabled: bool = Field(
        default=True,
        description="Wrap every descriptor definition in an OpenTelemetry span. "
                    "Spans are no-ops unless the application installs a tracer provider."
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name and reject names ``logging`` does not know.

        Args:
            v: The configured level name

        Returns:
            Upper-cased level name
        """
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Invalid log level '{v}'. "
                f"Expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )
        return level


_settings: Optional[HyperserialSettings] = None


def get_settings(force_reload: bool = False) -> HyperserialSettings:
    """Get the singleton settings instance.

    Settings are read from ``HYPERSERIAL_*`` environment variables (and an
    optional ``.env`` file) on first access and cached afterwards.

    Args:
        force_reload: Discard the cached instance and read the environment again

    Returns:
        The shared HyperserialSettings instance

    Example:
        >>> settings = get_settings()
        >>> settings.log_format
        'json'
    """
    global _settings

    if _settings is None or force_reload:
        _settings = HyperserialSettings()

    return _settings


def _reload_settings() -> HyperserialSettings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)

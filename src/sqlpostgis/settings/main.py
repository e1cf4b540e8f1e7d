from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SpatialSettings(BaseSettings):
    """Configuration for fragment building and rendering.

    Values are read from ``SQLPOSTGIS_``-prefixed environment variables
    or a ``.env`` file, falling back to the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="SQLPOSTGIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    dialect: str = Field(
        default="postgresql",
        min_length=1,
        description="SQLAlchemy dialect name used for identifier quoting and clause compilation"
    )
    auto_alias_columns: bool = Field(
        default=True,
        description=(
            "Alias the result of output functions (ST_AsText, ST_AsEWKT, ST_AsGeoJSON) "
            "with the column name when their argument is a bare column"
        )
    )
    log_level: str = Field(
        default="INFO",
        description="Log level used by setup_logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(_LOG_LEVELS)}"
            )
        return level


# Singleton instance
_settings: Optional[SpatialSettings] = None


def get_settings(force_reload: bool = False) -> SpatialSettings:
    """Get the singleton settings instance.

    Args:
        force_reload: If True, creates a new instance even if one already
                     exists. Useful for testing or when environment
                     variables have changed.

    Returns:
        SpatialSettings: The singleton settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = SpatialSettings()

    return _settings


def _reload_settings() -> SpatialSettings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh SpatialSettings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)

"""Configuration schema validation using Pydantic."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from layered_i18n.core.loader import DEFAULT_PATTERN

DEFAULT_LOCALE = "en"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: str | None = None
    max_size_mb: int = Field(default=10, gt=0)
    backup_count: int = Field(default=3, ge=0)
    structured: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v


class I18nConfig(BaseModel):
    """Top-level locale store configuration."""

    model_config = ConfigDict(extra="allow")

    default_locale: str = DEFAULT_LOCALE
    locale_paths: list[str] = Field(default_factory=list)
    file_pattern: str = DEFAULT_PATTERN
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("default_locale", mode="before")
    @classmethod
    def validate_locale(cls, v):
        """Coerce locale identifiers to non-empty strings."""
        v = str(v).strip()
        if not v:
            raise ValueError("default_locale must not be empty")
        return v

    @field_validator("locale_paths", mode="before")
    @classmethod
    def validate_paths(cls, v):
        """Allow a single path where a list is expected."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return [str(p) for p in v]


def validate_config(config_dict: dict[str, Any]) -> I18nConfig:
    """Validate configuration dictionary.

    Args:
        config_dict: Raw configuration dictionary from YAML

    Returns:
        Validated I18nConfig object

    Raises:
        ValidationError: If configuration is invalid
    """
    return I18nConfig(**config_dict)


def config_to_dict(config: I18nConfig) -> dict[str, Any]:
    """Convert I18nConfig back to dictionary."""
    if isinstance(config, dict):
        return config
    return config.model_dump()

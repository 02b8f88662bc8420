"""Configuration for the rule parser and code-model extractors using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserSettings(BaseSettings):
    """Settings for the rule-language parser."""

    model_config = SettingsConfigDict(
        env_prefix="GUARDING_PARSER_",
    )

    keep_literal_quotes: bool = Field(
        default=True,
        description="Keep the surrounding quote characters of decoded string literals",
    )

    strict_unsupported: bool = Field(
        default=False,
        description="Raise instead of returning a marker for forms that have no model yet",
    )


class IdentifySettings(BaseSettings):
    """Settings for code-model extraction."""

    model_config = SettingsConfigDict(
        env_prefix="GUARDING_IDENTIFY_",
    )

    include_interfaces: bool = Field(
        default=False,
        description="Report top-level interface declarations as classes",
    )


class GuardingSettings(BaseSettings):
    """Global settings for parsing and identification."""

    model_config = SettingsConfigDict(
        env_prefix="GUARDING_",
    )

    parser: ParserSettings = Field(default_factory=ParserSettings)
    identify: IdentifySettings = Field(default_factory=IdentifySettings)


# Global settings instance that can be accessed throughout the application
_settings: GuardingSettings | None = None


def get_settings() -> GuardingSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = GuardingSettings()
    return _settings


def set_settings(settings: GuardingSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings

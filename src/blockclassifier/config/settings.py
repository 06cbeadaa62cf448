"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ClassifierSettings(BaseSettings):
    """Application settings loaded from environment variables.

    Decision tree thresholds are fixed constants of the classifier and are
    intentionally not exposed here.
    """

    service_name: str = "block-classifier"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate(self) -> None:
        if not self.service_name.strip():
            raise ValueError("service_name must not be empty")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")


_settings: ClassifierSettings | None = None


def get_settings() -> ClassifierSettings:
    global _settings
    if _settings is None:
        _settings = ClassifierSettings()
        _settings.validate()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None

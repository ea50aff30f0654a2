"""
Configuration Management for fintrack

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Scoring thresholds are deliberately NOT configurable: they are part of
the product's behavior, and two installs must score the same finances
the same way. Only presentation and operational defaults live here.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fintrack.models.metrics import SafeToSpendMode
from fintrack.models.records import Currency


AUTO_MODE = "auto"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseSettings):
    """Structured logging and audit trail configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Minimum level written by the structured logger"
    )
    json_output: bool = Field(
        default=True,
        description="Render log lines as JSON (False renders for the console)"
    )
    audit_trail_size: int = Field(
        default=1000,
        ge=1,
        le=100000,
        description="How many audit events are kept in memory"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize to an upper-case stdlib level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment, attached to every audit log line"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG logging)"
    )

    # Presentation defaults
    default_currency: Currency = Field(
        default=Currency.TRY,
        description="Snapshot currency when no profile is given"
    )
    default_safe_to_spend_mode: str = Field(
        default=SafeToSpendMode.BALANCED.value,
        description="Safe-to-spend posture when the caller does not pick one, or 'auto'"
    )

    @field_validator('default_safe_to_spend_mode')
    @classmethod
    def validate_default_mode(cls, v: str) -> str:
        """Accept a posture name or 'auto' (use the recommended posture)."""
        mode = v.strip().lower()
        allowed = [m.value for m in SafeToSpendMode] + [AUTO_MODE]
        if mode not in allowed:
            raise ValueError(f"default_safe_to_spend_mode must be one of {', '.join(allowed)}")
        return mode

    @property
    def uses_recommended_mode(self) -> bool:
        return self.default_safe_to_spend_mode == AUTO_MODE


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are loaded lazily to allow partial configuration

    @property
    def app(self) -> AppSettings:
        return AppSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, object]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name}_error with the message for each failure.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("app", "logging"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results

"""
Centralized configuration management for HookScore.

Settings are grouped by concern, validated with pydantic-settings and
loaded from environment variables or an optional .env file.

Usage:
    from hookscore.config import get_settings

    settings = get_settings()
    if settings.remote_analysis_available:
        ...
"""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# LLM Provider Settings
# =============================================================================


class LLMSettings(BaseSettings):
    """Configuration for the optional remote scoring providers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    anthropic_api_key: Optional[SecretStr] = Field(
        default=None,
        description="Anthropic API key for Claude models",
    )
    openai_api_key: Optional[SecretStr] = Field(
        default=None,
        description="OpenAI API key for GPT models",
    )
    gemini_api_key: Optional[SecretStr] = Field(
        default=None,
        description="Google Gemini API key",
    )

    anthropic_model: str = Field(
        default="claude-sonnet-4-20250514",
        description="Anthropic model to use",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model to use",
    )
    gemini_model: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model to use",
    )

    llm_api_timeout: int = Field(
        default=30,
        ge=1,
        le=600,
        description="Timeout in seconds for LLM API requests",
    )

    @property
    def has_any_provider(self) -> bool:
        """Check if at least one LLM provider is configured."""
        return any([
            self.anthropic_api_key,
            self.openai_api_key,
            self.gemini_api_key,
        ])

    @property
    def available_providers(self) -> List[str]:
        """Configured provider names in selection priority order."""
        providers = []
        if self.anthropic_api_key:
            providers.append("anthropic")
        if self.openai_api_key:
            providers.append("openai")
        if self.gemini_api_key:
            providers.append("gemini")
        return providers

    @property
    def default_provider(self) -> Optional[str]:
        """The provider a remote analysis would use, if any."""
        providers = self.available_providers
        return providers[0] if providers else None


# =============================================================================
# Analysis Settings
# =============================================================================


class AnalysisSettings(BaseSettings):
    """Limits and switches for the analysis endpoints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_content_length: int = Field(
        default=15000,
        ge=1,
        description="Maximum sanitized content length in characters",
    )
    remote_analysis_enabled: bool = Field(
        default=True,
        description="Allow remote LLM providers to produce the core scores",
    )


# =============================================================================
# Security Settings
# =============================================================================


class SecuritySettings(BaseSettings):
    """Configuration for deployment environment and CORS."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    allowed_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        description="Comma-separated list of allowed CORS origins",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def origins_list(self) -> List[str]:
        """Get parsed list of allowed origins."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingSettings(BaseSettings):
    """Configuration for logging."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format_json: bool = Field(
        default=False,
        description="Force JSON log format in development",
    )


# =============================================================================
# Monitoring Settings (Sentry)
# =============================================================================


class SentrySettings(BaseSettings):
    """Configuration for Sentry error tracking."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )
    sentry_environment: str = Field(
        default="development",
        description="Sentry environment name",
    )
    sentry_traces_sample_rate: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Sentry transaction sample rate (0.0 to 1.0)",
    )
    sentry_release: Optional[str] = Field(
        default="hookscore@1.0.0",
        description="Sentry release version",
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.sentry_dsn)


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Aggregates all configuration groups."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    llm: LLMSettings = Field(default_factory=LLMSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    sentry: SentrySettings = Field(default_factory=SentrySettings)

    @property
    def is_sentry_configured(self) -> bool:
        return self.sentry.is_configured

    @property
    def has_llm_provider(self) -> bool:
        return self.llm.has_any_provider

    @property
    def remote_analysis_available(self) -> bool:
        """Remote scoring is enabled and a provider key is present."""
        return self.analysis.remote_analysis_enabled and self.llm.has_any_provider

    @property
    def is_production(self) -> bool:
        return self.security.is_production

    def get_config_summary(self) -> dict:
        """
        Get a summary of configuration status for logging.

        Never includes secret values.
        """
        return {
            "environment": self.security.environment,
            "llm_providers": self.llm.available_providers,
            "default_llm_provider": self.llm.default_provider,
            "remote_analysis_enabled": self.analysis.remote_analysis_enabled,
            "max_content_length": self.analysis.max_content_length,
            "sentry_configured": self.is_sentry_configured,
            "allowed_origins": self.security.origins_list,
            "log_level": self.logging.log_level,
        }


# =============================================================================
# Settings Singleton
# =============================================================================


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Call reload_settings() after changing the environment.

    Raises:
        ValidationError: If configuration is invalid
    """
    return Settings()


def reload_settings() -> Settings:
    """Clear the cached settings and load them again from the environment."""
    get_settings.cache_clear()
    return get_settings()

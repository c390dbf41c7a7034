"""Configuration management for tube2notion."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Required configuration is missing."""

    pass


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Webhook server
    port: int = Field(default=8080, alias="PORT")
    webhook_secret: Optional[str] = Field(default=None, alias="WEBHOOK_SECRET")
    log_level: str = Field(default="INFO", alias="TUBE2NOTION_LOG_LEVEL")

    # Transcript provider
    supadata_api_key: Optional[str] = Field(default=None, alias="SUPADATA_API_KEY")
    supadata_base_url: str = Field(
        default="https://api.supadata.ai/v1",
        alias="SUPADATA_BASE_URL",
    )
    http_timeout: float = Field(default=30.0, alias="TUBE2NOTION_HTTP_TIMEOUT")

    # LLM Configuration (LiteLLM reads GEMINI_API_KEY itself)
    default_model: str = Field(
        default="gemini/gemini-2.0-flash",
        alias="TUBE2NOTION_MODEL",
    )
    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    llm_temperature: float = Field(default=0.2, alias="TUBE2NOTION_TEMPERATURE")
    llm_max_tokens: int = Field(default=8192, alias="TUBE2NOTION_MAX_TOKENS")

    # Notion
    notion_api_key: Optional[str] = Field(default=None, alias="NOTION_API_KEY")
    notion_default_parent_id: Optional[str] = Field(
        default=None,
        alias="NOTION_DEFAULT_PARENT_ID",
    )
    notion_default_parent_type: Literal["database", "page"] = Field(
        default="database",
        alias="NOTION_DEFAULT_PARENT_TYPE",
    )

    @field_validator(
        "webhook_secret",
        "supadata_api_key",
        "gemini_api_key",
        "notion_api_key",
        "notion_default_parent_id",
        mode="before",
    )
    @classmethod
    def _strip_secret(cls, value: Optional[str]) -> Optional[str]:
        """Trim stray whitespace and treat blank values as unset."""
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


# Environment variables that must be set for the webhook to work
REQUIRED_SETTINGS = {
    "webhook_secret": "WEBHOOK_SECRET",
    "gemini_api_key": "GEMINI_API_KEY",
    "notion_api_key": "NOTION_API_KEY",
    "supadata_api_key": "SUPADATA_API_KEY",
}


def validate_settings(settings: Settings) -> None:
    """Check that every required variable is present.

    Raises:
        ConfigurationError: Naming each missing environment variable
    """
    missing = [env for attr, env in REQUIRED_SETTINGS.items() if not getattr(settings, attr)]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings

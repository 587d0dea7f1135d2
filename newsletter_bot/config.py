"""Configuration loading and validation."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from newsletter_bot.llm import PROVIDER_DEFAULTS, Provider
from newsletter_bot.logging_config import LogLevel


class Settings(BaseSettings):
    """Runtime settings read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    gemini_api_key: str = Field(min_length=1)
    resend_api_key: str = Field(min_length=1)
    from_email: str = Field(min_length=3)
    to_emails: str = Field(min_length=3, description="Comma-separated recipients")

    llm_provider: Provider = "gemini"
    llm_model: str | None = None
    log_level: LogLevel = "INFO"

    @property
    def recipients(self) -> list[str]:
        """Recipient addresses parsed from TO_EMAILS."""
        return [address.strip() for address in self.to_emails.split(",") if address.strip()]

    @property
    def resolved_model(self) -> str:
        return self.llm_model or PROVIDER_DEFAULTS[self.llm_provider]

    @property
    def llm_api_key(self) -> str:
        """API key for the configured provider."""
        return self.gemini_api_key


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()

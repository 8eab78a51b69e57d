"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = "Vitals Suggestion API"
    environment: str = "local"
    debug: bool = True

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8080

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True

    # Chat-completion provider settings
    openai_api_key: str = Field(..., min_length=1)
    openai_base_url: str = "https://api.openai.com/v1"
    suggestion_model: str = "gpt-3.5-turbo"
    suggestion_timeout: float = Field(default=10.0, gt=0)
    clean_suggestion_text: bool = False

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_local(self) -> bool:
        """Check if running in local development environment."""
        return self.environment == "local"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()

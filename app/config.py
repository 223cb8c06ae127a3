"""Configuration management using pydantic-settings."""

from typing import List

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # External analysis service (n8n workflow webhook)
    analysis_webhook_url: str = "https://n8n.datascienceforbusinessia.com:8445/webhook/CryptoTraderAI"
    # Upper bound on a single webhook call so a session never stays loading forever
    analysis_webhook_timeout_seconds: float = 30.0

    # Application Configuration
    app_env: str = "development"
    log_level: str = "INFO"

    # Comma-separated list of allowed origins (production only)
    cors_origins: str = ""

    # Rate limiting
    rate_limit_per_minute: int = 60
    rate_limit_analyze_per_minute: int = 20
    rate_limit_sessions_per_minute: int = 10

    # In-memory session registry cap; oldest sessions are evicted first
    max_sessions: int = 1000

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

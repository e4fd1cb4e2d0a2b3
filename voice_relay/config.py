"""
Configuration management using pydantic-settings.
Loads environment variables with type validation.
"""

from functools import lru_cache
from typing import Dict, List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Voice Relay"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Deepgram
    deepgram_api_key: Optional[str] = None
    deepgram_api_url: str = "https://api.deepgram.com/v1/listen"
    deepgram_model: str = "nova-2"
    deepgram_smart_format: bool = True
    deepgram_punctuate: bool = True
    deepgram_timeout: Optional[float] = None

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def deepgram_query_params(self) -> Dict[str, str]:
        """Fixed query parameters sent with every transcription request."""
        return {
            "model": self.deepgram_model,
            "smart_format": str(self.deepgram_smart_format).lower(),
            "punctuate": str(self.deepgram_punctuate).lower(),
        }


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings instance.
    Use dependency injection in FastAPI routes.
    """
    return Settings()

"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # ==========================================================================
    # Environment
    # ==========================================================================

    environment: str = "development"
    debug: bool = True

    # ==========================================================================
    # API Server
    # ==========================================================================

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # ==========================================================================
    # Hugging Face Inference API
    # ==========================================================================

    hf_api_key: str = ""
    hf_api_base: str = "https://router.huggingface.co/hf-inference/models"
    hf_default_model: str = "facebook/mbart-large-50-many-to-many-mmt"

    # ==========================================================================
    # Translation gateway
    # ==========================================================================

    # Upstream calls
    translation_request_timeout: float = 30.0
    translation_max_retries: int = 3
    translation_default_wait: float = 20.0   # used when a 503 carries no estimate
    translation_max_wait: float = 60.0

    # Cache
    translation_cache_max_size: int = 1000
    translation_cache_ttl_hours: float = 24.0

    # Request limits
    translation_max_text_length: int = 5000
    translation_max_batch_size: int = 20
    translation_batch_concurrency: int = 1
    translation_batch_deadline: float | None = None

    # Warm-up
    translation_warmup_file: str = ""
    translation_warmup_languages: str = "hi,ta,te,bn,mr"

    # ==========================================================================
    # Optional Services
    # ==========================================================================

    sentry_dsn: str = ""

    # ==========================================================================
    # Helpers
    # ==========================================================================

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def warmup_languages_list(self) -> list[str]:
        return [
            code.strip().lower()
            for code in self.translation_warmup_languages.split(",")
            if code.strip()
        ]

    @property
    def translation_cache_ttl_seconds(self) -> float:
        return self.translation_cache_ttl_hours * 60 * 60

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def has_hf_credentials(self) -> bool:
        """Whether a Hugging Face API key is configured."""
        return bool(self.hf_api_key and self.hf_api_key.strip())

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

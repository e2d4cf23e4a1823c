"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Secrets are passed to their clients unmodified

Design Decisions:
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://autoconnect:autoconnect@db:5432/autoconnect"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Frontend (redirect targets for checkout)
    frontend_url: str = "http://localhost:3001"

    @field_validator("frontend_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Payments (Stripe Checkout)
    stripe_secret_key: str = "sk_test_placeholder"
    stripe_api_base: str = "https://api.stripe.com"
    payment_currency: str = "lkr"

    # SMTP
    smtp_host: str = "localhost"
    smtp_port: int = 465
    smtp_user: str = "AutoConnect"
    smtp_email: str = "noreply@autoconnect.lk"
    smtp_key: str = ""
    smtp_use_tls: bool = True

    # OCR (Azure Computer Vision Read API)
    azure_vision_endpoint: str = "https://placeholder.cognitiveservices.azure.com"
    azure_vision_key: str = "azure-vision-placeholder"
    ocr_max_polls: int = 10
    ocr_poll_interval_seconds: float = 1.0

    # LLM (Anthropic)
    anthropic_api_key: str = "sk-ant-placeholder"
    llm_model: str = "claude-3-5-haiku-latest"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000

    # Outbound HTTP
    http_timeout_seconds: float = 30.0

    # Uploads
    upload_max_bytes: int = 10 * 1024 * 1024

    # API
    cors_origins: list[str] = ["http://localhost:3001"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Application Configuration.

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "Work Whiz"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=True)

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Redis (email job queue)
    REDIS_URL: str = Field(default="redis://localhost:6379")

    # CORS
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Role resolution by sub-domain
    ADMIN_SUBDOMAIN: str = "admin"
    EMPLOYER_SUBDOMAIN: str = "employer"
    CANDIDATE_SUBDOMAIN: str = "www"

    # Outgoing email
    SMTP_HOST: str = Field(default="localhost")
    SMTP_PORT: int = Field(default=587)
    SMTP_USERNAME: str | None = Field(default=None)
    SMTP_PASSWORD: str | None = Field(default=None)
    SMTP_USE_TLS: bool = Field(default=False)
    SMTP_START_TLS: bool = Field(default=True)
    SMTP_TIMEOUT_SECONDS: int = Field(default=30)
    EMAIL_FROM: str = Field(default="Work Whiz <no-reply@workwhiz.co.za>")

    # Email queue
    EMAIL_QUEUE_NAME: str = "arq:queue"
    EMAIL_QUEUE_MAX_TRIES: int = Field(default=3, ge=1)
    EMAIL_JOB_TIMEOUT_SECONDS: int = Field(default=60, ge=1)

    # Frontend links used inside emails
    FRONTEND_BASE_URL: str = Field(default="http://localhost:5173")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Worker metrics
    WORKER_METRICS_PORT: int = 8001

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Normalize LOG_LEVEL and reject unknown levels."""
        level = str(v).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got '{v}'"
            )
        return level

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()

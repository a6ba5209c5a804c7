"""Application Configuration.

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "BAIS Onboarding Core"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Registration API
    API_BASE_URL: str = Field(
        default="http://localhost:8000",
        description="Base URL of the BAIS registration API"
    )
    REGISTRATION_PATH: str = Field(default="/api/v1/businesses/register")
    REQUEST_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="Timeout for a single registration request (no retries are attempted)"
    )

    @field_validator('LOG_LEVEL', mode='after')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got '{v}'")
        return level

    @field_validator('API_BASE_URL', mode='after')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop a trailing slash so paths can be appended directly."""
        return v.rstrip('/')


settings = Settings()

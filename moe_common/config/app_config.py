# moe_common/config/app_config.py
"""
Complete application configuration with validation.
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator
from .config_types import EnvLogLevel, Environment
from .env_config import require_env, get_env
from .logging_config import LoggingConfig


class AppConfig(BaseModel):
    """
    Complete application configuration.

    All configuration is loaded from environment variables and validated
    at startup. Invalid configuration will fail fast with clear error messages.
    """

    app_title: str = Field(..., min_length=1)
    app_version: str = Field(..., pattern=r"^\d+\.\d+\.\d+$")  # Semantic versioning
    environment: Environment
    app_url: Optional[str] = Field(
        default=None, description="Origin used when no request origin is bound"
    )

    logging: LoggingConfig

    model_config = {"frozen": True}

    @field_validator("app_url")
    @classmethod
    def validate_app_url(cls, v: Optional[str]) -> Optional[str]:
        """Require an http(s) origin and drop any trailing slash."""
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"APP_URL must start with http:// or https://, got {v!r}")
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "AppConfig":
        """
        Validate production-specific requirements.
        """
        if self.environment.is_production:
            if self.logging.log_level == EnvLogLevel.DEBUG:
                raise ValueError("DEBUG log level not allowed in production")
        return self


def load_app_config() -> AppConfig:
    """
    Load complete application configuration.

    Environment variables:
    Required:
    - APP_TITLE
    - APP_VERSION
    - ENVIRONMENT: development, staging or production
    - LOG_LEVEL

    Optional:
    - APP_URL: fallback origin for get_app_url()

    Raises:
        ValidationError: If configuration is invalid
        ConfigurationError: If required env vars are missing
    """
    from .logging_config import load_logging_config

    return AppConfig(
        app_title=require_env("APP_TITLE"),
        app_version=require_env("APP_VERSION"),
        environment=require_env("ENVIRONMENT"),
        app_url=get_env("APP_URL") or None,
        logging=load_logging_config(),
    )


__all__ = [
    "AppConfig",
    "load_app_config",
]

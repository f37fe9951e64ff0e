# moe_common/config/initialize_config.py
"""
Configuration initialization module.

Handles the complete application configuration lifecycle.
"""
from typing import Optional, List
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError
from .app_config import AppConfig, load_app_config
from .structlog_config import configure_structlog
from moe_common.api_error import ConfigurationError


class _ConfigState:
    """
    Singleton holder for application configuration.
    """

    _instance: Optional["_ConfigState"] = None
    _config: Optional[AppConfig]

    def __new__(cls) -> "_ConfigState":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = None
        return cls._instance

    @property
    def is_initialized(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> AppConfig:
        """Get application configuration."""
        if self._config is None:
            raise RuntimeError(
                "Configuration not initialized. Call initialize_config() at startup."
            )
        return self._config

    def set_config(self, config: AppConfig) -> None:
        self._config = config

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        self._config = None


_state = _ConfigState()


def initialize_config(load_env_file: bool = True) -> AppConfig:
    """
    Initialize and validate all application configuration.

    Call once at startup, before any code that logs.

    Args:
        load_env_file: Read the nearest .env file (searched upward from the
            working directory) into the environment first. Variables
            already set in the environment win.

    Returns:
        The validated AppConfig

    Raises:
        ConfigurationError: If configuration is invalid or missing
        RuntimeError: If structlog was configured with a different level
    """
    if load_env_file:
        env_file = find_dotenv(usecwd=True)
        if env_file:
            load_dotenv(env_file)

    try:
        config = load_app_config()
    except ValidationError as e:
        # Convert Pydantic errors to ConfigurationError with better messages
        errors: List[str] = []
        for error in e.errors():
            field = ".".join(str(x) for x in error["loc"])
            errors.append(f"{field}: {error['msg']}")

        raise ConfigurationError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {line}" for line in errors)
        ) from e

    configure_structlog(config.logging.level_int)
    _state.set_config(config)
    return config


def get_config() -> AppConfig:
    """
    Get validated application configuration.

    Raises:
        RuntimeError: If not initialized
    """
    return _state.config


def is_initialized() -> bool:
    return _state.is_initialized


__all__ = ["initialize_config", "get_config", "is_initialized"]

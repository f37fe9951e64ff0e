# moe_common/config/logging_config.py
from dataclasses import dataclass
from .env_config import require_env
from .config_types import EnvLogLevel
from moe_common.api_error import ConfigurationError

_default_log_level_env_key = "LOG_LEVEL"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    log_level: EnvLogLevel

    @property
    def level_int(self) -> int:
        """Get numeric log level."""
        return self.log_level.level


def load_logging_config(
    log_level_env_key: str = _default_log_level_env_key,
) -> LoggingConfig:
    """
    Load logging configuration from environment.

    Args:
        log_level_env_key: Environment variable name

    Returns:
        LoggingConfig instance

    Raises:
        ConfigurationError: If LOG_LEVEL is missing or invalid
    """
    log_level_val = require_env(log_level_env_key).upper()

    try:
        return LoggingConfig(log_level=EnvLogLevel(log_level_val))
    except ValueError as exc:
        valid_levels = ", ".join(level.value for level in EnvLogLevel)
        raise ConfigurationError(
            f"Invalid logging configuration. "
            f"{log_level_env_key} must be one of [{valid_levels}]"
        ) from exc


__all__ = [
    "LoggingConfig",
    "load_logging_config",
]

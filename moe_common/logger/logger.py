# moe_common/logger/logger.py
"""
Application logger with explicit initialization.

Usage:
    from moe_common.logger import get_app_logger

    logger = get_app_logger(__name__)
    logger.info("Application started")
"""

from typing import Any, Dict, Mapping, Optional
import structlog

from moe_common.config.structlog_config import get_logger as _get_structlog_logger

# structlog keeps the message under "event"; a field of that name is renamed
RESERVED_FIELD_RENAMES = {"event": "event_field"}


def safe_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Return fields with structlog-reserved keys renamed."""
    return {RESERVED_FIELD_RENAMES.get(key, key): value for key, value in fields.items()}


class AppLogger:
    """
    Application logger wrapper.

    Provides a type-safe interface to structlog. The underlying logger is
    resolved on first use, so instances can be created at import time
    before configure_structlog() runs. The message is positional-only, so
    any keyword is accepted as a field.
    """

    def __init__(self, name: str = "app") -> None:
        self._name = name
        self._logger_instance: Optional[structlog.BoundLogger] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def _logger(self) -> structlog.BoundLogger:
        if self._logger_instance is None:
            self._logger_instance = _get_structlog_logger(self._name)
        return self._logger_instance

    def _log(self, level: str, msg: str, fields: Dict[str, Any]) -> None:
        getattr(self._logger, level)(msg, **safe_fields(fields))

    def debug(self, msg: str, /, **kwargs: Any) -> None:
        self._log("debug", msg, kwargs)

    def info(self, msg: str, /, **kwargs: Any) -> None:
        self._log("info", msg, kwargs)

    def warning(self, msg: str, /, **kwargs: Any) -> None:
        self._log("warning", msg, kwargs)

    def error(self, msg: str, /, **kwargs: Any) -> None:
        self._log("error", msg, kwargs)

    def critical(self, msg: str, /, **kwargs: Any) -> None:
        self._log("critical", msg, kwargs)


def get_app_logger(name: str = "app") -> AppLogger:
    """
    Get application logger instance.

    Args:
        name: Logger name

    Returns:
        AppLogger instance
    """
    return AppLogger(name=name)


__all__ = ["AppLogger", "get_app_logger", "safe_fields"]

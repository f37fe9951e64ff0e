# moe_common/config/structlog_config.py
"""
Structlog configuration module.
Must be configured once per process via configure_structlog().
"""
import sys
import os
import threading
from typing import Any, List, Optional
import structlog
from rich.traceback import install as install_rich_traceback

install_rich_traceback(show_locals=True, width=None, extra_lines=3)


class _ConfiguredLevel:
    """
    Level structlog was configured with, tracked per process id.

    A forked worker inherits the parent's record but not its configuration
    ownership, so it configures itself again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._level: Optional[int] = None
        self._process_id: Optional[int] = None

    @property
    def is_set(self) -> bool:
        return self._level is not None and self._process_id == os.getpid()

    def claim(self, log_level: int) -> bool:
        """
        Record log_level for this process.

        Returns:
            False if this process already holds the same level

        Raises:
            RuntimeError: If this process holds a different level
        """
        with self._lock:
            if self.is_set:
                if self._level == log_level:
                    return False
                raise RuntimeError(
                    f"structlog already configured in this process. "
                    f"Current level: {self._level}, attempted: {log_level}"
                )
            self._level = log_level
            self._process_id = os.getpid()
            return True

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        with self._lock:
            self._level = None
            self._process_id = None


_state = _ConfiguredLevel()


def _processors() -> List[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.RichTracebackFormatter(
                show_locals=False,
                width=None,
                suppress=["pydantic", "dotenv"],
            ),
        ),
    ]


def configure_structlog(log_level: int) -> None:
    """
    Configure structlog to render records at or above log_level on stderr.

    Calling again with the same level is a no-op.

    Raises:
        RuntimeError: If this process was configured with a different level
    """
    if not _state.claim(log_level):
        return

    structlog.configure(
        processors=_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "app") -> structlog.BoundLogger:
    """
    Raises:
        RuntimeError: If structlog hasn't been configured yet in this process
    """
    if not _state.is_set:
        raise RuntimeError(
            "structlog not configured. "
            "Call configure_structlog() at application startup."
        )
    return structlog.get_logger(name)


def is_configured() -> bool:
    return _state.is_set


__all__ = [
    "configure_structlog",
    "get_logger",
    "is_configured",
]

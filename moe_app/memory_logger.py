# moe_app/memory_logger.py
import sys
from typing import Any

import structlog

from moe_common.config import is_configured
from moe_common.logger import get_app_logger, safe_fields

MEMORY_LOG_SOURCE = "memory"
MEMORY_LOGGER_NAME = "moe.memory"

_logger = get_app_logger(MEMORY_LOGGER_NAME)


def log_memory(event: str, /, **data: Any) -> None:
    """
    Emit a debug record for a memory-store event, tagged source="memory".

    Before configure_structlog() runs the record goes through structlog's
    default configuration. Best-effort: a failure while emitting is reported
    on stderr rather than raised.

    Example:
        >>> log_memory("cipher.fetch.cacheHit", session_id="abc", count=3)
    """
    # The source tag is fixed; callers cannot relabel records
    data.pop("source", None)
    try:
        if is_configured():
            _logger.debug(event, source=MEMORY_LOG_SOURCE, **data)
        else:
            structlog.get_logger(MEMORY_LOGGER_NAME).debug(
                event, source=MEMORY_LOG_SOURCE, **safe_fields(data)
            )
    except Exception as e:
        print(f"Memory log '{event}' dropped: {e}", file=sys.stderr)


__all__ = ["MEMORY_LOG_SOURCE", "log_memory"]

# moe_app/app_url.py
"""
Application base URL derivation.

While a request is being served its origin is bound in a context variable,
so every task sees the origin of its own request. Outside a request the
configured APP_URL is used, then a fixed local fallback.
"""

from contextlib import contextmanager
from typing import Iterator
from urllib.parse import urlsplit

from moe_common.config import get_config, is_initialized
from moe_common.context_vars import request_origin_context_var

DEFAULT_APP_URL = "http://localhost:8080"


def _to_origin(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise ValueError(f"Not an http(s) URL: {url!r}")
    host = parts.netloc.rpartition("@")[2]
    return f"{parts.scheme}://{host}"


@contextmanager
def request_origin(url: str) -> Iterator[str]:
    """
    Bind the origin of the current request for the duration of the block.

    Everything except scheme://host[:port] is dropped.

    Raises:
        ValueError: If url is not an absolute http(s) URL

    Example:
        >>> with request_origin("https://ensemble.example.com/session/42?tab=1"):
        ...     get_app_url()
        'https://ensemble.example.com'
    """
    origin = _to_origin(url)
    token = request_origin_context_var.set(origin)
    try:
        yield origin
    finally:
        request_origin_context_var.reset(token)


def get_app_url() -> str:
    """Return the bound request origin, else the configured or local fallback."""
    origin = request_origin_context_var.get()
    if origin:
        return origin

    if is_initialized():
        configured = get_config().app_url
        if configured:
            return configured

    return DEFAULT_APP_URL


__all__ = ["DEFAULT_APP_URL", "request_origin", "get_app_url"]

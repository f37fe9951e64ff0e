# moe_common/context_vars.py
from contextvars import ContextVar
from typing import Optional

# Origin (scheme://host[:port]) of the request being served by this task
request_origin_context_var: ContextVar[Optional[str]] = ContextVar(
    "request_origin",
    default=None,
)

__all__ = ["request_origin_context_var"]

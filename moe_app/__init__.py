# moe_app/__init__.py
"""
Helpers used by the expert ensemble: Gemini response text extraction,
app URL derivation, the memory debug logger and API key access.
"""

from .gemini_text import *
from .app_url import *
from .memory_logger import *
from .credentials import *

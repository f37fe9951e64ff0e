# moe_common/logger/__init__.py
from .logger import *

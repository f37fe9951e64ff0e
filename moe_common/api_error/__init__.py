# moe_common/api_error/__init__.py
from .config_error import *

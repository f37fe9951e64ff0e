# moe_app/credentials.py
from moe_common.api_error import ConfigurationError
from moe_common.config import is_configured, require_env
from moe_common.logger import get_app_logger

API_KEY_ENV = "API_KEY"

logger = get_app_logger(__name__)


def get_api_key() -> str:
    """
    Get the Gemini API key.

    Raises:
        ConfigurationError: If API_KEY is not set. The ensemble cannot
            run without it, so there is no fallback.
    """
    try:
        return require_env(API_KEY_ENV)
    except ConfigurationError:
        if is_configured():
            logger.critical(
                "API_KEY environment variable not set. The application will not function.",
                env_var=API_KEY_ENV,
            )
        raise


__all__ = ["API_KEY_ENV", "get_api_key"]

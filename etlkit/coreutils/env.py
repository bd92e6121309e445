from dotenv import load_dotenv
import logging
import os

load_dotenv()  # take environment variables from .env

logger = logging.getLogger(__name__)


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def env_get_int(key: str, default: int, minimum: int | None = None) -> int:
    """Get environment variable as int, falling back to default if unset, invalid or below minimum."""
    raw = env_get(key)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"⚠️  Invalid integer for {key}: {raw!r}, using {default}")
        return default

    if minimum is not None and value < minimum:
        logger.warning(
            f"⚠️  {key}={value} is below the minimum {minimum}, using {default}"
        )
        return default

    return value


DEFAULT_BATCH_SIZE = env_get_int("ETLKIT_BATCH_SIZE", 1_000, minimum=1)
DEFAULT_LOG_LEVEL = env_get("ETLKIT_LOG_LEVEL", "INFO")

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from etlkit.coreutils.env import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

logger = logging.getLogger(__name__)


def resolve_level(level: Optional[Union[int, str]]) -> int:
    """Turn a level name or number into a logging level, INFO if unknown"""
    if level is None:
        level = DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        logger.warning(f"⚠️  Unknown log level {level!r}, using INFO")
        return logging.INFO
    return resolved


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_dir: Optional[Union[str, Path]] = None,
):
    """Setup logging for the etlkit package logger

    Handlers from a previous call are closed and replaced, so calling it
    again with another level or log_dir takes effect. Records still
    propagate to the root logger.

    Args:
        level: Logging level, defaults to ETLKIT_LOG_LEVEL (INFO if unset or unknown)
        log_dir: Optional directory for a dated log file

    Returns:
        The etlkit package logger
    """
    package_logger = logging.getLogger("etlkit")

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                log_dir / f"etlkit_{datetime.now().strftime('%Y-%m-%d')}.log"
            )
        )

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.setLevel(resolve_level(level))
    return package_logger

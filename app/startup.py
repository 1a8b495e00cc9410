"""Startup validation and configuration checks."""

import logging
from pathlib import Path

from .config import get_log_level, get_max_code_bytes, get_port

logger = logging.getLogger(__name__)


def _level_from_config():
    level = getattr(logging, get_log_level(), None)
    return level if isinstance(level, int) else None


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL."""
    logging.basicConfig(
        level=_level_from_config() or logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_config() -> None:
    """Log the effective configuration and warn about surprising values."""
    if not Path(".env").exists():
        logger.info(".env file not found; using environment and defaults")
    if _level_from_config() is None:
        logger.warning("LOG_LEVEL=%s is not a logging level; using INFO", get_log_level())
    logger.info("Serving on port %d, max script size %d bytes", get_port(), get_max_code_bytes())

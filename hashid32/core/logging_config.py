import logging
import sys
from typing import Optional

from hashid32.core.config import settings

DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(level: Optional[str]) -> str:
    """Return level as a stdlib level name, falling back to INFO for unknown names."""
    name = (level or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name


def configure_logging(level: Optional[str] = None):
    requested = level or settings.LOG_LEVEL
    resolved = resolve_log_level(requested)
    logging.basicConfig(
        level=resolved,
        format='%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logger = logging.getLogger("hashid32")
    if resolved != requested.strip().upper():
        logger.warning(f"Unknown log level '{requested}'. Using {resolved}.")
    return logger

# core/logging.py
"""
Logging configuration for the advisory service, the agents and the gateway
"""
import logging
import sys
from typing import Optional

from .config import LogLevel, Settings, get_settings

def setup_logging(settings: Optional[Settings] = None) -> None:
    """Root handler on stdout, then the per-logger levels from settings.logger_levels"""
    settings = settings or get_settings()
    logger = logging.getLogger(__name__)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.value),
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    for name, level in settings.logger_levels.items():
        level = str(level).upper()
        if level not in LogLevel.__members__:
            logger.warning(f"Ignoring unknown log level {level!r} for logger {name!r}")
            continue
        logging.getLogger(name).setLevel(level)

    logger.debug(f"Logger levels: {settings.logger_levels}")

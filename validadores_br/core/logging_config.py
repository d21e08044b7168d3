"""
Logging configuration for Validadores BR
"""

import logging
import sys
from typing import Optional

from validadores_br.core.config import Settings, get_settings

PACKAGE_LOGGERS = [
    "validadores_br",
    "validadores_br.services",
    "validadores_br.validators",
]


def configure_logging(config: Optional[Settings] = None) -> logging.Logger:
    """
    Configure logging for applications using the package

    Args:
        config: Settings instance (defaults to the cached settings)

    Returns:
        Logger for this module
    """
    config = config or get_settings()
    log_level = config.LOG_LEVEL.upper()
    level = getattr(logging, log_level, logging.INFO)

    # Configure root logger
    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Set package loggers
    for logger_name in PACKAGE_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)

    # requests/urllib3 are noisy at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")
    return logger

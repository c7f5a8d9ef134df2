"""
Logging setup for the tracker
"""

import logging
import sys

from eventease.core.config import settings

def setup_logging(level: str = None):
    """Configure root logging with a single console handler"""
    if level is None:
        level = settings.LOG_LEVEL

    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(console_handler)

    return logger

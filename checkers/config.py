"""
Configuration - Environment settings and logging setup.

All settings are read from the environment once, at import time.
"""

import os
import sys

from loguru import logger

CHECKERS_ENV = os.getenv("CHECKERS_ENV", "development")
CHECKERS_LOG_LEVEL = os.getenv("CHECKERS_LOG_LEVEL", "INFO")
CHECKERS_DEFAULT_RULESET = os.getenv("CHECKERS_DEFAULT_RULESET", "extended")
SESSION_MAX_AGE_SECONDS = int(os.getenv("CHECKERS_SESSION_MAX_AGE", "3600"))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=(level or CHECKERS_LOG_LEVEL).upper())

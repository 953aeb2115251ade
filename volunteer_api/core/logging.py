"""Logging setup."""

import logging

from volunteer_api.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from the application settings."""
    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("volunteer_api").setLevel(level)

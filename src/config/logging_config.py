"""
Yahtzee - Logging Setup

Modules log through ``logging.getLogger(__name__)``; this configures the
root handler once from Settings.
"""

import logging

from src.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> int:
    """
    Apply the configured log level to the root logger.

    Returns:
        The numeric level in effect
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level

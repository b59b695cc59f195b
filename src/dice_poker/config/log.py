"""Logging setup for hosts embedding the game engine."""

import logging

from dice_poker.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> int:
    """Call once at program start. Returns the level applied."""
    settings = settings or get_settings()
    if settings.debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
    logging.getLogger("dice_poker").setLevel(level)
    return level

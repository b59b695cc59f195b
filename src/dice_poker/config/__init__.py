"""
Dice Poker Configuration.

Environment variables, settings, and logging configuration.
"""

from dice_poker.config.log import configure_logging
from dice_poker.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]

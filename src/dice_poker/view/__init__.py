"""
Dice Poker Read Models.

Serializable snapshots of engine state for a presentation layer.
"""

from dice_poker.view.models import CardView, GameSnapshot

__all__ = ["CardView", "GameSnapshot"]

"""
Dice Poker - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from dice_poker.engine.base import DiceRoll


def validate_dice_values(values: Sequence[int]) -> tuple[int, ...]:
    """
    Validate and normalize the three round dice.

    Args:
        values: Sequence of dice values to validate

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count != DiceRoll.NUM_DICE:
        raise ValueError(f"Exactly {DiceRoll.NUM_DICE} dice required, got {count}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DiceRoll.FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DiceRoll.FACES}."
            )

    return values_tuple


def validate_die_index(index: int) -> int:
    """
    Validate a die position.

    Args:
        index: Position of a die in the roll

    Returns:
        Validated index

    Raises:
        ValueError: If the index is not 0, 1 or 2
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise ValueError(f"Die index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < DiceRoll.NUM_DICE):
        raise ValueError(
            f"Die index {index} is out of range. Must be between 0 and {DiceRoll.NUM_DICE - 1}."
        )

    return index


def validate_die_indices(indices: Sequence[int] | frozenset[int] | set[int]) -> frozenset[int]:
    """Validate a collection of die positions."""
    if not indices:
        return frozenset()
    return frozenset(validate_die_index(idx) for idx in indices)


def validate_draw_count(count: int) -> int:
    """
    Validate the number of cards to draw.

    Raises:
        ValueError: If count is not a non-negative integer
    """
    if not isinstance(count, int) or isinstance(count, bool):
        raise ValueError(f"Draw count must be an integer, got {type(count).__name__}.")

    if count < 0:
        raise ValueError(f"Draw count cannot be negative, got {count}.")

    return count

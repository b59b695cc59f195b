"""
Dice Poker - Dice Engine

Rolls the three round dice and resolves them into economy effects.

Face Mapping (applied per die and summed):
    - Faces 1 & 6: +1 currency
    - Faces 4 & 5: +1 action point on top of the base of 1
    - Faces 2 & 3: +1 bonus card draw

Roll Budget:
    - A round allows at most 3 roll actions (full roll or batch reroll)
    - No rolling once the dice are confirmed
"""

import random
from enum import Enum
from typing import ClassVar, Sequence

from dice_poker.engine.base import DiceResolution, DiceRoll
from dice_poker.engine.validators import validate_dice_values, validate_die_indices


class FaceEffect(Enum):
    """What a die face is worth when the roll is confirmed."""
    CURRENCY = "currency"
    ACTION_POINT = "action_point"
    BONUS_DRAW = "bonus_draw"


class DiceEngine:
    """
    Stateless engine for the dice round.

    All methods are class methods operating on immutable data.
    """

    NUM_DICE: ClassVar[int] = DiceRoll.NUM_DICE
    DIE_FACES: ClassVar[int] = DiceRoll.FACES
    MAX_ROLLS: ClassVar[int] = 3
    BASE_ACTION_POINTS: ClassVar[int] = 1

    FACE_MAPPING: ClassVar[dict[int, FaceEffect]] = {
        1: FaceEffect.CURRENCY,
        2: FaceEffect.BONUS_DRAW,
        3: FaceEffect.BONUS_DRAW,
        4: FaceEffect.ACTION_POINT,
        5: FaceEffect.ACTION_POINT,
        6: FaceEffect.CURRENCY,
    }

    @classmethod
    def roll_die(cls, rng: random.Random | None = None) -> int:
        """Roll a single D6."""
        source = random if rng is None else rng
        return source.randint(1, cls.DIE_FACES)

    @classmethod
    def roll_dice(cls, rng: random.Random | None = None) -> DiceRoll:
        """Roll all three dice."""
        return DiceRoll.from_sequence([cls.roll_die(rng) for _ in range(cls.NUM_DICE)])

    @classmethod
    def reroll(
        cls,
        dice: DiceRoll,
        indices: frozenset[int] | set[int],
        rng: random.Random | None = None,
    ) -> DiceRoll:
        """
        Reroll only the dice at the given positions.

        Args:
            dice: Current roll
            indices: Positions to reroll
            rng: Random source

        Returns:
            New DiceRoll with the other positions unchanged

        Raises:
            ValueError: If any index is out of range
        """
        positions = validate_die_indices(indices)
        # Sorted so a seeded generator yields the same faces for the same selection
        return dice.replace_at({i: cls.roll_die(rng) for i in sorted(positions)})

    @classmethod
    def can_roll(cls, roll_count: int, confirmed: bool) -> bool:
        """Whether another roll action is allowed this round."""
        return roll_count < cls.MAX_ROLLS and not confirmed

    @classmethod
    def resolve(cls, dice: DiceRoll | Sequence[int]) -> DiceResolution:
        """
        Resolve a confirmed roll into economy effects.

        Examples:
            (1, 4, 2) -> +1 currency, 2 action points, 1 bonus draw
            (6, 6, 6) -> +3 currency, 1 action point, 0 bonus draws

        Args:
            dice: The roll being confirmed, or its raw face values

        Returns:
            DiceResolution with the summed effects

        Raises:
            ValueError: If raw values are not three faces between 1 and 6
        """
        values = dice.values if isinstance(dice, DiceRoll) else validate_dice_values(dice)

        currency = 0
        extra_action_points = 0
        bonus_draws = 0

        for value in values:
            effect = cls.FACE_MAPPING[value]
            if effect is FaceEffect.CURRENCY:
                currency += 1
            elif effect is FaceEffect.ACTION_POINT:
                extra_action_points += 1
            else:
                bonus_draws += 1

        return DiceResolution(
            currency=currency,
            action_points=cls.BASE_ACTION_POINTS + extra_action_points,
            bonus_draws=bonus_draws,
        )

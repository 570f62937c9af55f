"""
Yahtzee - Dice Set

Five dice with a per-turn roll counter. Each DiceSet owns its random
source, so a seeded instance replays the same rolls.
"""

import random
from typing import ClassVar, Iterable

from src.engine.base import DIE_FACES, NUM_DICE, DiceRoll
from src.engine.errors import RollLimitExceeded
from src.engine.validators import validate_die_indices


class DiceSet:
    """
    The five dice shared by all players.

    Indices 0-4 are stable identifiers for selective rerolls. The roll
    counter only goes back to zero through reset(), which the session
    calls when a move is committed.
    """

    NUM_DICE: ClassVar[int] = NUM_DICE
    MAX_ROLLS: ClassVar[int] = 3

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self._values = [self._roll_die() for _ in range(self.NUM_DICE)]
        self._roll_count = 0

    def _roll_die(self) -> int:
        return self._rng.randint(1, DIE_FACES)

    @property
    def roll_count(self) -> int:
        """Number of rolls taken since the last reset."""
        return self._roll_count

    def roll(self, subset: Iterable[int] | None = None) -> DiceRoll:
        """
        Roll the selected dice.

        Args:
            subset: Die indices (0-4) to roll, None rolls all five

        Returns:
            Snapshot of all five dice after the roll

        Raises:
            RollLimitExceeded: If MAX_ROLLS rolls were already taken
            ValueError: If an index is out of range
        """
        if self._roll_count >= self.MAX_ROLLS:
            raise RollLimitExceeded(self.MAX_ROLLS)

        indices = validate_die_indices(subset, self.NUM_DICE)
        for i in sorted(indices):
            self._values[i] = self._roll_die()
        self._roll_count += 1
        return self.values()

    def values(self) -> DiceRoll:
        """Read-only snapshot of the current face values."""
        return DiceRoll(values=tuple(self._values))

    def reset(self) -> None:
        """Start a new turn: the roll counter goes back to zero."""
        self._roll_count = 0

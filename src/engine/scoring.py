"""
Yahtzee - Category Scorer

This module implements the scoring rules for the thirteen categories. All
methods are stateless class methods that operate on immutable inputs.

Scoring Rules:
    - Ones..Sixes: Sum of the dice showing that face
    - Three of a Kind: Sum of all dice if 3+ dice match the middle die
    - Four of a Kind: Sum of all dice if 4+ dice match the middle die
    - Full House (pair + triple): 25 points
    - Small Straight (4 in a row): 30 points
    - Large Straight (5 in a row): 40 points
    - Yahtzee (five of a kind): 50 points
    - Chance: Sum of all dice
"""

from collections import Counter
from typing import Sequence

from src.engine.base import Category, DiceRoll
from src.engine.validators import validate_hand


class CategoryScorer:
    """
    Stateless scorer for the thirteen categories.

    Every rule is total over all five-die hands: a hand that does not
    qualify scores 0.
    """

    # Scoring values
    FULL_HOUSE_POINTS = 25
    SMALL_STRAIGHT_POINTS = 30
    LARGE_STRAIGHT_POINTS = 40
    YAHTZEE_POINTS = 50

    SMALL_STRAIGHTS = (
        frozenset({1, 2, 3, 4}),
        frozenset({2, 3, 4, 5}),
        frozenset({3, 4, 5, 6}),
    )
    LARGE_STRAIGHTS = (
        (1, 2, 3, 4, 5),
        (2, 3, 4, 5, 6),
    )

    @classmethod
    def score(cls, category: Category, dice: Sequence[int] | DiceRoll) -> int:
        """
        Score a hand in one category.

        Args:
            category: Category to score
            dice: Five dice values (sequence or DiceRoll)

        Returns:
            Points the hand earns in that category

        Raises:
            ValueError: If the hand is not five dice in 1-6
        """
        values = validate_hand(dice)

        if category.is_upper:
            return cls._sum_of(category.face_value, values)
        if category is Category.THREE_OF_A_KIND:
            return cls._n_of_a_kind(3, values)
        if category is Category.FOUR_OF_A_KIND:
            return cls._n_of_a_kind(4, values)
        if category is Category.FULL_HOUSE:
            return cls._full_house(values)
        if category is Category.SMALL_STRAIGHT:
            return cls._small_straight(values)
        if category is Category.LARGE_STRAIGHT:
            return cls._large_straight(values)
        if category is Category.YAHTZEE:
            return cls._yahtzee(values)
        if category is Category.CHANCE:
            return sum(values)
        raise TypeError(f"No scoring rule for {category!r}")

    @classmethod
    def score_all(cls, dice: Sequence[int] | DiceRoll) -> dict[Category, int]:
        """Potential score of the hand in every category, in scorecard order."""
        values = validate_hand(dice)
        return {category: cls.score(category, values) for category in Category}

    @staticmethod
    def _sum_of(face_value: int, values: tuple[int, ...]) -> int:
        return sum(v for v in values if v == face_value)

    @staticmethod
    def _n_of_a_kind(n: int, values: tuple[int, ...]) -> int:
        # Matches are counted against the middle die of the sorted hand
        middle = sorted(values)[2]
        if values.count(middle) >= n:
            return sum(values)
        return 0

    @classmethod
    def _full_house(cls, values: tuple[int, ...]) -> int:
        counts = sorted(Counter(values).values())
        return cls.FULL_HOUSE_POINTS if counts == [2, 3] else 0

    @classmethod
    def _small_straight(cls, values: tuple[int, ...]) -> int:
        unique = set(values)
        if any(run <= unique for run in cls.SMALL_STRAIGHTS):
            return cls.SMALL_STRAIGHT_POINTS
        return 0

    @classmethod
    def _large_straight(cls, values: tuple[int, ...]) -> int:
        return cls.LARGE_STRAIGHT_POINTS if tuple(sorted(values)) in cls.LARGE_STRAIGHTS else 0

    @classmethod
    def _yahtzee(cls, values: tuple[int, ...]) -> int:
        return cls.YAHTZEE_POINTS if len(set(values)) == 1 else 0


def score(category: Category, hand: Sequence[int] | DiceRoll) -> int:
    """Shortcut for CategoryScorer.score."""
    return CategoryScorer.score(category, hand)

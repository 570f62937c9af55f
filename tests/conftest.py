"""
Yahtzee - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from typing import Callable, Iterable

import pytest

from src.engine.base import Category
from src.engine.dice import DiceSet
from src.engine.game import GameSession, new_game


class ScriptedRandom(random.Random):
    """Random source that returns a fixed sequence of die faces."""

    def __init__(self, faces: Iterable[int]) -> None:
        super().__init__(0)
        self._faces = list(faces)

    def randint(self, a: int, b: int) -> int:
        if not self._faces:
            raise AssertionError("ScriptedRandom ran out of faces")
        return self._faces.pop(0)


# Faces consumed when a DiceSet is constructed
INITIAL_FACES = (1, 1, 1, 1, 1)


# =============================================================================
# HAND TEST DATA
# =============================================================================

@pytest.fixture
def category_scores() -> dict[str, tuple[Category, tuple[int, ...], int]]:
    """
    Hands with their expected score in one category.

    Returns:
        Dict mapping name to (category, hand, expected_points)
    """
    return {
        "ones": (Category.ONES, (1, 1, 2, 3, 1), 3),
        "twos_none": (Category.TWOS, (1, 3, 4, 5, 6), 0),
        "sixes": (Category.SIXES, (6, 6, 6, 2, 1), 18),
        "three_kind": (Category.THREE_OF_A_KIND, (3, 3, 3, 4, 5), 18),
        "four_kind": (Category.FOUR_OF_A_KIND, (2, 5, 5, 5, 5), 22),
        "full_house": (Category.FULL_HOUSE, (2, 2, 3, 3, 3), 25),
        "small_straight": (Category.SMALL_STRAIGHT, (1, 2, 3, 4, 6), 30),
        "large_straight": (Category.LARGE_STRAIGHT, (1, 2, 3, 4, 5), 40),
        "yahtzee": (Category.YAHTZEE, (4, 4, 4, 4, 4), 50),
        "chance": (Category.CHANCE, (1, 2, 3, 4, 6), 16),
    }


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def scripted_dice() -> Callable[..., DiceSet]:
    """Factory for a DiceSet whose rolls produce the given faces in order."""
    def factory(*faces: int) -> DiceSet:
        return DiceSet(rng=ScriptedRandom(INITIAL_FACES + tuple(faces)))
    return factory


@pytest.fixture
def scripted_game() -> Callable[..., GameSession]:
    """Factory for a session whose dice produce the given hands in order."""
    def factory(player_count: int, *hands: Iterable[int]) -> GameSession:
        faces = [face for hand in hands for face in hand]
        return new_game(player_count, rng=ScriptedRandom(INITIAL_FACES + tuple(faces)))
    return factory


@pytest.fixture
def seeded_game() -> GameSession:
    """Two-player game with deterministic dice."""
    return new_game(2, seed=1234)

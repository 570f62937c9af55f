"""
Yahtzee - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Iterable, Sequence

from src.engine.base import DIE_FACES, NUM_DICE, DiceRoll


def validate_hand(values: Sequence[int] | DiceRoll) -> tuple[int, ...]:
    """
    Validate and normalize a five-die hand.

    Args:
        values: Sequence of dice values or a DiceRoll

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    if isinstance(values, DiceRoll):
        return values.values

    values_tuple = tuple(values)
    if len(values_tuple) != NUM_DICE:
        raise ValueError(f"A hand has exactly {NUM_DICE} dice, got {len(values_tuple)}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_die_indices(
    indices: Iterable[int] | None,
    dice_count: int = NUM_DICE
) -> frozenset[int]:
    """
    Validate indices of dice selected for a reroll.

    Args:
        indices: Collection of dice indices, None selects every die
        dice_count: Total number of dice

    Returns:
        Validated indices as a frozenset

    Raises:
        ValueError: If any index is out of range
    """
    if indices is None:
        return frozenset(range(dice_count))

    indices_set = frozenset(indices)

    for idx in indices_set:
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise ValueError(f"Die index must be an integer, got {type(idx).__name__}.")
        if not (0 <= idx < dice_count):
            raise ValueError(
                f"Die index {idx} is out of range. Must be between 0 and {dice_count - 1}."
            )

    return indices_set


def validate_score(score: int) -> int:
    """
    Validate a category score. Zero is a legitimate score.

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_player_index(index: int, player_count: int) -> int:
    """Validate a player index against the number of seats."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Player index must be an integer, got {type(index).__name__}.")
    if not (0 <= index < player_count):
        raise IndexError(
            f"Player index {index} is out of range. Must be between 0 and {player_count - 1}."
        )
    return index

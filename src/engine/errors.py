"""
Yahtzee - Game Engine Errors

Every rule violation raised by the engine derives from YahtzeeError so a
caller can handle them in one place. Malformed raw input (bad die values,
out-of-range indices) raises ValueError instead.
"""


class YahtzeeError(Exception):
    """Base class for recoverable game rule violations."""


class RollLimitExceeded(YahtzeeError):
    """A roll was attempted after all rolls of the turn were used."""

    def __init__(self, max_rolls: int) -> None:
        super().__init__(
            f"You've had {max_rolls} rolls - choose a category to score this turn."
        )
        self.max_rolls = max_rolls


class InvalidCategorySelection(YahtzeeError):
    """The chosen category is unknown or cannot be scored."""


class CategoryAlreadyScored(InvalidCategorySelection):
    """The category already holds a score on this scorecard."""

    def __init__(self, category, score: int) -> None:
        super().__init__(
            f"Category '{category.value}' was already scored ({score} points)."
        )
        self.category = category
        self.score = score


class RollRequired(YahtzeeError):
    """A move was committed before the dice were rolled this turn."""


class GameAlreadyOver(YahtzeeError):
    """The game has ended; no more rolls or moves are accepted."""

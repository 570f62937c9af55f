"""
Yahtzee - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value objects are immutable (frozen dataclasses) so a snapshot
handed to a caller can never drift from the state that produced it.
"""

from dataclasses import dataclass
from enum import Enum

from src.engine.errors import InvalidCategorySelection


DIE_FACES = 6
NUM_DICE = 5


class Category(Enum):
    """The thirteen scoring categories of a scorecard."""
    ONES = "ones"
    TWOS = "twos"
    THREES = "threes"
    FOURS = "fours"
    FIVES = "fives"
    SIXES = "sixes"
    THREE_OF_A_KIND = "three_of_a_kind"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    SMALL_STRAIGHT = "small_straight"
    LARGE_STRAIGHT = "large_straight"
    YAHTZEE = "yahtzee"
    CHANCE = "chance"

    @property
    def is_upper(self) -> bool:
        """Returns True for the six number categories."""
        return self in _UPPER

    @property
    def face_value(self) -> int | None:
        """Die face counted by a number category, None for the lower section."""
        return _UPPER.get(self)

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")

    @classmethod
    def upper(cls) -> tuple["Category", ...]:
        return tuple(_UPPER)

    @classmethod
    def lower(cls) -> tuple["Category", ...]:
        return tuple(c for c in cls if c not in _UPPER)

    @classmethod
    def parse(cls, name: "Category | str") -> "Category":
        """
        Resolve a category from a member or its name.

        Accepts "full_house", "Full House" and "full-house" alike.

        Raises:
            InvalidCategorySelection: If the name matches no category
        """
        if isinstance(name, Category):
            return name
        if not isinstance(name, str):
            raise InvalidCategorySelection(f"Unrecognized category {name!r}.")
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            raise InvalidCategorySelection(f"Unrecognized category {name!r}.") from None


_UPPER: dict[Category, int] = {
    Category.ONES: 1,
    Category.TWOS: 2,
    Category.THREES: 3,
    Category.FOURS: 4,
    Category.FIVES: 5,
    Category.SIXES: 6,
}


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of the five dice.

    Attributes:
        values: Tuple of dice face values, in die order
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        if len(self.values) != NUM_DICE:
            raise ValueError(
                f"A hand has exactly {NUM_DICE} dice, got {len(self.values)}."
            )
        for value in self.values:
            if not (1 <= value <= DIE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. Must be between 1 and {DIE_FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __iter__(self):
        return iter(self.values)

    def __str__(self) -> str:
        return ", ".join(str(v) for v in self.values)


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        num_players: Number of players (at least 1)
    """
    num_players: int = 1

    def __post_init__(self) -> None:
        """Validate configuration."""
        if isinstance(self.num_players, bool) or not isinstance(self.num_players, int):
            raise ValueError(
                f"Number of players must be an integer, got {type(self.num_players).__name__}."
            )
        if self.num_players < 1:
            raise ValueError(f"Number of players must be at least 1, got {self.num_players}.")

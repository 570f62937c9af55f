"""
Yahtzee - Display Snapshots

Pydantic models handed to presentation code. They are frozen copies of
engine state; mutating the game afterwards never changes a snapshot.
"""

from pydantic import BaseModel, Field


class CategoryLine(BaseModel):
    """One row of a scorecard."""

    category: str
    label: str
    score: int | None = None

    model_config = {"frozen": True}

    @property
    def is_set(self) -> bool:
        return self.score is not None


class ScorecardView(BaseModel):
    """Read-only snapshot of a player's scorecard and derived totals."""

    player_index: int = Field(ge=0)
    upper: tuple[CategoryLine, ...]
    lower: tuple[CategoryLine, ...]
    upper_subtotal: int = 0
    upper_bonus: int = 0
    upper_total: int = 0
    lower_total: int = 0
    grand_total: int = 0
    is_complete: bool = False

    model_config = {"frozen": True}

    def score_of(self, category: str) -> int | None:
        """Score recorded for a category name, None when unset."""
        for line in self.upper + self.lower:
            if line.category == category:
                return line.score
        raise KeyError(category)


class GameResult(BaseModel):
    """Leaders of a game. More than one winner means a tie."""

    winners: tuple[int, ...]
    top_score: int
    is_final: bool = False

    model_config = {"frozen": True}

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

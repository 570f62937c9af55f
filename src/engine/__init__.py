"""
Yahtzee Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, category scoring, scorecards and turn order.
"""

from src.engine.base import Category, DiceRoll, GameConfig
from src.engine.dice import DiceSet
from src.engine.errors import (
    CategoryAlreadyScored,
    GameAlreadyOver,
    InvalidCategorySelection,
    RollLimitExceeded,
    RollRequired,
    YahtzeeError,
)
from src.engine.game import GameSession, Player, TurnPhase, new_game
from src.engine.scorecard import Scorecard
from src.engine.scoring import CategoryScorer, score
from src.engine.views import CategoryLine, GameResult, ScorecardView

__all__ = [
    # Data Classes
    "DiceRoll",
    "GameConfig",
    "Player",
    # Enums
    "Category",
    "TurnPhase",
    # Components
    "DiceSet",
    "CategoryScorer",
    "Scorecard",
    "GameSession",
    "new_game",
    "score",
    # Views
    "CategoryLine",
    "GameResult",
    "ScorecardView",
    # Errors
    "YahtzeeError",
    "RollLimitExceeded",
    "InvalidCategorySelection",
    "CategoryAlreadyScored",
    "RollRequired",
    "GameAlreadyOver",
]

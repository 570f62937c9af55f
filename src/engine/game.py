"""
Yahtzee - Game Session

Owns the dice, the players' scorecards and turn order, and enforces the
turn cycle:

    AWAITING_ROLL --roll--> AWAITING_DECISION --reroll (x2)--> AWAITING_DECISION
    AWAITING_DECISION --commit--> AWAITING_ROLL (next player) or GAME_OVER

Execution is strictly sequential; one player acts at a time.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

from src.engine.base import Category, DiceRoll, GameConfig
from src.engine.dice import DiceSet
from src.engine.errors import CategoryAlreadyScored, GameAlreadyOver, RollRequired
from src.engine.scorecard import Scorecard
from src.engine.scoring import CategoryScorer
from src.engine.validators import validate_player_index
from src.engine.views import GameResult, ScorecardView

logger = logging.getLogger(__name__)


class TurnPhase(Enum):
    """Where the active turn stands."""
    AWAITING_ROLL = auto()
    AWAITING_DECISION = auto()
    GAME_OVER = auto()


@dataclass
class Player:
    """A seat at the table, identified by its position in turn order."""
    index: int
    scorecard: Scorecard = field(default_factory=Scorecard)

    @property
    def is_finished(self) -> bool:
        return self.scorecard.is_complete()


class GameSession:
    """
    A game from the first roll to the last committed move.

    Attributes:
        config: Validated game configuration
        players: Players in turn order
    """

    def __init__(self, config: GameConfig, dice: DiceSet | None = None) -> None:
        self.config = config
        self.players = [Player(index=i) for i in range(config.num_players)]
        self._dice = dice if dice is not None else DiceSet()
        self._current = 0
        self._phase = TurnPhase.AWAITING_ROLL
        logger.debug("New game with %d player(s)", config.num_players)

    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @property
    def roll_count(self) -> int:
        """Rolls taken in the active turn (0-3)."""
        return self._dice.roll_count

    @property
    def current_player(self) -> Player:
        return self.players[self._current]

    def current_player_index(self) -> int:
        return self._current

    def dice(self) -> DiceRoll:
        """Current face values of the dice."""
        return self._dice.values()

    def is_over(self) -> bool:
        return self._phase is TurnPhase.GAME_OVER

    def _ensure_not_over(self) -> None:
        if self.is_over():
            raise GameAlreadyOver("The game is over; no further rolls or moves are allowed.")

    def roll_dice(self, subset: Iterable[int] | None = None) -> DiceRoll:
        """
        Roll for the active player.

        Only the dice in ``subset`` are rolled (all five when None); the
        rest keep their values.

        Raises:
            GameAlreadyOver: If the game has ended
            RollLimitExceeded: If the turn's three rolls are used up
            ValueError: If a die index is out of range
        """
        self._ensure_not_over()
        result = self._dice.roll(subset)
        self._phase = TurnPhase.AWAITING_DECISION
        logger.debug(
            "Player %d roll %d: %s", self._current, self._dice.roll_count, result
        )
        return result

    def commit_move(self, category: Category | str) -> int:
        """
        Score the current dice in a category for the active player.

        Args:
            category: Category member or its name, e.g. "full_house"

        Returns:
            Points recorded (possibly 0)

        Raises:
            GameAlreadyOver: If the game has ended
            InvalidCategorySelection: If the category is unknown
            CategoryAlreadyScored: If the player already filled the category
            RollRequired: If the dice were not rolled this turn
        """
        self._ensure_not_over()
        selected = Category.parse(category)
        player = self.current_player

        existing = player.scorecard.read(selected)
        if existing is not None:
            raise CategoryAlreadyScored(selected, existing)
        if self._phase is not TurnPhase.AWAITING_DECISION:
            raise RollRequired("Roll the dice before choosing a category.")

        points = CategoryScorer.score(selected, self._dice.values())
        player.scorecard.record(selected, points)
        logger.debug("Player %d scored %d in %s", player.index, points, selected.value)

        self._end_turn()
        return points

    def _end_turn(self) -> None:
        self._dice.reset()
        self._current = (self._current + 1) % len(self.players)
        if all(p.is_finished for p in self.players):
            self._phase = TurnPhase.GAME_OVER
            result = self.standings()
            logger.info(
                "Game over: winner(s) %s with %d points", list(result.winners), result.top_score
            )
        else:
            self._phase = TurnPhase.AWAITING_ROLL

    def scorecard_view(self, player_index: int) -> ScorecardView:
        """Snapshot of one player's scorecard for display."""
        validate_player_index(player_index, len(self.players))
        return self.players[player_index].scorecard.view(player_index)

    def standings(self) -> GameResult:
        """
        Players sharing the highest grand total.

        Ties are reported as several winners, never broken by seat order.
        """
        totals = [p.scorecard.grand_total() for p in self.players]
        top = max(totals)
        return GameResult(
            winners=tuple(i for i, total in enumerate(totals) if total == top),
            top_score=top,
            is_final=self.is_over(),
        )


def new_game(
    player_count: int = 1,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> GameSession:
    """
    Start a game.

    Args:
        player_count: Number of players (at least 1)
        rng: Random source for the dice
        seed: Seed for a fresh random source when rng is not given

    Raises:
        ValueError: If player_count is not a positive integer
    """
    config = GameConfig(num_players=player_count)
    return GameSession(config, dice=DiceSet(rng=rng, seed=seed))

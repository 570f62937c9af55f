"""
Yahtzee - Game Session Tests

Tests for the turn cycle, roll limit, turn rotation, game over and winners.
"""

import pytest

from src.engine.base import Category
from src.engine.errors import (
    CategoryAlreadyScored,
    GameAlreadyOver,
    InvalidCategorySelection,
    RollLimitExceeded,
    RollRequired,
)
from src.engine.game import GameSession, TurnPhase, new_game
from src.engine.views import ScorecardView


# Scores 0 in every category but chance
ZERO_HAND = (1, 1, 2, 2, 3)

# One hand per category, all scoring 0 except yahtzee (50) and chance (5)
SOLO_GAME = [
    (Category.ONES, (2, 2, 3, 3, 4)),
    (Category.TWOS, (1, 1, 3, 3, 4)),
    (Category.THREES, (1, 1, 2, 2, 4)),
    (Category.FOURS, ZERO_HAND),
    (Category.FIVES, ZERO_HAND),
    (Category.SIXES, ZERO_HAND),
    (Category.THREE_OF_A_KIND, ZERO_HAND),
    (Category.FOUR_OF_A_KIND, ZERO_HAND),
    (Category.FULL_HOUSE, ZERO_HAND),
    (Category.SMALL_STRAIGHT, ZERO_HAND),
    (Category.LARGE_STRAIGHT, ZERO_HAND),
    (Category.CHANCE, (1, 1, 1, 1, 1)),
    (Category.YAHTZEE, (6, 6, 6, 6, 6)),
]


def play_all_categories(game: GameSession) -> None:
    """Roll once and commit each category in order, rotating through players."""
    for category in Category:
        for _ in game.players:
            game.roll_dice()
            game.commit_move(category)


class TestNewGame:
    """Tests for new_game()."""

    def test_initial_state(self):
        game = new_game(3, seed=1)
        assert len(game.players) == 3
        assert game.current_player_index() == 0
        assert game.phase is TurnPhase.AWAITING_ROLL
        assert game.roll_count == 0
        assert not game.is_over()

    def test_default_single_player(self):
        assert len(new_game(seed=1).players) == 1

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_player_count_raises(self, count):
        with pytest.raises(ValueError):
            new_game(count)

    def test_seed_is_deterministic(self):
        assert new_game(1, seed=8).roll_dice() == new_game(1, seed=8).roll_dice()


class TestRolling:
    """Tests for GameSession.roll_dice()."""

    def test_first_roll_moves_to_decision(self, seeded_game):
        seeded_game.roll_dice()
        assert seeded_game.phase is TurnPhase.AWAITING_DECISION
        assert seeded_game.roll_count == 1

    def test_opening_roll_honours_subset(self, scripted_game):
        # Dice start at (1, 1, 1, 1, 1)
        game = scripted_game(1, (6,))
        assert game.roll_dice({0}).values == (6, 1, 1, 1, 1)
        assert game.phase is TurnPhase.AWAITING_DECISION
        assert game.roll_count == 1

    def test_opening_roll_defaults_to_all_dice(self, scripted_game):
        game = scripted_game(1, (2, 3, 4, 5, 6))
        assert game.roll_dice().values == (2, 3, 4, 5, 6)

    def test_reroll_subset(self, scripted_game):
        game = scripted_game(1, (2, 3, 4, 5, 6), (1,), (6, 6))
        game.roll_dice()
        assert game.roll_dice([4]).values == (2, 3, 4, 5, 1)
        assert game.roll_dice([0, 1]).values == (6, 6, 4, 5, 1)
        assert game.dice().values == (6, 6, 4, 5, 1)

    def test_fourth_roll_raises(self, seeded_game):
        for _ in range(3):
            seeded_game.roll_dice()
        with pytest.raises(RollLimitExceeded):
            seeded_game.roll_dice()
        assert seeded_game.roll_count == 3

    def test_commit_resets_roll_count(self, seeded_game):
        for _ in range(3):
            seeded_game.roll_dice()
        seeded_game.commit_move(Category.CHANCE)
        assert seeded_game.roll_count == 0
        seeded_game.roll_dice()
        assert seeded_game.roll_count == 1


class TestCommit:
    """Tests for GameSession.commit_move()."""

    def test_scores_current_dice(self, scripted_game):
        game = scripted_game(1, (2, 2, 3, 3, 3))
        game.roll_dice()
        assert game.commit_move(Category.FULL_HOUSE) == 25
        assert game.scorecard_view(0).score_of("full_house") == 25

    def test_accepts_category_name(self, scripted_game):
        game = scripted_game(1, (5, 5, 5, 1, 2))
        game.roll_dice()
        assert game.commit_move("fives") == 15

    def test_zero_score_is_recorded(self, scripted_game):
        game = scripted_game(1, ZERO_HAND)
        game.roll_dice()
        assert game.commit_move(Category.YAHTZEE) == 0
        assert game.players[0].scorecard.read(Category.YAHTZEE) == 0

    def test_unknown_category_raises(self, seeded_game):
        seeded_game.roll_dice()
        with pytest.raises(InvalidCategorySelection):
            seeded_game.commit_move("sevens")
        assert seeded_game.current_player_index() == 0
        assert seeded_game.roll_count == 1

    def test_already_filled_category_raises(self, scripted_game):
        game = scripted_game(1, (4, 4, 4, 4, 4), (1, 2, 3, 4, 5))
        game.roll_dice()
        game.commit_move(Category.CHANCE)
        game.roll_dice()
        with pytest.raises(CategoryAlreadyScored) as excinfo:
            game.commit_move(Category.CHANCE)
        assert isinstance(excinfo.value, InvalidCategorySelection)
        assert game.players[0].scorecard.read(Category.CHANCE) == 20
        assert game.phase is TurnPhase.AWAITING_DECISION

    def test_commit_before_roll_raises(self, seeded_game):
        with pytest.raises(RollRequired):
            seeded_game.commit_move(Category.CHANCE)


class TestTurnRotation:
    """Tests for turn order."""

    def test_three_players_cycle(self):
        game = new_game(3, seed=11)
        seen = [game.current_player_index()]
        for category in (Category.CHANCE, Category.CHANCE, Category.CHANCE, Category.ONES):
            game.roll_dice()
            game.commit_move(category)
            seen.append(game.current_player_index())
        assert seen == [0, 1, 2, 0, 1]

    def test_commit_writes_to_active_player_only(self, scripted_game):
        game = scripted_game(2, (6, 6, 6, 6, 6))
        game.roll_dice()
        game.commit_move(Category.YAHTZEE)
        assert game.players[0].scorecard.read(Category.YAHTZEE) == 50
        assert game.players[1].scorecard.read(Category.YAHTZEE) is None
        assert game.current_player.index == 1


class TestGameOver:
    """Tests for end-of-game detection."""

    def test_single_player_game(self, scripted_game):
        game = scripted_game(1, *(hand for _, hand in SOLO_GAME))
        for turn, (category, _) in enumerate(SOLO_GAME, start=1):
            assert not game.is_over()
            game.roll_dice()
            game.commit_move(category)
            assert game.is_over() == (turn == 13)

        view = game.scorecard_view(0)
        assert view.is_complete
        assert view.score_of("yahtzee") == 50
        assert view.grand_total == 55

    def test_over_only_when_every_player_done(self):
        game = new_game(2, seed=5)
        play_all_categories(game)
        assert game.is_over()
        assert game.phase is TurnPhase.GAME_OVER

    def test_no_moves_after_game_over(self):
        game = new_game(1, seed=5)
        play_all_categories(game)
        with pytest.raises(GameAlreadyOver):
            game.roll_dice()
        with pytest.raises(GameAlreadyOver):
            game.commit_move(Category.CHANCE)


class TestStandings:
    """Tests for winner determination."""

    def test_single_winner(self, scripted_game):
        game = scripted_game(2, (6, 6, 6, 6, 6), (1, 1, 1, 1, 1))
        game.roll_dice()
        game.commit_move(Category.CHANCE)
        game.roll_dice()
        game.commit_move(Category.CHANCE)
        result = game.standings()
        assert result.winners == (0,)
        assert result.top_score == 30
        assert not result.is_tie
        assert not result.is_final

    def test_tie_is_reported(self, scripted_game):
        game = scripted_game(3, (2, 2, 2, 2, 2), (1, 1, 1, 1, 1), (2, 2, 2, 2, 2))
        for _ in range(3):
            game.roll_dice()
            game.commit_move(Category.CHANCE)
        result = game.standings()
        assert result.winners == (0, 2)
        assert result.is_tie

    def test_final_after_game_over(self):
        game = new_game(2, seed=21)
        play_all_categories(game)
        result = game.standings()
        totals = [game.scorecard_view(i).grand_total for i in range(2)]
        assert result.is_final
        assert result.top_score == max(totals)
        assert all(totals[i] == result.top_score for i in result.winners)


class TestScorecardView:
    """Tests for GameSession.scorecard_view()."""

    def test_returns_view(self, seeded_game):
        view = seeded_game.scorecard_view(1)
        assert isinstance(view, ScorecardView)
        assert view.player_index == 1

    def test_bad_index_raises(self, seeded_game):
        with pytest.raises(IndexError):
            seeded_game.scorecard_view(2)

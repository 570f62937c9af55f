"""
Yahtzee CLI - Console shell around the game engine.

Usage:
    yahtzee [players]      Play a hot-seat game (default: 1 player)

All rules live in src.engine; this module only prompts, parses keys and
prints.
"""

import argparse
import logging
import sys
from typing import Callable

from src.config import configure_logging, get_settings
from src.engine import (
    Category,
    CategoryLine,
    CategoryScorer,
    GameResult,
    GameSession,
    InvalidCategorySelection,
    ScorecardView,
    new_game,
)

logger = logging.getLogger(__name__)

KEY_CATEGORIES: dict[str, Category] = {
    "1": Category.ONES,
    "2": Category.TWOS,
    "3": Category.THREES,
    "4": Category.FOURS,
    "5": Category.FIVES,
    "6": Category.SIXES,
    "t": Category.THREE_OF_A_KIND,
    "f": Category.FOUR_OF_A_KIND,
    "h": Category.FULL_HOUSE,
    "s": Category.SMALL_STRAIGHT,
    "l": Category.LARGE_STRAIGHT,
    "y": Category.YAHTZEE,
    "?": Category.CHANCE,
}

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def coerce_player_count(raw: str | int | None, default: int = 1) -> int:
    """Player count from a command-line value; anything below 1 becomes 1."""
    if raw is None:
        return max(default, 1)
    try:
        count = int(raw)
    except (TypeError, ValueError):
        count = 0
    return count if count > 0 else 1


def parse_reroll(command: str) -> list[int]:
    """Die indices from a string of die numbers, e.g. "135" -> [0, 2, 4]."""
    return sorted({int(ch) - 1 for ch in command if ch in "12345"})


def render_scorecard(view: ScorecardView) -> str:
    """Plain-text scorecard; open slots are shown as '-'."""
    def fmt(line: CategoryLine) -> str:
        return str(line.score) if line.is_set else "-"

    rows = [f"{line.label:<16}{fmt(line)}" for line in view.upper]
    rows.append(f"{'bonus':<16}{view.upper_bonus}")
    rows.append(f"{'upper total':<16}{view.upper_total}")
    rows.extend(f"{line.label:<16}{fmt(line)}" for line in view.lower)
    rows.append(f"{'lower total':<16}{view.lower_total}")
    rows.append(f"{'grand total':<16}{view.grand_total}")
    return "\n".join(rows)


def render_result(result: GameResult) -> str:
    players = ", ".join(f"player {i + 1}" for i in result.winners)
    if result.is_tie:
        return f"It's a tie between {players} with a score of {result.top_score}"
    return f"The winner is {players} with a score of {result.top_score}"


def _category_menu(game: GameSession) -> str:
    potential = CategoryScorer.score_all(game.dice())
    open_slots = set(game.current_player.scorecard.open_categories())
    return "\n".join(
        f"  {key}  {category.label:<16}{potential[category]}"
        for key, category in KEY_CATEGORIES.items()
        if category in open_slots
    )


def play_turn(game: GameSession, read: InputFn, write: OutputFn) -> int:
    """Run one roll-reroll-reroll-commit cycle for the active player."""
    write(f"Player {game.current_player_index() + 1}'s turn")
    dice = game.roll_dice()

    for ordinal in ("first", "second"):
        write(
            f"Your {ordinal} roll is {dice}.\n"
            'Enter the numbers of the dice you want to reroll (e.g. "12345" for all dice)'
        )
        dice = game.roll_dice(parse_reroll(read("> ")))

    write(f"Your final roll is {dice}.\nEnter your move - one of:\n{_category_menu(game)}")
    while True:
        key = read("> ").strip().lower()
        category = KEY_CATEGORIES.get(key, key)
        try:
            points = game.commit_move(category)
        except InvalidCategorySelection as e:
            write(str(e))
            continue
        write(f"You scored {points} in that move")
        return points


def run(
    player_count: int,
    read: InputFn | None = None,
    write: OutputFn | None = None,
    seed: int | None = None,
) -> GameResult:
    """Play a full game on the console and return the final standings."""
    read = read or input
    write = write or print
    game = new_game(player_count, seed=seed)
    write(f"Beginning Yahtzee game with {player_count} player{'s' if player_count != 1 else ''}")

    while not game.is_over():
        index = game.current_player_index()
        play_turn(game, read, write)
        write(render_scorecard(game.scorecard_view(index)))

    result = game.standings()
    write(render_result(result))
    return result


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    settings = get_settings()
    configure_logging(settings)

    parser = argparse.ArgumentParser(
        description="Yahtzee - five dice, thirteen categories",
        prog="yahtzee",
    )
    parser.add_argument("players", nargs="?", help="Number of players (default: 1)")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Seed for the dice")
    args = parser.parse_args(argv)

    players = coerce_player_count(args.players, settings.default_players)
    try:
        run(players, seed=args.seed)
    except (EOFError, KeyboardInterrupt):
        logger.info("Game abandoned")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Command-line interface for playing Filler against the computer.
"""

import argparse
import logging

from filler.api import play_game, prompt_manual_board
from filler.core.types import DEFAULT_PALETTE
from filler.utils.config import DEFAULT_COLS, DEFAULT_ROWS, Config
from filler.utils.factory import create_game
from filler.selection.minimax import DEFAULT_DEPTH


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Filler against a minimax computer player"
    )
    parser.add_argument(
        "--manual", "-m",
        action="store_true",
        help="Enter the board colors by hand instead of a random board",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for the random board",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"Minimax search depth in plies (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=DEFAULT_ROWS,
        help=f"Board rows (default: {DEFAULT_ROWS})",
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=DEFAULT_COLS,
        help=f"Board columns (default: {DEFAULT_COLS})",
    )
    parser.add_argument(
        "--palette",
        type=str,
        default="".join(DEFAULT_PALETTE),
        help=f"Color symbols, one character each (default: {''.join(DEFAULT_PALETTE)})",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=1,
        help="Worker processes for the search (default: 1)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays for both players (no human players)",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated list of human player numbers (e.g., '1,2'). Overrides --self-play.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the search table on computer turns",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def parse_human_players(players_str: str | None, self_play: bool) -> list[int]:
    """Parse and validate the human players argument."""
    if self_play and players_str is None:
        return []

    if players_str is None:
        return [1]  # Default: player 1 is human

    try:
        human_players = [int(p.strip()) for p in players_str.split(",") if p.strip()]
    except ValueError as e:
        raise ValueError(
            f"Invalid --players format: '{players_str}'. "
            "Expected comma-separated integers (e.g., '1,2')."
        ) from e

    invalid = [p for p in human_players if p not in (1, 2)]
    if invalid:
        raise ValueError(
            f"Invalid player number(s): {invalid}. Filler only supports players 1-2."
        )

    return sorted(set(human_players))


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(
        rows=args.rows,
        cols=args.cols,
        palette=args.palette,
        depth=args.depth,
        num_workers=args.workers,
    )

    if args.manual:
        game = prompt_manual_board(config)
    else:
        game = create_game(config, seed=args.seed)

    human_players = parse_human_players(args.players, args.self_play)

    play_game(
        game,
        human_players=human_players,
        depth=config.depth,
        num_workers=config.num_workers,
        debug=args.debug,
    )


if __name__ == "__main__":
    main()

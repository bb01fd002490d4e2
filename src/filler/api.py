"""
Public API for playing Filler.

Usage:
    from filler import create_game, play_game

    game = create_game(seed=42)
    play_game(game, human_players=[1], depth=4)
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Tuple, TYPE_CHECKING

from filler.core.scoring import winner
from filler.core.types import PLAYER_ONE, PLAYER_SYMBOLS
from filler.games.filler import Filler, InvalidBoardError
from filler.parallel.runner import SearchRunner
from filler.selection import choose_move
from filler.selection.minimax import DEFAULT_DEPTH
from filler.utils.config import DEFAULT_CONFIG, Config
from filler.utils.factory import create_game, create_game_from_colors, parse_cell, parse_color

if TYPE_CHECKING:
    from filler.games.game_base import GameBase

logger = logging.getLogger(__name__)

ReadInput = Callable[[str], str]
Write = Callable[[str], None]


def _human_turn(game: "Filler", read_input: ReadInput, write: Write) -> str:
    """Prompt until the player names a legal color, apply it, return it."""
    symbol = PLAYER_SYMBOLS[game.current_player()]
    write(f"\nYour turn (Player {symbol}). Colors: {', '.join(game.valid_moves())}")

    while True:
        try:
            color = parse_color(read_input("Choose a color: "), game.palette)
            game.apply_move(color)
            return color
        except ValueError as e:
            write(f"{e}. Please try again.")


def _ai_turn(
    game: "GameBase",
    depth: int,
    runner: Optional[SearchRunner],
    debug: bool = False,
) -> Optional[str]:
    """AI selects and applies move. Returns move or None if no valid moves."""
    move = choose_move(game, depth, runner=runner, debug=debug)
    if move is None:
        return None
    game.apply_move(move, validated=True)
    return move


def prompt_manual_board(
    config: Config = DEFAULT_CONFIG,
    read_input: Optional[ReadInput] = None,
    write: Optional[Write] = None,
) -> Filler:
    """Ask for every cell color, row by row; a bad cell is asked again."""
    read_input = read_input or input
    write = write or print

    write(
        f"Working row-wise, enter {config.cols} colors for each row starting "
        f"from the top row. Colors: {', '.join(config.palette)}"
    )
    grid = []
    for r in range(config.rows):
        row = []
        for c in range(config.cols):
            while True:
                raw = read_input(f"Enter a color for cell [{r}, {c}]: ")
                try:
                    row.append(parse_cell(raw, config.palette, r, c))
                    break
                except InvalidBoardError as e:
                    write(f"{e}. Please try again.")
        grid.append(row)
    return create_game_from_colors(grid, config)


def final_message(game: "GameBase") -> str:
    best = winner(game.get_state())
    if best is None:
        return "It's a tie!"
    return f"Player {PLAYER_SYMBOLS[best]} wins!"


def play_game(
    game: Optional["Filler"] = None,
    human_players: Iterable[int] = (PLAYER_ONE,),
    depth: int = DEFAULT_DEPTH,
    num_workers: int = 1,
    debug: bool = False,
    read_input: Optional[ReadInput] = None,
    write: Optional[Write] = None,
) -> Tuple[int, int]:
    """
    Main entry point: alternate human and computer turns until the board fills.

    Parameters
    ----------
    game : Filler, optional
        Game to play. A random default board is used if omitted.
    human_players : Iterable[int]
        Player IDs controlled by human input; the rest are computer players.
    depth : int
        Minimax plies searched below each candidate color.
    num_workers : int
        Worker processes for the root search (1 = in-process).
    debug : bool
        If True, show the root evaluation table on computer turns.
    read_input, write : callables
        Input / output hooks (default: terminal).

    Returns
    -------
    Tuple[int, int]
        Final (player 1 cells, player 2 cells).
    """
    if game is None:
        game = create_game()
    read_input = read_input or input
    write = write or print
    human_set = set(human_players)
    runner = SearchRunner(num_workers)

    write(f"Welcome to the Filler game! ({game.rows}x{game.cols}, depth {depth})")
    write(game.state_string())

    try:
        with runner:
            while not game.is_over():
                current = game.current_player()
                symbol = PLAYER_SYMBOLS[current]

                if not game.valid_moves():
                    write(f"\nPlayer {symbol} has no legal color. Game stops here.")
                    logger.info("No legal color for player %d; ending game", current)
                    break

                if current in human_set:
                    move = _human_turn(game, read_input, write)
                    write(f"\nYou played: {move}")
                else:
                    move = _ai_turn(game, depth, runner, debug=debug)
                    write(f"\nAI (Player {symbol}) played: {move}")

                write(game.state_string())

    except KeyboardInterrupt:
        write("\nInterrupted - shutting down...")
        runner.shutdown(force=True)
        raise
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    counts = game.owned_counts()
    write("\n" + "=" * 40)
    write("GAME OVER")
    write("=" * 40)
    write(final_message(game))
    logger.info("Game over: X=%d O=%d", *counts)
    return counts


__all__ = [
    "play_game",
    "prompt_manual_board",
    "final_message",
    "choose_move",
    "create_game",
    "create_game_from_colors",
    "SearchRunner",
]

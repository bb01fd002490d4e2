"""
Filler - two-player territory game with a minimax computer opponent.

Players alternately pick a color. Their whole territory is repainted that
color and every neutral neighbouring cell already of that color joins it.
Whoever owns more cells when the board is full wins.

Quick Start:
    from filler import create_game, choose_move

    game = create_game(seed=7)
    game.apply_move("g")                 # player 1 (human)
    game.apply_move(choose_move(game))   # player 2 (computer)

Modules:
    core       - Player ids, outcome states, scoring
    games      - GameState value type and the Filler move rule
    selection  - Minimax search and computer move choice
    parallel   - Process pool for root candidate evaluation
    debug      - Terminal table of search results
"""

from filler.api import (
    play_game,
    prompt_manual_board,
    choose_move,
    create_game,
    create_game_from_colors,
    SearchRunner,
)

from filler.core import State, PLAYER_ONE, PLAYER_TWO, owned_counts, score
from filler.games import Filler, GameState, InvalidMoveError, InvalidBoardError
from filler.selection.minimax import minimax
from filler.utils.config import Config, DEFAULT_CONFIG

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_game",
    "prompt_manual_board",
    "choose_move",
    "create_game",
    "create_game_from_colors",
    "SearchRunner",
    "minimax",
    # Types
    "Filler",
    "GameState",
    "State",
    "Config",
    "DEFAULT_CONFIG",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "owned_counts",
    "score",
    # Errors
    "InvalidMoveError",
    "InvalidBoardError",
]

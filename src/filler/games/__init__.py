"""
Games module - Filler board model and move rule.
"""

from filler.games.game_state import GameState
from filler.games.game_base import GameBase
from filler.games.game_rules import neighbor_mask, board_full
from filler.games.filler import Filler, InvalidMoveError, InvalidBoardError

__all__ = [
    "GameState",
    "GameBase",
    "Filler",
    "InvalidMoveError",
    "InvalidBoardError",
    "neighbor_mask",
    "board_full",
]

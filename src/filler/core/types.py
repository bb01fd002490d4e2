"""
Core types and constants.

Player identities are plain ints so they can live directly in the int8
owner grid:
    0 = unowned (neutral)
    1 = player 1 (X), starts in the bottom-left corner
    2 = player 2 (O), starts in the top-right corner
"""

from __future__ import annotations

from enum import Enum, auto

import numpy as np


class State(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


NO_OWNER = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

PLAYERS = (PLAYER_ONE, PLAYER_TWO)

# Display symbol per owner value
PLAYER_SYMBOLS = {NO_OWNER: ".", PLAYER_ONE: "X", PLAYER_TWO: "O"}

# Palette used by the reference 7x8 game
DEFAULT_PALETTE = ("r", "g", "b", "y", "k")

# Palette indices are stored in int8 color grids
MAX_PALETTE_SIZE = int(np.iinfo(np.int8).max)


def other_player(player: int) -> int:
    """Return the opponent of ``player`` (toggle 1<->2)."""
    if player not in PLAYERS:
        raise ValueError(f"Unknown player: {player}")
    return 3 - player

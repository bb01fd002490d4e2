"""
Core module - player identities, outcome states, and scoring.

This module provides the building blocks shared by the game and the search.
"""

from filler.core.types import (
    State,
    NO_OWNER,
    PLAYER_ONE,
    PLAYER_TWO,
    PLAYERS,
    PLAYER_SYMBOLS,
    DEFAULT_PALETTE,
    MAX_PALETTE_SIZE,
    other_player,
)
from filler.core.scoring import owned_counts, score, winner, result_for

__all__ = [
    # Types
    "State",
    # Constants
    "NO_OWNER",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "PLAYERS",
    "PLAYER_SYMBOLS",
    "DEFAULT_PALETTE",
    "MAX_PALETTE_SIZE",
    # Functions
    "other_player",
    "owned_counts",
    "score",
    "winner",
    "result_for",
]

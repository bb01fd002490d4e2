"""
GameState - value container for a Filler position.

Optimized for fast copying: the search clones a state at every node.
"""

from __future__ import annotations

import numpy as np


class GameState:
    """
    Lightweight game state container.

    Two int8 grids of identical shape (rows, cols), row 0 at the top:
        colors: palette index of each cell
        owners: 0 = neutral, 1 = player 1, 2 = player 2
    """
    __slots__ = ('colors', 'owners', 'current_player')

    def __init__(self, colors: np.ndarray, owners: np.ndarray, current_player: int):
        if colors.shape != owners.shape:
            raise ValueError(
                f"colors {colors.shape} and owners {owners.shape} must have the same shape"
            )
        self.colors = colors
        self.owners = owners
        self.current_player = current_player

    @property
    def shape(self):
        return self.colors.shape

    def copy(self) -> "GameState":
        """Deep copy - both grids are copied, nothing is shared."""
        return GameState(self.colors.copy(), self.owners.copy(), self.current_player)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.current_player == other.current_player
            and np.array_equal(self.colors, other.colors)
            and np.array_equal(self.owners, other.owners)
        )

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"GameState({rows}x{cols}, current_player={self.current_player})"

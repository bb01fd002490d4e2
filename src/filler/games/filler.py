"""
Filler game implementation.

Uses two int8 grids (see GameState):
    colors: palette index per cell
    owners: 0 = neutral, 1 = player 1 (X), 2 = player 2 (O)

Player 1 starts owning the bottom-left corner, player 2 the top-right
corner. The colors of those two corners are the players' identity colors
and can never be chosen as a move by either side.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from filler.core.scoring import owned_counts, result_for
from filler.core.types import (
    DEFAULT_PALETTE,
    MAX_PALETTE_SIZE,
    NO_OWNER,
    PLAYER_ONE,
    PLAYER_SYMBOLS,
    PLAYER_TWO,
    State,
    other_player,
)
from filler.games.game_base import GameBase
from filler.games.game_rules import board_full, neighbor_mask
from filler.games.game_state import GameState

logger = logging.getLogger(__name__)

ColorRows = Sequence[Union[str, Sequence[str]]]


class InvalidMoveError(ValueError):
    """Color is outside the palette or is one of the two identity colors."""


class InvalidBoardError(ValueError):
    """Manual board input contains a non-palette symbol or has the wrong shape."""

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.row = row
        self.col = col


def _check_palette(palette: Sequence[str]) -> Tuple[str, ...]:
    palette = tuple(palette)
    if not palette:
        raise ValueError("Palette must contain at least one color")
    if len(palette) > MAX_PALETTE_SIZE:
        raise ValueError(
            f"Palette has {len(palette)} colors, at most {MAX_PALETTE_SIZE} are supported"
        )
    if len(set(palette)) != len(palette):
        raise ValueError(f"Palette colors must be distinct: {palette}")
    return palette


def _claim_corners(owners: np.ndarray) -> None:
    """Player 1 takes the bottom-left corner, player 2 the top-right one."""
    rows, cols = owners.shape
    owners[rows - 1, 0] = PLAYER_ONE
    owners[0, cols - 1] = PLAYER_TWO


class Filler(GameBase):
    """Two-player territory game on a rows x cols grid."""

    __slots__ = ('state', 'palette')

    ROWS = 7
    COLS = 8

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        palette: Sequence[str] = DEFAULT_PALETTE,
    ):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must be at least 1x1, got {rows}x{cols}")
        self.palette = _check_palette(palette)
        colors = np.zeros((rows, cols), dtype=np.int8)
        owners = np.zeros((rows, cols), dtype=np.int8)
        _claim_corners(owners)
        self.state = GameState(colors, owners, current_player=PLAYER_ONE)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def random(
        cls,
        rows: int = ROWS,
        cols: int = COLS,
        palette: Sequence[str] = DEFAULT_PALETTE,
        seed: Union[None, int, np.random.Generator] = None,
    ) -> "Filler":
        """Every cell gets an independent uniform color; corners keep theirs."""
        game = cls(rows, cols, palette)
        rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
        game.state.colors[:] = rng.integers(0, len(game.palette), size=(rows, cols))
        logger.debug("Random %dx%d board generated (seed=%r)", rows, cols, seed)
        return game

    @classmethod
    def from_colors(cls, grid: ColorRows, palette: Sequence[str] = DEFAULT_PALETTE) -> "Filler":
        """
        Build a game from rows of palette symbols, top row first.

        Each row may be a string ("rgby...") or a sequence of symbols.
        Raises InvalidBoardError at the first bad cell.
        """
        palette = _check_palette(palette)
        rows = [list(row) for row in grid]
        if not rows or not rows[0]:
            raise InvalidBoardError("Board must have at least one row and one column")

        cols = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != cols:
                raise InvalidBoardError(
                    f"Row {r} has {len(row)} cells, expected {cols}", row=r
                )

        game = cls(len(rows), cols, palette)
        for r, row in enumerate(rows):
            for c, symbol in enumerate(row):
                if symbol not in game.palette:
                    raise InvalidBoardError(
                        f"Invalid color {symbol!r} at cell [{r}, {c}]", row=r, col=c
                    )
                game.state.colors[r, c] = game.palette.index(symbol)
        return game

    @classmethod
    def from_state(cls, game_state: GameState, palette: Sequence[str] = DEFAULT_PALETTE) -> "Filler":
        """Wrap an existing state as-is (no corner claiming)."""
        g = cls.__new__(cls)
        g.palette = _check_palette(palette)
        g.state = game_state
        return g

    # ------------------------------------------------------------------
    # GameBase
    # ------------------------------------------------------------------

    def game_id(self) -> str:
        return "filler"

    def num_players(self) -> int:
        return 2

    def clone(self) -> "Filler":
        g = Filler.__new__(Filler)
        g.state = self.state
        g.palette = self.palette
        return g

    def deep_clone(self) -> "Filler":
        g = Filler.__new__(Filler)
        g.state = self.state.copy()
        g.palette = self.palette
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state

    def current_player(self) -> int:
        return self.state.current_player

    @property
    def rows(self) -> int:
        return self.state.colors.shape[0]

    @property
    def cols(self) -> int:
        return self.state.colors.shape[1]

    def color_at(self, r: int, c: int) -> str:
        return self.palette[self.state.colors[r, c]]

    def owner_at(self, r: int, c: int) -> int:
        return int(self.state.owners[r, c])

    def identity_colors(self) -> Tuple[str, str]:
        """Colors currently on player 1's and player 2's starting corners."""
        return self.color_at(self.rows - 1, 0), self.color_at(0, self.cols - 1)

    def is_valid_move(self, move: str) -> bool:
        """Palette color that is neither identity color; same for both sides."""
        return move in self.palette and move not in self.identity_colors()

    def valid_moves(self) -> List[str]:
        forbidden = self.identity_colors()
        return [color for color in self.palette if color not in forbidden]

    def apply_move(self, move: str, *, validated: bool = False) -> None:
        if move not in self.palette:
            raise InvalidMoveError(f"Color {move!r} is not in the palette {self.palette}")
        if not validated and not self.is_valid_move(move):
            raise InvalidMoveError(
                f"Color {move!r} is an identity color {self.identity_colors()}"
            )

        color = self.palette.index(move)
        colors = self.state.colors
        owners = self.state.owners
        player = self.state.current_player

        # Both masks come from the pre-move snapshot
        owned = owners == player
        border = (owners == NO_OWNER) & neighbor_mask(owned) & (colors == color)

        colors[owned] = color
        owners[border & (owners == NO_OWNER)] = player

        self.state.current_player = other_player(player)

    def is_over(self) -> bool:
        return board_full(self.state.owners)

    def owned_counts(self) -> Tuple[int, int]:
        return owned_counts(self.state)

    def get_result(self, player: int) -> State:
        return result_for(self.state, player)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def cell_string(self, r: int, c: int) -> str:
        """Color symbol followed by owner symbol, e.g. 'rX', 'g.'."""
        return self.color_at(r, c) + PLAYER_SYMBOLS[self.owner_at(r, c)]

    def state_string(self) -> str:
        lines = [
            " ".join(self.cell_string(r, c) for c in range(self.cols))
            for r in range(self.rows)
        ]
        p1, p2 = self.owned_counts()
        lines.append("")
        lines.append(
            f"Player {PLAYER_SYMBOLS[PLAYER_ONE]}: {p1}  "
            f"Player {PLAYER_SYMBOLS[PLAYER_TWO]}: {p2}"
        )
        return "\n".join(lines)

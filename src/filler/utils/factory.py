"""
Factory functions for creating games and parsing player input.
"""

from typing import Sequence, Union

import numpy as np

from filler.games.filler import Filler, InvalidBoardError, InvalidMoveError
from filler.utils.config import DEFAULT_CONFIG, Config


def create_game(
    config: Config = DEFAULT_CONFIG,
    seed: Union[None, int, np.random.Generator] = None,
) -> Filler:
    """
    Create a game on a random board.

    Args:
        config: Board geometry and palette
        seed: Seed or Generator for reproducible boards

    Returns:
        Fresh game, player 1 to move
    """
    return Filler.random(config.rows, config.cols, config.palette, seed=seed)


def create_game_from_colors(
    grid: Sequence[Union[str, Sequence[str]]],
    config: Config = DEFAULT_CONFIG,
) -> Filler:
    """
    Create a game from manually entered colors, top row first.

    The grid must match the configured geometry exactly.
    """
    rows = [list(row) for row in grid]
    if len(rows) != config.rows:
        raise InvalidBoardError(f"Expected {config.rows} rows, got {len(rows)}")
    for r, row in enumerate(rows):
        if len(row) != config.cols:
            raise InvalidBoardError(
                f"Row {r} has {len(row)} cells, expected {config.cols}", row=r
            )
    return Filler.from_colors(rows, config.palette)


def parse_color(raw: str, palette: Sequence[str]) -> str:
    """
    Turn one line of user input into a palette color.

    Only the first non-blank character counts.
    """
    text = raw.strip()
    if not text:
        raise ValueError("No input detected")
    color = text[0]
    if color not in palette:
        raise InvalidMoveError(
            f"Invalid color {color!r}. Choose one of: {', '.join(palette)}"
        )
    return color


def parse_cell(raw: str, palette: Sequence[str], row: int, col: int) -> str:
    """Validate one manually entered cell color."""
    try:
        return parse_color(raw, palette)
    except ValueError as e:
        raise InvalidBoardError(f"Cell [{row}, {col}]: {e}", row=row, col=col) from e

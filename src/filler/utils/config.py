"""
Configuration - board geometry, palette, and search settings.
"""

from typing import Sequence

from filler.core.types import DEFAULT_PALETTE, MAX_PALETTE_SIZE
from filler.games.filler import Filler
from filler.selection.minimax import DEFAULT_DEPTH


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_ROWS = Filler.ROWS
DEFAULT_COLS = Filler.COLS


def _parse_palette(palette: Sequence[str]) -> tuple:
    """Accept 'rgbyk' or ('r', 'g', ...); every color is one character."""
    colors = tuple(palette)
    if not colors:
        raise ValueError("Palette must contain at least one color")
    if len(colors) > MAX_PALETTE_SIZE:
        raise ValueError(
            f"Palette has {len(colors)} colors, at most {MAX_PALETTE_SIZE} are supported"
        )
    bad = [c for c in colors if not isinstance(c, str) or len(c) != 1 or c.isspace()]
    if bad:
        raise ValueError(f"Palette colors must be single characters, got {bad}")
    if len(set(colors)) != len(colors):
        raise ValueError(f"Palette colors must be distinct: {colors}")
    return colors


class Config:
    """Game configuration with sensible defaults."""

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        palette: Sequence[str] = DEFAULT_PALETTE,
        depth: int = DEFAULT_DEPTH,
        num_workers: int = 1,
    ):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must be at least 1x1, got {rows}x{cols}")
        if depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {depth}")
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")

        self.rows = rows
        self.cols = cols
        self.palette = _parse_palette(palette)
        self.depth = depth
        self.num_workers = num_workers

    @property
    def shape(self):
        return self.rows, self.cols

    def __repr__(self) -> str:
        return (
            f"Config(rows={self.rows}, cols={self.cols}, "
            f"palette={''.join(self.palette)!r}, depth={self.depth}, "
            f"num_workers={self.num_workers})"
        )


# Default configuration
DEFAULT_CONFIG = Config()

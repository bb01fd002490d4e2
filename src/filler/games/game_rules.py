"""
NumPy grid utilities for the Filler move rule.

All operations work on whole boolean masks; nothing wraps around the
board edges.
"""

from __future__ import annotations

import numpy as np

from filler.core.types import NO_OWNER


def neighbor_mask(mask: np.ndarray) -> np.ndarray:
    """
    Cells with at least one orthogonal neighbour set in ``mask``.

    Built from four shifted copies of the mask; edge cells simply have no
    neighbour on the outside.
    """
    out = np.zeros_like(mask, dtype=bool)
    out[1:, :] |= mask[:-1, :]   # neighbour above
    out[:-1, :] |= mask[1:, :]   # neighbour below
    out[:, 1:] |= mask[:, :-1]   # neighbour to the left
    out[:, :-1] |= mask[:, 1:]   # neighbour to the right
    return out


def board_full(owners: np.ndarray) -> bool:
    """Return True if no cell is left unowned."""
    return not np.any(owners == NO_OWNER)

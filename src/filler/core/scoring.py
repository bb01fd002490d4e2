"""
Scoring - cell counts and the scalar advantage used by the search.

These are the only functions that count territory. The driver's final
report and the minimax leaves both go through ``owned_counts`` so the
computer optimises exactly what the human is shown.
"""

from __future__ import annotations

from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np

from filler.core.types import NO_OWNER, PLAYER_ONE, PLAYER_TWO, State

if TYPE_CHECKING:
    from filler.games.game_state import GameState


def owned_counts(state: "GameState") -> Tuple[int, int]:
    """Return ``(cells owned by player 1, cells owned by player 2)``."""
    owners = state.owners
    return (
        int(np.count_nonzero(owners == PLAYER_ONE)),
        int(np.count_nonzero(owners == PLAYER_TWO)),
    )


def score(state: "GameState", maximizing_player: int = PLAYER_TWO) -> int:
    """
    Territory advantage of ``maximizing_player`` over its opponent.

    With the default (player 2 maximizing) this is ``count(P2) - count(P1)``.
    """
    p1, p2 = owned_counts(state)
    diff = p2 - p1
    if maximizing_player == PLAYER_TWO:
        return diff
    if maximizing_player == PLAYER_ONE:
        return -diff
    raise ValueError(f"Unknown player: {maximizing_player}")


def winner(state: "GameState") -> Optional[int]:
    """Player with more cells, or None on equal counts."""
    p1, p2 = owned_counts(state)
    if p1 > p2:
        return PLAYER_ONE
    if p2 > p1:
        return PLAYER_TWO
    return None


def result_for(state: "GameState", player: int) -> State:
    """WIN / LOSS / TIE for ``player`` once the board is full, else NEUTRAL."""
    if np.any(state.owners == NO_OWNER):
        return State.NEUTRAL
    best = winner(state)
    if best is None:
        return State.TIE
    return State.WIN if best == player else State.LOSS

"""
Shared test fixtures for filler tests.

Design principles:
- Tiny hand-written boards so expected outcomes can be worked out by hand
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Iterator, List

import numpy as np
import pytest

from filler.core.types import NO_OWNER, PLAYER_ONE, PLAYER_TWO
from filler.games.filler import Filler
from filler.games.game_state import GameState


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def small_game() -> Filler:
    """
    3x3 board, default palette. Identity colors: P1 'r', P2 'y'.

        g b y(O)
        b g r
        r(X) g b
    """
    return Filler.from_colors(["gby", "bgr", "rgb"])


@pytest.fixture
def blocked_game() -> Filler:
    """
    2x2 board, palette {r, g}: both colors are identity colors,
    so nobody has a legal move.

        r  g(O)
        r(X) g
    """
    return Filler.from_colors(["rg", "rg"], palette=("r", "g"))


@pytest.fixture
def endgame_state() -> GameState:
    """
    2x3 position, player 2 to move, two neutral 'b' cells left.

        rX b. gO
        rX b. gO
    """
    colors = np.array([[0, 3, 1], [0, 3, 1]], dtype=np.int8)  # palette r g y b
    owners = np.array(
        [[PLAYER_ONE, NO_OWNER, PLAYER_TWO], [PLAYER_ONE, NO_OWNER, PLAYER_TWO]],
        dtype=np.int8,
    )
    return GameState(colors, owners, current_player=PLAYER_TWO)


@pytest.fixture
def endgame(endgame_state: GameState) -> Filler:
    """Endgame position with palette r, g, y, b ('b' enumerated last)."""
    return Filler.from_state(endgame_state, palette=("r", "g", "y", "b"))


@pytest.fixture
def forced_game() -> Filler:
    """
    2x3 board on a 3-color palette: every turn has exactly one legal color.
    The game ends 4-2 for player 1 after five moves (b, r, g, b, r).
    """
    return Filler.from_colors(["rbg", "rbg"], palette=("r", "g", "b"))


# =============================================================================
# I/O Fixtures
# =============================================================================

class ScriptedInput:
    """Callable standing in for input(): replays answers, records prompts."""

    def __init__(self, answers: List[str]):
        self._answers: Iterator[str] = iter(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        return next(self._answers)


@pytest.fixture
def scripted_input():
    """Factory: scripted_input(["b", "g"]) -> input() replacement."""
    return ScriptedInput


@pytest.fixture
def output() -> List[str]:
    """Collects everything the driver writes."""
    return []

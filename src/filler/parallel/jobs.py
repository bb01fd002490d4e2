"""
Job data structures for parallel root evaluation.

Defines the input (SearchJob) and output (SearchResult) types used
by worker processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filler.games.game_base import GameBase


@dataclass(frozen=True)
class SearchJob:
    """
    Self-contained job for a worker process.

    Carries its own copy of the game so no state is shared with
    the parent or with sibling jobs.
    """
    game: "GameBase"
    move: str
    depth: int
    maximizing_player: int


@dataclass
class SearchResult:
    """Minimax value of one root color."""
    move: str
    value: int

"""
Selection module - computer move choice.

Provides the main entry point:
- choose_move(): deterministic minimax pick for the side to move
"""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from filler.debug.viz import format_move_scores
from filler.selection.minimax import (
    DEFAULT_DEPTH,
    best_move,
    evaluate,
    minimax,
    score_moves,
)

if TYPE_CHECKING:
    from filler.games.game_base import GameBase
    from filler.parallel.runner import SearchRunner

logger = logging.getLogger(__name__)


def choose_move(
    game: "GameBase",
    depth: int = DEFAULT_DEPTH,
    maximizing_player: Optional[int] = None,
    runner: Optional["SearchRunner"] = None,
    debug: bool = False,
) -> Optional[str]:
    """
    Select the computer's color.

    Args:
        game: Live game (never mutated)
        depth: Plies searched below each root candidate
        maximizing_player: Whose advantage to maximize. Defaults to the
                           side to move.
        runner: Optional SearchRunner to evaluate root candidates in
                worker processes. Results are identical to the serial path.
        debug: If True, print the table of root evaluations

    Returns:
        Best color, or None if no color is legal
    """
    if maximizing_player is None:
        maximizing_player = game.current_player()

    if runner is not None:
        scored = runner.score_moves(game, depth, maximizing_player)
    else:
        scored = score_moves(game, depth, maximizing_player)

    selected = best_move(scored)
    logger.debug(
        "Player %d search depth %d: %s -> %r",
        maximizing_player, depth, scored, selected,
    )

    if debug:
        print(format_move_scores(scored, selected, maximizing_player))

    return selected


__all__ = [
    "DEFAULT_DEPTH",
    "choose_move",
    "best_move",
    "evaluate",
    "minimax",
    "score_moves",
]

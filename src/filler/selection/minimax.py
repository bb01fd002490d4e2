"""
Plain minimax over color choices.

The value of a position is the territory advantage of a fixed
``maximizing_player`` (see core.scoring.score). Every node works on its own
deep clone, so sibling subtrees never share state and the game handed in
by the caller is never touched.

No pruning: the branching factor is at most the palette size minus the two
identity colors, which keeps a depth-4 search small.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from filler.core.scoring import score
from filler.core.types import PLAYER_TWO

if TYPE_CHECKING:
    from filler.games.game_base import GameBase

DEFAULT_DEPTH = 4

ScoredMoves = List[Tuple[str, int]]


def evaluate(game: "GameBase", maximizing_player: int = PLAYER_TWO) -> int:
    """Static evaluation: cells of maximizing_player minus cells of its opponent."""
    return score(game.get_state(), maximizing_player)


def child(game: "GameBase", move: str) -> "GameBase":
    """Clone ``game`` and play ``move`` on the clone."""
    g = game.deep_clone()
    g.apply_move(move, validated=True)
    return g


def minimax(
    game: "GameBase",
    depth: int,
    maximizing: bool,
    maximizing_player: int = PLAYER_TWO,
) -> int:
    """
    Minimax value of ``game`` searched ``depth`` plies deep.

    Args:
        game: Position to evaluate (not mutated)
        depth: Remaining plies; 0 returns the static evaluation
        maximizing: True if this node takes the max over its children
        maximizing_player: Player whose advantage is being measured

    A node with no legal color is scored statically, like a leaf.
    """
    if depth <= 0 or game.is_over():
        return evaluate(game, maximizing_player)

    moves = game.valid_moves()
    if not moves:
        return evaluate(game, maximizing_player)

    values = [
        minimax(child(game, move), depth - 1, not maximizing, maximizing_player)
        for move in moves
    ]
    return max(values) if maximizing else min(values)


def score_candidate(
    game: "GameBase",
    move: str,
    depth: int,
    maximizing_player: int,
) -> int:
    """
    Root evaluation of one color.

    The move is played on a clone, then the resulting position is searched
    ``depth`` further plies with the max step first.
    """
    return minimax(child(game, move), depth, True, maximizing_player)


def score_moves(
    game: "GameBase",
    depth: int = DEFAULT_DEPTH,
    maximizing_player: int = PLAYER_TWO,
) -> ScoredMoves:
    """Evaluate every legal root color, in palette order."""
    return [
        (move, score_candidate(game, move, depth, maximizing_player))
        for move in game.valid_moves()
    ]


def best_move(scored: Sequence[Tuple[str, int]]) -> Optional[str]:
    """
    Color with the strictly greatest value.

    Ties go to the color enumerated first; None if there are no candidates.
    """
    best: Optional[str] = None
    best_value = 0
    for move, value in scored:
        if best is None or value > best_value:
            best, best_value = move, value
    return best

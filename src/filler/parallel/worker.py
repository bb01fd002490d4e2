"""
Worker process logic for parallel root evaluation.

Workers are stateless: each SearchJob carries the position it needs.
"""

from __future__ import annotations

import signal

from filler.parallel.jobs import SearchJob, SearchResult
from filler.selection.minimax import score_candidate


def worker_init() -> None:
    """Workers ignore SIGINT; only the main process handles Ctrl+C."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def evaluate_candidate(job: SearchJob) -> SearchResult:
    """Score a single root color."""
    value = score_candidate(job.game, job.move, job.depth, job.maximizing_player)
    return SearchResult(move=job.move, value=value)

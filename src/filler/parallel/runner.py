"""
Parallel search runner.

Each legal root color is an independent minimax problem over its own
clone, so the root candidates are fanned out to a process pool and the
results collected in palette order.
"""

from __future__ import annotations

import atexit
import logging
import multiprocessing as mp
from multiprocessing.pool import Pool
from typing import List, Optional, Tuple, TYPE_CHECKING

from filler.parallel.jobs import SearchJob, SearchResult
from filler.parallel.worker import evaluate_candidate, worker_init

if TYPE_CHECKING:
    from filler.games.game_base import GameBase

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["SearchRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class SearchRunner:
    """
    Evaluates root candidates across worker processes.

    With num_workers <= 1 no pool is created and jobs run in-process;
    either way the scores match the serial search exactly.
    """

    def __init__(self, num_workers: int = DEFAULT_WORKER_COUNT):
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        self.num_workers = num_workers
        self._pool: Optional[Pool] = None

        _active_runners.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    @property
    def parallel(self) -> bool:
        return self.num_workers > 1

    def _ensure_pool(self) -> Optional[Pool]:
        if self._pool is None and self.parallel:
            logger.info("Starting search pool with %d workers", self.num_workers)
            self._pool = Pool(processes=self.num_workers, initializer=worker_init)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        if force:
            pool.terminate()
        else:
            pool.close()
        pool.join()
        logger.info("Search pool shut down (force=%s)", force)

    def make_jobs(
        self,
        game: "GameBase",
        depth: int,
        maximizing_player: int,
    ) -> List[SearchJob]:
        return [
            SearchJob(
                game=game.deep_clone(),
                move=move,
                depth=depth,
                maximizing_player=maximizing_player,
            )
            for move in game.valid_moves()
        ]

    def run(self, jobs: List[SearchJob]) -> List[SearchResult]:
        """Evaluate jobs; results come back in job order."""
        if not jobs:
            return []

        pool = self._ensure_pool()
        if pool is None:
            return [evaluate_candidate(job) for job in jobs]
        return pool.map(evaluate_candidate, jobs)

    def score_moves(
        self,
        game: "GameBase",
        depth: int,
        maximizing_player: int,
    ) -> List[Tuple[str, int]]:
        """Same contract as selection.minimax.score_moves."""
        results = self.run(self.make_jobs(game, depth, maximizing_player))
        return [(result.move, result.value) for result in results]

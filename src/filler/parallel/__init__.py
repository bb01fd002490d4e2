"""
Parallel module - fan root search candidates out to worker processes.
"""

from filler.parallel.jobs import SearchJob, SearchResult
from filler.parallel.runner import SearchRunner, DEFAULT_WORKER_COUNT

__all__ = [
    "SearchJob",
    "SearchResult",
    "SearchRunner",
    "DEFAULT_WORKER_COUNT",
]

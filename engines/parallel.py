"""Worker pool that maps disjoint index ranges and joins before returning.

Kernels hand the pool an iteration space ``[start, stop)`` and a callable
``fn(lo, hi)``. Each worker receives a contiguous range that no other worker
touches, so kernels writing only inside their own range need no locking.
NumPy slice arithmetic releases the GIL, which lets the threads overlap.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

from models.engine_config import EngineConfig

_LOGGER = logging.getLogger(__name__)


def split_range(start: int, stop: int, parts: int) -> List[Tuple[int, int]]:
    """Partition ``[start, stop)`` into at most ``parts`` contiguous non-empty ranges."""
    total = stop - start
    if total <= 0:
        return []
    parts = max(1, min(parts, total))
    base, extra = divmod(total, parts)
    ranges = []
    lo = start
    for i in range(parts):
        hi = lo + base + (1 if i < extra else 0)
        ranges.append((lo, hi))
        lo = hi
    return ranges


class WorkerPool:
    """Fixed-size thread pool for data-parallel transform kernels."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.num_workers = self.config.resolved_workers
        self._executor: Optional[ThreadPoolExecutor] = None
        if self.num_workers > 1:
            self._executor = ThreadPoolExecutor(
                max_workers=self.num_workers, thread_name_prefix="imgproc"
            )

    def map_ranges(
        self,
        start: int,
        stop: int,
        fn: Callable[[int, int], None],
        unit_cost: int = 1,
    ) -> None:
        """Run ``fn(lo, hi)`` over disjoint pieces of ``[start, stop)``.

        ``unit_cost`` is the number of bytes touched per index; the range runs
        inline when the total stays under ``config.min_chunk``. The first
        worker exception is re-raised once every worker has finished.
        """
        total = stop - start
        if total <= 0:
            return
        if self._executor is None or total * unit_cost < self.config.min_chunk:
            fn(start, stop)
            return

        ranges = split_range(start, stop, self.num_workers)
        _LOGGER.debug("Dispatching %d ranges over [%d, %d)", len(ranges), start, stop)
        futures: List[Future] = [self._executor.submit(fn, lo, hi) for lo, hi in ranges]

        error = None
        for fut in futures:
            exc = fut.exception()
            if exc is not None and error is None:
                error = exc
        if error is not None:
            raise error

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


_default_pool: Optional[WorkerPool] = None
_default_lock = threading.Lock()


def get_default_pool() -> WorkerPool:
    """Return the lazily created process-wide pool."""
    global _default_pool
    with _default_lock:
        if _default_pool is None:
            _default_pool = WorkerPool()
        return _default_pool

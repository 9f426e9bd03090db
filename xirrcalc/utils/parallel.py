"""Parallel map/fold over independent terms."""

import logging
import math
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, Iterable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ParallelReducer:
    """
    Fan out one task per item onto a thread pool and fold the results by addition.

    The first task to raise aborts the reduction and its exception
    propagates to the caller. Pending tasks are cancelled. Use as a
    context manager so the pool lives exactly as long as one solve.
    """

    def __init__(self, max_workers: Optional[int] = None):
        self.max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None

    def __enter__(self) -> "ParallelReducer":
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="xirr-term",
        )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True, cancel_futures=True)
            self._executor = None

    def sum(self, function: Callable[[T], float], items: Iterable[T]) -> float:
        """
        Apply ``function`` to every item in parallel and return the sum.

        ``math.fsum`` makes the total independent of completion order.
        """
        if self._executor is None:
            raise RuntimeError("ParallelReducer used outside of its context")

        futures = [self._executor.submit(function, item) for item in items]
        done, not_done = wait(futures, return_when=FIRST_EXCEPTION)

        for future in done:
            error = future.exception()
            if error is not None:
                for pending in not_done:
                    pending.cancel()
                logger.debug("Term evaluation failed: %r", error)
                raise error

        return math.fsum(future.result() for future in futures)


def parallel_sum(
    function: Callable[[T], float],
    items: Iterable[T],
    max_workers: Optional[int] = None,
) -> float:
    """One-shot parallel map/fold using a short-lived pool."""
    with ParallelReducer(max_workers) as reducer:
        return reducer.sum(function, items)

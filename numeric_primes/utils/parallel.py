"""
Order-preserving parallel filtering over lazy, possibly infinite sources.

Candidates are pulled from the source in batches and the predicate is
evaluated for every member of a batch on a thread pool. executor.map
returns results in submission order, so the filtered output is identical
to the sequential filter; parallelism only changes how the predicate is
evaluated, never the emission order.

The consumer cancels by no longer pulling: closing the generator shuts the
pool down and drops any queued work.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from typing import Callable, Iterable, Iterator, Optional, TypeVar

from ..config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar('T')


def resolve_degree_of_parallelism(degree_of_parallelism: Optional[int] = None) -> int:
    """
    Resolve the number of workers to use.

    Args:
        degree_of_parallelism: Explicit worker count (None = configured default,
            falling back to every available CPU)

    Returns:
        Worker count (always >= 1)

    Raises:
        ValueError: If an explicit count is less than 1
    """
    if degree_of_parallelism is None:
        degree_of_parallelism = get_settings().max_degree_of_parallelism

    if degree_of_parallelism is None:
        return os.cpu_count() or 1

    if degree_of_parallelism < 1:
        raise ValueError(f"Degree of parallelism must be at least 1, got {degree_of_parallelism}")

    return degree_of_parallelism


def ordered_parallel_filter(
    source: Iterable[T],
    predicate: Callable[[T], bool],
    degree_of_parallelism: Optional[int] = None,
    batch_size: Optional[int] = None
) -> Iterator[T]:
    """
    Lazily yield the members of source that satisfy predicate, in source order.

    Args:
        source: Lazy iterable of candidates (may be infinite)
        predicate: Test evaluated for each candidate on a worker thread
        degree_of_parallelism: Maximum worker threads (1 = sequential)
        batch_size: Candidates evaluated per worker per batch

    Yields:
        Candidates for which predicate returned True, in original order
    """
    workers = resolve_degree_of_parallelism(degree_of_parallelism)
    iterator = iter(source)

    if workers == 1:
        for candidate in iterator:
            if predicate(candidate):
                yield candidate
        return

    if batch_size is None:
        batch_size = get_settings().parallel_batch_size
    window = batch_size * workers

    logger.debug(f"Parallel filter using {workers} workers, {window} candidates per batch")

    executor = ThreadPoolExecutor(max_workers=workers)
    try:
        while True:
            batch = list(islice(iterator, window))
            if not batch:
                return

            verdicts = executor.map(predicate, batch)
            for candidate, verdict in zip(batch, verdicts):
                if verdict:
                    yield candidate
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

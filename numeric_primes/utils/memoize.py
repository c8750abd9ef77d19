"""
Append-only memoizing list over a lazy source.

LazyList caches every item it pulls from its source so that later
enumerations are served from memory. The cache only grows: readers
iterate by index and never observe a shrinking or reordered list, so
they need no lock. Pulling from the source is serialized with an RLock.
The lock is re-entrant because a source may read the cache it feeds
(prime discovery tests new candidates against the primes found so far).
"""

import logging
import threading
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class LazyList(Generic[T]):
    """Thread-safe, append-only cache of a lazily consumed iterable."""

    def __init__(self, source: Iterable[T]):
        self._source: Optional[Iterator[T]] = iter(source)
        self._cache: List[T] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        """Number of items cached so far (not the length of the source)."""
        return len(self._cache)

    @property
    def is_complete(self) -> bool:
        """True once the source has been exhausted."""
        return self._source is None

    def _ensure(self, index: int) -> bool:
        """Pull from the source until index is cached. False if it ran out."""
        if index < len(self._cache):
            return True

        with self._lock:
            while len(self._cache) <= index:
                if self._source is None:
                    return False
                try:
                    item = next(self._source)
                except StopIteration:
                    self._source = None
                    logger.debug(f"Source exhausted after {len(self._cache)} items")
                    return False
                self._cache.append(item)
            return True

    def __getitem__(self, index: int) -> T:
        if index < 0:
            raise IndexError("LazyList does not support negative indexes")
        if not self._ensure(index):
            raise IndexError(f"Index {index} is beyond the end of the source")
        return self._cache[index]

    def __iter__(self) -> Iterator[T]:
        index = 0
        while self._ensure(index):
            yield self._cache[index]
            index += 1

"""
Unit tests for LazyList.
"""
import threading
from itertools import count, islice

import pytest
from numeric_primes.utils.memoize import LazyList


class TestLazyList:
    """Tests for the append-only memoizing list."""

    def test_pulls_lazily(self):
        pulled = []

        def source():
            for n in count():
                pulled.append(n)
                yield n

        items = LazyList(source())
        assert len(items) == 0
        assert items[4] == 4
        assert pulled == [0, 1, 2, 3, 4]
        assert len(items) == 5

    def test_reiteration_served_from_cache(self):
        pulled = []

        def source():
            for n in range(10):
                pulled.append(n)
                yield n * n

        items = LazyList(source())
        assert list(islice(items, 5)) == [0, 1, 4, 9, 16]
        assert list(islice(items, 5)) == [0, 1, 4, 9, 16]
        assert pulled == [0, 1, 2, 3, 4]

    def test_finite_source(self):
        items = LazyList([1, 2, 3])
        assert list(items) == [1, 2, 3]
        assert items.is_complete
        assert list(items) == [1, 2, 3]

    def test_index_beyond_end(self):
        items = LazyList([1, 2])
        with pytest.raises(IndexError):
            items[2]

    def test_negative_index(self):
        items = LazyList([1, 2])
        with pytest.raises(IndexError):
            items[-1]

    def test_source_may_read_cache(self):
        """A source can consult what it has produced so far."""
        def doubling():
            yield 1
            while True:
                yield items[len(items) - 1] * 2

        items = LazyList(doubling())
        assert list(islice(items, 6)) == [1, 2, 4, 8, 16, 32]

    def test_concurrent_readers(self):
        items = LazyList(iter(range(5000)))
        results = []
        lock = threading.Lock()

        def reader():
            seen = list(islice(items, 5000))
            with lock:
                results.append(seen)

        threads = [threading.Thread(target=reader) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 6
        assert all(r == list(range(5000)) for r in results)

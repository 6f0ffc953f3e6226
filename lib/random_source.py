# =============================================================================
# lib/random_source.py - Injectable Random Source
# =============================================================================
# Random draws used to build sample forecasts go through a small protocol so
# the source can be swapped out in tests.
#
# - SharedRandom: default source, one generator per thread
# - SequenceRandom: replays fixed draws (deterministic tests)
#
# Usage:
#   from lib.random_source import SharedRandom
#   rng = SharedRandom()
#   rng.randint(-20, 55)   # -20 <= n < 55
# =============================================================================

from __future__ import annotations

import random
import threading
from itertools import cycle
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Uniform integer draws. Upper bounds are exclusive."""

    def randint(self, low: int, high: int) -> int:
        ...

    def index(self, length: int) -> int:
        ...


class SharedRandom:
    """
    Random source that is safe to share between request threads.

    Each thread lazily gets its own random.Random instance, so concurrent
    draws never touch the same generator state.

    Args:
        seed: Optional seed. When given, each thread's generator is seeded
              with (seed, n) where n is the order in which threads first drew.
    """

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._local = threading.local()
        self._counter_lock = threading.Lock()
        self._threads_seen = 0

    def _generator(self) -> random.Random:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            if self._seed is None:
                rng = random.Random()
            else:
                with self._counter_lock:
                    n = self._threads_seen
                    self._threads_seen += 1
                rng = random.Random(f"{self._seed}:{n}")
            self._local.rng = rng
        return rng

    def randint(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"Empty range: [{low}, {high})")
        return self._generator().randrange(low, high)

    def index(self, length: int) -> int:
        if length <= 0:
            raise ValueError(f"Cannot pick an index from length {length}")
        return self._generator().randrange(length)


class SequenceRandom:
    """
    Deterministic random source for tests.

    Replays `values` in order (cycling when exhausted). randint() returns
    the next value as-is; index() reduces it modulo the length.

    Example:
        rng = SequenceRandom([10, 3])
        rng.randint(-20, 55)  # 10
        rng.index(10)         # 3
    """

    def __init__(self, values: Iterable[int]):
        values = list(values)
        if not values:
            raise ValueError("SequenceRandom needs at least one value")
        self._values = cycle(values)
        self._lock = threading.Lock()

    def _next(self) -> int:
        with self._lock:
            return next(self._values)

    def randint(self, low: int, high: int) -> int:
        value = self._next()
        if not low <= value < high:
            raise ValueError(f"Scripted value {value} outside [{low}, {high})")
        return value

    def index(self, length: int) -> int:
        if length <= 0:
            raise ValueError(f"Cannot pick an index from length {length}")
        return self._next() % length

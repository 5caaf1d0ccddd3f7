"""Thread-safe, lazily-initialized, immutable-after-construction cache.

``OnceCache`` maps a key to a value built by a factory on first request.
The factory runs at most once per key (as long as it succeeds); concurrent
callers for the same key wait for that single build and then all receive
the same object. Entries are never evicted.
"""

import threading
from typing import Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class OnceCache(Generic[K, V]):
    """At-most-once initialization per key."""

    def __init__(self, factory: Callable[[K], V]):
        self._factory = factory
        self._values: dict[K, V] = {}
        self._locks: dict[K, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, key: K) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def get(self, key: K) -> V:
        """Return the value for ``key``, building it on first use.

        If the factory raises, nothing is stored and the exception
        propagates; the next caller for ``key`` runs the factory again.
        """
        try:
            return self._values[key]
        except KeyError:
            pass

        with self._lock_for(key):
            # Another thread may have finished the build while we waited.
            if key not in self._values:
                self._values[key] = self._factory(key)
            return self._values[key]

    def is_loaded(self, key: K) -> bool:
        return key in self._values

    def keys(self) -> list[K]:
        return list(self._values)

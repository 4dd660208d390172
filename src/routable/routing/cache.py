"""Memoization of path bindings per normalized url.

Pure memoization: clearing it changes recomputation cost, never results.
Resolution may run on several threads; every access holds the lock, and
concurrent upserts of the same key store equal values.
"""

import threading

from routable.routing.route import RouteMatch


class ResultCache:
    """Thread-safe normalized-url -> ``RouteMatch`` map. No eviction."""

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, RouteMatch] = {}

    def get(self, key: str) -> RouteMatch | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, match: RouteMatch) -> None:
        with self._lock:
            self._entries[key] = match

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

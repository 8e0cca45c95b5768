"""Bounded LRU cache of short keys discovered at runtime."""

from __future__ import annotations

from collections import OrderedDict
from threading import Lock

from chss.define_config_defaults__config import DEFAULT_DISCOVERY_CACHE_CAPACITY


class DiscoveryCache:
    """Maps boards to short keys, evicting the least recently used entry past capacity.

    Both ``get`` hits and ``put`` count as accesses. All operations hold a single lock
    and only do cache-local work.
    """

    def __init__(self, capacity: int = DEFAULT_DISCOVERY_CACHE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Discovery cache capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._entries: OrderedDict[str, str] = OrderedDict()
        self._lock = Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, board: str) -> str | None:
        with self._lock:
            key = self._entries.get(board)
            if key is None:
                return None
            self._entries.move_to_end(board)
            return key

    def put(self, board: str, key: str) -> None:
        with self._lock:
            self._store(board, key)

    def put_if_shorter(self, board: str, key: str) -> bool:
        """Store ``key`` unless the board already maps to a key no longer than it."""
        with self._lock:
            current = self._entries.get(board)
            if current is not None and len(current) <= len(key):
                self._entries.move_to_end(board)
                return False
            self._store(board, key)
            return True

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, board: object) -> bool:
        with self._lock:
            return board in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _store(self, board: str, key: str) -> None:
        self._entries[board] = key
        self._entries.move_to_end(board)
        while len(self._entries) > self._capacity:
            self._entries.popitem(last=False)

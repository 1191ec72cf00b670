"""Least-recently-used caches."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
from typing import Any

MISSING = -1


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class LRUCache:
    """Key-value cache that evicts the least recently used entry when full."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def get(self, key: Hashable) -> Any:
        """Value for ``key``, marking it recently used, or ``MISSING`` (-1) if absent."""
        if key not in self._entries:
            return MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if needed."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


class PageCache:
    """Set of page keys kept in most-recently-referenced order."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._keys: OrderedDict[Hashable, None] = OrderedDict()

    def refer(self, key: Hashable) -> None:
        """Reference ``key``, evicting the least recently used key if full."""
        if key in self._keys:
            self._keys.move_to_end(key)
            return
        if len(self._keys) == self.capacity:
            self._keys.popitem(last=False)
        self._keys[key] = None

    def contents(self) -> list[Hashable]:
        """Cached keys, most recently referenced first."""
        return list(reversed(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys
"""A bounded binary min-heap that supports decrease-key and delete-by-index."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class MinHeap:
    """Array-backed min-heap holding at most ``capacity`` keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Keys in array (level) order."""
        return iter(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __repr__(self) -> str:
        return f"MinHeap(capacity={self.capacity}, items={self._items!r})"

    def insert(self, key: Any) -> None:
        """Add ``key``; raises OverflowError when the heap is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("heap is full, could not insert key")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def decrease_key(self, index: int, value: Any) -> None:
        """Lower the key at ``index`` to ``value`` and restore heap order."""
        self._check_index(index)
        if value > self._items[index]:
            raise ValueError("new value is larger than the current key")
        self._items[index] = value
        self._sift_up(index)

    def delete(self, index: int) -> Any:
        """Remove and return the key stored at ``index``."""
        self._check_index(index)
        removed = self._items[index]
        self._sift_up(index, to_root=True)
        self.extract_min()
        return removed

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        root = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return root

    def minimum(self) -> Any:
        """The smallest key, without removing it."""
        if not self._items:
            raise IndexError("minimum of an empty heap")
        return self._items[0]

    def height(self) -> int:
        """Height of the heap tree; -1 when empty."""
        return len(self._items).bit_length() - 1

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index {index} out of range")

    def _sift_up(self, index: int, to_root: bool = False) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not to_root and items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest
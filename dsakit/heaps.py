"""Heap-based selection problems: running medians and k-th order statistics."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Sequence


class MedianStream:
    """Running median of a stream of numbers, kept in two balanced heaps."""

    def __init__(self) -> None:
        self._lower: list[float] = []  # max-heap via negation
        self._upper: list[float] = []

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)

    def add(self, value: float) -> None:
        """Add ``value`` to the stream."""
        if self._lower and value > -self._lower[0]:
            heapq.heappush(self._upper, value)
        else:
            heapq.heappush(self._lower, -value)
        if len(self._lower) > len(self._upper) + 1:
            heapq.heappush(self._upper, -heapq.heappop(self._lower))
        elif len(self._upper) > len(self._lower) + 1:
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def median(self) -> float:
        """Median of everything added so far."""
        if not self._lower and not self._upper:
            raise ValueError("median of an empty stream")
        if len(self._lower) > len(self._upper):
            return -self._lower[0]
        if len(self._upper) > len(self._lower):
            return self._upper[0]
        return (-self._lower[0] + self._upper[0]) / 2


def _check_k(k: int, available: int) -> None:
    if not 1 <= k <= available:
        raise ValueError(f"k must be between 1 and {available}, got {k}")


def kth_largest_subarray_sum(values: Sequence[int], k: int) -> int:
    """The k-th largest sum among all contiguous subarrays."""
    n = len(values)
    _check_k(k, n * (n + 1) // 2)
    prefix = [0, *itertools.accumulate(values)]
    top: list[int] = []
    for start in range(n):
        for end in range(start + 1, n + 1):
            total = prefix[end] - prefix[start]
            if len(top) < k:
                heapq.heappush(top, total)
            elif top[0] < total:
                heapq.heapreplace(top, total)
    return top[0]


def kth_smallest(values: Iterable[int], k: int) -> int:
    """The k-th smallest value (1-based), counting duplicates."""
    values = list(values)
    _check_k(k, len(values))
    largest_kept: list[int] = []
    for value in values:
        heapq.heappush(largest_kept, -value)
        if len(largest_kept) > k:
            heapq.heappop(largest_kept)
    return -largest_kept[0]


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for i in range(low, high):
        if items[i] < pivot:
            items[i], items[store] = items[store], items[i]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def kth_largest(values: Iterable[int], k: int) -> int:
    """The k-th largest value (1-based), counting duplicates, by quickselect."""
    items = list(values)
    _check_k(k, len(items))
    target = len(items) - k
    low, high = 0, len(items) - 1
    while True:
        position = _partition(items, low, high)
        if position == target:
            return items[position]
        if position > target:
            high = position - 1
        else:
            low = position + 1


def kth_smallest_distinct(values: Iterable[int], k: int) -> int:
    """The k-th smallest among the distinct values."""
    distinct = sorted(set(values))
    _check_k(k, len(distinct))
    return distinct[k - 1]
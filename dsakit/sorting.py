"""Comparison sorts and inversion counting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def _merge_count(left: list[Any], right: list[Any]) -> tuple[list[Any], int]:
    merged: list[Any] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _sort_count(values: Sequence[Any]) -> tuple[list[Any], int]:
    if len(values) <= 1:
        return list(values), 0
    middle = (len(values) + 1) // 2
    left, left_count = _sort_count(values[:middle])
    right, right_count = _sort_count(values[middle:])
    merged, split_count = _merge_count(left, right)
    return merged, left_count + right_count + split_count


def count_inversions(values: Iterable[Any]) -> int:
    """Number of pairs ``i < j`` with ``values[i] > values[j]``."""
    return _sort_count(list(values))[1]


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """A new list holding ``values`` in ascending order, sorted stably by merging."""
    return _sort_count(list(values))[0]


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for index in range(low, high):
        if items[index] < pivot:
            items[index], items[store] = items[store], items[index]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """A new list holding ``values`` in ascending order, sorted by quicksort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(items, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items
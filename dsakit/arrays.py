"""Classic array problems: profits, streaks, rotations, partitions and more."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

_CHUNK_DIGITS = 18
_CHUNK = 10**_CHUNK_DIGITS


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0."""
    best = 0
    lowest = math.inf
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return int(best)


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    values = set(nums)
    longest = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def rotate_by_one(items: Sequence) -> list:
    """Rotate a sequence one place to the right."""
    items = list(items)
    if not items:
        return []
    return [items[-1], *items[:-1]]


def _decimal_digits(value: int) -> list[int]:
    chunks: list[int] = []
    while value:
        value, rest = divmod(value, _CHUNK)
        chunks.append(rest)
    if not chunks:
        return [0]
    chunks.reverse()
    text = str(chunks[0]) + "".join(str(c).zfill(_CHUNK_DIGITS) for c in chunks[1:])
    return [int(ch) for ch in text]


def factorial_digits(n: int) -> list[int]:
    """Decimal digits of ``n!``, most significant first."""
    return _decimal_digits(math.prod(range(2, n + 1)))


def common_elements(first: Sequence[int], second: Sequence[int], third: Sequence[int]) -> list[int]:
    """Distinct values present in all three sorted sequences, in ascending order."""
    result: list[int] = []
    i = j = k = 0
    while i < len(first) and j < len(second) and k < len(third):
        x, y, z = first[i], second[j], third[k]
        if x == y == z:
            if not result or result[-1] != x:
                result.append(x)
            i += 1
            j += 1
            k += 1
        elif x < y:
            i += 1
        elif y < z:
            j += 1
        else:
            k += 1
    return result


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def majority_element(nums: Iterable[int]) -> int:
    """Boyer-Moore vote: the element that appears more than half the time."""
    count = 0
    candidate = None
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    if candidate is None:
        raise ValueError("majority_element() needs at least one value")
    return candidate


def majority_elements(nums: Sequence[int]) -> list[int]:
    """All elements appearing more than ``len(nums) // 3`` times."""
    first = second = None
    first_count = second_count = 0
    for value in nums:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        elif first_count == 0:
            first, first_count = value, 1
        elif second_count == 0:
            second, second_count = value, 1
        else:
            first_count -= 1
            second_count -= 1

    threshold = len(nums) // 3
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and nums.count(candidate) > threshold
    ]


def max_product_subarray(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous run."""
    if not nums:
        raise ValueError("max_product_subarray() needs at least one value")
    low = high = best = nums[0]
    for value in nums[1:]:
        if value < 0:
            low, high = high, low
        high = max(value, high * value)
        low = min(value, low * value)
        best = max(best, high)
    return best


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping (or touching) closed intervals."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def next_permutation(nums: Sequence[int]) -> list[int]:
    """The next lexicographic permutation, wrapping round to the smallest."""
    result = list(nums)
    size = len(result)
    if size < 2:
        return result
    pivot = size - 2
    while pivot >= 0 and result[pivot] >= result[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        successor = size - 1
        while result[successor] <= result[pivot]:
            successor -= 1
        result[pivot], result[successor] = result[successor], result[pivot]
    result[pivot + 1:] = reversed(result[pivot + 1:])
    return result


def rearrange_alternately(sorted_nums: Iterable[int]) -> list[int]:
    """Interleave a sorted sequence as max, min, second max, second min, ..."""
    values = deque(sorted_nums)
    result = []
    take_max = True
    while values:
        result.append(values.pop() if take_max else values.popleft())
        take_max = not take_max
    return result


def is_subset(superset: Iterable, subset: Iterable) -> bool:
    """True when every element of ``subset`` occurs in ``superset``."""
    present = set(superset)
    return all(value in present for value in subset)


def three_way_partition(items: Sequence[int], low: int, high: int) -> list[int]:
    """Reorder so values below ``low`` come first, then those in range, then those above ``high``."""
    result = list(items)
    left, right, i = 0, len(result) - 1, 0
    while i <= right:
        if result[i] < low:
            result[i], result[left] = result[left], result[i]
            left += 1
            i += 1
        elif result[i] > high:
            result[i], result[right] = result[right], result[i]
            right -= 1
        else:
            i += 1
    return result


def trap_rain_water(heights: Sequence[int]) -> int:
    """Units of water trapped between bars of the given heights."""
    trapped = 0
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= max_left:
                max_left = heights[left]
            else:
                trapped += max_left - heights[left]
            left += 1
        else:
            if heights[right] >= max_right:
                max_right = heights[right]
            else:
                trapped += max_right - heights[right]
            right -= 1
    return trapped
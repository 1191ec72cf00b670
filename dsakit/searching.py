"""Searching problems: binary search on answers, prefix sums and two pointers."""

from __future__ import annotations

import bisect
import itertools
import math
from collections import Counter
from collections.abc import Iterable, Sequence


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Distinct sorted quadruplets of ``nums`` that add up to ``target``."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i in range(size):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            wanted = target - values[i] - values[j]
            front, back = j + 1, size - 1
            while front < back:
                pair = values[front] + values[back]
                if pair < wanted:
                    front += 1
                elif pair > wanted:
                    back -= 1
                else:
                    third, fourth = values[front], values[back]
                    result.append([values[i], values[j], third, fourth])
                    while front < back and values[front] == third:
                        front += 1
                    while front < back and values[back] == fourth:
                        back -= 1
    return result


def aggressive_cows(stalls: Iterable[int], cows: int) -> int:
    """Largest minimum distance at which ``cows`` cows can be placed in the stalls."""
    positions = sorted(stalls)
    if cows < 1:
        raise ValueError("at least one cow is needed")
    if cows > len(positions):
        raise ValueError("more cows than stalls")

    def fits(gap: int) -> bool:
        placed = 1
        last = positions[0]
        for position in positions[1:]:
            if placed >= cows:
                break
            if position - last >= gap:
                last = position
                placed += 1
        return placed >= cows

    best = 0
    low, high = 0, positions[-1]
    while low <= high:
        mid = (low + high + 1) // 2
        if fits(mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def soldiers_defeated(powers: Iterable[int], queries: Iterable[int]) -> list[tuple[int, int]]:
    """For each query power, how many soldiers it beats and their total power."""
    ordered = sorted(powers)
    prefix = [0, *itertools.accumulate(ordered)]
    answers = []
    for power in queries:
        beaten = bisect.bisect_right(ordered, power)
        answers.append((beaten, prefix[beaten]))
    return answers


def allocate_pages(pages: Sequence[int], students: int) -> int:
    """Least possible maximum of pages read by one student, books kept contiguous."""
    if students < 1:
        raise ValueError("at least one student is needed")
    if len(pages) < students:
        raise ValueError("fewer books than students")

    def feasible(limit: int) -> bool:
        needed = 1
        running = 0
        for book in pages:
            running += book
            if running > limit:
                needed += 1
                running = book
                if needed > students:
                    return False
        return True

    low, high = max(pages), sum(pages)
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def count_zero_sum_subarrays(nums: Iterable[int]) -> int:
    """Number of contiguous subarrays whose sum is zero."""
    seen = Counter({0: 1})
    count = 0
    for total in itertools.accumulate(nums):
        count += seen[total]
        seen[total] += 1
    return count


def max_sawblade_height(trees: Sequence[int], wood: int) -> int:
    """Highest saw height that still cuts at least ``wood`` metres of timber."""

    def cut(height: int) -> int:
        return sum(tree - height for tree in trees if tree >= height)

    if wood > cut(0):
        raise ValueError("the trees do not hold that much wood")
    low, high = 0, max(trees, default=0)
    while low < high:
        mid = (low + high + 1) // 2
        if cut(mid) >= wood:
            low = mid
        else:
            high = mid - 1
    return low


def longest_zero_sum_subarray(nums: Iterable[int]) -> int:
    """Length of the longest contiguous subarray whose sum is zero."""
    first_seen = {0: -1}
    longest = 0
    for index, total in enumerate(itertools.accumulate(nums)):
        if total in first_seen:
            longest = max(longest, index - first_seen[total])
        else:
            first_seen[total] = index
    return longest


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Each position's product of all the other elements."""
    prefix = [1, *itertools.accumulate(nums, lambda a, b: a * b)]
    result = []
    suffix = 1
    for index in range(len(nums) - 1, -1, -1):
        result.append(prefix[index] * suffix)
        suffix *= nums[index]
    result.reverse()
    return result


def min_prata_time(cook_ranks: Sequence[int], parathas: int) -> int:
    """Least minutes for the cooks to make ``parathas``.

    A cook of rank ``r`` takes ``r`` minutes for the first paratha,
    ``2r`` for the second, ``3r`` for the third and so on.
    """
    if parathas < 0:
        raise ValueError("parathas must not be negative")
    if parathas == 0:
        return 0
    if not cook_ranks:
        raise ValueError("no cooks to make parathas")
    if any(rank <= 0 for rank in cook_ranks):
        raise ValueError("cook ranks must be positive")

    def made(minutes: int) -> int:
        total = 0
        for rank in cook_ranks:
            units = minutes // rank
            total += (math.isqrt(8 * units + 1) - 1) // 2
            if total >= parathas:
                break
        return total

    low, high = 0, min(cook_ranks) * parathas * (parathas + 1) // 2
    while low < high:
        mid = (low + high) // 2
        if made(mid) >= parathas:
            high = mid
        else:
            low = mid + 1
    return low


def _subset_sums(values: Iterable[int]) -> list[int]:
    sums = [0]
    for value in values:
        sums += [total + value for total in sums]
    return sums


def count_subset_sums(values: Sequence[int], low: int, high: int) -> int:
    """Number of subsets (the empty one included) whose sum lies in ``[low, high]``."""
    half = len(values) // 2
    left = _subset_sums(values[:half])
    right = sorted(_subset_sums(values[half:]))
    return sum(
        bisect.bisect_right(right, high - total) - bisect.bisect_left(right, low - total)
        for total in left
    )


def double_helix_max_sum(first: Sequence[int], second: Sequence[int]) -> int:
    """Largest sum of a walk along two sorted sequences, switching at common values."""
    i = j = 0
    run_first = run_second = total = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            run_first += first[i]
            i += 1
        elif first[i] > second[j]:
            run_second += second[j]
            j += 1
        else:
            total += max(run_first, run_second) + first[i]
            run_first = run_second = 0
            i += 1
            j += 1
    run_first += sum(first[i:])
    run_second += sum(second[j:])
    return total + max(run_first, run_second)


def trailing_zeros(n: int) -> int:
    """Number of trailing zeros in ``n!``."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    count = 0
    power = 5
    while n // power:
        count += n // power
        power *= 5
    return count
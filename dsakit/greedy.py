"""Greedy algorithms: scheduling, knapsack, ropes, trains and shopping."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item for the fractional knapsack."""

    value: int
    weight: int


@dataclass(frozen=True)
class Job:
    """A job that earns ``profit`` if finished by ``deadline``."""

    id: int
    deadline: int
    profit: int


@dataclass(frozen=True)
class Train:
    """A train wanting to stop at ``platform`` between arrival and departure."""

    arrival: int
    departure: int
    platform: int


@dataclass(frozen=True)
class Process:
    """A process for shortest-job-first scheduling."""

    pid: int
    arrival: int
    burst: int


def duplicate_characters(text: str) -> dict[str, int]:
    """Characters that occur more than once, with their counts, in sorted order."""
    counts = Counter(text)
    return {ch: counts[ch] for ch in sorted(counts) if counts[ch] > 1}


def _check_meetings(starts: Sequence[int], ends: Sequence[int]) -> None:
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")


def max_meetings(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Most meetings that fit in one room; a meeting must start after the last one ends."""
    _check_meetings(starts, ends)
    count = 0
    last_end = None
    for start, end in sorted(zip(starts, ends), key=lambda m: (m[1], m[0])):
        if last_end is None or start > last_end:
            count += 1
            last_end = end
    return count


def meeting_order(starts: Sequence[int], ends: Sequence[int]) -> list[int]:
    """1-based positions of the meetings chosen greedily by earliest end."""
    _check_meetings(starts, ends)
    meetings = sorted(
        ((end, position, start) for position, (start, end) in enumerate(zip(starts, ends), 1)),
    )
    chosen: list[int] = []
    limit = None
    for end, position, start in meetings:
        if limit is None or start > limit:
            chosen.append(position)
            limit = end
    return chosen


def choose_and_swap(text: str) -> str:
    """Lexicographically smallest string from swapping all occurrences of two letters once."""
    remaining = set(text)
    for ch in text:
        remaining.discard(ch)
        if not remaining:
            break
        smallest = min(remaining)
        if smallest < ch:
            return text.translate(str.maketrans({ch: smallest, smallest: ch}))
    return text


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Greatest value that fits in ``capacity`` when items may be split."""
    items = list(items)
    if any(item.weight <= 0 for item in items):
        raise ValueError("item weights must be positive")
    ranked = sorted(
        ((item.value / item.weight, index) for index, item in enumerate(items)),
        reverse=True,
    )
    total = 0.0
    used = 0
    for ratio, index in ranked:
        item = items[index]
        if used + item.weight < capacity:
            total += item.value
            used += item.weight
        else:
            total += (capacity - used) * ratio
            break
    return total


def job_scheduling(jobs: Iterable[Job]) -> tuple[int, int]:
    """Number of jobs done and total profit when each job takes one unit of time."""
    ranked = sorted(jobs, key=lambda job: job.profit, reverse=True)
    taken = [False] * len(ranked)
    done = 0
    profit = 0
    for job in ranked:
        for slot in range(min(len(taken), job.deadline) - 1, -1, -1):
            if not taken[slot]:
                taken[slot] = True
                done += 1
                profit += job.profit
                break
    return done, profit


def max_abs_difference(values: Sequence[int]) -> int:
    """Maximum of ``|A[i] - A[j]| + |i - j|`` over all index pairs."""
    if not values:
        raise ValueError("max_abs_difference() needs at least one value")
    plus = [value + index for index, value in enumerate(values)]
    minus = [index - value for index, value in enumerate(values)]
    return max(max(plus) - min(plus), max(minus) - min(minus))


def max_stopped_trains(trains: Iterable[Train], platforms: int) -> int:
    """Most trains that can stop when each platform holds one train at a time."""
    schedules: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for train in trains:
        if not 0 <= train.platform <= platforms:
            raise ValueError(f"platform {train.platform} is outside 0..{platforms}")
        schedules[train.platform].append((train.departure, train.arrival))

    count = 0
    for schedule in schedules.values():
        schedule.sort()
        last_departure = schedule[0][0]
        count += 1
        for departure, arrival in schedule[1:]:
            if arrival >= last_departure:
                last_departure = departure
                count += 1
    return count


def min_rope_cost(lengths: Iterable[int]) -> int:
    """Least total cost of joining ropes, where a join costs the sum of both lengths."""
    heap = list(lengths)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += joined
        heapq.heappush(heap, joined)
    return cost


def sjf_order(processes: Iterable[Process]) -> list[int]:
    """Process ids in the order non-preemptive shortest-job-first runs them."""
    pending = sorted(processes, key=lambda p: (p.arrival, p.burst, p.pid))
    ready: list[tuple[int, int, int]] = []
    order: list[int] = []
    clock = 0
    position = 0
    while position < len(pending) or ready:
        if not ready:
            nxt = pending[position]
            position += 1
            heapq.heappush(ready, (nxt.burst, nxt.arrival, nxt.pid))
        burst, _, pid = heapq.heappop(ready)
        order.append(pid)
        clock += burst
        while position < len(pending) and pending[position].arrival <= clock:
            nxt = pending[position]
            position += 1
            heapq.heappush(ready, (nxt.burst, nxt.arrival, nxt.pid))
    return order


def candy_store(prices: Iterable[int], k: int) -> tuple[int, int]:
    """Least and greatest spend when every bought candy brings ``k`` more free."""
    if k < 0:
        raise ValueError("k must not be negative")
    ordered = sorted(prices)
    bought = -(-len(ordered) // (k + 1))
    cheapest = sum(ordered[:bought])
    dearest = sum(ordered[len(ordered) - bought:])
    return cheapest, dearest
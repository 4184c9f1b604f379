"""Greedy algorithms: activity selection, fractional knapsack, job sequencing, merging."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def max_activities(jobs: Iterable[tuple[int, int]]) -> int:
    """Most non-overlapping ``(start, end)`` jobs one person can do.

    A job may start at the moment the previous one ends.
    """
    ordered = sorted(jobs, key=lambda job: job[1])
    if not ordered:
        return 0
    count = 1
    finish = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= finish:
            finish = end
            count += 1
    return count


def fractional_knapsack(items: Iterable[tuple[float, float]], capacity: float) -> float:
    """Largest profit from ``(profit, weight)`` items when items may be split."""
    pieces = list(items)
    if any(weight <= 0 for _, weight in pieces):
        raise ValueError("weights must be positive")
    pieces.sort(key=lambda item: item[0] / item[1], reverse=True)
    total = 0.0
    room = capacity
    for profit, weight in pieces:
        if room <= 0:
            break
        if weight <= room:
            total += profit
            room -= weight
        else:
            total += profit * room / weight
            room = 0
    return total


def job_sequencing(jobs: Sequence[tuple[int, int]]) -> tuple[list[int], int]:
    """Schedule unit-time ``(profit, deadline)`` jobs for the greatest profit.

    Returns the indices of the chosen jobs in the order they run, and their
    total profit. Each job goes into the latest free slot before its deadline.
    """
    size = len(jobs)
    slots: list[int | None] = [None] * size
    total = 0
    by_profit = sorted(range(size), key=lambda index: jobs[index][0], reverse=True)
    for index in by_profit:
        profit, deadline = jobs[index]
        for slot in range(min(size, deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = index
                total += profit
                break
    return [index for index in slots if index is not None], total


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Least total cost of merging files two at a time into one."""
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total
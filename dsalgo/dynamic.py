"""Dynamic programming: 0/1 knapsack, subset sums, LCS and travelling salesman."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain, pairwise, permutations


def knapsack_01(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Largest total profit of items whose total weight fits in ``capacity``.

    Each item is taken whole or not at all. A capacity of zero or less, or no
    items, gives a profit of 0.
    """
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if capacity <= 0 or not profits:
        return 0
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for profit, weight in zip(profits, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + profit)
    return best[capacity]


def subset_sum(values: Sequence[int], target: int) -> bool:
    """Whether some subset of ``values`` (each used at most once) sums to ``target``."""
    if target < 0 or any(value < 0 for value in values):
        raise ValueError("values and target must not be negative")
    mask = (1 << (target + 1)) - 1
    reachable = 1
    for value in values:
        reachable = (reachable | (reachable << value)) & mask
    return bool((reachable >> target) & 1)


def can_partition(values: Sequence[int]) -> bool:
    """Whether ``values`` splits into two parts of equal sum."""
    total = sum(values)
    if total % 2:
        return False
    return subset_sum(values, total // 2)


def _lcs_table(first: Sequence, second: Sequence) -> list[list[int]]:
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, left in enumerate(first, start=1):
        for j, right in enumerate(second, start=1):
            if left == right:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def lcs_length(first: Sequence, second: Sequence) -> int:
    """Length of the longest common subsequence of two sequences."""
    return _lcs_table(first, second)[len(first)][len(second)]


def longest_common_subsequence(first: str, second: str) -> str:
    """One longest common subsequence of two strings."""
    table = _lcs_table(first, second)
    picked: list[str] = []
    i, j = len(first), len(second)
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def min_insertions_for_palindrome(text: str) -> int:
    """Fewest characters to insert into ``text`` to make it a palindrome."""
    return len(text) - lcs_length(text, text[::-1])


def travelling_salesman(graph: Sequence[Sequence[int]], source: int) -> int:
    """Cost of the cheapest tour from ``source`` through every vertex and back.

    Every ordering of the other vertices is tried, so this is O(n!).
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square matrix")
    if not 0 <= source < size:
        raise IndexError(f"source {source} is outside 0..{size - 1}")
    others = [vertex for vertex in range(size) if vertex != source]
    return min(
        sum(graph[u][v] for u, v in pairwise(chain((source,), order, (source,))))
        for order in permutations(others)
    )
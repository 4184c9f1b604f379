"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable, Mapping, Sequence
from itertools import count


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, float]], source: int
) -> list[float]:
    """Shortest distance from ``source`` to each vertex over directed weighted edges.

    Unreachable vertices get ``math.inf``. Raises NegativeCycleError when a
    negative cycle is reachable from ``source``.
    """
    if not 0 <= source < vertex_count:
        raise IndexError(f"source {source} is outside 0..{vertex_count - 1}")
    edge_list = list(edges)
    for first, second, _ in edge_list:
        for vertex in (first, second):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} is outside 0..{vertex_count - 1}")
    distance = [math.inf] * vertex_count
    distance[source] = 0
    for _ in range(vertex_count - 1):
        updated = False
        for first, second, weight in edge_list:
            if distance[first] != math.inf and distance[first] + weight < distance[second]:
                distance[second] = distance[first] + weight
                updated = True
        if not updated:
            return distance
    for first, second, weight in edge_list:
        if distance[first] != math.inf and distance[first] + weight < distance[second]:
            raise NegativeCycleError("graph has a negative-weight cycle")
    return distance


def dijkstra(
    adjacency: Mapping[Hashable, Sequence[tuple[Hashable, float]]], source: Hashable
) -> dict[Hashable, float]:
    """Shortest distance from ``source`` to every node, by Dijkstra's algorithm.

    ``adjacency`` maps a node to ``(neighbour, weight)`` pairs. Every node that
    appears in the graph is in the result; unreachable ones get ``math.inf``.
    """
    distance: dict[Hashable, float] = {node: math.inf for node in adjacency}
    for neighbours in adjacency.values():
        for neighbour, weight in neighbours:
            if weight < 0:
                raise ValueError("edge weights must not be negative")
            distance.setdefault(neighbour, math.inf)
    distance[source] = 0
    tie_breaker = count(1)
    heap: list[tuple[float, int, Hashable]] = [(0, 0, source)]
    while heap:
        dist, _, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for neighbour, weight in adjacency.get(node, ()):
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, next(tie_breaker), neighbour))
    return distance


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a weight matrix; ``math.inf`` marks no edge.

    The input is left untouched.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    distance = [list(row) for row in matrix]
    for k in range(size):
        row_k = distance[k]
        for row_i in distance:
            through = row_i[k]
            for j in range(size):
                if row_i[j] > through + row_k[j]:
                    row_i[j] = through + row_k[j]
    return distance
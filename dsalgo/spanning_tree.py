"""Minimum spanning tree weights by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from dsalgo.disjoint_set import UnionFind


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def kruskal_weight(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning forest of an undirected graph.

    ``edges`` holds ``(first, second, weight)`` triples over vertices
    ``0..vertex_count-1``. Edges are taken lightest first whenever they join
    two different components.
    """
    forest = UnionFind(vertex_count)
    total = 0
    for first, second, weight in sorted(edges, key=lambda edge: edge[2]):
        if forest.union(first, second):
            total += weight
    return total


def prim_weight(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning tree grown from vertex 0.

    ``edges`` holds ``(first, second, weight)`` triples over vertices
    ``0..vertex_count-1``. Only the component holding vertex 0 is spanned.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for first, second, weight in edges:
        _check_vertex(first, vertex_count)
        _check_vertex(second, vertex_count)
        adjacency[first].append((second, weight))
        adjacency[second].append((first, weight))
    if vertex_count == 0:
        return 0
    visited = [False] * vertex_count
    heap: list[tuple[int, int]] = [(0, 0)]
    total = 0
    while heap:
        weight, vertex = heapq.heappop(heap)
        if visited[vertex]:
            continue
        visited[vertex] = True
        total += weight
        for neighbour, edge_weight in adjacency[vertex]:
            if not visited[neighbour]:
                heapq.heappush(heap, (edge_weight, neighbour))
    return total
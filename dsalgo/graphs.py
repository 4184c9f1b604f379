"""Undirected graphs: traversals, articulation points, greedy colouring and bipartiteness."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from itertools import count


class Graph:
    """An undirected graph kept as adjacency lists in insertion order."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, first: Hashable, second: Hashable) -> None:
        """Connect ``first`` and ``second`` in both directions."""
        self._adjacency.setdefault(first, []).append(second)
        self._adjacency.setdefault(second, []).append(first)

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Neighbours of ``node`` in the order their edges were added."""
        return list(self._adjacency.get(node, ()))

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Nodes reachable from ``source`` in breadth-first order."""
        visited = {source}
        queue = deque([source])
        order: list[Hashable] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adjacency.get(node, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, source: Hashable) -> list[Hashable]:
        """Nodes reachable from ``source`` in depth-first (preorder) order."""
        order = [source]
        visited = {source}
        stack = [iter(self._adjacency.get(source, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        return order


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def _adjacency_lists(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    lists: list[list[int]] = [[] for _ in range(vertex_count)]
    for first, second in edges:
        _check_vertex(first, vertex_count)
        _check_vertex(second, vertex_count)
        lists[first].append(second)
        lists[second].append(first)
    return lists


def articulation_points(adjacency: Mapping[int, Sequence[int]], vertex_count: int) -> list[int]:
    """Vertices whose removal disconnects their component, by Tarjan's algorithm.

    ``adjacency`` maps a vertex to its neighbours; vertices are ``0..vertex_count-1``.
    """
    discovery = [-1] * vertex_count
    low = [-1] * vertex_count
    parent = [-1] * vertex_count
    is_point = [False] * vertex_count
    timer = 0

    def visit(u: int) -> None:
        nonlocal timer
        discovery[u] = low[u] = timer
        timer += 1
        children = 0
        for v in adjacency.get(u, ()):
            _check_vertex(v, vertex_count)
            if discovery[v] == -1:
                children += 1
                parent[v] = u
                visit(v)
                low[u] = min(low[u], low[v])
                if parent[u] == -1 and children > 1:
                    is_point[u] = True
                if parent[u] != -1 and low[v] >= discovery[u]:
                    is_point[u] = True
            elif v != parent[u]:
                low[u] = min(low[u], discovery[v])

    for vertex in range(vertex_count):
        if discovery[vertex] == -1:
            visit(vertex)
    return [vertex for vertex, flagged in enumerate(is_point) if flagged]


def greedy_coloring(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Colour vertices in index order with the lowest colour free among their neighbours.

    Returns the number of colours used and the colour of each vertex.
    """
    graph = _adjacency_lists(vertex_count, edges)
    colors = [-1] * vertex_count
    for vertex in range(vertex_count):
        taken = {colors[neighbour] for neighbour in graph[vertex] if colors[neighbour] != -1}
        colors[vertex] = next(color for color in count() if color not in taken)
    return (max(colors) + 1 if colors else 0), colors


def is_bipartite(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the graph can be coloured with two colours, adjacent vertices differing."""
    graph = _adjacency_lists(vertex_count, edges)
    colors = [-1] * vertex_count
    for start in range(vertex_count):
        if colors[start] != -1:
            continue
        colors[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in graph[node]:
                if colors[neighbour] == -1:
                    colors[neighbour] = 1 - colors[node]
                    queue.append(neighbour)
                elif colors[neighbour] == colors[node]:
                    return False
    return True
"""Maximum flow by Ford-Fulkerson with breadth-first augmenting paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FlowResult:
    """Maximum flow, the augmenting paths used, and the final residual graph."""

    max_flow: int
    paths: list[list[int]]
    residual: list[list[int]]


def _augmenting_path(
    residual: list[list[int]], source: int, sink: int
) -> tuple[int, list[int]] | None:
    """Bottleneck and parent links of a shortest path with spare capacity."""
    size = len(residual)
    parent = [-1] * size
    parent[source] = source
    queue: deque[tuple[int, float]] = deque([(source, float("inf"))])
    while queue:
        node, capacity = queue.popleft()
        for dest in range(size):
            if dest != node and parent[dest] == -1 and residual[node][dest] > 0:
                parent[dest] = node
                bottleneck = min(capacity, residual[node][dest])
                if dest == sink:
                    return int(bottleneck), parent
                queue.append((dest, bottleneck))
    return None


def ford_fulkerson(capacity: Sequence[Sequence[int]], source: int, sink: int) -> FlowResult:
    """Maximum flow from ``source`` to ``sink`` in a capacity matrix."""
    size = len(capacity)
    if any(len(row) != size for row in capacity):
        raise ValueError("capacity must be a square matrix")
    for node in (source, sink):
        if not 0 <= node < size:
            raise IndexError(f"node {node} is outside 0..{size - 1}")
    residual = [list(row) for row in capacity]
    paths: list[list[int]] = []
    max_flow = 0
    while (found := _augmenting_path(residual, source, sink)) is not None:
        bottleneck, parent = found
        max_flow += bottleneck
        path = [sink]
        node = sink
        while node != source:
            previous = parent[node]
            residual[node][previous] += bottleneck
            residual[previous][node] -= bottleneck
            node = previous
            path.append(node)
        path.reverse()
        paths.append(path)
    return FlowResult(max_flow, paths, residual)
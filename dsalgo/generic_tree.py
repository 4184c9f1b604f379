"""N-ary trees built from a preorder encoding in which -1 closes the current node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

END_OF_CHILDREN = -1


@dataclass
class GenericNode:
    """A tree node with any number of ordered children."""

    data: int
    children: list[GenericNode] = field(default_factory=list)


def build_generic_tree(encoding: Iterable[int]) -> GenericNode | None:
    """Build a tree from a preorder list where -1 ends the node opened last.

    Returns None for an encoding without nodes.
    """
    root: GenericNode | None = None
    stack: list[GenericNode] = []
    for value in encoding:
        if value == END_OF_CHILDREN:
            if not stack:
                raise ValueError("encoding closes more nodes than it opens")
            stack.pop()
            continue
        node = GenericNode(value)
        if stack:
            stack[-1].children.append(node)
        else:
            root = node
        stack.append(node)
    return root


def describe(root: GenericNode) -> Iterator[str]:
    """Yield one line per node in preorder, as ``data->child, child, .``."""
    children = "".join(f"{child.data}, " for child in root.children)
    yield f"{root.data}->{children}."
    for child in root.children:
        yield from describe(child)


def generic_diameter(root: GenericNode) -> int:
    """Number of edges on the longest path between any two nodes of the tree."""
    best = 0

    def height(node: GenericNode) -> int:
        nonlocal best
        tallest = second = -1
        for child in node.children:
            child_height = height(child)
            if child_height >= tallest:
                second, tallest = tallest, child_height
            elif child_height >= second:
                second = child_height
        best = max(best, tallest + second + 2)
        return tallest + 1

    height(root)
    return best


def node_to_root_path(root: GenericNode, key: int) -> list[int]:
    """Values from the node holding ``key`` up to the root; empty if absent."""
    if root.data == key:
        return [root.data]
    for child in root.children:
        path = node_to_root_path(child, key)
        if path:
            path.append(root.data)
            return path
    return []


def distance_between(root: GenericNode, first: int, second: int) -> int:
    """Number of edges between the nodes holding ``first`` and ``second``."""
    first_path = node_to_root_path(root, first)
    second_path = node_to_root_path(root, second)
    if not first_path or not second_path:
        missing = first if not first_path else second
        raise ValueError(f"{missing} is not in the tree")
    i, j = len(first_path) - 1, len(second_path) - 1
    while i >= 0 and j >= 0 and first_path[i] == second_path[j]:
        i -= 1
        j -= 1
    return (i + 1) + (j + 1)
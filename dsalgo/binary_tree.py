"""Binary trees: search-tree insertion, traversals, height, diameter and largest BST subtree."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def bst_insert(root: TreeNode | None, value: Any, allow_duplicates: bool = False) -> TreeNode:
    """Insert ``value`` into the search tree at ``root`` and return the root.

    Smaller values go left and larger ones right. A value equal to one already
    present is dropped, or placed to the right when ``allow_duplicates`` is true.
    """
    new_node = TreeNode(value)
    if root is None:
        return new_node
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        elif value > node.value or allow_duplicates:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right
        else:
            return root


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def level_order(root: TreeNode | None) -> list[Any]:
    """Values level by level from the root, each level from left to right."""
    if root is None:
        return []
    order: list[Any] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        order.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return order


def morris_inorder(root: TreeNode | None) -> list[Any]:
    """In-order values found without recursion or a stack, by threading the tree.

    The temporary links are removed again, so the tree ends up unchanged.
    """
    order: list[Any] = []
    current = root
    while current is not None:
        if current.left is None:
            order.append(current.value)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            order.append(current.value)
            current = current.right
    return order


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _height_and_diameter(node: TreeNode | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(node.left)
    right_height, right_diameter = _height_and_diameter(node.right)
    return (
        max(left_height, right_height) + 1,
        max(left_diameter, right_diameter, left_height + right_height),
    )


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def build_level_order(values: Sequence[Any]) -> TreeNode | None:
    """Build a tree from values given level by level, None marking a missing child.

    The first value is the root; each node then takes the next two values as
    its left and right children. Missing trailing values count as None.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def build_preorder(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from a preorder listing in which None marks an empty subtree."""
    items = iter(values)

    def build() -> TreeNode | None:
        value = next(items, None)
        if value is None:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _bst_summary(node: TreeNode | None) -> tuple[bool, float, float, TreeNode | None, int]:
    """Whether the subtree is a BST, its min and max, and its largest BST subtree."""
    if node is None:
        return True, math.inf, -math.inf, None, 0
    left_ok, left_min, left_max, left_root, left_size = _bst_summary(node.left)
    right_ok, right_min, right_max, right_root, right_size = _bst_summary(node.right)
    lowest = min(node.value, left_min, right_min)
    highest = max(node.value, left_max, right_max)
    if left_ok and right_ok and left_max < node.value < right_min:
        return True, lowest, highest, node, left_size + right_size + 1
    if left_size > right_size:
        return False, lowest, highest, left_root, left_size
    return False, lowest, highest, right_root, right_size


def largest_bst(root: TreeNode | None) -> tuple[TreeNode | None, int]:
    """Root and node count of the largest subtree that is a binary search tree."""
    _, _, _, best_root, best_size = _bst_summary(root)
    return best_root, best_size


class BinarySearchTree:
    """A binary search tree of distinct values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value``; a value already present is ignored."""
        self.root = bst_insert(self.root, value)

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        """Values in ascending order."""
        return _inorder(self.root)
"""A self-balancing AVL search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, key: Any) -> tuple[_Node, bool]:
    if node is None:
        return _Node(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False
    return _rebalance(node), added


def _delete(node: _Node | None, key: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = _delete(node.left, key)
    elif key > node.key:
        node.right, removed = _delete(node.right, key)
    else:
        removed = True
        if node.left is None or node.right is None:
            return node.left or node.right, True
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right, _ = _delete(node.right, successor.key)
    return _rebalance(node), removed


def _preorder(node: _Node | None) -> Iterator[Any]:
    while node is not None:
        yield node.key
        yield from _preorder(node.left)
        node = node.right


class AVLTree:
    """A binary search tree kept height-balanced on insertion and deletion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def insert(self, key: Any) -> bool:
        """Add ``key``; returns False if it was already present."""
        self._root, added = _insert(self._root, key)
        self._size += added
        return added

    def delete(self, key: Any) -> bool:
        """Remove ``key``; returns False if it was not present."""
        self._root, removed = _delete(self._root, key)
        self._size -= removed
        return removed

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def preorder(self) -> list[Any]:
        """Keys in root, left, right order."""
        return list(_preorder(self._root))
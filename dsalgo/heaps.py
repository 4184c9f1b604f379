"""Binary max-heaps on lists: heapify, heap sort, a max-heap class and k largest."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def heapify(values: list[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items to restore a max-heap."""
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return the array representation of a max-heap holding ``values``."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        heapify(items, size, index)
    return items


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending with heap sort."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items


class MaxHeap:
    """A max-heap supporting insertion and removal of the root."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = build_max_heap(values)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, key: Any) -> None:
        """Insert ``key``, sifting it up to its place."""
        items = self._items
        items.append(key)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop_root(self) -> Any:
        """Remove and return the largest key."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            heapify(self._items, len(self._items), 0)
        return root

    def to_list(self) -> list[Any]:
        """The heap's array representation."""
        return list(self._items)


def k_largest(values: Iterable[Any], k: int) -> list[Any]:
    """The ``k`` largest values, largest first."""
    if k <= 0:
        return []
    return heapq.nlargest(k, values)
"""Searching in sequences: binary search with bounds, linear search and jump search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from math import isqrt
from typing import Any


def lower_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element not less than ``key`` in a sorted sequence."""
    return bisect_left(values, key)


def upper_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element greater than ``key`` in a sorted sequence."""
    return bisect_right(values, key)


def binary_search(values: Sequence[Any], key: Any) -> bool:
    """Whether ``key`` occurs in the sorted sequence."""
    index = lower_bound(values, key)
    return index < len(values) and values[index] == key


def count_occurrences(values: Sequence[Any], key: Any) -> int:
    """How many times ``key`` occurs in the sorted sequence."""
    return upper_bound(values, key) - lower_bound(values, key)


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Index of the first element equal to ``key``, or None if there is none."""
    return next((index for index, value in enumerate(values) if value == key), None)


def jump_search(values: Sequence[Any], key: Any) -> int | None:
    """Index of ``key`` in a sorted sequence found by jumping in blocks of sqrt(n).

    Returns None when ``key`` is absent.
    """
    size = len(values)
    if size == 0:
        return None
    step = isqrt(size)
    previous = 0
    block_end = step
    while values[min(block_end, size) - 1] < key:
        previous = block_end
        block_end += step
        if previous >= size:
            return None
    while values[previous] < key:
        previous += 1
        if previous == min(block_end, size):
            return None
    return previous if values[previous] == key else None
"""Segregating even and odd values around the first one."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def segregate_even_odd(values: Iterable[int]) -> list[int]:
    """Arrange values so that later evens come first and later odds last.

    The first value stays as the pivot. Each following even value is put at
    the front and each following odd value at the back, in the order they come.
    """
    items = iter(values)
    result: deque[int] = deque()
    for first in items:
        result.append(first)
        break
    for value in items:
        if value % 2 == 0:
            result.appendleft(value)
        else:
            result.append(value)
    return list(result)
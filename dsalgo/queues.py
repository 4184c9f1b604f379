"""Reversing FIFO queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def reverse_queue(queue: Iterable[T]) -> deque[T]:
    """Return a new queue holding the items in reverse order, using a stack."""
    stack = list(queue)
    reversed_queue: deque[T] = deque()
    while stack:
        reversed_queue.append(stack.pop())
    return reversed_queue


def reverse_queue_recursive(queue: deque[T]) -> None:
    """Reverse ``queue`` in place by recursion."""
    if not queue:
        return
    front = queue.popleft()
    reverse_queue_recursive(queue)
    queue.append(front)
"""A singly linked list with positional insert and delete, reversal and middle lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class ListNode:
    """One node of a singly linked list."""

    value: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self._size = 0
        tail: ListNode | None = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        self.head = ListNode(value, self.head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
        else:
            current = self.head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1

    def _node_at(self, position: int) -> ListNode:
        node = self.head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} is outside 1..{self._size + 1}")
        if position == 1:
            self.push_front(value)
            return
        previous = self._node_at(position - 1)
        previous.next = ListNode(value, previous.next)
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        if position == 1:
            assert self.head is not None
            removed = self.head
            self.head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        self._size -= 1
        return removed.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: ListNode | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def _middle_node(self) -> ListNode:
        if self.head is None:
            raise IndexError("an empty list has no middle")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            assert slow is not None
            slow = slow.next
            fast = fast.next.next
        assert slow is not None
        return slow

    def middle(self) -> Any:
        """Value of the middle node; of two middle nodes, the second."""
        return self._middle_node().value

    def is_palindrome(self) -> bool:
        """Whether the values read the same forwards and backwards."""
        if self.head is None:
            return True
        node: ListNode | None = self._middle_node()
        stack: list[Any] = []
        while node is not None:
            stack.append(node.value)
            node = node.next
        front: ListNode | None = self.head
        while stack:
            assert front is not None
            if front.value != stack.pop():
                return False
            front = front.next
        return True
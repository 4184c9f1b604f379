"""Infix-to-postfix conversion and a fixed-capacity stack."""

from __future__ import annotations

from typing import Any

OPERATORS = "+-*/^"


def precedence(symbol: str) -> int:
    """Binding strength of an operator; '(' is 0 and unknown symbols are -1."""
    if symbol == "(":
        return 0
    if symbol in ("+", "-"):
        return 1
    if symbol in ("*", "/"):
        return 2
    if symbol == "^":
        return 3
    return -1


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence, '^' included, associate to the left.
    Whitespace is ignored.
    """
    stack: list[str] = []
    result: list[str] = []
    for symbol in expression:
        if symbol.isspace():
            continue
        if _is_operand(symbol):
            result.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                result.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        elif symbol in OPERATORS:
            while stack and precedence(symbol) <= precedence(stack[-1]):
                result.append(stack.pop())
            stack.append(symbol)
        else:
            raise ValueError(f"unexpected symbol {symbol!r} in expression")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unbalanced '(' in expression")
        result.append(top)
    return "".join(result)


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> None:
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]
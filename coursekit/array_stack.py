"""A stack of integers stored in a fixed-capacity array."""

from __future__ import annotations

from collections.abc import Sequence


class ArrayStack:
    """A last-in, first-out stack with a fixed capacity."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._elements: list[int] = []

    def push(self, value: int) -> None:
        """Put value on top of the stack."""
        if len(self._elements) >= self._capacity:
            raise OverflowError("stack is full")
        self._elements.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._elements:
            raise IndexError("pop from an empty stack")
        return self._elements.pop()

    def top(self) -> int:
        """Return the top value, or -1 when the stack is empty."""
        if not self._elements:
            return -1
        return self._elements[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)


def main(argv: Sequence[str] | None = None) -> int:
    """Push two values, pop one and show what remains."""
    stack = ArrayStack()
    stack.push(10)
    stack.push(20)
    popped = stack.pop()
    print(f"after poping the first element:{popped}")
    print(f"the remaining element is:{stack.top()}")
    return 0
"""A sequence container with a fixed capacity chosen at construction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any

_NO_FILL = object()


class BoundedVector:
    """A growable sequence that refuses to hold more than its capacity."""

    def __init__(self, capacity: int = 10, fill: Any = _NO_FILL) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = [] if fill is _NO_FILL else [fill] * capacity

    # Element access

    def at(self, index: int) -> Any:
        """Return the element at a non-negative index, checking bounds."""
        if not 0 <= index < len(self._items):
            raise IndexError("Out of bounds!")
        return self._items[index]

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("front of an empty vector")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("back of an empty vector")
        return self._items[-1]

    def _normalise(self, index: int) -> int:
        size = len(self._items)
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise IndexError("Out of bounds!")
        return position

    def __getitem__(self, index: int) -> Any:
        return self._items[self._normalise(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._normalise(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedVector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    # Capacity

    def is_empty(self) -> bool:
        """Return True when the vector holds no elements."""
        return not self._items

    def capacity(self) -> int:
        """Return the maximum number of elements the vector can hold."""
        return self._capacity

    def reserve(self, n: int) -> None:
        """Raise the capacity to n if n exceeds it; otherwise do nothing."""
        if n > self._capacity:
            self._capacity = n

    # Modifiers

    def _require_room(self) -> None:
        if len(self._items) >= self._capacity:
            raise OverflowError("Exceeded maximum capacity!")

    def insert(self, index: int, value: Any) -> int:
        """Insert value before position index (0..len) and return index."""
        self._require_room()
        if not 0 <= index <= len(self._items):
            raise IndexError("Out of bounds!")
        self._items.insert(index, value)
        return index

    def erase(self, index: int) -> int:
        """Remove the element at index and return the index that follows it."""
        if not 0 <= index < len(self._items):
            raise IndexError("Out of bounds!")
        del self._items[index]
        return index

    def append(self, value: Any) -> None:
        """Add value at the end."""
        self._require_room()
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from an empty vector")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def swap_elements(self, items: MutableSequence[Any]) -> None:
        """Exchange contents with a mutable sequence of the same length."""
        if len(items) != len(self._items):
            raise ValueError("Can't swap vector with a range of different size")
        theirs = list(items)
        for position, value in enumerate(self._items):
            items[position] = value
        self._items[:] = theirs

    def copy(self) -> BoundedVector:
        """Return an independent vector with the same capacity and elements."""
        duplicate = BoundedVector(self._capacity)
        duplicate._items = list(self._items)
        return duplicate

    # Operators

    def __iadd__(self, other: Any) -> BoundedVector:
        values: Iterable[Any] = list(other) if isinstance(other, BoundedVector) else [other]
        for value in values:
            self.append(value)
        return self

    def __add__(self, other: Any) -> BoundedVector:
        result = self.copy()
        result += other
        return result

    def __radd__(self, other: Any) -> BoundedVector:
        result = self.copy()
        result.append(other)
        return result

    def __str__(self) -> str:
        return "".join(f"{value} " for value in self._items) + "\n"

    def __repr__(self) -> str:
        return f"BoundedVector(capacity={self._capacity}, items={self._items!r})"
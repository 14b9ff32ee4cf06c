"""Track the median of a stream of values as they arrive."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterable
from typing import Any


class StreamingMedianTracker:
    """Keep inserted elements ordered by a key and report the median.

    Elements that compare equal are placed before those already present.
    For an even number of elements the larger of the two middle ones
    is the median.
    """

    def __init__(self, key: Callable[[Any], Any] | None = None) -> None:
        self._key = key
        self._elems: list[Any] = []

    def insert(self, element: Any) -> None:
        """Insert one element, keeping the elements ordered."""
        if self._key is None:
            position = bisect.bisect_left(self._elems, element)
        else:
            position = bisect.bisect_left(
                self._elems, self._key(element), key=self._key
            )
        self._elems.insert(position, element)

    def extend(self, elements: Iterable[Any]) -> None:
        """Insert every element of an iterable."""
        for element in elements:
            self.insert(element)

    def median(self) -> Any:
        """Return the median element; raise IndexError if nothing was inserted."""
        if not self._elems:
            raise IndexError("median of an empty tracker")
        return self._elems[len(self._elems) // 2]

    def __len__(self) -> int:
        return len(self._elems)
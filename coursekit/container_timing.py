"""Time how fast sequence containers grow and are written to."""

from __future__ import annotations

import argparse
import time
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def time_append(factory: Callable[[], Any], n: int) -> float:
    """Append 0..n-1 to a fresh container; return the milliseconds taken."""
    container = factory()
    start = time.perf_counter()
    for value in range(n):
        container.append(value)
    return _elapsed_ms(start)


def time_prepend(factory: Callable[[], Any], n: int) -> float:
    """Put 0..n-1 at the front of a fresh container; return milliseconds taken.

    Containers with appendleft use it; others insert at position 0.
    """
    container = factory()
    prepend = getattr(container, "appendleft", None)
    if prepend is None:
        def prepend(value: Any) -> None:
            container.insert(0, value)
    start = time.perf_counter()
    for value in range(n):
        prepend(value)
    return _elapsed_ms(start)


def time_index_assign(factory: Callable[[Iterable[int]], Any], n: int) -> float:
    """Assign position i the value i in a container built from n zeros.

    The factory receives the initial contents; returns milliseconds taken.
    """
    container = factory([0] * n)
    start = time.perf_counter()
    for index in range(n):
        container[index] = index
    return _elapsed_ms(start)


def sizes(start: int, iterations: int) -> list[int]:
    """Return iterations sizes beginning at start, each double the last."""
    if start < 0 or iterations < 0:
        raise ValueError("start and iterations must not be negative")
    return [start * 2**step for step in range(iterations)]


def run_benchmark(
    measure: Callable[[int], float], start: int, iterations: int
) -> list[float]:
    """Return measure(n) for each size in sizes(start, iterations)."""
    return [measure(n) for n in sizes(start, iterations)]


def format_series(values: Iterable[float]) -> str:
    """Render values as '{v1 v2 ... }'."""
    return "{" + "".join(f"{value:g} " for value in values) + "}"


_EXPERIMENTS: dict[str, tuple[int, Callable[[int], float], Callable[[int], float]]] = {
    "insertion": (
        10,
        lambda n: time_append(list, n),
        lambda n: time_prepend(list, n),
    ),
    "deque": (
        14,
        lambda n: time_append(deque, n),
        lambda n: time_prepend(deque, n),
    ),
    "access": (
        20,
        lambda n: time_index_assign(list, n),
        lambda n: time_index_assign(deque, n),
    ),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one container experiment and print both timing series."""
    parser = argparse.ArgumentParser(prog="coursekit-timing")
    parser.add_argument("experiment", choices=sorted(_EXPERIMENTS), nargs="?", default="insertion")
    parser.add_argument("--start", type=int, default=500)
    parser.add_argument("--iterations", type=int, default=None)
    args = parser.parse_args(argv)

    default_iterations, first, second = _EXPERIMENTS[args.experiment]
    iterations = args.iterations if args.iterations is not None else default_iterations
    first_series: list[float] = []
    second_series: list[float] = []
    for step, n in enumerate(sizes(args.start, iterations)):
        print(f"{100.0 * step / iterations:g}% complete")
        first_series.append(first(n))
        second_series.append(second(n))
    print(format_series(first_series))
    print(format_series(second_series))
    return 0
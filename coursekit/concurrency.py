"""Threads that greet, agents that sell tickets, and a shared pointer."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TextIO


class Counter:
    """A thread-safe count that can be raised, lowered and reset."""

    def __init__(self) -> None:
        self._count = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        """Add one to the count."""
        with self._lock:
            self._count += 1

    def decrement(self) -> None:
        """Take one from the count."""
        with self._lock:
            self._count -= 1

    def reset(self) -> None:
        """Set the count back to zero."""
        with self._lock:
            self._count = 0

    def value(self) -> int:
        """Return the current count."""
        with self._lock:
            return self._count

    def __str__(self) -> str:
        return f"Counter val: {self.value()}\n"


class SharedPointer:
    """A handle to a value whose owners share a single use count.

    A pointer to None is a null pointer and is never counted.
    """

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self._count = Counter()
        if value is not None:
            self._count.increment()

    def copy(self) -> SharedPointer:
        """Return another owner of the same value, sharing the count."""
        other = SharedPointer()
        other._value = self._value
        other._count = self._count
        if self._value is not None:
            self._count.increment()
        return other

    def release(self) -> None:
        """Give up ownership; this handle becomes a null pointer."""
        if self._value is not None:
            self._count.decrement()
            self._value = None

    def get(self) -> Any:
        """Return the value pointed at; raise ValueError for a null pointer."""
        if self._value is None:
            raise ValueError("dereferencing a null pointer")
        return self._value

    def use_count(self) -> int:
        """Return how many owners the value currently has."""
        return self._count.value()

    def __enter__(self) -> SharedPointer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __str__(self) -> str:
        return f"Value pointed at: {self.get()}\n{self._count}\n"


class StreamLocks:
    """One lock per output stream, so whole messages are written at once.

    Locking the standard error stream locks standard output instead.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Any, threading.Lock] = {}

    def _lock_for(self, stream: TextIO) -> threading.Lock:
        target = sys.stdout if stream is sys.stderr else stream
        with self._guard:
            lock = self._locks.get(target)
            if lock is None:
                lock = self._locks[target] = threading.Lock()
            return lock

    @contextmanager
    def locked(self, stream: TextIO) -> Iterator[TextIO]:
        """Hold the lock of stream for the duration of the block."""
        lock = self._lock_for(stream)
        with lock:
            yield stream


_STREAM_LOCKS = StreamLocks()


def _say(out: TextIO, message: str) -> None:
    with _STREAM_LOCKS.locked(out):
        out.write(message + "\n")
        out.flush()


def greet_all(num_threads: int = 5, out: TextIO | None = None) -> None:
    """Start num_threads threads that each introduce themselves, then wait."""
    stream = out if out is not None else sys.stdout
    _say(stream, "Greetings from threads...")
    threads = [
        threading.Thread(target=_say, args=(stream, f"Hello my name is {ident}"))
        for ident in range(num_threads)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    _say(stream, "All greetings done!")


def sell_tickets(
    num_tickets: int = 100,
    num_agents: int = 10,
    delay: float = 0.01,
    out: TextIO | None = None,
) -> int:
    """Let num_agents threads sell num_tickets tickets; return how many remain."""
    stream = out if out is not None else sys.stdout
    remaining = num_tickets
    tickets_lock = threading.Lock()

    def agent(ident: int) -> None:
        nonlocal remaining
        while True:
            time.sleep(delay)
            with tickets_lock:
                if remaining <= 0:
                    return
                remaining -= 1
                _say(
                    stream,
                    f"Agent #{ident} sold a ticket! ({remaining} more to be sold).",
                )

    threads = [threading.Thread(target=agent, args=(ident,)) for ident in range(num_agents)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    _say(stream, "All tickets sold!")
    _say(stream, f"Tickets remaining: {remaining}")
    return remaining
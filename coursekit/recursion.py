"""Small recursive and generic routines: factorial, palindromes, N queens."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n in (0, 1):
        return 1
    return n * factorial(n - 1)


def mystery(n: int) -> int:
    """Return n with every decimal digit written twice."""
    if n < 10:
        return 10 * n + n
    return 100 * mystery(n // 10) + mystery(n % 10)


def is_palindrome(s: str) -> bool:
    """Return True when s reads the same forwards and backwards."""
    if len(s) <= 1:
        return True
    return s[0] == s[-1] and is_palindrome(s[1:-1])


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens on an n-by-n board.

    Queens are placed column by column, trying rows from the top, and each
    board is a list of row strings using 'Q' and '.'.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    queen_rows: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def render() -> list[str]:
        board = [["."] * n for _ in range(n)]
        for col, row in enumerate(queen_rows):
            board[row][col] = "Q"
        return ["".join(row) for row in board]

    def place(col: int) -> None:
        if col == n:
            solutions.append(render())
            return
        for row in range(n):
            if row in used_rows or row - col in used_diagonals or row + col in used_antidiagonals:
                continue
            queen_rows.append(row)
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_antidiagonals.add(row + col)
            place(col + 1)
            queen_rows.pop()
            used_rows.discard(row)
            used_diagonals.discard(row - col)
            used_antidiagonals.discard(row + col)

    place(0)
    return solutions


def my_min(first: Any, *args: Any) -> Any:
    """Return the smallest argument; among equals the last one wins."""
    result = args[-1] if args else first
    for value in reversed((first, *args[:-1]) if args else ()):
        if value < result:
            result = value
    return result


def count_occurrences(items: Iterable[Any], value: Any) -> int:
    """Count how many items equal value."""
    return sum(1 for item in items if item == value)


def count_if(items: Iterable[Any], predicate: Callable[[Any], bool]) -> int:
    """Count how many items satisfy predicate."""
    return sum(1 for item in items if predicate(item))


def _ask(value: str | None, prompt: str) -> str:
    if value is not None:
        return value
    print(prompt)
    return input().strip()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the recursive exercises from the command line."""
    parser = argparse.ArgumentParser(prog="coursekit-recursion")
    commands = parser.add_subparsers(dest="command", required=True)
    for name in ("queens", "mystery", "palindrome", "factorial"):
        sub = commands.add_parser(name)
        sub.add_argument("value", nargs="?")
    args = parser.parse_args(argv)

    if args.command == "queens":
        n = int(_ask(args.value, "please insert the dim of the board:"))
        solutions = solve_n_queens(n)
        for board in solutions:
            for row in board:
                print(row)
            print()
        print(f"there are {len(solutions)} solutions.")
    elif args.command == "mystery":
        print(mystery(int(_ask(args.value, "Please enter your test string:"))))
    elif args.command == "palindrome":
        print(int(is_palindrome(_ask(args.value, "Please enter your test string:"))))
    else:
        print(factorial(int(_ask(args.value, "Please enter a number:"))))
    return 0
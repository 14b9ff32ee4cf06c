import math

import pytest

from coursekit.recursion import (
    count_if,
    count_occurrences,
    factorial,
    is_palindrome,
    main,
    my_min,
    mystery,
    solve_n_queens,
)


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


@pytest.mark.parametrize("n", range(2, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_mystery_doubles_digits():
    assert mystery(348) == 334488


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, 0),
        (7, 77),
        (10, 1100),
        (905, 990055),
        (123456, 112233445566),
    ],
)
def test_mystery_repeats_each_digit(n, expected):
    assert mystery(n) == expected


@pytest.mark.parametrize("word", ["", "a", "racecar", "abba", "noon"])
def test_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["ab", "abca", "hello"])
def test_not_palindromes(word):
    assert is_palindrome(word) is False


def test_queens_small_boards():
    assert solve_n_queens(1) == [["Q"]]
    assert solve_n_queens(2) == []
    assert solve_n_queens(3) == []


def test_queens_eight_count():
    assert len(solve_n_queens(8)) == 92


@pytest.mark.parametrize("n", [4, 5, 6])
def test_queens_are_non_attacking(n):
    solutions = solve_n_queens(n)
    assert solutions
    for board in solutions:
        assert len(board) == n
        queens = [(r, c) for r, row in enumerate(board) for c, ch in enumerate(row) if ch == "Q"]
        assert len(queens) == n
        assert len({r for r, _ in queens}) == n
        assert len({c for _, c in queens}) == n
        assert len({r - c for r, c in queens}) == n
        assert len({r + c for r, c in queens}) == n
    assert len({tuple(b) for b in solutions}) == len(solutions)


def test_my_min():
    assert my_min(3, 4, 5, 6, 2) == 2
    assert my_min(9) == 9


def test_my_min_keeps_last_of_equals():
    a, b = [1], [1]
    assert my_min(a, b) is b


def test_count_occurrences_examples():
    vec = [5, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 5]
    lst = [4.7, 3, 4, 3.7, 4.7, 2.9, 4.7]
    assert count_occurrences(vec, 3) == 10
    assert count_occurrences(lst, 4.7) == 3
    assert count_occurrences("Hello world!", "X") == 0
    assert count_occurrences(vec[len(vec) // 2:], 5) == 1
    assert count_if(vec[len(vec) // 2:], lambda v: v <= 5) == 6


def test_main_queens(capsys):
    assert main(["queens", "4"]) == 0
    out = capsys.readouterr().out
    solutions = solve_n_queens(4)
    assert out.endswith(f"there are {len(solutions)} solutions.\n")
    assert solutions[0][0] in out.splitlines()


def test_main_palindrome(capsys):
    assert main(["palindrome", "level"]) == 0
    assert capsys.readouterr().out == "1\n"
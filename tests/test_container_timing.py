from collections import deque

import pytest

from coursekit.container_timing import (
    format_series,
    main,
    run_benchmark,
    sizes,
    time_append,
    time_index_assign,
    time_prepend,
)


def test_sizes_double_each_step():
    assert sizes(500, 3) == [500, 1000, 2000]
    assert sizes(7, 0) == []


def test_sizes_rejects_negative():
    with pytest.raises(ValueError):
        sizes(-1, 3)
    with pytest.raises(ValueError):
        sizes(1, -3)


def test_time_append_fills_container():
    holder = []
    elapsed = time_append(lambda: holder, 5)
    assert elapsed >= 0
    assert holder == list(range(5))


def test_time_prepend_on_list_reverses():
    holder = []
    elapsed = time_prepend(lambda: holder, 5)
    assert elapsed >= 0
    assert holder == list(reversed(range(5)))


def test_time_prepend_on_deque_reverses():
    holder = deque()
    time_prepend(lambda: holder, 4)
    assert list(holder) == list(reversed(range(4)))


@pytest.mark.parametrize("kind", [list, deque])
def test_time_index_assign_writes_positions(kind):
    box = {}

    def factory(items):
        box["c"] = kind(items)
        return box["c"]

    elapsed = time_index_assign(factory, 6)
    assert elapsed >= 0
    assert list(box["c"]) == list(range(6))


def test_run_benchmark_measures_each_size():
    seen = []

    def measure(n):
        seen.append(n)
        return n / 2

    result = run_benchmark(measure, 2, 3)
    assert seen == sizes(2, 3)
    assert result == [n / 2 for n in seen]


def test_format_series():
    assert format_series([1.0, 2.5]) == "{1 2.5 }"
    assert format_series([]) == "{}"


@pytest.mark.parametrize("experiment", ["insertion", "deque", "access"])
def test_main_prints_progress_and_series(experiment, capsys):
    assert main([experiment, "--start", "4", "--iterations", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "0% complete"
    assert lines[1] == "50% complete"
    assert len(lines) == 4
    for series in lines[2:]:
        assert series.startswith("{") and series.endswith("}")
        assert len(series[1:-1].split()) == 2
# coursekit

A collection of small, self-contained data structures and algorithms for
learning and teaching. It has no runtime dependencies.

## What is inside

- `coursekit.bounded_vector`: `BoundedVector`, a sequence whose capacity is
  fixed at construction (default 10, optionally filled with a value).
  Access is bounds-checked (`at`, indexing, `front`, `back`); `insert`,
  `append` and `+=` raise `OverflowError` once the capacity is reached;
  `reserve(n)` raises the capacity. It also has `erase`, `pop`, `clear`,
  `copy`, `swap_elements` and `+`.
- `coursekit.median`: `StreamingMedianTracker`, which keeps inserted elements
  ordered (optionally by a `key` function) and reports the median with
  `median()`; with an even count, the larger middle element is returned.
- `coursekit.array_stack`: `ArrayStack`, a fixed-capacity stack of integers
  whose `top()` returns `-1` when empty.
- `coursekit.recursion`: `factorial`, `mystery` (doubles every digit),
  `is_palindrome`, `solve_n_queens`, `my_min`, `count_occurrences` and
  `count_if`.
- `coursekit.stylometry`: feature vectors over common English words and
  punctuation (`presence_vector`, `count_vector`), plus `dot_product`,
  `magnitude` and cosine `similarity` for comparing texts.
- `coursekit.records`: small record-processing exercises: daily reports
  (`Report`, `read_reports`, `find_report`), `solve_quadratic`,
  `report_lines`, course schedules (`Time`, `Course`, `find_course`,
  `shift_courses`, `format_course`), `chop_both_ends`, friendship maps
  (`friend_list`, `read_friend_file`), `describe_coolness`, `erase_value`
  and rated courses (`RatedCourse`, `sample_ratings`, `sort_by_name`,
  `format_rating`).
- `coursekit.concurrency`: a thread-safe `Counter`, a reference-counted
  `SharedPointer`, per-stream output locks (`StreamLocks`), and the threaded
  demos `greet_all` and `sell_tickets`.
- `coursekit.container_timing`: `time_append`, `time_prepend` and
  `time_index_assign` measure container operations in milliseconds;
  `sizes`, `run_benchmark` and `format_series` run and print a series.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from coursekit.median import StreamingMedianTracker

tracker = StreamingMedianTracker()
for value in (3, 5, 15):
    tracker.insert(value)
tracker.median()   # 5
tracker.insert(20)
tracker.median()   # 15 (on a tie the larger middle element is chosen)
```

```python
from coursekit.recursion import my_min, solve_n_queens

my_min(3, 4, 5, 6, 2)     # 2
len(solve_n_queens(4))    # 2
```

```python
from coursekit.stylometry import count_occurrences, dot_product

count_occurrences("thank you next next thank you next next", "next")  # 4
dot_product([1, 0, -1], [1, 0, 1])                                     # 0
```

## Commands

- `coursekit-stack`: pushes 10 and 20, pops one and prints what remains.
- `coursekit-recursion {queens,mystery,palindrome,factorial} [value]`:
  runs one exercise; without a value it prompts for one.
- `coursekit-stylometry [--res-dir DIR]`: reads `unknown.txt`,
  `hamilton.txt`, `jj.txt` and `madison.txt` from `DIR` (default `res`) and
  prints the similarity of each known text to the unknown one.
- `coursekit-timing [insertion|deque|access] [--start N] [--iterations K]`:
  times two container operations at doubling sizes and prints both series.

## What it does not do

- `coursekit-timing` prints its timings as text; it does not draw charts.
- No texts come with the package; `coursekit-stylometry` needs you to
  supply the four files.
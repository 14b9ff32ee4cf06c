"""Small record-keeping exercises: reports, courses, friendships and lists."""

from __future__ import annotations

import copy
import math
import random
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Report:
    """Global case figures reported for one date."""

    date: str
    cases: int
    deaths: int
    increase_rate: float


def read_reports(lines: Iterable[str]) -> list[Report]:
    """Parse lines of 'date cases deaths increase_rate' into reports.

    Blank lines are skipped; a line with missing or malformed fields
    raises ValueError.
    """
    reports = []
    for line in lines:
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 4:
            raise ValueError(f"malformed report line: {line!r}")
        date, cases, deaths, rate = fields[:4]
        reports.append(Report(date, int(cases), int(deaths), float(rate)))
    return reports


def find_report(reports: Iterable[Report], date: str) -> Report | None:
    """Return the first report for date, or None when there is none."""
    return next((report for report in reports if report.date == date), None)


def solve_quadratic(a: int, b: int, c: int) -> tuple[float, float] | None:
    """Return the real roots of a*x**2 + b*x + c, or None if there are none.

    The root using +sqrt of the discriminant comes first.
    """
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    return (-b + root) / (2 * a), (-b - root) / (2 * a)


def report_lines(lines: Iterable[str]) -> tuple[int, str]:
    """Count lines up to the first empty one and find the longest.

    Among lines of equal length the earliest is kept.
    """
    count = 0
    longest = ""
    for line in lines:
        line = line.rstrip("\n")
        if line == "":
            break
        count += 1
        if len(line) > len(longest):
            longest = line
    return count, longest


@dataclass
class Time:
    """A time of day in hours and minutes."""

    hour: int
    minute: int

    def __str__(self) -> str:
        return f"{self.hour}:{self.minute}"


@dataclass
class Course:
    """A course with its meeting time and instructors."""

    code: str
    time: tuple[Time, Time]
    instructors: list[str] = field(default_factory=list)


def find_course(courses: Iterable[Course], code: str) -> Course | None:
    """Return a copy of the first course with the given code, or None."""
    for course in courses:
        if course.code == code:
            return copy.deepcopy(course)
    return None


def shift_courses(courses: Iterable[Course]) -> None:
    """Move every course one hour later, in place."""
    for course in courses:
        start, end = course.time
        start.hour += 1
        end.hour += 1


def format_course(course: Course) -> str:
    """Render a course as 'CODE start-end instructor instructor '."""
    start, end = course.time
    names = "".join(f"{name} " for name in course.instructors)
    return f"{course.code} {start}-{end} {names}"


def chop_both_ends(text: str) -> str:
    """Return text without its first and last characters."""
    return text[1:-1]


def friend_list(lines: Iterable[str]) -> dict[str, set[str]]:
    """Build a two-way friendship map from lines of 'name name'.

    Keys come out in sorted order. Blank lines are skipped; a line with
    a single name raises ValueError.
    """
    friends: dict[str, set[str]] = {}
    for line in lines:
        names = line.split()
        if not names:
            continue
        if len(names) < 2:
            raise ValueError(f"malformed friendship line: {line!r}")
        first, second = names[:2]
        friends.setdefault(first, set()).add(second)
        friends.setdefault(second, set()).add(first)
    return dict(sorted(friends.items()))


def read_friend_file(path: str | Path) -> dict[str, set[str]]:
    """Read a friendship file and return its friendship map."""
    with Path(path).open(encoding="utf-8") as handle:
        return friend_list(handle)


def describe_coolness(lines: Iterable[str]) -> list[str]:
    """Turn lines of 'name coolness' into sentences with doubled coolness."""
    sentences = []
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"malformed line: {line!r}")
        name, coolness = fields[0], int(fields[1])
        sentences.append(f"{name} is cool by a factor of {coolness * 2}")
    return sentences


def erase_value(items: MutableSequence[Any], value: Any) -> int:
    """Remove every element equal to value in place; return how many went."""
    kept = [item for item in items if item != value]
    removed = len(items) - len(kept)
    items.clear()
    items.extend(kept)
    return removed


@dataclass(frozen=True)
class RatedCourse:
    """A course name with its average rating."""

    name: str
    rating: float


_RATINGS: tuple[tuple[str, float], ...] = (
    ("CS 106A", 4.4337), ("CS 106B", 4.4025), ("CS 107", 4.6912),
    ("CS 103", 4.0532), ("CS 109", 4.6062), ("CS 110", 4.343),
    ("Math 51", 3.6119), ("Math 52", 4.325), ("Math 53", 4.3111),
    ("Econ 1", 4.2552), ("Anthro 3", 3.71), ("Educ 342", 4.55),
    ("Chem 33", 3.50), ("German 132", 4.83), ("Econ 137", 4.84),
    ("CS 251", 4.24), ("TAPS 103", 4.79), ("Music 21", 4.37),
    ("English 10A", 4.41),
)


def sample_ratings() -> list[RatedCourse]:
    """Return a fixed survey of course ratings in a shuffled order."""
    courses = [RatedCourse(name, rating) for name, rating in _RATINGS]
    random.Random(0).shuffle(courses)
    return courses


def sort_by_name(courses: Iterable[RatedCourse]) -> list[RatedCourse]:
    """Return the courses sorted by name."""
    return sorted(courses, key=lambda course: course.name)


def format_rating(course: RatedCourse) -> str:
    """Render a course as its name right-aligned in 15 columns and its rating."""
    return f"{course.name:>15}   {course.rating:g}"
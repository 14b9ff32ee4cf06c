from dataclasses import dataclass

import pytest

from coursekit.median import StreamingMedianTracker


@dataclass
class Patient:
    name: str
    priority: int


def test_integer_stream_matches_expected_medians():
    tracker = StreamingMedianTracker()
    tracker.insert(3)
    tracker.insert(5)
    tracker.insert(15)
    assert tracker.median() == 5
    tracker.insert(20)
    assert tracker.median() == 15
    tracker.extend([1, 2, 3, 4, 6, 7, 30, 40])
    assert tracker.median() == 6
    assert len(tracker) == 12


def test_patients_by_priority():
    hospital = StreamingMedianTracker(key=lambda p: p.priority)
    hospital.insert(Patient("Avery", 3))
    hospital.insert(Patient("Anna", 5))
    hospital.insert(Patient("Ali", 7))
    assert hospital.median().name == "Anna"
    hospital.insert(Patient("Mike", 10))
    assert hospital.median().name == "Ali"


def test_empty_tracker_raises():
    tracker = StreamingMedianTracker()
    assert len(tracker) == 0
    with pytest.raises(IndexError):
        tracker.median()


def test_single_element_is_median():
    tracker = StreamingMedianTracker()
    tracker.insert(42)
    assert tracker.median() == 42


def test_equal_keys_inserted_before_existing():
    tracker = StreamingMedianTracker(key=lambda p: p.priority)
    for name in ("first", "second", "third"):
        tracker.insert(Patient(name, 5))
    assert tracker.median().name == "second"


def test_median_independent_of_insertion_order():
    values = [9, 1, 8, 2, 7, 3, 6]
    forward = StreamingMedianTracker()
    forward.extend(values)
    backward = StreamingMedianTracker()
    backward.extend(reversed(values))
    assert forward.median() == backward.median() == sorted(values)[len(values) // 2]
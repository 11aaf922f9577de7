# tests/test_grading.py

import pytest

from core.grading import Grade, calculate_average, get_letter_grade, get_status, parse_grade


def test_calculate_average():
    assert calculate_average([90, 80, 70]) == 80.0
    assert calculate_average([100]) == 100.0


def test_calculate_average_empty_is_zero():
    assert calculate_average([]) == 0


def test_calculate_average_rounds_to_two_places():
    assert calculate_average([1, 2, 2]) == 1.67
    assert calculate_average([80, 80.25]) == 80.13


@pytest.mark.parametrize(
    "average, grade",
    [
        (100, Grade.A),
        (90, Grade.A),
        (89.99, Grade.B),
        (80, Grade.B),
        (79.99, Grade.C),
        (70, Grade.C),
        (69.99, Grade.D),
        (60, Grade.D),
        (59.99, Grade.F),
        (0, Grade.F),
    ],
)
def test_get_letter_grade_bands(average, grade):
    assert get_letter_grade(average) is grade


def test_get_status():
    assert get_status(Grade.F) == "Failing"
    assert get_status(Grade.D) == "Passing"
    assert get_status(Grade.A) == "Passing"


def test_parse_grade():
    assert parse_grade(" b ") is Grade.B
    assert parse_grade(Grade.C) is Grade.C
    assert parse_grade("E") is None
    assert parse_grade("AB") is None
    assert parse_grade(None) is None
    assert parse_grade(4) is None

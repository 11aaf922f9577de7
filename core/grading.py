# core/grading.py

"""
Pure grading rules shared by the record store and its exporters.

Letter grades are assigned by lower-bound-inclusive bands on a student's average:
    - A: 90 and above
    - B: 80 up to 90
    - C: 70 up to 80
    - D: 60 up to 70
    - F: below 60
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from core.utils import round_half_up


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


PASSING = "Passing"
FAILING = "Failing"

GRADE_THRESHOLDS: list[tuple[float, Grade]] = [
    (90.0, Grade.A),
    (80.0, Grade.B),
    (70.0, Grade.C),
    (60.0, Grade.D),
]


def calculate_average(scores: Sequence[float]) -> float:
    if not scores:
        return 0

    return round_half_up(sum(scores) / len(scores), 2)


def get_letter_grade(average: float) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if average >= threshold:
            return grade

    return Grade.F


def get_status(grade: Grade) -> str:
    return FAILING if grade is Grade.F else PASSING


def parse_grade(grade: object) -> Grade | None:
    """
    Normalizes a user-supplied grade into a `Grade` member.

    Args:
        grade (object): A `Grade` or a string such as " b ".

    Returns:
        The matching `Grade`, or None if the input is not one of A, B, C, D, F.
    """
    if isinstance(grade, Grade):
        return grade

    if not isinstance(grade, str):
        return None

    try:
        return Grade(grade.strip().upper())

    except ValueError:
        return None

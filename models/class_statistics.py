# models/class_statistics.py

"""
Aggregate statistics over every student in a `RecordStore`.

An empty store produces `ClassStatistics.empty()`, which is a normal result rather than an error.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from core.grading import Grade
from core.utils import round_half_up
from models.graded_student import GradedStudent


def _empty_distribution() -> dict[Grade, int]:
    return {grade: 0 for grade in Grade}


@dataclass(frozen=True)
class ClassStatistics:
    total_students: int = 0
    class_average: float = 0
    highest_average: float = 0
    lowest_average: float = 0
    # whole-number percentage of students at or above the passing average
    passing_rate: int = 0
    grade_distribution: dict[Grade, int] = field(default_factory=_empty_distribution)

    @classmethod
    def empty(cls) -> ClassStatistics:
        return cls()

    @classmethod
    def from_graded(
        cls, graded: Sequence[GradedStudent], passing_average: float = 60.0
    ) -> ClassStatistics:
        if not graded:
            return cls.empty()

        averages = [student.average for student in graded]
        passing = sum(1 for average in averages if average >= passing_average)

        distribution = _empty_distribution()
        distribution.update(Counter(student.grade for student in graded))

        return cls(
            total_students=len(graded),
            class_average=round_half_up(sum(averages) / len(averages), 2),
            highest_average=max(averages),
            lowest_average=min(averages),
            passing_rate=int(round_half_up(passing / len(graded) * 100, 0)),
            grade_distribution=distribution,
        )

    def to_dict(self) -> dict:
        return {
            "total_students": self.total_students,
            "class_average": self.class_average,
            "highest_average": self.highest_average,
            "lowest_average": self.lowest_average,
            "passing_rate": self.passing_rate,
            "grade_distribution": {
                grade.value: count for grade, count in self.grade_distribution.items()
            },
        }

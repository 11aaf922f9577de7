# models/graded_student.py

"""
A read-only view of a `Student` decorated with derived grading fields.

`GradedStudent` objects are built on demand by `RecordStore` queries and are never stored.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.grading import Grade, calculate_average, get_letter_grade, get_status
from models.student import Student


@dataclass(frozen=True)
class GradedStudent:
    id: str
    name: str
    scores: tuple[float, ...]
    average: float
    grade: Grade
    status: str

    @classmethod
    def from_student(cls, student: Student) -> GradedStudent:
        average = calculate_average(student.scores)
        grade = get_letter_grade(average)

        return cls(
            id=student.id,
            name=student.name,
            scores=tuple(student.scores),
            average=average,
            grade=grade,
            status=get_status(grade),
        )

    @property
    def is_failing(self) -> bool:
        return self.grade is Grade.F

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "scores": list(self.scores),
            "average": self.average,
            "grade": self.grade.value,
            "status": self.status,
        }

# cli/model_formatters.py

# anything that renders domain objects or RecordStore read-only results
from textwrap import dedent

import core.formatters as formatters
from core.grading import Grade
from models.class_statistics import ClassStatistics
from models.graded_student import GradedStudent

# === student formatters ===


def format_student_oneline(student: GradedStudent) -> str:
    failing = " [FAILING]" if student.is_failing else ""

    return f"{student.name:<25} | {formatters.format_average(student.average):>6} | {student.grade.value}{failing}"


def format_student_multiline(student: GradedStudent) -> str:
    return dedent(
        f"""\
        Student:
        ... Name: {student.name}
        ... ID: {student.id}
        ... Scores: {formatters.format_scores(student.scores)}
        ... Average: {formatters.format_average(student.average)}
        ... Grade: {student.grade.value}
        ... Status: {student.status}"""
    )


# === statistics formatters ===


def format_class_statistics(statistics: ClassStatistics) -> str:
    distribution = ", ".join(
        f"{grade.value}: {statistics.grade_distribution[grade]}" for grade in Grade
    )

    return dedent(
        f"""\
        Class statistics:
        ... Total Students: {statistics.total_students}
        ... Class Average: {formatters.format_average(statistics.class_average)}
        ... Highest Average: {formatters.format_average(statistics.highest_average)}
        ... Lowest Average: {formatters.format_average(statistics.lowest_average)}
        ... Passing Rate: {formatters.format_percentage(statistics.passing_rate)}
        ... Grade Distribution: {distribution}"""
    )

# core/exporters.py

"""
Text serializations of graded student records.

Each exporter is a pure function of a graded projection and its class statistics:
    - `export_csv()`: one row per student, scores packed into a single quoted field
    - `export_report()`: a human-readable summary with statistics and per-student details
    - `export_json()`: a machine-readable document with an export timestamp

All exporters return `NO_DATA_MESSAGE` instead of an empty or header-only document when
there are no students.
"""

from __future__ import annotations

import csv
import datetime
import io
import json
from collections.abc import Sequence

import core.formatters as formatters
from core.grading import Grade
from models.class_statistics import ClassStatistics
from models.graded_student import GradedStudent

NO_DATA_MESSAGE = "No data to export"

CSV_HEADER = ["ID", "Name", "Scores", "Average", "Grade", "Status"]


def export_csv(graded: Sequence[GradedStudent]) -> str:
    if not graded:
        return NO_DATA_MESSAGE

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow(CSV_HEADER)

    for student in graded:
        writer.writerow(
            [
                student.id,
                student.name,
                formatters.format_scores(student.scores),
                formatters.format_average(student.average),
                student.grade.value,
                student.status,
            ]
        )

    return buffer.getvalue()


def export_report(
    graded: Sequence[GradedStudent],
    statistics: ClassStatistics,
    top_performer: GradedStudent | None,
    generated_at: datetime.datetime,
) -> str:
    """
    Builds a plain-text grade report.

    Args:
        graded (Sequence[GradedStudent]): The decorated students, in store order.
        statistics (ClassStatistics): Aggregate statistics for the same students.
        top_performer (GradedStudent | None): The student with the highest average, if any.
        generated_at (datetime.datetime): Timestamp printed at the end of the report.

    Returns:
        The report text, or `NO_DATA_MESSAGE` if there are no students.
    """
    if not graded:
        return NO_DATA_MESSAGE

    lines = [
        formatters.format_banner_text("STUDENT GRADE MANAGEMENT REPORT"),
        "",
        formatters.format_section_heading("CLASS STATISTICS:"),
        f"Total Students: {statistics.total_students}",
        f"Class Average: {formatters.format_average(statistics.class_average)}",
        f"Highest Average: {formatters.format_average(statistics.highest_average)}",
        f"Lowest Average: {formatters.format_average(statistics.lowest_average)}",
        f"Passing Rate: {formatters.format_percentage(statistics.passing_rate)}",
        "",
        formatters.format_section_heading("GRADE DISTRIBUTION:"),
    ]

    for grade in Grade:
        lines.append(f"{grade.value}: {statistics.grade_distribution[grade]} students")

    lines.append("")

    if top_performer is not None:
        lines.extend(
            [
                formatters.format_section_heading("TOP PERFORMER:"),
                f"Name: {top_performer.name}",
                f"Average: {formatters.format_average(top_performer.average)}",
                f"Grade: {top_performer.grade.value}",
                "",
            ]
        )

    lines.extend(["INDIVIDUAL STUDENT DETAILS:", "=" * 40, ""])

    for index, student in enumerate(graded, 1):
        lines.extend(
            [
                f"{index}. {student.name}",
                f"   ID: {student.id}",
                f"   Scores: {formatters.format_scores(student.scores)}",
                f"   Average: {formatters.format_average(student.average)}",
                f"   Grade: {student.grade.value}",
                f"   Status: {student.status}",
                "-" * 40,
            ]
        )

    lines.extend(
        ["", f"Report generated: {formatters.format_timestamp(generated_at)}", ""]
    )

    return "\n".join(lines)


def export_json(
    graded: Sequence[GradedStudent],
    statistics: ClassStatistics,
    exported_at: datetime.datetime,
) -> str:
    if not graded:
        return NO_DATA_MESSAGE

    payload = {
        "export_date": exported_at.isoformat(),
        "statistics": statistics.to_dict(),
        "students": [student.to_dict() for student in graded],
    }

    return json.dumps(payload, indent=2)

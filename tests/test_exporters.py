# tests/test_exporters.py

import csv
import datetime
import io
import json

import pytest

import core.exporters as exporters
from models.class_statistics import ClassStatistics
from models.graded_student import GradedStudent
from models.student import Student

GENERATED_AT = datetime.datetime(2025, 9, 1, 8, 30)


@pytest.fixture
def graded():
    students = [
        Student("STU-001", "Ann Lee", [90, 80, 70], GENERATED_AT),
        Student("STU-002", "Mary-Jane O'Neil", [55.5, 50], GENERATED_AT),
    ]
    return [GradedStudent.from_student(student) for student in students]


@pytest.fixture
def statistics(graded):
    return ClassStatistics.from_graded(graded)


def test_empty_input_returns_no_data_message(statistics):
    assert exporters.export_csv([]) == exporters.NO_DATA_MESSAGE
    assert exporters.export_report([], statistics, None, GENERATED_AT) == "No data to export"
    assert exporters.export_json([], statistics, GENERATED_AT) == "No data to export"


def test_export_csv(graded):
    output = exporters.export_csv(graded)

    assert output.splitlines() == [
        "ID,Name,Scores,Average,Grade,Status",
        'STU-001,Ann Lee,"90, 80, 70",80.00,B,Passing',
        "STU-002,Mary-Jane O'Neil,\"55.5, 50\",52.75,F,Failing",
    ]


def test_export_csv_is_readable_by_csv_module(graded):
    rows = list(csv.reader(io.StringIO(exporters.export_csv(graded))))

    assert rows[0] == exporters.CSV_HEADER
    assert rows[1][2] == "90, 80, 70"
    assert len(rows) == 3


def test_export_report_sections(graded, statistics):
    report = exporters.export_report(graded, statistics, graded[0], GENERATED_AT)

    assert report.startswith("=" * 40)
    assert "CLASS STATISTICS:" in report
    assert "Total Students: 2" in report
    assert "Class Average: 66.38" in report
    assert "Highest Average: 80.00" in report
    assert "Lowest Average: 52.75" in report
    assert "Passing Rate: 50%" in report
    assert "A: 0 students" in report
    assert "B: 1 students" in report
    assert "TOP PERFORMER:" in report
    assert "1. Ann Lee" in report
    assert "2. Mary-Jane O'Neil" in report
    assert "   Scores: 55.5, 50" in report
    assert "   Status: Failing" in report
    assert "Report generated: 2025-09-01 08:30:00" in report


def test_export_report_without_top_performer(graded, statistics):
    report = exporters.export_report(graded, statistics, None, GENERATED_AT)

    assert "TOP PERFORMER:" not in report
    assert "INDIVIDUAL STUDENT DETAILS:" in report


def test_export_json(graded, statistics):
    payload = json.loads(exporters.export_json(graded, statistics, GENERATED_AT))

    assert payload["export_date"] == "2025-09-01T08:30:00"
    assert payload["statistics"]["passing_rate"] == 50
    assert payload["statistics"]["grade_distribution"] == {
        "A": 0,
        "B": 1,
        "C": 0,
        "D": 0,
        "F": 1,
    }
    assert payload["students"][0] == {
        "id": "STU-001",
        "name": "Ann Lee",
        "scores": [90, 80, 70],
        "average": 80.0,
        "grade": "B",
        "status": "Passing",
    }


def test_export_keeps_full_score_precision():
    student = Student("STU-003", "Cy Dunn", [85.1234567, 12.345, 90.0], GENERATED_AT)
    graded = [GradedStudent.from_student(student)]
    statistics = ClassStatistics.from_graded(graded)

    csv_output = exporters.export_csv(graded)
    report = exporters.export_report(graded, statistics, graded[0], GENERATED_AT)

    assert '"85.1234567, 12.345, 90"' in csv_output
    assert "   Scores: 85.1234567, 12.345, 90" in report

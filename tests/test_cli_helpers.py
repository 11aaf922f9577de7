# tests/test_cli_helpers.py

import os

import cli.model_formatters as model_formatters
from cli.path_utils import get_save_dir, resolve_output_path, sanitize_name


def test_sanitize_name():
    assert sanitize_name("  fall term report ") == "fall_term_report"


def test_get_save_dir_default():
    expected = os.path.join(os.path.expanduser("~"), "Documents", "GradeRecords")

    assert get_save_dir(None) == expected
    assert get_save_dir("   ") == expected


def test_resolve_output_path_creates_directory(tmp_path):
    target = tmp_path / "exports" / "fall"

    path = resolve_output_path("grade report", "csv", str(target))

    assert path == os.path.join(str(target), "grade_report.csv")
    assert target.is_dir()


def test_format_student_oneline_flags_failing(sample_store):
    lines = {
        student.name: model_formatters.format_student_oneline(student)
        for student in sample_store.get_all_students_with_grades()
    }

    assert lines["Sarah Davis"].endswith("| F [FAILING]")
    assert lines["Emma Wilson"].endswith("|  95.00 | A")


def test_format_class_statistics(sample_store):
    text = model_formatters.format_class_statistics(sample_store.get_class_statistics())

    assert "... Passing Rate: 80%" in text
    assert "... Grade Distribution: A: 1, B: 2, C: 1, D: 0, F: 1" in text

# tests/test_student.py

import datetime

import pytest

from core.config import StoreConfig
from models.student import Student


def test_student_to_dict(sample_student):
    data = sample_student.to_dict()

    assert data["id"] == "STU-001"
    assert data["name"] == "Ann Lee"
    assert data["scores"] == [90, 80, 70]
    assert data["added_at"] == "2025-09-01T08:30:00"
    assert data["last_edited_at"] is None


def test_student_from_dict():
    student = Student.from_dict(
        {
            "id": "STU-002",
            "name": "Bo Park",
            "scores": [60.5, 70],
            "added_at": "2025-09-01T08:30:00",
            "last_edited_at": "2025-09-02T10:00:00",
        }
    )

    assert student.id == "STU-002"
    assert student.name == "Bo Park"
    assert student.scores == [60.5, 70]
    assert student.added_at == datetime.datetime(2025, 9, 1, 8, 30)
    assert student.last_edited_at == datetime.datetime(2025, 9, 2, 10, 0)


def test_student_to_str(sample_student):
    assert sample_student.__str__() == "STUDENT: name: Ann Lee, scores: 3, id: STU-001"


def test_copy_is_independent(sample_student):
    duplicate = sample_student.copy()
    duplicate.scores = [10]
    duplicate.name = "Someone Else"

    assert sample_student.scores == [90, 80, 70]
    assert sample_student.name == "Ann Lee"
    assert duplicate.id == sample_student.id


def test_scores_property_returns_copy(sample_student):
    scores = sample_student.scores
    scores.append(100)

    assert sample_student.scores == [90, 80, 70]


# === data validators ===


def test_validate_name_trims_whitespace():
    assert Student.validate_name_input("  Mary-Jane O'Neil  ") == "Mary-Jane O'Neil"


@pytest.mark.parametrize(
    "name, error, message",
    [
        (None, TypeError, "Name is required"),
        ("", TypeError, "Name is required"),
        (42, TypeError, "Name is required"),
        (" A ", ValueError, "at least 2 characters"),
        ("A" * 51, ValueError, "must not exceed 50 characters"),
        ("R2 D2", ValueError, "can only contain letters"),
        ("Ann_Lee", ValueError, "can only contain letters"),
    ],
)
def test_validate_name_rejects(name, error, message):
    with pytest.raises(error, match=message):
        Student.validate_name_input(name)


def test_validate_name_length_boundaries():
    assert Student.validate_name_input("Al") == "Al"
    assert Student.validate_name_input("A" * 50) == "A" * 50


def test_validate_scores_returns_copy():
    scores = [100, 0, 55.5]
    validated = Student.validate_scores_input(scores)

    assert validated == scores
    assert validated is not scores


def test_validate_scores_accepts_tuple():
    assert Student.validate_scores_input((1, 2, 3)) == [1, 2, 3]


@pytest.mark.parametrize(
    "scores, error, message",
    [
        ("90, 80", TypeError, "must be a list"),
        (None, TypeError, "must be a list"),
        ([], ValueError, "At least one score"),
        ([50] * 21, ValueError, "Maximum 20 scores"),
        ([90, "80"], TypeError, "position 2 must be a valid number"),
        ([True], TypeError, "position 1 must be a valid number"),
        ([float("nan")], TypeError, "position 1 must be a valid number"),
        ([float("inf")], TypeError, "position 1 must be a valid number"),
        ([90, -1], ValueError, "position 2 must be between 0 and 100"),
        ([100.01], ValueError, "position 1 must be between 0 and 100"),
    ],
)
def test_validate_scores_rejects(scores, error, message):
    with pytest.raises(error, match=message):
        Student.validate_scores_input(scores)


def test_validate_scores_uses_config_limits():
    config = StoreConfig(max_scores=2)

    with pytest.raises(ValueError, match="Maximum 2 scores"):
        Student.validate_scores_input([1, 2, 3], config)

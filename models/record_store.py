# models/record_store.py

"""
The RecordStore model is the central data object of the program and represents the "source of truth" for all student records.

Students are held in an ordered list owned exclusively by the store. Callers only ever receive copies of records or
freshly built `GradedStudent` projections, so nothing outside the store can break its invariants:
    - no two students share a case-insensitive, whitespace-trimmed name
    - every student has between 1 and `max_scores` scores, each within the configured bounds
    - student IDs are unique for the lifetime of the store and are never reused

Every successful mutation (add, remove, score update, rename) captures a deep-copy snapshot of the previous state
in a bounded undo history. Undo and redo swap whole snapshots in and out, and any new mutation invalidates redo.

Derived views (averages, letter grades, statistics, search, exports) are computed on demand from current state
and are never cached. Mutators return structured `Response` objects and never raise.
"""

from __future__ import annotations

import datetime
import logging
import traceback
from collections.abc import Callable, Sequence
from typing import Any

import core.exporters as exporters
from core.config import StoreConfig
from core.grading import Grade, calculate_average, get_letter_grade, parse_grade
from core.history import HistoryManager, HistorySnapshot
from core.response import ErrorCode, Response
from core.utils import generate_student_id, normalize
from models.class_statistics import ClassStatistics
from models.graded_student import GradedStudent
from models.student import Student

logger = logging.getLogger(__name__)


class DuplicateNameError(ValueError):
    pass


class RecordStore:

    def __init__(
        self,
        config: StoreConfig | None = None,
        clock: Callable[[], datetime.datetime] | None = None,
    ):
        self._config: StoreConfig = config or StoreConfig()
        self._clock: Callable[[], datetime.datetime] = clock or datetime.datetime.now
        self._students: list[Student] = []
        self._issued_ids: set[str] = set()
        self._history: HistoryManager = HistoryManager(self._config.history_capacity)

    # === properties ===

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def students(self) -> list[Student]:
        return [student.copy() for student in self._students]

    # --- history status ---

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def get_history(self) -> list[str]:
        """
        Returns the action labels currently available to undo, oldest first.
        """
        return self._history.undo_labels()

    def clear_history(self) -> None:
        self._history.clear()

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "students": [student.to_dict() for student in self._students],
        }

    def import_students(self, student_data: list[dict[str, Any]]) -> Response:
        """
        Replaces the store contents with a list of serialized student records.

        Args:
            student_data (list[dict[str, Any]]): A list of dictionaries, each produced by `Student.to_dict()`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every record was deserialized, validated, and imported.
                    - False if any record is malformed, invalid, or conflicts with another record.
                - detail (str | None):
                    - On failure, a human-readable description naming the offending record.
                    - On success, the number of students imported.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the payload is not a list, or a record is malformed or lacks a non-empty string ID.
                    - `ErrorCode.VALIDATION_FAILED` if a record fails name or score validation.
                    - `ErrorCode.DUPLICATE_NAME` if two records share a normalized name or an ID.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 409 on duplicate records
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "count" (int): The number of imported students.
                    - On failure:
                        - None

        Notes:
            - This method fails fast: if any record is rejected, the store is left unchanged.
            - On success the undo/redo history is cleared, since the imported records are the new baseline.
        """
        if not isinstance(student_data, list):
            return Response.fail(
                detail="Expected a list of student records.",
                error=ErrorCode.INVALID_INPUT,
            )

        try:
            imported: list[Student] = []
            seen_names: set[str] = set()
            seen_ids: set[str] = set()

            for record_dict in student_data:
                try:
                    student = Student.from_dict(record_dict)
                    self.require_valid_id(student.id)

                except (KeyError, TypeError, ValueError, AttributeError) as e:
                    return self._reject_import(
                        f"Failed to deserialize student: {record_dict} - {e}",
                        ErrorCode.INVALID_INPUT,
                    )

                try:
                    student.name = Student.validate_name_input(
                        student.name, self._config
                    )
                    student.scores = Student.validate_scores_input(
                        student.scores, self._config
                    )

                except (TypeError, ValueError) as e:
                    return self._reject_import(
                        f"Failed to import student: {record_dict} - {e}",
                        ErrorCode.VALIDATION_FAILED,
                    )

                if normalize(student.name) in seen_names or student.id in seen_ids:
                    return self._reject_import(
                        f"Failed to import student: {record_dict} - duplicate name or ID.",
                        ErrorCode.DUPLICATE_NAME,
                        status_code=409,
                    )

                seen_names.add(normalize(student.name))
                seen_ids.add(student.id)
                imported.append(student)

        except Exception as e:
            return self._internal_failure("import students", e)

        else:
            self._students = imported
            self._issued_ids.update(seen_ids)
            self._history.clear()

            logger.info("Imported %d students", len(imported))

            return Response.succeed(
                detail=f"{len(imported)} students imported.",
                data={
                    "count": len(imported),
                },
            )

    # === data accessors ===

    def __len__(self) -> int:
        return len(self._students)

    def find_student_by_name(self, name: str) -> Response:
        """
        Finds the `Student` whose normalized name matches the given name.

        Args:
            name (str): The name to look up; matching ignores case and surrounding whitespace.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a matching student was found.
                    - False if the name is missing or no student matches.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if the name is missing or not a string.
                    - `ErrorCode.NOT_FOUND` if no matching record is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                    - 400 if the name is missing
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): A copy of the matching student.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
        """
        lookup = self._locate_student(name)

        if not lookup.success:
            return lookup

        index = lookup.data["index"]

        return Response.succeed(
            data={
                "record": self._students[index].copy(),
            },
        )

    # --- grading ---

    @staticmethod
    def calculate_average(scores: Sequence[float]) -> float:
        return calculate_average(scores)

    @staticmethod
    def get_letter_grade(average: float) -> Grade:
        return get_letter_grade(average)

    def get_all_students_with_grades(self) -> list[GradedStudent]:
        return [GradedStudent.from_student(student) for student in self._students]

    def get_failing_students(self) -> list[GradedStudent]:
        return [
            student
            for student in self.get_all_students_with_grades()
            if student.is_failing
        ]

    def get_top_performer(self) -> GradedStudent | None:
        graded = self.get_all_students_with_grades()

        if not graded:
            return None

        # max() keeps the first of several equal maxima
        return max(graded, key=lambda student: student.average)

    def search_students(self, query: str) -> list[GradedStudent]:
        """
        Finds graded students whose name contains the query, ignoring case and surrounding whitespace.

        Returns an empty list for a blank or non-string query.
        """
        if not isinstance(query, str) or not query.strip():
            return []

        query = normalize(query)

        return [
            student
            for student in self.get_all_students_with_grades()
            if query in student.name.lower()
        ]

    def get_students_by_grade(self, grade: Grade | str) -> list[GradedStudent]:
        """
        Lists graded students with the given letter grade.

        Returns an empty list if the grade is not one of A, B, C, D, F.
        """
        target = parse_grade(grade)

        if target is None:
            return []

        return [
            student
            for student in self.get_all_students_with_grades()
            if student.grade is target
        ]

    def get_class_statistics(self) -> ClassStatistics:
        return ClassStatistics.from_graded(
            self.get_all_students_with_grades(),
            passing_average=self._config.passing_average,
        )

    # --- exports ---

    def export_as_csv(self) -> str:
        return exporters.export_csv(self.get_all_students_with_grades())

    def export_as_report(self) -> str:
        return exporters.export_report(
            self.get_all_students_with_grades(),
            self.get_class_statistics(),
            self.get_top_performer(),
            generated_at=self._clock(),
        )

    def export_as_json(self) -> str:
        return exporters.export_json(
            self.get_all_students_with_grades(),
            self.get_class_statistics(),
            exported_at=self._clock(),
        )

    # === data manipulators ===

    def add_student(self, name: str, scores: Sequence[float]) -> Response:
        """
        Validates and adds a new student to the store.

        Args:
            name (str): The student's name. Surrounding whitespace is trimmed before storing.
            scores (Sequence[float]): The student's scores, as a list or tuple of numbers.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was validated and added.
                    - False if validation fails, the name is already taken, or unexpected errors occur.
                - detail (str | None):
                    - On failure, the first violated rule or a description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if the name or scores are invalid.
                    - `ErrorCode.DUPLICATE_NAME` if a student with the same normalized name exists.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 409 if the name is already taken
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): A copy of the newly added student.
                    - On failure:
                        - None

        Notes:
            - The name is validated before the scores, and both before the uniqueness check.
            - This method mutates `RecordStore` state and records an undo snapshot only if successful.
            - The stored scores are a copy; later changes to the caller's sequence have no effect.
        """
        try:
            name = Student.validate_name_input(name, self._config)
            scores = Student.validate_scores_input(scores, self._config)

            self.require_unique_name(name)

            student = Student(
                id=self._generate_unique_id(),
                name=name,
                scores=scores,
                added_at=self._clock(),
            )

            students = [*self._students, student]

            self._record_history(f"Added student: {name}")
            self._students = students

        except DuplicateNameError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.DUPLICATE_NAME,
                status_code=409,
            )

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.VALIDATION_FAILED,
            )

        except Exception as e:
            return self._internal_failure("add student", e)

        else:
            logger.info("Added student %s (%s)", student.name, student.id)

            return Response.succeed(
                detail=f'Student "{student.name}" added successfully.',
                data={
                    "record": student.copy(),
                },
            )

    def remove_student(self, name: str) -> Response:
        """
        Removes the student whose normalized name matches the given name.

        Args:
            name (str): The name of the student to remove; matching ignores case and surrounding whitespace.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if exactly one matching student was removed.
                    - False if the name is missing, no student matches, or unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a confirmation message naming the removed student.
                - error (ErrorCode | str | None):
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if the name is missing or not a string.
                    - `ErrorCode.NOT_FOUND` if no student matches.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 400 for other failures
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - This method mutates `RecordStore` state and records an undo snapshot only if successful.
        """
        lookup = self._locate_student(name)

        if not lookup.success:
            return lookup

        index = lookup.data["index"]

        try:
            removed = self._students[index]
            students = self._students[:index] + self._students[index + 1 :]

            self._record_history(f"Removed student: {removed.name}")
            self._students = students

        except Exception as e:
            return self._internal_failure("remove student", e)

        else:
            logger.info("Removed student %s (%s)", removed.name, removed.id)

            return Response.succeed(
                detail=f'Student "{removed.name}" removed successfully.'
            )

    def update_student_scores(self, name: str, scores: Sequence[float]) -> Response:
        """
        Replaces the scores of the student whose normalized name matches the given name.

        Args:
            name (str): The name of the student to update.
            scores (Sequence[float]): The new scores.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the scores were replaced, or already matched (no-op).
                    - False if the student cannot be found, the scores are invalid, or unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if the name is missing or not a string.
                    - `ErrorCode.NOT_FOUND` if no student matches.
                    - `ErrorCode.VALIDATION_FAILED` if the scores are invalid.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): A copy of the updated student.
                    - On failure:
                        - None

        Notes:
            - This method mutates `RecordStore` state and records an undo snapshot if the scores change.
            - If the new scores match the current ones, the method returns early without touching history.
        """
        lookup = self._locate_student(name)

        if not lookup.success:
            return lookup

        index = lookup.data["index"]

        try:
            scores = Student.validate_scores_input(scores, self._config)

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.VALIDATION_FAILED,
            )

        current = self._students[index]

        if current.scores == scores:
            return Response.succeed(
                detail="The scores provided match the current ones. No changes made.",
                data={
                    "record": current.copy(),
                },
            )

        try:
            edited = current.copy()
            edited.scores = scores
            edited.mark_edited(self._clock())

            self._replace_student(index, edited, f"Updated scores: {edited.name}")

        except Exception as e:
            return self._internal_failure("update student scores", e)

        else:
            logger.info("Updated scores for %s (%s)", edited.name, edited.id)

            return Response.succeed(
                detail=f'Scores for "{edited.name}" successfully updated.',
                data={
                    "record": edited.copy(),
                },
            )

    def rename_student(self, name: str, new_name: str) -> Response:
        """
        Renames the student whose normalized name matches the given name.

        Args:
            name (str): The current name of the student.
            new_name (str): The new name to be assigned.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was renamed, or the new name matched exactly (no-op).
                    - False if the student cannot be found, the new name is invalid or taken, or unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message with the updated value.
                - error (ErrorCode | str | None):
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if the current name is missing or not a string.
                    - `ErrorCode.NOT_FOUND` if no student matches.
                    - `ErrorCode.VALIDATION_FAILED` if the new name is invalid.
                    - `ErrorCode.DUPLICATE_NAME` if another student already has the new name.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 409 if the new name is taken
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): A copy of the renamed student.
                    - On failure:
                        - None

        Notes:
            - Changing only the capitalization of a student's own name is allowed.
            - This method mutates `RecordStore` state and records an undo snapshot if the name changes.
        """
        lookup = self._locate_student(name)

        if not lookup.success:
            return lookup

        index = lookup.data["index"]

        current = self._students[index]

        try:
            new_name = Student.validate_name_input(new_name, self._config)
            self.require_unique_name(new_name, exclude_id=current.id)

        except DuplicateNameError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.DUPLICATE_NAME,
                status_code=409,
            )

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.VALIDATION_FAILED,
            )

        if current.name == new_name:
            return Response.succeed(
                detail="The name provided matches the current one. No changes made.",
                data={
                    "record": current.copy(),
                },
            )

        try:
            edited = current.copy()
            edited.name = new_name
            edited.mark_edited(self._clock())

            self._replace_student(
                index, edited, f"Renamed student: {current.name} to {new_name}"
            )

        except Exception as e:
            return self._internal_failure("rename student", e)

        else:
            logger.info("Renamed student %s to %s (%s)", current.name, new_name, edited.id)

            return Response.succeed(
                detail=f"Student name successfully updated to: {new_name}.",
                data={
                    "record": edited.copy(),
                },
            )

    # --- history methods ---

    def undo(self) -> Response:
        """
        Restores the state captured before the most recent undoable mutation.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a previous state was restored.
                    - False if there is nothing to undo or unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, "Undone: <action>".
                - error (ErrorCode | str | None):
                    - `ErrorCode.HISTORY_EMPTY` if the undo history is empty.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "action" (str): The label of the undone action.
                    - On failure:
                        - None

        Notes:
            - The current state is moved onto the redo stack before the previous state is restored.
            - Undo never clears the redo stack; only new mutations do.
        """
        try:
            previous = self._history.pop_undo(self._students, self._clock())

            if previous is None:
                return Response.fail(
                    detail="Nothing to undo.",
                    error=ErrorCode.HISTORY_EMPTY,
                )

            self._students = previous.restore()

        except Exception as e:
            return self._internal_failure("undo", e)

        else:
            logger.info("Undone: %s", previous.action)

            return Response.succeed(
                detail=f"Undone: {previous.action}",
                data={
                    "action": previous.action,
                },
            )

    def redo(self) -> Response:
        """
        Re-applies the most recently undone mutation.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the undone state was restored.
                    - False if there is nothing to redo or unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, "Redone: <action>".
                - error (ErrorCode | str | None):
                    - `ErrorCode.HISTORY_EMPTY` if the redo history is empty.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "action" (str): The label of the redone action.
                    - On failure:
                        - None

        Notes:
            - Exactly one undone state is restored. The state it replaces goes back onto the undo stack
              under the same action label, so the redone action can be undone again.
            - Redo does not clear the remaining redo stack.
        """
        try:
            following = self._history.pop_redo(self._students, self._clock())

            if following is None:
                return Response.fail(
                    detail="Nothing to redo.",
                    error=ErrorCode.HISTORY_EMPTY,
                )

            self._students = following.restore()

        except Exception as e:
            return self._internal_failure("redo", e)

        else:
            logger.info("Redone: %s", following.action)

            return Response.succeed(
                detail=f"Redone: {following.action}",
                data={
                    "action": following.action,
                },
            )

    # === data validators ===

    def require_unique_name(self, name: str, exclude_id: str | None = None) -> None:
        """
        Validates that no existing student shares the given name.

        Args:
            name (str): The student name to validate for uniqueness.
            exclude_id (str | None): The ID of a student to skip, used when renaming a student.

        Raises:
            DuplicateNameError: If a student with the same normalized name already exists.
        """
        normalized = normalize(name)

        if any(
            normalize(s.name) == normalized and s.id != exclude_id
            for s in self._students
        ):
            raise DuplicateNameError(f'Student "{name.strip()}" already exists.')

    def require_valid_id(self, student_id: Any) -> None:
        """
        Validates that an imported student ID is a non-empty string.

        Raises:
            TypeError: If the ID is not a string.
            ValueError: If the ID is blank.
        """
        if not isinstance(student_id, str):
            raise TypeError(f"Student ID must be a string, got {student_id!r}.")

        if not student_id.strip():
            raise ValueError("Student ID must not be blank.")

    # === helper methods ===

    def _locate_student(self, name: Any) -> Response:
        if not name or not isinstance(name, str):
            return Response.fail(
                detail="Valid student name is required.",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        normalized = normalize(name)

        for index, student in enumerate(self._students):
            if normalize(student.name) == normalized:
                return Response.succeed(
                    data={
                        "index": index,
                    },
                )

        return Response.fail(
            detail=f'Student "{name.strip()}" not found.',
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    def _reject_import(
        self, detail: str, error: ErrorCode, status_code: int = 400
    ) -> Response:
        logger.warning("Student import rejected: %s", detail)

        return Response.fail(
            detail=detail,
            error=error,
            status_code=status_code,
        )

    def _generate_unique_id(self) -> str:
        student_id = generate_student_id()

        while student_id in self._issued_ids:
            student_id = generate_student_id()

        self._issued_ids.add(student_id)

        return student_id

    def _record_history(self, action: str) -> None:
        self._history.record(
            HistorySnapshot.capture(action, self._students, self._clock())
        )

    def _replace_student(self, index: int, edited: Student, action: str) -> None:
        students = [*self._students]
        students[index] = edited

        self._record_history(action)
        self._students = students

    def _internal_failure(self, operation: str, e: Exception) -> Response:
        logger.exception("Unexpected error during %s", operation)

        return Response.fail(
            detail=f"Unexpected error: {e}",
            error=ErrorCode.INTERNAL_ERROR,
            trace=traceback.format_exc(),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"RecordStore({len(self._students)} students, undo={self._history.undo_depth}, redo={self._history.redo_depth})"

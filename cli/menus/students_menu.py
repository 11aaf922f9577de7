# cli/menus/students_menu.py

"""
Manage Students menu for the grade records CLI.

This module defines the interface for mutating `Student` records, including:
- Adding new students with their scores
- Replacing a student's scores or renaming a student
- Removing students

All operations are routed through the `RecordStore` API for validation and undo history.
The CLI only parses input; every rule (name format, score range, uniqueness) is enforced by the store
and reported back through its `Response`.
"""

from collections.abc import Callable
from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.graded_student import GradedStudent
from models.record_store import RecordStore


def run(store: RecordStore) -> None:
    """
    Top-level loop with dispatch for the Manage Students menu.

    Args:
        store (RecordStore): The active `RecordStore`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Manage Students")
    options: list[tuple[str, Callable[[RecordStore], None]]] = [
        ("Add Student", add_student),
        ("Update Student Scores", update_student_scores),
        ("Rename Student", rename_student),
        ("Remove Student", remove_student),
    ]
    zero_option = "Return to Records menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(store)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Records menu")


# === add student ===


def add_student(store: RecordStore) -> None:
    """
    Loops a prompt to collect a name and scores and add a new student to the store.

    Args:
        store (RecordStore): The active `RecordStore`.
    """
    while True:
        name = helpers.prompt_user_input_or_cancel(
            "Enter the student's name (leave blank to cancel):"
        )

        if name is MenuSignal.CANCEL:
            break
        name = cast(str, name)

        scores = helpers.prompt_scores_input_or_cancel()

        if scores is MenuSignal.CANCEL:
            break
        scores = cast(list[float], scores)

        store_response = store.add_student(name, scores)

        if not store_response.success:
            helpers.display_response_failure(store_response)
            print(f"\n{name} was not added.")

        else:
            print(f"\n{store_response.detail}")

        if not helpers.confirm_action(
            "Would you like to continue adding new students?"
        ):
            break

    helpers.returning_to("Manage Students menu")


# === edit student ===


def prompt_find_student(store: RecordStore) -> GradedStudent | MenuSignal:
    """
    Prompts for a search query and lets the user pick one of the matching students.

    Args:
        store (RecordStore): The active `RecordStore`.

    Returns:
        The selected `GradedStudent`, or `MenuSignal.CANCEL` if the user cancels or nothing matches.
    """
    query = helpers.prompt_user_input_or_cancel(
        "Enter the student's name or part of it (leave blank to cancel):"
    )

    if query is MenuSignal.CANCEL:
        return MenuSignal.CANCEL
    query = cast(str, query)

    results = store.search_students(query)

    if not results:
        print("\nYour search returned no results.")
        return MenuSignal.CANCEL

    if len(results) == 1:
        return results[0]

    print(f"\nYour search returned {len(results)} students:")

    while True:
        helpers.display_results(results, True, model_formatters.format_student_oneline)

        choice = helpers.prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return MenuSignal.CANCEL

        try:
            return results[int(choice) - 1]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def update_student_scores(store: RecordStore) -> None:
    student = prompt_find_student(store)

    if student is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    student = cast(GradedStudent, student)

    print(model_formatters.format_student_multiline(student))

    scores = helpers.prompt_scores_input_or_cancel()

    if scores is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    scores = cast(list[float], scores)

    print(
        f"\nCurrent scores: {formatters.format_scores(student.scores)} -> New scores: {formatters.format_scores(scores)}"
    )

    if not helpers.confirm_action("Do you want to make this change?"):
        helpers.returning_without_changes()
        return

    helpers.display_response(store.update_student_scores(student.name, scores))


def rename_student(store: RecordStore) -> None:
    student = prompt_find_student(store)

    if student is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    student = cast(GradedStudent, student)

    new_name = helpers.prompt_user_input_or_cancel(
        "Enter the new name (leave blank to cancel):"
    )

    if new_name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    new_name = cast(str, new_name)

    print(f"\nCurrent name: {student.name} -> New name: {new_name}")

    if not helpers.confirm_action("Do you want to make this change?"):
        helpers.returning_without_changes()
        return

    helpers.display_response(store.rename_student(student.name, new_name))


# === remove student ===


def remove_student(store: RecordStore) -> None:
    """
    Prompts the user to find a student and confirm permanent removal.

    Args:
        store (RecordStore): The active `RecordStore`.

    Notes:
        - Removal can be reverted with Undo from the Records menu.
    """
    student = prompt_find_student(store)

    if student is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    student = cast(GradedStudent, student)

    print("\nYou are about to remove the following student:")
    print(model_formatters.format_student_multiline(student))

    if not helpers.confirm_action("Do you want to remove this student?"):
        helpers.returning_without_changes()
        return

    helpers.display_response(store.remove_student(student.name))

# cli/menus/reports_menu.py

"""
View Reports menu for the grade records CLI.

Every option is read-only and renders `RecordStore` projections: all students with grades,
failing students, the top performer, name search, students by letter grade, and class statistics.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.graded_student import GradedStudent
from models.record_store import RecordStore


def run(store: RecordStore) -> None:
    title = formatters.format_banner_text("View Reports")
    options = [
        ("All Students", view_all_students),
        ("Failing Students", view_failing_students),
        ("Top Performer", view_top_performer),
        ("Search Students", search_students),
        ("Students by Grade", view_students_by_grade),
        ("Class Statistics", view_class_statistics),
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


def display_students(students: list[GradedStudent], description: str) -> None:
    if not students:
        print(f"\nThere are no {description}.")
        return

    helpers.display_banner(description.title())
    helpers.display_results(students, True, model_formatters.format_student_oneline)


def view_all_students(store: RecordStore) -> None:
    display_students(store.get_all_students_with_grades(), "students")


def view_failing_students(store: RecordStore) -> None:
    display_students(store.get_failing_students(), "failing students")


def view_top_performer(store: RecordStore) -> None:
    top_performer = store.get_top_performer()

    if top_performer is None:
        print("\nThere are no students.")
        return

    print(f"\n{model_formatters.format_student_multiline(top_performer)}")


def search_students(store: RecordStore) -> None:
    query = helpers.prompt_user_input_or_cancel(
        "Enter a name or part of a name (leave blank to cancel):"
    )

    if query is MenuSignal.CANCEL:
        return
    query = cast(str, query)

    display_students(store.search_students(query), f"students matching '{query}'")


def view_students_by_grade(store: RecordStore) -> None:
    grade = helpers.prompt_user_input_or_cancel(
        "Enter a letter grade: A, B, C, D, or F (leave blank to cancel):"
    )

    if grade is MenuSignal.CANCEL:
        return
    grade = cast(str, grade)

    display_students(
        store.get_students_by_grade(grade), f"students with grade '{grade.upper()}'"
    )


def view_class_statistics(store: RecordStore) -> None:
    print(f"\n{model_formatters.format_class_statistics(store.get_class_statistics())}")

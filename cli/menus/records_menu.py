# cli/menus/records_menu.py

"""
Records menu for the grade records CLI.

Provides calls to the Manage Students, View Reports, and Export & Save menus,
along with undo, redo, and a listing of the actions that can currently be undone.
"""

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import export_menu, reports_menu, students_menu
from models.record_store import RecordStore


def run(store: RecordStore) -> None:
    """
    Top-level loop with dispatch for the Records menu.

    Args:
        store (RecordStore): The active `RecordStore`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Student Grade Records")
    options = [
        ("Manage Students", lambda: students_menu.run(store)),
        ("View Reports", lambda: reports_menu.run(store)),
        ("Undo", lambda: helpers.display_response(store.undo())),
        ("Redo", lambda: helpers.display_response(store.redo())),
        ("View History", lambda: view_history(store)),
        ("Export & Save", lambda: export_menu.run(store)),
    ]
    zero_option = "Return to Start Menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response()

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Start Menu")


def view_history(store: RecordStore) -> None:
    history = store.get_history()

    if not history:
        print("\nThere is nothing to undo.")
        return

    helpers.display_banner("Undo History")
    # most recent first, matching the order undo walks back through
    helpers.display_results(reversed(history), show_index=True)

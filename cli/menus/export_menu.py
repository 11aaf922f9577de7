# cli/menus/export_menu.py

"""
Export & Save menu for the grade records CLI.

Writes `RecordStore` serializations to disk. The store itself never touches the filesystem;
this module owns every file write:
- CSV, text report, and JSON exports of the graded projection
- Saving the raw records (`RecordStore.to_dict()`) so they can be loaded again later
"""

import json
import logging
from typing import Callable

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.path_utils import resolve_output_path
from core.exporters import NO_DATA_MESSAGE
from models.record_store import RecordStore

logger = logging.getLogger(__name__)


def run(store: RecordStore) -> None:
    title = formatters.format_banner_text("Export & Save")
    options = [
        ("Export as CSV", lambda: export_to_file(store.export_as_csv, "csv")),
        ("Export as Report", lambda: export_to_file(store.export_as_report, "txt")),
        ("Export as JSON", lambda: export_to_file(store.export_as_json, "json")),
        ("Save Records", lambda: save_records(store)),
    ]
    zero_option = "Return to Records menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response()

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    helpers.returning_to("Records menu")


def prompt_output_path(default_stem: str, extension: str) -> str:
    stem = helpers.prompt_user_input_or_none(
        f"Enter a file name without extension (leave blank for '{default_stem}'):"
    )
    dir_input = helpers.prompt_user_input_or_none(
        "Enter a directory (leave blank to use default):"
    )

    return resolve_output_path(stem or default_stem, extension, dir_input)


def export_to_file(export_fn: Callable[[], str], extension: str) -> None:
    """
    Runs an exporter and writes its output to a user-chosen file.

    Args:
        export_fn (Callable[[], str]): A bound `RecordStore` export method.
        extension (str): The file extension for the output file.

    Notes:
        - Nothing is written when the store is empty.
    """
    content = export_fn()

    if content == NO_DATA_MESSAGE:
        print(f"\n{NO_DATA_MESSAGE}.")
        return

    path = prompt_output_path("grade_export", extension)

    try:
        with open(path, "w") as f:
            f.write(content)

    except OSError as e:
        logger.error("Failed to write export to %s: %s", path, e)
        print(f"\n[ERROR] Failed to write export to disk: {e}")

    else:
        print(f"\nExport written to {path}")


def save_records(store: RecordStore) -> None:
    path = prompt_output_path("students", "json")

    try:
        with open(path, "w") as f:
            json.dump(store.to_dict(), f, indent=2, sort_keys=True)

    except (OSError, TypeError) as e:
        logger.error("Failed to save records to %s: %s", path, e)
        print(f"\n[ERROR] Failed to save records to disk: {e}")

    else:
        print(f"\n{len(store)} students saved to {path}")

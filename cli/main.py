# cli/main.py

"""
Start Menu for the grade records CLI.

Provides functions for starting with an empty RecordStore or loading saved records from disk.
"""

import json
import logging
import os
import sys
from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import records_menu
from core.config import StoreConfig, load_config
from models.record_store import RecordStore

CONFIG_ENV_VAR = "GRADE_RECORDS_CONFIG"


def run_cli(config: StoreConfig | None = None) -> None:
    """
    Top-level loop with dispatch for the Start menu.

    Args:
        config (StoreConfig | None): Limits for every store created in this session. Defaults to the standard limits.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    config = config or StoreConfig()

    title = formatters.format_banner_text("GRADE RECORDS MANAGER")
    options = [
        ("Start with empty records", lambda: RecordStore(config)),
        ("Load saved records", lambda: load_records(config)),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            store = menu_response()

            if store is not None:
                records_menu.run(store)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def load_records(config: StoreConfig) -> RecordStore | None:
    """
    Prompts the user to load saved student records from a JSON file.

    Args:
        config (StoreConfig): Limits for the new `RecordStore`.

    Returns:
        RecordStore: A populated `RecordStore` if loading succeeds.
        None: If the user cancels.

    Notes:
        - The file must contain the output of `RecordStore.to_dict()`.
        - Validation of every record is delegated to `RecordStore.import_students()`, which returns a structured `Response`.
    """
    while True:
        file_path = helpers.prompt_user_input_or_cancel(
            "Enter path to a saved records file (leave blank to cancel):"
        )

        if file_path is MenuSignal.CANCEL:
            return None
        file_path = cast(str, file_path)

        file_path = os.path.abspath(os.path.expanduser(file_path))

        if not os.path.isfile(file_path):
            print(f"\nFile not found: {file_path}. Please try again.")
            continue

        print("\nLoading records ...")

        try:
            with open(file_path, "r") as f:
                payload = json.load(f)

        except (OSError, json.JSONDecodeError) as e:
            print(f"\n[ERROR] Failed to read records file: {e}")
            continue

        store = RecordStore(config)
        store_response = store.import_students(
            payload.get("students") if isinstance(payload, dict) else payload
        )

        if not store_response.success:
            helpers.display_response_failure(store_response)
            continue

        print(f"... {store_response.detail}")

        return store


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


def main() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(os.environ.get(CONFIG_ENV_VAR))

    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        raise SystemExit(1)

    run_cli(config)


if __name__ == "__main__":
    main()

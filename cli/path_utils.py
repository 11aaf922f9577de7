# cli/path_utils.py

import os

DEFAULT_DIR_NAME = "GradeRecords"


def sanitize_name(name: str) -> str:
    """
    Sanitizes a file name stem for use in file paths.

    Args:
        name (str): The input string to sanitize.

    Returns:
        A string with leading and trailing whitespace removed and internal spaces replaced with underscores.
    """
    return name.strip().replace(" ", "_")


def get_save_dir(user_input: str | None) -> str:
    """
    Resolves a directory for saved records and exports based on user input or default location.

    Args:
        user_input (str | None): An optional user-specified directory path. If None or blank, the default path is used.

    Returns:
        A resolved path string. If user input is provided, it is expanded and returned directly.
        Otherwise, defaults to: `~/Documents/GradeRecords`.
    """
    if user_input is not None and user_input.strip():
        return os.path.expanduser(user_input.strip())
    else:
        documents = os.path.join(os.path.expanduser("~"), "Documents")
        return os.path.join(documents, DEFAULT_DIR_NAME)


def resolve_output_path(file_stem: str, extension: str, dir_input: str | None) -> str:
    """
    Produces a file path for writing records or an export, creating the directory if needed.

    Args:
        file_stem (str): The file name without extension (may contain spaces).
        extension (str): The file extension without the leading dot, e.g. "csv".
        dir_input (str | None): An optional directory path string. If None, the default directory is used.

    Returns:
        A fully resolved path for the output file.

    Notes:
        - Creates the directory path on disk (including parent directories) if it does not exist.
    """
    save_dir = os.path.abspath(get_save_dir(dir_input))

    os.makedirs(save_dir, exist_ok=True)

    return os.path.join(save_dir, f"{sanitize_name(file_stem)}.{extension}")

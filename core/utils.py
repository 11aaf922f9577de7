# core/utils.py

"""
Repository for program-wide utilities.
"""

import uuid
from decimal import ROUND_HALF_UP, Decimal


def generate_student_id() -> str:
    return f"STU-{uuid.uuid4().hex[:16]}"


def normalize(input: str) -> str:
    return input.strip().lower()


def round_half_up(value: float, places: int = 2) -> float:
    """
    Rounds a number to a fixed number of decimal places, with halves rounded away from zero.

    Python's built-in `round()` uses banker's rounding (`round(12.5) == 12`), which
    would report a 12.5% passing rate as 12 instead of 13.

    Args:
        value (float): The number to round.
        places (int): The number of decimal places to keep. Defaults to 2.

    Returns:
        The rounded value as a float.
    """
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))

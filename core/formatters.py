# core/formatters.py

# all pure utilities & number/datetime helpers
# must never import from models!

import datetime
from collections.abc import Iterable

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_section_heading(title: str, width: int = 40) -> str:
    return f"{title}\n{'-' * width}"


# === number formatters ===


def format_score(score: float) -> str:
    # integral scores print without a trailing ".0"
    if float(score).is_integer():
        return str(int(score))

    return repr(score)


def format_scores(scores: Iterable[float]) -> str:
    return ", ".join(format_score(score) for score in scores)


def format_average(average: float) -> str:
    return f"{average:.2f}"


def format_percentage(rate: int) -> str:
    return f"{rate}%"


# === date formatters ===


def format_timestamp(timestamp: datetime.datetime) -> str:
    return timestamp.strftime("%Y-%m-%d %H:%M:%S")

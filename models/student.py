# models/student.py

"""
Represents a single student record held by a `RecordStore`.

Stores the identifying name, an ordered list of scores, and a unique ID assigned by the store.
Creation and last-edit timestamps are informational only.

Includes functionality for:
- Validating and normalizing name and score input
- Serializing to and from JSON-compatible dictionaries
- Producing independent deep copies for history snapshots and query results

Validation limits default to the standard record rules (2 to 50 character names, 1 to 20 scores
in [0, 100]) and can be tightened or relaxed through a `StoreConfig`.
"""

from __future__ import annotations

import datetime
import math
import re
from numbers import Real
from typing import Any

from core.config import StoreConfig

NAME_PATTERN = re.compile(r"[A-Za-z\s'-]+")

_DEFAULT_CONFIG = StoreConfig()


class Student:

    def __init__(
        self,
        id: str,
        name: str,
        scores: list[float],
        added_at: datetime.datetime,
        last_edited_at: datetime.datetime | None = None,
    ):
        self._id: str = id
        self._name: str = name
        self._scores: list[float] = list(scores)
        self._added_at: datetime.datetime = added_at
        self._last_edited_at: datetime.datetime | None = last_edited_at

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = name

    @property
    def scores(self) -> list[float]:
        return self._scores.copy()

    @scores.setter
    def scores(self, scores: list[float]) -> None:
        self._scores = list(scores)

    @property
    def added_at(self) -> datetime.datetime:
        return self._added_at

    @property
    def last_edited_at(self) -> datetime.datetime | None:
        return self._last_edited_at

    def mark_edited(self, edited_at: datetime.datetime) -> None:
        self._last_edited_at = edited_at

    def copy(self) -> Student:
        return Student(
            id=self._id,
            name=self._name,
            scores=self._scores,
            added_at=self._added_at,
            last_edited_at=self._last_edited_at,
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "scores": list(self._scores),
            "added_at": self._added_at.isoformat(),
            "last_edited_at": (
                self._last_edited_at.isoformat() if self._last_edited_at else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        last_edited_raw = data.get("last_edited_at")

        return cls(
            id=data["id"],
            name=data["name"],
            scores=data["scores"],
            added_at=datetime.datetime.fromisoformat(data["added_at"]),
            last_edited_at=(
                datetime.datetime.fromisoformat(last_edited_raw)
                if last_edited_raw
                else None
            ),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._scores})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._name}, scores: {len(self._scores)}, id: {self._id}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented

        return self.to_dict() == other.to_dict()

    # === data validators ===

    @staticmethod
    def validate_name_input(name: Any, config: StoreConfig | None = None) -> str:
        """
        Validates and normalizes a Student name.

        Normalizes the input by stripping leading and trailing whitespace.
        Ensures the name:
            - Is a non-empty string
            - Is between `min_name_length` and `max_name_length` characters once trimmed
            - Contains only letters, whitespace, hyphens, and apostrophes

        Args:
            name (Any): The input name to validate.
            config (StoreConfig | None): Limits to apply. Defaults to the standard limits.

        Returns:
            The trimmed name if valid.

        Raises:
            TypeError: If the name is missing or not a string.
            ValueError: If the name violates a length or character rule.
        """
        config = config or _DEFAULT_CONFIG

        if not name or not isinstance(name, str):
            raise TypeError("Name is required and must be a string.")

        name = name.strip()

        if len(name) < config.min_name_length:
            raise ValueError(
                f"Name must be at least {config.min_name_length} characters long."
            )

        if len(name) > config.max_name_length:
            raise ValueError(
                f"Name must not exceed {config.max_name_length} characters."
            )

        if not NAME_PATTERN.fullmatch(name):
            raise ValueError(
                "Name can only contain letters, spaces, hyphens, and apostrophes."
            )

        return name

    @staticmethod
    def validate_scores_input(
        scores: Any, config: StoreConfig | None = None
    ) -> list[float]:
        """
        Validates a sequence of scores and returns an independent copy.

        Ensures the scores:
            - Are provided as a list or tuple
            - Contain between 1 and `max_scores` entries
            - Are each a finite real number (booleans are rejected)
            - Are each between `min_score` and `max_score`, inclusive

        Args:
            scores (Any): The input scores to validate.
            config (StoreConfig | None): Limits to apply. Defaults to the standard limits.

        Returns:
            A new list holding the validated scores in their original order.

        Raises:
            TypeError: If the scores are not a list or tuple, or an entry is not a number.
            ValueError: If the count or any individual value is out of bounds.

        Notes:
            - Positions in error messages are 1-based.
        """
        config = config or _DEFAULT_CONFIG

        if not isinstance(scores, (list, tuple)):
            raise TypeError("Scores must be a list of numbers.")

        if len(scores) == 0:
            raise ValueError("At least one score is required.")

        if len(scores) > config.max_scores:
            raise ValueError(f"Maximum {config.max_scores} scores allowed.")

        for position, score in enumerate(scores, 1):
            if (
                isinstance(score, bool)
                or not isinstance(score, Real)
                or not math.isfinite(score)
            ):
                raise TypeError(f"Score at position {position} must be a valid number.")

            if score < config.min_score or score > config.max_score:
                raise ValueError(
                    f"Score at position {position} must be between "
                    f"{config.min_score:g} and {config.max_score:g}."
                )

        return list(scores)

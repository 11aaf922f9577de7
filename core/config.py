# core/config.py

"""
Configuration for a `RecordStore`.

Limits on names, scores, and undo history are gathered in a single validated
`StoreConfig` model. The defaults describe the standard record rules:
names of 2 to 50 characters, 1 to 20 scores in [0, 100], a passing average of 60,
and an undo history of 50 steps.
"""

from __future__ import annotations

import json
import logging
import os

from pydantic import BaseModel, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)


class StoreConfig(BaseModel):
    """Validated limits applied by a `RecordStore`."""

    # maximum number of undo snapshots; oldest entries are evicted beyond this
    history_capacity: int = Field(50, ge=1, description="Undo history depth")
    min_name_length: int = Field(2, ge=1, description="Shortest allowed name")
    max_name_length: int = Field(50, ge=1, description="Longest allowed name")
    max_scores: int = Field(20, ge=1, description="Most scores per student")
    min_score: float = Field(0.0, description="Lowest allowed score")
    max_score: float = Field(100.0, description="Highest allowed score")
    # averages at or above this value count as passing
    passing_average: float = Field(60.0, description="Lowest passing average")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_bounds(self) -> StoreConfig:
        if self.min_name_length > self.max_name_length:
            raise ValueError("min_name_length must not exceed max_name_length")
        if self.min_score > self.max_score:
            raise ValueError("min_score must not exceed max_score")
        return self


def load_config(path: str | None) -> StoreConfig:
    """
    Loads a `StoreConfig` from a JSON file.

    Args:
        path (str | None): Location of the JSON config file. If None or missing, defaults are used.

    Returns:
        The validated `StoreConfig`.

    Raises:
        ValueError: If the file exists but does not contain a valid configuration.
    """
    if path is None or not os.path.exists(path):
        logger.info("No config file found at %s, using defaults", path)
        return StoreConfig()

    with open(path, "r") as f:
        raw = f.read()

    try:
        return StoreConfig.model_validate_json(raw)

    except ValidationError as e:
        raise ValueError(f"Invalid store configuration in {path}: {e}") from e


def save_config(config: StoreConfig, path: str) -> None:
    with open(path, "w") as f:
        json.dump(config.model_dump(), f, indent=2, sort_keys=True)

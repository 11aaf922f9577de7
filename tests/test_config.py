# tests/test_config.py

import json

import pydantic
import pytest

from core.config import StoreConfig, load_config, save_config


def test_defaults():
    config = StoreConfig()

    assert config.history_capacity == 50
    assert config.min_name_length == 2
    assert config.max_name_length == 50
    assert config.max_scores == 20
    assert config.min_score == 0.0
    assert config.max_score == 100.0
    assert config.passing_average == 60.0


def test_config_is_frozen():
    config = StoreConfig()

    with pytest.raises(pydantic.ValidationError):
        config.history_capacity = 10


@pytest.mark.parametrize(
    "overrides",
    [
        {"history_capacity": 0},
        {"min_name_length": 10, "max_name_length": 5},
        {"min_score": 50, "max_score": 10},
    ],
)
def test_rejects_invalid_bounds(overrides):
    with pytest.raises(pydantic.ValidationError):
        StoreConfig(**overrides)


def test_load_config_without_path_uses_defaults():
    assert load_config(None) == StoreConfig()


def test_load_config_missing_file_uses_defaults(tmp_path):
    assert load_config(str(tmp_path / "missing.json")) == StoreConfig()


def test_load_config_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"history_capacity": 5, "max_scores": 3}))

    config = load_config(str(path))

    assert config.history_capacity == 5
    assert config.max_scores == 3
    assert config.max_name_length == 50


def test_load_config_invalid_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"history_capacity": -1}))

    with pytest.raises(ValueError, match="Invalid store configuration"):
        load_config(str(path))


def test_save_then_load(tmp_path):
    path = str(tmp_path / "config.json")
    config = StoreConfig(passing_average=65)

    save_config(config, path)

    assert load_config(path) == config

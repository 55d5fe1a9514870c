"""
test_config_manager.py
----------------------
Tests for JSON config loading and default merging.
"""

import json

import pytest

from dungeon_core.core.services.config_manager import load_config, merge_config
from dungeon_core.entities.player.player_config import DEFAULT_CONFIG, load_player_config


DEFAULTS = {"movement": {"cooldown_ms": 200, "normal_duration_ms": 100}, "flag": True}


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "tuning.json"
    path.write_text(json.dumps({"_notes": "ignored", "movement": {"cooldown_ms": 150}}))

    config = load_config(str(path), DEFAULTS)

    assert config == {"movement": {"cooldown_ms": 150, "normal_duration_ms": 100}, "flag": True}


def test_missing_file_falls_back_to_defaults():
    config = load_config("does_not_exist.json", DEFAULTS)
    assert config == DEFAULTS
    assert config is not DEFAULTS


def test_malformed_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert load_config(str(path), DEFAULTS) == DEFAULTS


def test_non_object_file_falls_back(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")
    assert load_config(str(path), DEFAULTS) == DEFAULTS


def test_strict_mode_raises():
    with pytest.raises(FileNotFoundError):
        load_config("does_not_exist.json", DEFAULTS, strict=True)


def test_merge_does_not_mutate_defaults():
    merged = merge_config(DEFAULTS, {"movement": {"cooldown_ms": 1}})
    merged["movement"]["normal_duration_ms"] = 0

    assert DEFAULTS["movement"] == {"cooldown_ms": 200, "normal_duration_ms": 100}


def test_packaged_player_config_matches_defaults():
    assert load_player_config() == merge_config(DEFAULT_CONFIG, {})


def test_player_config_overrides():
    config = load_player_config({"combat": {"hazard_damage": 5}})
    assert config["combat"]["hazard_damage"] == 5
    assert config["combat"]["contact_damage"] == 10

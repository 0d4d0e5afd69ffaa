from __future__ import annotations

"""
Unit tests for the Configuration Domain.

Verifies default values and JSON loading with its fallbacks.
"""

import json
from pathlib import Path

from shelltree.domain.config import get_default_config, load_config


def test_default_config_values():
    cfg = get_default_config()
    assert cfg["small_dir_threshold"] == 100000
    assert cfg["disk_capacity"] == 70000000
    assert cfg["desired_free_space"] == 30000000
    assert cfg["render_tree"] is False


def test_default_config_returns_fresh_dict():
    a = get_default_config()
    a["disk_capacity"] = 1
    assert get_default_config()["disk_capacity"] == 70000000


def test_load_config_merges_known_keys(tmp_path: Path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"disk_capacity": 100, "theme": "dark"}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["disk_capacity"] == 100
    assert cfg["desired_free_space"] == 30000000
    assert "theme" not in cfg


def test_load_config_missing_file_returns_defaults(tmp_path: Path):
    assert load_config(str(tmp_path / "missing.json")) == get_default_config()


def test_load_config_invalid_json_returns_defaults(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_load_config_non_object_returns_defaults(tmp_path: Path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()

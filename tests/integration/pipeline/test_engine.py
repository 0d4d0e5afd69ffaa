from __future__ import annotations

"""
Integration tests for the analysis pipeline.

Runs run_pipeline end to end against real transcript files and a mocked
HTTP source.
"""

from pathlib import Path
from unittest.mock import patch

from shelltree.core.pipeline.engine import run_pipeline
from shelltree.domain.errors import TranscriptFetchError


def test_pipeline_sample_answers(mock_config_dict):
    result = run_pipeline(mock_config_dict)

    assert result.ok is True, result.error
    assert result.small_dirs_total == 95437
    assert result.deletion_candidate == 24933642
    assert result.total_used == 48381165
    assert result.required_space == 8381165
    assert result.directory_count == 4
    assert result.file_count == 10
    assert result.tree_lines == []
    assert result.summary["source"] == "local"


def test_pipeline_renders_tree_when_requested(mock_config_dict):
    mock_config_dict["render_tree"] = True
    result = run_pipeline(mock_config_dict)

    assert result.ok is True
    assert result.tree_lines[0] == "/ (48381165)"


def test_pipeline_custom_parameters(tmp_path: Path):
    path = tmp_path / "t.txt"
    path.write_text("$ cd /\n$ ls\n10 a.txt\n", encoding="utf-8")

    result = run_pipeline({
        "input_path": str(path),
        "small_dir_threshold": 100000,
        "disk_capacity": 15,
        "desired_free_space": 10,
    })

    assert result.ok is True
    assert result.required_space == 5
    assert result.small_dirs_total == 10
    assert result.deletion_candidate == 10


def test_pipeline_query_failure_returns_error(tmp_path: Path):
    path = tmp_path / "t.txt"
    path.write_text("$ cd /\n$ ls\n10 a.txt\n", encoding="utf-8")

    # Needs 11 freed but the whole tree only holds 10
    result = run_pipeline({
        "input_path": str(path),
        "disk_capacity": 10,
        "desired_free_space": 11,
    })

    assert result.ok is False
    assert "Query failed" in result.error
    assert result.summary["total_used"] == 10


def test_pipeline_navigation_error_returns_error(tmp_path: Path):
    path = tmp_path / "t.txt"
    path.write_text("$ cd /\n$ cd ..\n", encoding="utf-8")

    result = run_pipeline({"input_path": str(path)})

    assert result.ok is False
    assert "line 2" in result.error


def test_pipeline_missing_file_returns_error(tmp_path: Path):
    result = run_pipeline({"input_path": str(tmp_path / "nope.txt")})
    assert result.ok is False
    assert "Cannot read transcript" in result.error


def test_pipeline_remote_source(sample_transcript):
    with patch(
        "shelltree.core.pipeline.engine.fetch_transcript",
        return_value=sample_transcript,
    ) as mock_fetch:
        result = run_pipeline({
            "input_path": "https://example.com/2022/day/7/input",
            "session_cookie": "secret",
        })

    mock_fetch.assert_called_once_with("https://example.com/2022/day/7/input", "secret")
    assert result.ok is True
    assert result.small_dirs_total == 95437
    assert result.summary["source"] == "remote"


def test_pipeline_remote_failure_returns_error():
    with patch(
        "shelltree.core.pipeline.engine.fetch_transcript",
        side_effect=TranscriptFetchError("Failed to download"),
    ):
        result = run_pipeline({"input_path": "https://example.com/input"})

    assert result.ok is False
    assert "Failed to download" in result.error


def test_pipeline_renders_deep_transcript(tmp_path: Path):
    depth = 3000
    lines = ["$ cd /"]
    for i in range(depth):
        lines += ["$ ls", f"dir d{i}", f"$ cd d{i}"]
    lines += ["$ ls", "7 leaf"]
    path = tmp_path / "deep.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    result = run_pipeline({"input_path": str(path), "render_tree": True})

    assert result.ok is True, result.error
    assert result.total_used == 7
    assert result.small_dirs_total == 7 * (depth + 1)
    assert result.deletion_candidate == 7
    assert len(result.tree_lines) == depth + 2
    assert result.tree_lines[-1] == "    " * depth + "└── leaf (7)"

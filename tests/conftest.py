from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared transcript and configuration fixtures used across the suite.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_TRANSCRIPT: List[str] = [
    "$ cd /",
    "$ ls",
    "dir a",
    "14848514 b.txt",
    "8504156 c.dat",
    "dir d",
    "$ cd a",
    "$ ls",
    "dir e",
    "29116 f",
    "2557 g",
    "62596 h.lst",
    "$ cd e",
    "$ ls",
    "584 i",
    "$ cd ..",
    "$ cd ..",
    "$ cd d",
    "$ ls",
    "4060174 j",
    "8033020 d.log",
    "5626152 d.ext",
    "7214296 k",
]


@pytest.fixture
def sample_transcript() -> List[str]:
    """
    Return the canonical 23-line transcript.

    Expected answers: small-directories sum 95437, deletion candidate
    24933642 (capacity 70000000, desired free space 30000000).
    """
    return list(SAMPLE_TRANSCRIPT)


@pytest.fixture
def sample_transcript_file(tmp_path: Path, sample_transcript: List[str]) -> Path:
    """Write the canonical transcript to disk with a trailing newline."""
    path = tmp_path / "input.txt"
    path.write_text("\n".join(sample_transcript) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def mock_config_dict(sample_transcript_file: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary pointing at the
    canonical transcript file.
    """
    return {
        "input_path": str(sample_transcript_file),
        "session_cookie": "",
        "small_dir_threshold": 100000,
        "disk_capacity": 70000000,
        "desired_free_space": 30000000,
        "render_tree": False,
    }

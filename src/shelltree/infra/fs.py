from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and resilient streaming of transcript files.
"""

import os
from typing import Iterator, Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_transcript_lines(file_path: str) -> Iterator[str]:
    """
    Generate a line-by-line stream of a transcript file.

    Undecodable bytes are replaced rather than aborting the read, and line
    endings are stripped.

    Args:
        file_path: Path to the transcript file.

    Yields:
        str: Transcript lines without their line terminators.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line.rstrip("\r\n")

from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to hand analysis
outcomes from the pipeline engine to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete analysis run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Transcript source (file path or URL).
        small_dir_threshold: Threshold used by the small-directories query.
        disk_capacity: Total filesystem capacity assumed.
        desired_free_space: Free space the deletion must reach.
        total_used: Total size of the root directory.
        small_dirs_total: Sum of directory sizes at or below the threshold.
        required_space: Minimum size the deleted directory must have.
        deletion_candidate: Size of the smallest directory freeing enough space.
        directory_count: Number of directories in the tree.
        file_count: Number of files in the tree.
        tree_lines: Rendered ASCII tree (empty unless requested).
        summary: Extra execution metadata.
    """
    ok: bool
    error: str

    input_path: str
    small_dir_threshold: int
    disk_capacity: int
    desired_free_space: int

    total_used: int = 0
    small_dirs_total: int = 0
    required_space: int = 0
    deletion_candidate: int = 0

    directory_count: int = 0
    file_count: int = 0

    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        input_path=cfg.get("input_path", ""),
        small_dir_threshold=cfg.get("small_dir_threshold", 0),
        disk_capacity=cfg.get("disk_capacity", 0),
        desired_free_space=cfg.get("desired_free_space", 0),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        total_used: int,
        small_dirs_total: int,
        required_space: int,
        deletion_candidate: int,
        directory_count: int,
        file_count: int,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        cfg: Final configuration used during execution.
        total_used: Total size of the root directory.
        small_dirs_total: Small-directories query answer.
        required_space: Space the deletion must free.
        deletion_candidate: Deletion-candidate query answer.
        directory_count: Number of directories discovered.
        file_count: Number of files discovered.
        tree_lines: Rendered ASCII tree.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        input_path=cfg.get("input_path", ""),
        small_dir_threshold=cfg["small_dir_threshold"],
        disk_capacity=cfg["disk_capacity"],
        desired_free_space=cfg["desired_free_space"],
        total_used=total_used,
        small_dirs_total=small_dirs_total,
        required_space=required_space,
        deletion_candidate=deletion_candidate,
        directory_count=directory_count,
        file_count=file_count,
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )

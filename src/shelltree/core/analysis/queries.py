from __future__ import annotations

"""
Disk Usage Aggregation Queries.

Read-only traversals over a finished tree. Neither query mutates the
tree, so they can run in any order or concurrently.
"""

import logging
from typing import List

from shelltree.domain.config import DEFAULT_SMALL_DIR_THRESHOLD
from shelltree.domain.errors import QueryError
from shelltree.domain.tree_models import Directory

logger = logging.getLogger(__name__)


def collect_directory_sizes(root: Directory) -> List[int]:
    """Return the total size of every directory under root, root first."""
    return [d.total_size() for d in root.walk()]


def sum_small_directories(root: Directory, threshold: int = DEFAULT_SMALL_DIR_THRESHOLD) -> int:
    """
    Sum the total sizes of all directories whose total is at most threshold.

    Nested directories are counted independently, so a qualifying
    directory and its qualifying ancestor both contribute.

    Args:
        root: Root of the tree to scan.
        threshold: Inclusive upper bound on a directory's total size.

    Returns:
        int: The accumulated total.
    """
    total = sum(size for size in collect_directory_sizes(root) if size <= threshold)
    logger.debug(f"Directories at or below {threshold}: combined size {total}")
    return total


def required_space(root: Directory, capacity: int, desired_free: int) -> int:
    """
    Compute how much must be deleted to reach the desired free space.

    Args:
        root: Root of the tree; its total is the used space.
        capacity: Total filesystem capacity.
        desired_free: Free space that must be available afterwards.

    Returns:
        int: Space to free. Zero or negative means nothing needs deleting.
    """
    return desired_free - (capacity - root.total_size())


def find_deletion_candidate(root: Directory, min_space: int) -> int:
    """
    Find the smallest directory total that frees at least min_space.

    Args:
        root: Root of the tree to scan.
        min_space: Minimum total size the chosen directory must have.

    Returns:
        int: Total size of the chosen directory.

    Raises:
        QueryError: If no directory is large enough.
    """
    candidates = [size for size in collect_directory_sizes(root) if size >= min_space]
    if not candidates:
        raise QueryError(
            f"No directory frees at least {min_space}; "
            f"the whole tree only holds {root.total_size()}"
        )
    return min(candidates)

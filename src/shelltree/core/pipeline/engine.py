from __future__ import annotations

"""
Core analysis pipeline.

This module coordinates a full run:
1. Validates configuration.
2. Loads the transcript from disk or over HTTP.
3. Replays it into a directory tree.
4. Runs both aggregation queries in parallel threads.
5. Optionally renders the tree.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Tuple

from shelltree.core.analysis.queries import (
    find_deletion_candidate,
    required_space,
    sum_small_directories,
)
from shelltree.core.analysis.tree_renderer import render_tree
from shelltree.core.interpreter.session import build_tree
from shelltree.core.pipeline.validator import validate_config
from shelltree.domain.errors import TranscriptError
from shelltree.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from shelltree.domain.tree_models import Directory
from shelltree.infra.fs import normalize_path, stream_transcript_lines
from shelltree.infra.network import fetch_transcript, is_remote_source

logger = logging.getLogger(__name__)


def run_pipeline(config: Optional[Dict[str, Any]]) -> PipelineResult:
    """
    Execute the full transcript analysis.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        PipelineResult: Object containing status, answers and summary.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    source = cfg["input_path"]
    if not is_remote_source(source):
        source = normalize_path(source, os.getcwd())
        cfg["input_path"] = source

    # -------------------------------------------------------------------------
    # 2) Transcript Replay
    # -------------------------------------------------------------------------
    try:
        lines = _load_lines(source, cfg["session_cookie"])
        root = build_tree(lines)
    except TranscriptError as e:
        msg = f"Transcript rejected: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg)
    except OSError as e:
        msg = f"Cannot read transcript '{source}': {e}"
        logger.error(msg)
        return create_error_result(msg, cfg)

    total_used = root.total_size()
    to_free = required_space(root, cfg["disk_capacity"], cfg["desired_free_space"])
    logger.info(f"Tree rebuilt: {total_used} used, {to_free} must be freed.")

    # -------------------------------------------------------------------------
    # 3) Queries (read-only, safe to run concurrently)
    # -------------------------------------------------------------------------
    with ThreadPoolExecutor(max_workers=2) as executor:
        small_future = executor.submit(sum_small_directories, root, cfg["small_dir_threshold"])
        candidate_future = executor.submit(find_deletion_candidate, root, to_free)

        small_total = small_future.result()
        try:
            candidate = candidate_future.result()
        except TranscriptError as e:
            msg = f"Query failed: {e}"
            logger.error(msg)
            return create_error_result(msg, cfg, summary_extra={"total_used": total_used})

    # -------------------------------------------------------------------------
    # 4) Presentation
    # -------------------------------------------------------------------------
    tree_lines: List[str] = render_tree(root) if cfg["render_tree"] else []

    directory_count, file_count = _count_entries(root)
    logger.info("Pipeline execution finished successfully.")

    return create_success_result(
        cfg,
        total_used=total_used,
        small_dirs_total=small_total,
        required_space=to_free,
        deletion_candidate=candidate,
        directory_count=directory_count,
        file_count=file_count,
        tree_lines=tree_lines,
        summary_extra={
            "source": "remote" if is_remote_source(source) else "local",
            "root_name": root.name,
        },
    )


def _load_lines(source: str, session_cookie: str) -> List[str]:
    if is_remote_source(source):
        return fetch_transcript(source, session_cookie)
    logger.debug(f"Reading transcript file: {source}")
    return list(stream_transcript_lines(source))


def _count_entries(root: Directory) -> Tuple[int, int]:
    directories = 0
    files = 0
    for node in root.walk():
        directories += 1
        files += len(node.files)
    return directories, files

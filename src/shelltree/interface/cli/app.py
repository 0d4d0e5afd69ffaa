from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging setup, configuration merging
(defaults, optional JSON file, command-line overrides), pipeline
execution and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from shelltree.core.pipeline.engine import run_pipeline
from shelltree.core.pipeline.validator import validate_config
from shelltree.domain.config import get_default_config, load_config
from shelltree.domain.pipeline_models import PipelineResult
from shelltree.infra.logging import LoggingConfig, configure_logging, get_logger
from shelltree.infra.network import is_remote_source
from shelltree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 analysis failure, 2 missing
             input, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Resolve base configuration
    if args.config_path:
        base_conf = load_config(args.config_path)
    else:
        base_conf = get_default_config()

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Pre-flight input verification
    input_path = clean_conf["input_path"]
    if not is_remote_source(input_path) and not os.path.isfile(input_path):
        msg = f"Transcript file does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 6. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_answers(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into base."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_answers(result: PipelineResult) -> None:
    """
    Print the two answers, one per line, preceded by the tree if rendered.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    for line in result.tree_lines:
        print(line)

    print(result.small_dirs_total)
    print(result.deletion_candidate)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the shelltree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="shelltree",
        description=(
            "Rebuild a directory tree from a cd/ls shell transcript and "
            "report disk usage answers."
        ),
    )

    # --- Source ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Transcript file path or http(s) URL (default: input.txt).",
    )
    p.add_argument(
        "--session-cookie",
        dest="session_cookie",
        default=None,
        help="Session cookie sent when downloading a remote transcript.",
    )
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file with configuration values.",
    )

    # --- Query Parameters ---
    p.add_argument(
        "--threshold",
        dest="small_dir_threshold",
        type=int,
        default=None,
        help="Upper bound for the small-directories sum (default: 100000).",
    )
    p.add_argument(
        "--capacity",
        dest="disk_capacity",
        type=int,
        default=None,
        help="Total filesystem capacity (default: 70000000).",
    )
    p.add_argument(
        "--free-space",
        dest="desired_free_space",
        type=int,
        default=None,
        help="Free space required after deletion (default: 30000000).",
    )

    # --- Presentation ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the rebuilt tree before the answers.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the full result as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Options left unset are omitted so they do not mask file or default
    values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for key in (
        "input_path",
        "session_cookie",
        "small_dir_threshold",
        "disk_capacity",
        "desired_free_space",
    ):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value

    if args.print_tree:
        overrides["render_tree"] = True

    return overrides

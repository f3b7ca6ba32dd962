from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the domain layer.
"""

import argparse
from typing import Any, Dict

from fsreplay.core.solver import PuzzlePart

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the FSReplay CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fsreplay",
        description=(
            "Rebuild a directory tree from a terminal transcript of cd/ls "
            "commands and answer size queries over it."
        ),
    )

    # --- Input Selection ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        help="Transcript file to replay.",
        default=None,
    )
    p.add_argument(
        "-p", "--puzzle-part",
        dest="puzzle_part",
        choices=[part.value for part in PuzzlePart],
        default=None,
        help="Query to answer: 'one' (sum of small directories) or "
             "'two' (smallest directory to delete).",
    )

    # --- Query Parameters ---
    p.add_argument(
        "--total-space",
        dest="total_disk_space",
        type=int,
        default=None,
        help="Total disk capacity.",
    )
    p.add_argument(
        "--update-space",
        dest="update_space",
        type=int,
        default=None,
        help="Free space required by the update.",
    )
    p.add_argument(
        "--small-limit",
        dest="small_directory_limit",
        type=int,
        default=None,
        help="Exclusive size bound for part one.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file (defaults to the user data directory).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration (to --config or the user data directory) and exit.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Log the reconstructed tree.",
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

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only values explicitly given on the command line are returned.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for key in ("total_disk_space", "update_space", "small_directory_limit"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value

    return overrides

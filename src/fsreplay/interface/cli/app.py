from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted file, command-line overrides), transcript replay,
and result rendering. The answer is the only thing written to stdout.
"""

import argparse
import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fsreplay.core.analysis.tree_renderer import render_tree
from fsreplay.core.solver import FileSystemSolver, PuzzlePart
from fsreplay.core.validator import validate_config
from fsreplay.domain.config import get_default_config, load_config, save_config
from fsreplay.domain.errors import FSReplayError
from fsreplay.domain.result_models import (
    SolveResult,
    create_error_result,
    create_success_result,
)
from fsreplay.infra.fs import normalize_path
from fsreplay.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from fsreplay.interface.cli import args as cli_args

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
        int: Process exit code (0 success, 1 solver failure, 2 bad input).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(
        LoggingConfig(level=log_level, console=True, log_file=args.log_file),
        force=True,
    )

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: argparse.Namespace) -> int:
    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_path)

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, indent=2))
        return 0

    if args.save_config:
        return 0 if save_config(clean_conf, args.config_path) else 1

    if not args.input_path or not args.puzzle_part:
        msg = "both --input and --puzzle-part are required"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    input_path = normalize_path(args.input_path, fallback=os.getcwd())
    if not os.path.isfile(input_path):
        msg = f"Transcript does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    part = PuzzlePart(args.puzzle_part)
    logger.debug(f"Replaying transcript: {input_path}")

    try:
        result = _solve(input_path, part, clean_conf, print_tree=args.print_tree)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    elif result.ok:
        print(result.answer)
    else:
        print(f"ERROR: {result.error}", file=sys.stderr)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _solve(
        input_path: str,
        part: PuzzlePart,
        cfg: Dict[str, Any],
        print_tree: bool = False,
) -> SolveResult:
    """
    Replay the transcript and answer `part`, capturing domain failures in
    the returned result.
    """
    try:
        solver = FileSystemSolver.from_file(input_path, cfg)
        context = solver.build_context()
        answer = solver.answer(context, part)
    except FSReplayError as e:
        logger.error(str(e))
        return create_error_result(str(e), cfg, input_path, part.value)

    tree_lines: List[str] = []
    if print_tree:
        tree_lines = render_tree(context)
        logger.info("Tree Preview:\n" + "\n".join(tree_lines))

    summary = {
        "commands": len(solver.commands),
        "nodes": len(context.store),
    }
    return create_success_result(
        answer, cfg, input_path, part.value, tree_lines=tree_lines, summary_extra=summary
    )

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only keys already known to the base configuration are merged.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())

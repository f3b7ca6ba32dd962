from __future__ import annotations

"""
Solve Result Data Models.

Defines the result object exchanged between the solver and the interface
layer, together with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of a single `solve` invocation.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Transcript that was replayed.
        puzzle_part: Requested part ("one" or "two").
        answer: Decimal answer, empty on failure.
        total_disk_space: Disk capacity used by the query.
        update_space: Space required by the update.
        small_directory_limit: Exclusive size bound for Part 1.
        tree_lines: Rendered tree, when requested.
        summary: Replay statistics.
    """
    ok: bool
    error: str

    input_path: str
    puzzle_part: str
    answer: str

    total_disk_space: int
    update_space: int
    small_directory_limit: int

    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        input_path: str,
        puzzle_part: str,
        summary_extra: Optional[Dict[str, Any]] = None
) -> SolveResult:
    """
    Create a failed solve result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        input_path: Transcript path.
        puzzle_part: Requested part.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        SolveResult: An immutable error result object.
    """
    return SolveResult(
        ok=False,
        error=error,
        input_path=input_path,
        puzzle_part=puzzle_part,
        answer="",
        total_disk_space=cfg.get("total_disk_space", 0),
        update_space=cfg.get("update_space", 0),
        small_directory_limit=cfg.get("small_directory_limit", 0),
        summary=summary_extra or {},
    )


def create_success_result(
        answer: str,
        cfg: Dict[str, Any],
        input_path: str,
        puzzle_part: str,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> SolveResult:
    """
    Create a successful solve result instance.

    Args:
        answer: Decimal answer produced by the query.
        cfg: Final configuration used during execution.
        input_path: Transcript path.
        puzzle_part: Requested part.
        tree_lines: Rendered tree content.
        summary_extra: Replay statistics.

    Returns:
        SolveResult: An immutable success result object.
    """
    return SolveResult(
        ok=True,
        error="",
        input_path=input_path,
        puzzle_part=puzzle_part,
        answer=answer,
        total_disk_space=cfg.get("total_disk_space", 0),
        update_space=cfg.get("update_space", 0),
        small_directory_limit=cfg.get("small_directory_limit", 0),
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )

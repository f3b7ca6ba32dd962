from __future__ import annotations

"""
Filesystem Reconstruction Solver.

Entry point of the replay subsystem: parses a transcript once, then for
each requested part replays it into a fresh tree and runs the matching
aggregate query.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from fsreplay.core.filesystem.context import Context
from fsreplay.core.queries import smallest_directory_to_free, sum_small_directories
from fsreplay.core.replay.engine import replay
from fsreplay.core.replay.parser import parse_transcript
from fsreplay.domain.command_models import Command
from fsreplay.domain.config import get_default_config
from fsreplay.infra.fs import read_transcript_lines

logger = logging.getLogger(__name__)


class PuzzlePart(Enum):
    ONE = "one"
    TWO = "two"


class FileSystemSolver:
    """
    Holds the parsed command sequence of one transcript.

    Args:
        commands: Parsed commands, in transcript order.
        config: Disk figures; missing keys take their default values.
    """

    def __init__(self, commands: List[Command], config: Optional[Dict[str, Any]] = None) -> None:
        self.commands = commands
        self.config = get_default_config()
        if config:
            self.config.update(config)

    @classmethod
    def from_reader(
            cls, source: Iterable[str], config: Optional[Dict[str, Any]] = None
    ) -> "FileSystemSolver":
        """Parse every line of `source` (file object, StringIO, list of lines)."""
        return cls(parse_transcript(source), config)

    @classmethod
    def from_file(cls, path: str, config: Optional[Dict[str, Any]] = None) -> "FileSystemSolver":
        logger.debug(f"Reading transcript: {path}")
        return cls.from_reader(read_transcript_lines(path), config)

    def build_context(self) -> Context:
        """Replay the transcript into a new tree."""
        return replay(self.commands)

    def solve(self, part: PuzzlePart) -> str:
        """
        Replay the transcript and answer the requested part.

        Returns:
            str: The answer as a decimal numeral.
        """
        return self.answer(self.build_context(), part)

    def answer(self, context: Context, part: PuzzlePart) -> str:
        """Run the query of `part` against an already replayed context."""
        if part is PuzzlePart.ONE:
            value = sum_small_directories(context, self.config["small_directory_limit"])
        elif part is PuzzlePart.TWO:
            value = smallest_directory_to_free(
                context,
                self.config["total_disk_space"],
                self.config["update_space"],
            )
        else:
            raise ValueError(f"unknown puzzle part: {part!r}")

        logger.debug(f"Part {part.value} answer: {value}")
        return str(value)

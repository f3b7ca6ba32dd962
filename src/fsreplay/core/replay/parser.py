from __future__ import annotations

"""
Transcript Parser.

Turns the raw lines of a terminal transcript into an ordered list of
commands. Lines starting with `$` open a new command; every other line
is output of the most recent command. Any malformed line rejects the
whole transcript.
"""

import logging
import re
from typing import Iterable, List

from fsreplay.domain.command_models import ChangeDirectory, Command, ListDirectory, LsEntry
from fsreplay.domain.constants import COMMAND_PREFIX
from fsreplay.domain.errors import TranscriptParseError

logger = logging.getLogger(__name__)

_SIZE_RX = re.compile(r"[0-9]+")
_DIR_MARKER = "dir"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_transcript(lines: Iterable[str]) -> List[Command]:
    """
    Parse a full transcript.

    Args:
        lines: Transcript lines; trailing line terminators are ignored and
            blank lines are skipped.

    Returns:
        List[Command]: Commands in transcript order, outputs attached.

    Raises:
        TranscriptParseError: On the first malformed line.
    """
    commands: List[Command] = []

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            continue

        if line.startswith(COMMAND_PREFIX):
            commands.append(parse_command(line[len(COMMAND_PREFIX):]))
            continue

        if not commands:
            raise TranscriptParseError(f"missing outputs' command: {line}")
        add_output(commands[-1], line)

    logger.debug(f"Parsed {len(commands)} commands from transcript.")
    return commands


def parse_command(text: str) -> Command:
    """
    Build a command from a `$` line with the prefix already removed.

    Raises:
        TranscriptParseError: If the command is missing, unknown, or a `cd`
            without target.
    """
    tokens = text.split()

    if tokens == ["ls"]:
        return ListDirectory()
    if len(tokens) == 2 and tokens[0] == "cd":
        return ChangeDirectory(target=tokens[1])
    if tokens == ["cd"]:
        raise TranscriptParseError("wrong cd command: missing target directory")
    if tokens:
        raise TranscriptParseError(f"unknown command '{tokens[0]}'")
    raise TranscriptParseError("missing command")


def add_output(command: Command, output: str) -> None:
    """
    Route one output line to the command that produced it.

    Raises:
        TranscriptParseError: If the command produces no output or the line
            does not have the `ls` output shape.
    """
    if isinstance(command, ChangeDirectory):
        raise TranscriptParseError(f"cd {command.target}: command does not produce any output")
    command.outputs.append(parse_ls_entry(output))


def parse_ls_entry(output: str) -> LsEntry:
    """
    Parse `dir <name>` or `<size> <name>`.

    Raises:
        TranscriptParseError: On any other shape, a non-numeric size, or an
            invalid entry name (empty, or holding a separator or whitespace).
    """
    head, sep, name = output.partition(" ")
    if not sep:
        raise TranscriptParseError(
            f"wrong ls output: expected '{{[0-9]+|dir}} {{name}}' (got '{output}')"
        )

    _check_entry_name(name, output)

    if head == _DIR_MARKER:
        return LsEntry(name=name)

    if not _SIZE_RX.fullmatch(head):
        raise TranscriptParseError(
            f"wrong ls output: file size must be a valid unsigned integer (got '{head}')"
        )
    return LsEntry(name=name, size=int(head))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_entry_name(name: str, output: str) -> None:
    # names are single tokens: `cd` could never reach one holding a blank
    if not name or "/" in name or any(ch.isspace() for ch in name):
        raise TranscriptParseError(f"wrong ls output: invalid entry name in '{output}'")

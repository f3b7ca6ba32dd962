from __future__ import annotations

"""
Transcript Command Data Models.

Defines the closed set of commands a transcript may contain. A command
is built by the parser from its `$` line and then receives the output
lines that follow it; once parsing ends it is only read.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

# -----------------------------------------------------------------------------
# OUTPUT ENTRIES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LsEntry:
    """
    One line of `ls` output.

    Attributes:
        name: Listed entry name.
        size: File size, or None when the entry is a directory.
    """
    name: str
    size: Optional[int] = None

    @property
    def is_directory(self) -> bool:
        return self.size is None

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ChangeDirectory:
    """`$ cd <target>` where target is "/", ".." or a child name."""
    target: str


@dataclass
class ListDirectory:
    """`$ ls` together with every output line captured after it."""
    outputs: List[LsEntry] = field(default_factory=list)


Command = Union[ChangeDirectory, ListDirectory]

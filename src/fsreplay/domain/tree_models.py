from __future__ import annotations

"""
Reconstructed Filesystem Data Models.

Provides the tagged node variants stored by the arena-based Node Store.
Directories reference their children by stable identifier instead of
holding them directly, so the tree can be navigated without aliasing.
"""

from dataclasses import dataclass, field
from typing import List, Union

# Stable index of a node inside its owning store
NodeId = int

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the reconstructed tree.

    Attributes:
        name: Entry name as listed by `ls`.
        size: Size in bytes, unbounded.
    """
    name: str
    size: int


@dataclass
class DirectoryNode:
    """
    Represents a directory entry in the reconstructed tree.

    Attributes:
        name: Entry name as listed by `ls` ("/" for the root).
        children: Identifiers of the owned children, in listing order.
    """
    name: str
    children: List[NodeId] = field(default_factory=list)


Node = Union[FileNode, DirectoryNode]

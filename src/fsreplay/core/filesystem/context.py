from __future__ import annotations

"""
Replay Cursor.

Tracks the working directory during replay as the path of directory
identifiers leading from the root. The cursor starts empty: until the
first reset to root there is no working directory at all.
"""

from typing import Callable, List, Optional

from fsreplay.core.filesystem.store import NodeStore
from fsreplay.domain.tree_models import NodeId


class Context:
    """
    Root reference plus the cursor stack over a NodeStore.

    The top of the stack is the current working directory.
    """

    def __init__(self, store: Optional[NodeStore] = None) -> None:
        self.store = store if store is not None else NodeStore()
        self._root = self.store.new_root_directory()
        self._cursor: List[NodeId] = []

    @property
    def root(self) -> NodeId:
        return self._root

    @property
    def cursor(self) -> List[NodeId]:
        """Copy of the path from the root to the working directory."""
        return list(self._cursor)

    def reset_to_root(self) -> None:
        self._cursor = [self._root]

    def go_to(self, node_id: NodeId) -> None:
        """Push a directory onto the cursor; the caller checks it is a child."""
        self._cursor.append(node_id)

    def move_back(self) -> Optional[NodeId]:
        """Pop the working directory, or return None when there is none."""
        if not self._cursor:
            return None
        return self._cursor.pop()

    def working_directory(self) -> Optional[NodeId]:
        if not self._cursor:
            return None
        return self._cursor[-1]

    def browse_from_root(self, predicate: Callable[[NodeId], bool]) -> List[NodeId]:
        """Return the root and its descendants, in pre-order, that satisfy `predicate`."""
        candidates = [self._root] + self.store.successors(self._root)
        return [node_id for node_id in candidates if predicate(node_id)]

from __future__ import annotations

"""
Node Store.

Arena holding every node of a reconstructed filesystem. Nodes are
addressed by the index at which they were created; directories keep the
identifiers of their children in listing order. Each node has at most
one parent, assigned by `add_child`.
"""

from typing import Dict, List

from fsreplay.domain.constants import ROOT_NAME
from fsreplay.domain.tree_models import DirectoryNode, FileNode, Node, NodeId


class NodeStore:
    """Owns the nodes of a single tree and answers structural queries."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._parents: Dict[NodeId, NodeId] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    # -------------------------------------------------------------------------
    # CONSTRUCTION
    # -------------------------------------------------------------------------

    def new_root_directory(self) -> NodeId:
        """Create the empty root directory, named "/"."""
        return self._register(DirectoryNode(name=ROOT_NAME))

    def new_directory(self, name: str) -> NodeId:
        return self._register(DirectoryNode(name=name))

    def new_file(self, name: str, size: int) -> NodeId:
        return self._register(FileNode(name=name, size=size))

    def add_child(self, parent: NodeId, child: NodeId) -> None:
        """
        Append `child` to the children of directory `parent`.

        Listing the same directory twice appends duplicates; nothing is
        merged or replaced.

        Raises:
            TypeError: If `parent` is a file.
            ValueError: If `child` already has a parent or is `parent` itself.
        """
        directory = self._directory(parent)
        if child == parent or child in self._parents:
            raise ValueError(f"node {child} is already attached to the tree")
        self.get(child)
        directory.children.append(child)
        self._parents[child] = parent

    # -------------------------------------------------------------------------
    # ACCESSORS
    # -------------------------------------------------------------------------

    def get(self, node_id: NodeId) -> Node:
        if node_id < 0 or node_id >= len(self._nodes):
            raise KeyError(node_id)
        return self._nodes[node_id]

    def name(self, node_id: NodeId) -> str:
        return self.get(node_id).name

    def is_directory(self, node_id: NodeId) -> bool:
        return isinstance(self.get(node_id), DirectoryNode)

    def is_file(self, node_id: NodeId) -> bool:
        return isinstance(self.get(node_id), FileNode)

    def children(self, node_id: NodeId) -> List[NodeId]:
        """Direct children of a node; files have none."""
        node = self.get(node_id)
        if isinstance(node, DirectoryNode):
            return list(node.children)
        return []

    # -------------------------------------------------------------------------
    # AGGREGATION AND TRAVERSAL
    # -------------------------------------------------------------------------

    def size(self, node_id: NodeId) -> int:
        """
        Total size of a node.

        A file reports its listed size; a directory reports the sum of the
        sizes of everything beneath it. Nothing is cached, so each call
        walks the subtree. Python integers are unbounded, so totals past
        64 bits are exact.
        """
        total = 0
        pending = [node_id]
        while pending:
            node = self.get(pending.pop())
            if isinstance(node, FileNode):
                total += node.size
            else:
                pending.extend(node.children)
        return total

    def successors(self, node_id: NodeId) -> List[NodeId]:
        """
        Every descendant of a node in pre-order (parent before children,
        siblings in listing order). The node itself is not included.
        """
        ordered: List[NodeId] = []
        pending = list(reversed(self.children(node_id)))
        while pending:
            current = pending.pop()
            ordered.append(current)
            pending.extend(reversed(self.children(current)))
        return ordered

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _register(self, node: Node) -> NodeId:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def _directory(self, node_id: NodeId) -> DirectoryNode:
        node = self.get(node_id)
        if not isinstance(node, DirectoryNode):
            raise TypeError(f"node {node_id} ('{node.name}') is not a directory")
        return node

from __future__ import annotations

"""
Tree Renderer.

Converts a replayed tree into a visual ASCII representation, annotating
each entry with its kind and aggregated size.
"""

from typing import List

from fsreplay.core.filesystem.context import Context
from fsreplay.core.filesystem.store import NodeStore
from fsreplay.domain.tree_models import NodeId

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(context: Context) -> List[str]:
    """
    Render the whole tree held by a context, root first.

    Returns:
        List[str]: Visual lines of the tree.
    """
    store = context.store
    lines = [describe_node(store, context.root)]
    render_tree_structure(store, context.root, lines)
    return lines


def render_tree_structure(
        store: NodeStore,
        directory: NodeId,
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Recursively append the children of `directory` to `lines`.

    Uses standard ASCII connectors (├──, └──) and keeps listing order.

    Args:
        store: Store owning the nodes.
        directory: Node whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    entries = store.children(directory)
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{describe_node(store, entry)}")

        if store.is_directory(entry):
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(store, entry, lines, prefix=new_prefix)


def describe_node(store: NodeStore, node: NodeId) -> str:
    """Format `name (kind, size=N)` for a single node."""
    kind = "dir" if store.is_directory(node) else "file"
    return f"{store.name(node)} ({kind}, size={store.size(node)})"

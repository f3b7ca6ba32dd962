from __future__ import annotations

"""
Unit tests for the Node Store.

Verifies:
1. Node construction and the root sentinel.
2. Child attachment rules (append order, duplicates, single parent).
3. Size aggregation, including totals beyond 64 bits.
4. Pre-order traversal of descendants.
"""

import pytest

from fsreplay.core.filesystem.store import NodeStore
from fsreplay.domain.tree_models import DirectoryNode, FileNode


@pytest.fixture
def store() -> NodeStore:
    return NodeStore()


def _build_sample(store: NodeStore):
    """
    /
    ├── a/
    │   ├── x (10)
    │   └── b/
    │       └── y (20)
    ├── z (5)
    └── c/
    """
    root = store.new_root_directory()
    a = store.new_directory("a")
    b = store.new_directory("b")
    c = store.new_directory("c")
    x = store.new_file("x", 10)
    y = store.new_file("y", 20)
    z = store.new_file("z", 5)
    store.add_child(root, a)
    store.add_child(a, x)
    store.add_child(a, b)
    store.add_child(b, y)
    store.add_child(root, z)
    store.add_child(root, c)
    return root, a, b, c, x, y, z


# -----------------------------------------------------------------------------
# 1. Construction
# -----------------------------------------------------------------------------

def test_root_directory_is_empty_and_named_slash(store):
    root = store.new_root_directory()

    node = store.get(root)
    assert isinstance(node, DirectoryNode)
    assert node.name == "/"
    assert store.children(root) == []
    assert store.size(root) == 0


def test_constructors_return_distinct_ids(store):
    f = store.new_file("f", 3)
    d = store.new_directory("d")

    assert f != d
    assert store.get(f) == FileNode(name="f", size=3)
    assert store.is_file(f) and not store.is_directory(f)
    assert store.is_directory(d) and not store.is_file(d)
    assert len(store) == 2


def test_unknown_id_raises_key_error(store):
    with pytest.raises(KeyError):
        store.get(42)

# -----------------------------------------------------------------------------
# 2. Attachment
# -----------------------------------------------------------------------------

def test_add_child_keeps_append_order(store):
    root = store.new_root_directory()
    names = ["c", "a", "b"]
    for name in names:
        store.add_child(root, store.new_file(name, 1))

    assert [store.name(n) for n in store.children(root)] == names


def test_add_child_allows_duplicate_names(store):
    root = store.new_root_directory()
    store.add_child(root, store.new_file("same", 7))
    store.add_child(root, store.new_file("same", 7))

    assert len(store.children(root)) == 2
    assert store.size(root) == 14


def test_add_child_rejects_file_parent(store):
    f = store.new_file("f", 1)
    with pytest.raises(TypeError):
        store.add_child(f, store.new_file("g", 1))


def test_add_child_rejects_second_parent(store):
    root = store.new_root_directory()
    other = store.new_directory("other")
    child = store.new_file("f", 1)
    store.add_child(root, child)

    with pytest.raises(ValueError):
        store.add_child(other, child)


def test_add_child_rejects_self(store):
    d = store.new_directory("d")
    with pytest.raises(ValueError):
        store.add_child(d, d)

# -----------------------------------------------------------------------------
# 3. Size aggregation
# -----------------------------------------------------------------------------

def test_size_of_file_is_listed_size(store):
    assert store.size(store.new_file("f", 123)) == 123


def test_directory_size_is_sum_of_children(store):
    root, a, b, c, x, y, z = _build_sample(store)

    assert store.size(b) == 20
    assert store.size(a) == 30
    assert store.size(c) == 0
    assert store.size(root) == 35

    for directory in (root, a, b, c):
        assert store.size(directory) == sum(store.size(n) for n in store.children(directory))


def test_root_size_equals_sum_of_file_leaves(store):
    root, *_ = _build_sample(store)
    leaves = [n for n in store.successors(root) if store.is_file(n)]

    assert store.size(root) == sum(store.size(n) for n in leaves)


def test_size_does_not_wrap_past_64_bits(store):
    root = store.new_root_directory()
    store.add_child(root, store.new_file("big", 2 ** 64 - 1))
    store.add_child(root, store.new_file("more", 10))

    assert store.size(root) == 2 ** 64 + 9


def test_size_reflects_children_added_later(store):
    root = store.new_root_directory()
    assert store.size(root) == 0

    store.add_child(root, store.new_file("f", 4))
    assert store.size(root) == 4


def test_size_handles_very_deep_trees(store):
    current = store.new_root_directory()
    root = current
    for i in range(5000):
        nxt = store.new_directory(f"d{i}")
        store.add_child(current, nxt)
        current = nxt
    store.add_child(current, store.new_file("leaf", 1))

    assert store.size(root) == 1
    assert len(store.successors(root)) == 5001

# -----------------------------------------------------------------------------
# 4. Traversal
# -----------------------------------------------------------------------------

def test_successors_are_pre_order(store):
    root, a, b, c, x, y, z = _build_sample(store)

    assert store.successors(root) == [a, x, b, y, z, c]
    assert store.successors(a) == [x, b, y]


def test_successors_of_file_is_empty(store):
    assert store.successors(store.new_file("f", 1)) == []

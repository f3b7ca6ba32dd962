from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Data integrity of SolveResult factories (Success/Error).
2. Immutability of frozen dataclasses.
3. Error hierarchy and message prefixes.
"""

from dataclasses import FrozenInstanceError

import pytest

from fsreplay.domain.command_models import ChangeDirectory, ListDirectory, LsEntry
from fsreplay.domain.config import get_default_config
from fsreplay.domain.errors import (
    DiskSpaceError,
    FSReplayError,
    NavigationError,
    NoSolutionError,
    TranscriptParseError,
    TranscriptSourceError,
)
from fsreplay.domain.result_models import (
    SolveResult,
    create_error_result,
    create_success_result,
)
from fsreplay.domain.tree_models import DirectoryNode, FileNode


def test_create_success_result_populates_fields():
    cfg = get_default_config()
    result = create_success_result(
        answer="95437",
        cfg=cfg,
        input_path="/tmp/input.txt",
        puzzle_part="one",
        tree_lines=["/ (dir, size=0)"],
        summary_extra={"commands": 10},
    )

    assert isinstance(result, SolveResult)
    assert result.ok is True
    assert result.error == ""
    assert result.answer == "95437"
    assert result.total_disk_space == 70_000_000
    assert result.tree_lines == ["/ (dir, size=0)"]
    assert result.summary == {"commands": 10}


def test_create_error_result_handles_defaults():
    result = create_error_result(
        error="No solution found: nothing",
        cfg={},
        input_path="/tmp/input.txt",
        puzzle_part="two",
    )

    assert result.ok is False
    assert result.answer == ""
    assert result.update_space == 0
    assert result.tree_lines == []
    assert result.summary == {}


def test_frozen_models_are_immutable():
    with pytest.raises(FrozenInstanceError):
        FileNode(name="f", size=1).size = 2
    with pytest.raises(FrozenInstanceError):
        ChangeDirectory("a").target = "b"


def test_directory_node_children_are_independent():
    first = DirectoryNode("a")
    second = DirectoryNode("b")
    first.children.append(3)

    assert second.children == []
    assert ListDirectory().outputs == []


def test_ls_entry_kind():
    assert LsEntry("a").is_directory
    assert not LsEntry("a", 0).is_directory


@pytest.mark.parametrize("error_cls", [
    TranscriptSourceError,
    TranscriptParseError,
    NavigationError,
    DiskSpaceError,
    NoSolutionError,
])
def test_errors_share_base_class(error_cls):
    assert issubclass(error_cls, FSReplayError)


def test_error_messages():
    assert str(TranscriptParseError("bad")) == "Invalid input: bad"
    assert str(NoSolutionError("none")) == "No solution found: none"
    assert str(NavigationError("cd ..: no working directory")) == "cd ..: no working directory"

from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared transcript fixtures used across unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


CANONICAL_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def canonical_lines() -> List[str]:
    """
    Return the reference transcript as a list of lines.

    Expected figures: root 48381165, a 94853, e 584, d 24933642.
    """
    return CANONICAL_TRANSCRIPT.splitlines()


@pytest.fixture
def transcript_file(tmp_path: Path) -> Path:
    """Write the reference transcript to a temporary file."""
    path = tmp_path / "transcript.txt"
    path.write_text(CANONICAL_TRANSCRIPT, encoding="utf-8")
    return path

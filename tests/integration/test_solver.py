from __future__ import annotations

"""
Integration tests for the FileSystemSolver.

Exercises parsing, replay and both queries end to end through the public
solver interface.
"""

import io
from pathlib import Path

import pytest

from fsreplay.core.solver import FileSystemSolver, PuzzlePart
from fsreplay.domain.errors import (
    DiskSpaceError,
    NavigationError,
    NoSolutionError,
    TranscriptParseError,
    TranscriptSourceError,
)


def test_solve_canonical_from_reader(canonical_lines):
    solver = FileSystemSolver.from_reader(canonical_lines)

    assert solver.solve(PuzzlePart.ONE) == "95437"
    assert solver.solve(PuzzlePart.TWO) == "24933642"


def test_solve_canonical_from_file(transcript_file: Path):
    solver = FileSystemSolver.from_file(str(transcript_file))

    assert solver.solve(PuzzlePart.ONE) == "95437"
    assert solver.solve(PuzzlePart.TWO) == "24933642"


def test_from_reader_accepts_text_streams(transcript_file: Path):
    stream = io.StringIO(transcript_file.read_text(encoding="utf-8"))
    assert FileSystemSolver.from_reader(stream).solve(PuzzlePart.ONE) == "95437"


def test_repeated_solves_are_independent(canonical_lines):
    solver = FileSystemSolver.from_reader(canonical_lines)

    first = solver.solve(PuzzlePart.TWO)
    second = solver.solve(PuzzlePart.TWO)
    assert first == second
    assert solver.build_context() is not solver.build_context()


def test_config_overrides_defaults(canonical_lines):
    solver = FileSystemSolver.from_reader(canonical_lines, {"small_directory_limit": 600})

    assert solver.config["total_disk_space"] == 70_000_000
    assert solver.solve(PuzzlePart.ONE) == "584"


def test_answer_on_prebuilt_context(canonical_lines):
    solver = FileSystemSolver.from_reader(canonical_lines)
    context = solver.build_context()

    assert solver.answer(context, PuzzlePart.ONE) == "95437"


def test_answer_rejects_unknown_part(canonical_lines):
    solver = FileSystemSolver.from_reader(canonical_lines)
    with pytest.raises(ValueError):
        solver.answer(solver.build_context(), "three")


def test_leading_output_rejects_transcript():
    with pytest.raises(TranscriptParseError):
        FileSystemSolver.from_reader(["dir a", "$ cd /"])


def test_navigation_failure_aborts_solve():
    solver = FileSystemSolver.from_reader(["$ cd /", "$ cd missing"])
    with pytest.raises(NavigationError):
        solver.solve(PuzzlePart.ONE)


def test_disk_errors_only_affect_part_two():
    solver = FileSystemSolver.from_reader(["$ cd /", "$ ls", "10 f"])

    assert solver.solve(PuzzlePart.ONE) == "10"
    with pytest.raises(DiskSpaceError):
        solver.solve(PuzzlePart.TWO)


def test_no_solution_only_affects_part_one():
    solver = FileSystemSolver.from_reader(["$ cd /", "$ ls", "69000000 f"])

    with pytest.raises(NoSolutionError):
        solver.solve(PuzzlePart.ONE)
    assert solver.solve(PuzzlePart.TWO) == "69000000"


def test_totals_past_64_bits():
    lines = ["$ cd /", "$ ls", "dir a", "$ cd a", "$ ls"]
    lines += [f"{2 ** 63} f{i}" for i in range(4)]
    solver = FileSystemSolver.from_reader(lines)
    context = solver.build_context()

    assert context.store.size(context.root) == 2 ** 65


def test_missing_file_raises_source_error(tmp_path: Path):
    with pytest.raises(TranscriptSourceError):
        FileSystemSolver.from_file(str(tmp_path / "nope.txt"))

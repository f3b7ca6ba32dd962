from __future__ import annotations

"""
Domain Error Hierarchy.

Every failure raised by the replay subsystem derives from FSReplayError so
that interface layers can report it with a single handler.
"""


class FSReplayError(Exception):
    """Base class for all replay and query failures."""


class TranscriptSourceError(FSReplayError):
    """The transcript could not be opened or decoded."""


class TranscriptParseError(FSReplayError):
    """A transcript line does not match the expected command/output grammar."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid input: {message}")


class NavigationError(FSReplayError):
    """A command could not be resolved against the current working directory."""


class DiskSpaceError(FSReplayError):
    """The reconstructed disk usage is inconsistent with the update requirement."""


class NoSolutionError(FSReplayError):
    """A query matched no directory."""

    def __init__(self, message: str) -> None:
        super().__init__(f"No solution found: {message}")

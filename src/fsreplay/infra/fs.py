from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the application data directory,
path normalization, and the line source used to feed transcripts into
the replay engine.
"""

import os
from typing import Iterator, Optional

from fsreplay.domain.errors import TranscriptSourceError

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "FSReplay"
UNIX_APP_DIR_NAME = ".fsreplay"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Resolution only: the directory is created by whoever writes into it.
    Standards:
    - Windows: %LOCALAPPDATA%/FSReplay
    - Linux/Mac: ~/.fsreplay

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# TRANSCRIPT SOURCE API
# -----------------------------------------------------------------------------

def read_transcript_lines(path: str) -> Iterator[str]:
    """
    Yield the lines of a UTF-8 transcript file without line terminators.

    Args:
        path: Transcript file location.

    Yields:
        str: One transcript line.

    Raises:
        TranscriptSourceError: If the file cannot be opened or decoded.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                yield line.rstrip("\r\n")
    except OSError as e:
        raise TranscriptSourceError(f"Cannot open file '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise TranscriptSourceError(f"Transcript '{path}' is not valid UTF-8: {e}") from e

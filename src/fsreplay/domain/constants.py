from __future__ import annotations

"""
Domain Constants.

Centralizes the root sentinel and the default disk figures used by the
aggregate queries.
"""

CURRENT_CONFIG_VERSION = "1.0.0"

ROOT_NAME = "/"
PARENT_DIRECTORY = ".."
COMMAND_PREFIX = "$"

# -----------------------------------------------------------------------------
# QUERY DEFAULTS
# -----------------------------------------------------------------------------
TOTAL_DISK_SPACE = 70_000_000
UPDATE_SPACE = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000

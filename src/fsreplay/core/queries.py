from __future__ import annotations

"""
Aggregate Size Queries.

Read-only questions asked of a fully replayed tree. Both queries walk
the tree from the root and only consider directories.
"""

import logging

from fsreplay.core.filesystem.context import Context
from fsreplay.domain.constants import SMALL_DIRECTORY_LIMIT, TOTAL_DISK_SPACE, UPDATE_SPACE
from fsreplay.domain.errors import DiskSpaceError, NoSolutionError

logger = logging.getLogger(__name__)


def sum_small_directories(context: Context, limit: int = SMALL_DIRECTORY_LIMIT) -> int:
    """
    Sum the sizes of every directory strictly smaller than `limit`.

    Nested directories are counted on their own and again inside their
    parents, so files may contribute more than once.

    Raises:
        NoSolutionError: If no directory is smaller than `limit`.
    """
    store = context.store
    small_directories = context.browse_from_root(
        lambda node: store.is_directory(node) and store.size(node) < limit
    )
    if not small_directories:
        raise NoSolutionError(f"no directory smaller than {limit}")

    logger.debug(f"{len(small_directories)} directories below {limit}")
    return sum(store.size(node) for node in small_directories)


def smallest_directory_to_free(
        context: Context,
        total_space: int = TOTAL_DISK_SPACE,
        update_space: int = UPDATE_SPACE,
) -> int:
    """
    Size of the smallest directory whose deletion frees enough space for
    the update.

    Raises:
        DiskSpaceError: If the used space exceeds the disk, or the disk
            already has room for the update.
        NoSolutionError: If no directory is large enough.
    """
    store = context.store
    used_space = store.size(context.root)

    if used_space > total_space:
        raise DiskSpaceError(
            f"used space overflow total disk space: {used_space} > {total_space}"
        )
    free_space = total_space - used_space

    if free_space >= update_space:
        raise DiskSpaceError(
            f"file system already contains enough free space: {free_space}"
        )
    required_space = update_space - free_space
    logger.debug(f"used={used_space} free={free_space} required={required_space}")

    candidates = context.browse_from_root(
        lambda node: store.is_directory(node) and store.size(node) >= required_space
    )
    if not candidates:
        raise NoSolutionError(f"no directory of at least {required_space}")

    return min(store.size(node) for node in candidates)

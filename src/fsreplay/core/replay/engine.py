from __future__ import annotations

"""
Replay Engine.

Executes parsed commands, in order, against a fresh Context. Each `cd`
moves the cursor and each `ls` attaches its entries to the working
directory, so the position left by one command decides where the next
one writes. The first failure aborts the replay.
"""

import logging
from typing import Iterable, Optional

from fsreplay.core.filesystem.context import Context
from fsreplay.domain.command_models import ChangeDirectory, Command, ListDirectory
from fsreplay.domain.constants import PARENT_DIRECTORY, ROOT_NAME
from fsreplay.domain.errors import NavigationError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def replay(commands: Iterable[Command], context: Optional[Context] = None) -> Context:
    """
    Rebuild the filesystem implied by a command sequence.

    Args:
        commands: Commands in transcript order.
        context: Context to replay into. A new one is created if omitted.

    Returns:
        Context: The context holding the completed tree.

    Raises:
        NavigationError: If a command cannot be resolved.
    """
    ctx = context if context is not None else Context()

    executed = 0
    for command in commands:
        execute(ctx, command)
        executed += 1

    logger.info(f"Replayed {executed} commands into {len(ctx.store)} nodes.")
    return ctx


def execute(context: Context, command: Command) -> None:
    """Apply a single command to the context."""
    if isinstance(command, ChangeDirectory):
        _change_directory(context, command.target)
    elif isinstance(command, ListDirectory):
        _list_directory(context, command)
    else:
        raise TypeError(f"unsupported command: {command!r}")

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _change_directory(context: Context, target: str) -> None:
    if target == ROOT_NAME:
        context.reset_to_root()
        logger.debug("cd /")
        return

    if target == PARENT_DIRECTORY:
        old_node = context.move_back()
        if old_node is None:
            raise NavigationError("cd ..: no working directory")
        if context.working_directory() is None:
            raise NavigationError(
                f"cd ..: working directory '{context.store.name(old_node)}' has no parent"
            )
        logger.debug("cd ..")
        return

    working_directory = context.working_directory()
    if working_directory is None:
        raise NavigationError(f"cd {target}: no working directory")

    store = context.store
    for child in store.children(working_directory):
        if store.is_directory(child) and store.name(child) == target:
            context.go_to(child)
            logger.debug(f"cd {target}")
            return

    raise NavigationError(f"cd {target}: no such directory")


def _list_directory(context: Context, command: ListDirectory) -> None:
    working_directory = context.working_directory()
    if working_directory is None:
        raise NavigationError("ls: no working directory")

    store = context.store
    for entry in command.outputs:
        if entry.size is None:
            node = store.new_directory(entry.name)
        else:
            node = store.new_file(entry.name, entry.size)
        store.add_child(working_directory, node)

    logger.debug(
        f"ls in '{store.name(working_directory)}': {len(command.outputs)} entries attached"
    )

"""Optimistic update helper shared by the stores."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger("funfood.optimistic")

S = TypeVar("S")
R = TypeVar("R")


async def optimistic_update(
    read: Callable[[], S],
    write: Callable[[S], None],
    compute: Callable[[S], S],
    commit: Callable[[], Awaitable[R]],
) -> R:
    """Apply a local change before the remote call and undo it on failure.

    The snapshot returned by ``read`` is restored as-is when ``commit`` raises,
    replacing whatever the state holds at that moment. The error is re-raised.

    Args:
        read: Returns the current state snapshot
        write: Replaces the state
        compute: Derives the optimistic state from the snapshot
        commit: Performs the remote effect

    Returns:
        Whatever ``commit`` returns
    """
    snapshot = read()
    write(compute(snapshot))
    try:
        return await commit()
    except Exception as e:
        logger.warning(f"Remote update failed, rolling back: {e}")
        write(snapshot)
        raise

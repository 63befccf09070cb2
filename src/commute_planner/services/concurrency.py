"""
Ordered fan-out / fan-in over asyncio.

``gather_ordered`` runs one coroutine per item and waits for all of them.
Results come back in input order regardless of completion order, and a
coroutine that raises yields its exception in place instead of aborting the
others. Used for both the per-destination and the per-property level.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def gather_ordered(
    func: Callable[[T], Awaitable[R]],
    items: Iterable[T],
    *,
    limit: int | None = None,
) -> list[R | BaseException]:
    """
    Await ``func(item)`` for every item concurrently.

    Args:
        func: Coroutine function applied to each item.
        items: Inputs; ``result[i]`` corresponds to the i-th item.
        limit: Maximum number of calls in flight at once (None = unbounded).

    Returns:
        One entry per item: the return value, or the exception it raised.
    """
    items = list(items)
    if not items:
        return []

    if limit is None:
        return await asyncio.gather(*(func(item) for item in items), return_exceptions=True)

    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")
    semaphore = asyncio.Semaphore(limit)

    async def _bounded(item: T) -> R:
        async with semaphore:
            return await func(item)

    return await asyncio.gather(*(_bounded(item) for item in items), return_exceptions=True)

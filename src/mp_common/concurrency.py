"""Bounded fan-out helpers for batched lookups.

Used by the aggregation service to resolve many profile ids without opening
an unbounded number of simultaneous queries.
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def chunked(items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into consecutive lists of at most `size` elements."""
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


async def map_limit(
    items: Iterable[T],
    limit: int,
    fn: Callable[[T], Awaitable[R]],
) -> list[R]:
    """Run fn over items with at most `limit` calls in flight.

    Results come back in input order. The first failure cancels the
    remaining calls and is re-raised unwrapped.
    """
    if limit < 1:
        raise ValueError(f"concurrency limit must be >= 1, got {limit}")
    semaphore = asyncio.Semaphore(limit)

    async def _run(item: T) -> R:
        async with semaphore:
            return await fn(item)

    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_run(item)) for item in items]
    except ExceptionGroup as eg:
        raise eg.exceptions[0] from None
    return [task.result() for task in tasks]

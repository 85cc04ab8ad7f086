"""Joint settlement

Wait for every task, keep input order."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from kungfu import LazyCoroResult, Ok, Result

from .._types import NoError
from .classify import to_resolved
from .state import Settlement

def all_settled[T, E](
    tasks: Sequence[LazyCoroResult[T, E]],
) -> LazyCoroResult[list[Settlement[T, E]], NoError]:
    """
    Run all concurrently, wait until every one settles. Never fails.

    Outcomes come back in input order regardless of which task finished
    first.

    Example:
        result = await all_settled([delay_resolve("a", seconds=0.025), delay_reject("b", seconds=0.015)])
        # Ok([Settlement(FULFILLED, value="a"), Settlement(REJECTED, reason="b")])
    """

    async def run() -> Result[list[Settlement[T, E]], NoError]:
        resolved = to_resolved(tasks)
        results: list[Result[Settlement[T, E], NoError]] = await asyncio.gather(*(r() for r in resolved))
        return Ok([r.unwrap() for r in results])

    return LazyCoroResult(run)

__all__ = ("all_settled",)

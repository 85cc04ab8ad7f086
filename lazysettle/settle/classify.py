"""Settlement classifier

Turn tasks into tasks that never fail, with extract + wrap pattern."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import LazyCoroResult, Ok, Result

from .._helpers import identity
from .._types import NoError
from .state import Settlement

# Generic combinator (extract + wrap pattern)
def to_resolvedM[M, T, E, Raw](
    tasks: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]],
    *,
    extract: Callable[[Raw], Result[T, E]],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Result[Settlement[T, E], NoError]]]], M],
) -> list[M]:
    """
    Generic classifier.

    One output per task, same positions. Each output always succeeds with
    the task's Settlement.
    """

    def classify(task: Callable[[], Coroutine[typing.Any, typing.Any, Raw]]) -> M:
        async def run() -> Result[Settlement[T, E], NoError]:
            raw = await task()
            return Ok(Settlement.of(extract(raw)))

        return wrap(run)

    return [classify(task) for task in tasks]

# Sugar for LazyCoroResult
def to_resolved[T, E](
    tasks: Sequence[LazyCoroResult[T, E]],
) -> list[LazyCoroResult[Settlement[T, E], NoError]]:
    """Map each task to one that always succeeds with its Settlement."""
    return to_resolvedM(tasks, extract=identity, wrap=LazyCoroResult)

__all__ = ("to_resolved", "to_resolvedM")

"""Delay combinators

Tasks that settle after a fixed delay, with extract + wrap pattern."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import NoError

def _check_seconds(seconds: float, name: str) -> None:
    if seconds < 0.0:
        raise ValueError(f"{name}() requires seconds >= 0")

# Generic combinator (extract + wrap pattern)
def delayM[M, Raw](
    task: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    *,
    seconds: float,
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """
    Generic delay combinator.

    Start the task and the timer together; hand back the task's output once
    both are done. The delay counts from the start, not from the task's
    own completion.
    """
    _check_seconds(seconds, "delay")

    async def run() -> Raw:
        raw, _ = await asyncio.gather(task(), asyncio.sleep(seconds))
        return raw

    return wrap(run)

# Sugar for LazyCoroResult
def delay[T, E](
    task: LazyCoroResult[T, E],
    *,
    seconds: float,
) -> LazyCoroResult[T, E]:
    """Forward the task's outcome no sooner than ``seconds`` after start."""
    return delayM(task, seconds=seconds, wrap=LazyCoroResult)

def delay_resolve[T](value: T, *, seconds: float) -> LazyCoroResult[T, NoError]:
    """Succeed with value after ``seconds``."""
    _check_seconds(seconds, "delay_resolve")

    async def run() -> Result[T, NoError]:
        await asyncio.sleep(seconds)
        return Ok(value)

    return LazyCoroResult(run)

def delay_reject[E](reason: E, *, seconds: float) -> LazyCoroResult[NoError, E]:
    """Fail with reason after ``seconds``."""
    _check_seconds(seconds, "delay_reject")

    async def run() -> Result[NoError, E]:
        await asyncio.sleep(seconds)
        return Error(reason)

    return LazyCoroResult(run)

__all__ = ("delay", "delayM", "delay_reject", "delay_resolve")

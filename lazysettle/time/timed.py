"""
Timed race combinators
======================

Race a callback-style executor against a timer. Exactly one side settles
the result: whichever calls first. An executor win cancels the timer; a
timer win turns later executor callbacks into no-ops.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import TimeoutError
from .._types import Executor

logger = logging.getLogger(__name__)

_NO_REASON: typing.Final = object()

# Awaitables returned by executors; held until done so they are not collected.
_executors: set[asyncio.Future[typing.Any]] = set()


@dataclass(slots=True)
class _RaceToken:
    """Per-race state: whether a side has won, and the pending timer."""

    settled: bool = False
    timer: asyncio.TimerHandle | None = None


def _watch_executor[E](started: typing.Awaitable[typing.Any], reject: Callable[[E], None]) -> None:
    future = asyncio.ensure_future(started)
    _executors.add(future)

    def on_done(fut: asyncio.Future[typing.Any]) -> None:
        _executors.discard(fut)
        if fut.cancelled():
            return
        exc = fut.exception()
        if exc is not None:
            reject(typing.cast(E, exc))

    future.add_done_callback(on_done)


def _timed_or_settle[T, E](
    executor: Executor[T, E],
    *,
    seconds: float,
    on_timeout: Callable[[], Result[T, E]],
    name: str,
) -> LazyCoroResult[T, E]:
    if seconds < 0.0:
        raise ValueError(f"{name}() requires seconds >= 0")

    async def run() -> Result[T, E]:
        loop = asyncio.get_running_loop()
        outcome: asyncio.Future[Result[T, E]] = loop.create_future()
        token = _RaceToken()

        def settle(result: Result[T, E], winner: str) -> None:
            if token.settled:
                return
            token.settled = True
            if token.timer is not None:
                token.timer.cancel()
            logger.debug("%s settled by %s", name, winner)
            outcome.set_result(result)

        def resolve(value: T) -> None:
            settle(Ok(value), "executor")

        def reject(reason: E) -> None:
            settle(Error(reason), "executor")

        # Armed before the executor runs so a synchronous settlement cancels it.
        token.timer = loop.call_later(seconds, lambda: settle(on_timeout(), "timer"))

        try:
            try:
                started = executor(resolve, reject)
            except Exception as exc:
                reject(typing.cast(E, exc))
            else:
                if inspect.isawaitable(started):
                    _watch_executor(started, reject)
            return await outcome
        finally:
            token.settled = True
            token.timer.cancel()

    return LazyCoroResult(run)


def timed_or_resolve[T, E](
    executor: Executor[T, E],
    *,
    seconds: float,
    value: T,
) -> LazyCoroResult[T, E]:
    """
    Run executor; if it has not settled after ``seconds``, succeed with value.

    Example:
        def fetch(resolve, reject):
            loop = asyncio.get_running_loop()
            loop.call_later(0.03, resolve, "fresh")

        result = await timed_or_resolve(fetch, seconds=0.025, value="cached")
        # Ok("cached")
    """
    return _timed_or_settle(
        executor,
        seconds=seconds,
        on_timeout=lambda: Ok(value),
        name="timed_or_resolve",
    )


def timed_or_reject[T, E](
    executor: Executor[T, E],
    *,
    seconds: float,
    reason: E | object = _NO_REASON,
) -> LazyCoroResult[T, E | TimeoutError]:
    """
    Run executor; if it has not settled after ``seconds``, fail with reason.

    Without a reason the failure is TimeoutError(seconds).
    """
    fallback = TimeoutError(seconds) if reason is _NO_REASON else typing.cast(E, reason)
    return _timed_or_settle(
        executor,
        seconds=seconds,
        on_timeout=lambda: Error(fallback),
        name="timed_or_reject",
    )


__all__ = ("timed_or_reject", "timed_or_resolve")

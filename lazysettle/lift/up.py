"""
Lifting values and promise-like code into tasks.

Plain values, known failures, and exception-based coroutines become
LazyCoroResult tasks that every settlement combinator accepts.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import identity
from .._types import LCR


def pure[T](value: T) -> LCR[T, Never]:
    """
    Already-fulfilled task.

    Example:
        from lazysettle import lift as L

        await after_settled([L.pure("a"), L.pure("b")])  # Ok(["a", "b"])

    **Grammar:** `L.up.pure(value)` reads as "lift up pure value"
    """
    return LazyCoroResult.pure(value)


def fail[E](reason: E) -> LCR[Never, E]:
    """
    Already-rejected task. Dual of pure().

    The reason can be any value, not only an exception.
    """
    return Error(reason).to_async()


def from_awaitable[T, E](
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], E] = identity,
) -> LCR[T, E]:
    """
    Task from exception-based async code.

    A returned value fulfills; a raised Exception rejects with
    ``on_error(exc)`` (the exception itself by default).

    Example:
        from lazysettle import lift as L

        async def fetch_profile(user_id: int) -> dict: ...

        tasks = [L.from_awaitable(lambda i=i: fetch_profile(i)) for i in ids]
        settlements = await all_settled(tasks)

    NOTE: thunk must be a zero-arg callable so the task stays lazy.
          A bare coroutine would already be running and could run only once.
    """
    async def run() -> Result[T, E]:
        try:
            return Ok(await thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return LazyCoroResult(run)


__all__ = (
    "pure",
    "fail",
    "from_awaitable",
)

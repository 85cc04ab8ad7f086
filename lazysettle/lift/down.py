"""
Running tasks down to plain values.
"""

from __future__ import annotations

from kungfu import Result

from .._types import LCR


async def to_result[T, E](task: LCR[T, E]) -> Result[T, E]:
    """
    Run task and return its Result.

    **Grammar:** `await L.down.to_result(task)` reads as "run down to result"
    """
    return await task()


async def unsafe[T, E](task: LCR[T, E]) -> T:
    """
    Run and unwrap, raises on Error.

    NOTE: Raises kungfu.UnwrapError. When the reason is an exception the
          raised error also subclasses the reason's type.
    """
    result = await task()
    return result.unwrap()


__all__ = (
    "to_result",
    "unsafe",
)

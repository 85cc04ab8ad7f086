"""
Core type definitions for lazysettle.

Aliases shared by the iterator and settlement layers.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine, Iterable

from kungfu import LazyCoroResult, Result

# ============================================================================
# Type aliases
# ============================================================================

# Source = what a sequence factory pulls from; other values count as empty
type Source[T] = Iterable[T] | None

# Task = zero-arg callable producing a Result (LazyCoroResult fits)
type Task[T, E] = Callable[[], Coroutine[typing.Any, typing.Any, Result[T, E]]]

# Settlement callbacks handed to a timed-race executor
type Resolve[T] = Callable[[T], None]
type Reject[E] = Callable[[E], None]

# Executor = starts work and eventually calls resolve or reject.
# May return an awaitable, which is scheduled on the running loop.
type Executor[T, E] = Callable[[Resolve[T], Reject[E]], Awaitable[typing.Any] | None]

# NoError = "never fails"
# NOTE: Never (bottom type) rather than None: no value of it can exist.
type NoError = typing.Never

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "Source",
    "Task",
    "Resolve",
    "Reject",
    "Executor",
    "NoError",
    "LCR",
)

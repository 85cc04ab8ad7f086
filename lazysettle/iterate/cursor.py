"""Exhaustion-aware cursors

Restartable lazy sequences whose cursors expose an ``exhausted`` flag
next to the normal iterator protocol."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator
from functools import wraps


class ExhaustionAwareCursor[T]:
    """
    Iterator adapter that records completion of the iterator it wraps.

    ``exhausted`` is:
    - None before the first pull
    - False after a pull that produced a value
    - True after a pull that hit the end

    There is no lookahead: after the last value has been pulled the flag is
    still False, one more pull is needed to flip it.
    """

    __slots__ = ("_inner", "exhausted")

    def __init__(self, inner: Iterator[T], /) -> None:
        self._inner = inner
        self.exhausted: bool | None = None

    def __iter__(self) -> ExhaustionAwareCursor[T]:
        return self

    def __next__(self) -> T:
        try:
            value = next(self._inner)
        except StopIteration:
            self.exhausted = True
            raise
        self.exhausted = False
        return value

    def __repr__(self) -> str:
        return f"ExhaustionAwareCursor(exhausted={self.exhausted!r})"


class LazySequence[T]:
    """
    Restartable lazy sequence.

    Holds a generator function and its arguments. Every ``iter()`` call
    runs the function again, so each cursor re-reads the original source
    and is independent of every other cursor.
    """

    __slots__ = ("_factory", "_args", "_kwargs")

    def __init__(
        self,
        factory: Callable[..., Iterator[T]],
        /,
        *args: typing.Any,
        **kwargs: typing.Any,
    ) -> None:
        self._factory = factory
        self._args = args
        self._kwargs = kwargs

    def __iter__(self) -> ExhaustionAwareCursor[T]:
        return ExhaustionAwareCursor(self._factory(*self._args, **self._kwargs))

    def __repr__(self) -> str:
        return f"LazySequence({self._factory.__name__})"


def exhaustion_aware[T, **P](
    factory: Callable[P, Iterator[T]],
) -> Callable[P, LazySequence[T]]:
    """
    Decorator turning a generator function into a LazySequence factory.

    Example:
        @exhaustion_aware
        def evens(limit: int) -> Iterator[int]:
            yield from range(0, limit, 2)

        seq = evens(6)
        cursor = iter(seq)
        cursor.exhausted  # None
    """

    @wraps(factory)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> LazySequence[T]:
        return LazySequence(factory, *args, **kwargs)

    return wrapper


__all__ = ("ExhaustionAwareCursor", "LazySequence", "exhaustion_aware")

"""
Sequence factories
==================

Higher-order sequence transformations. Each public factory returns a
restartable, exhaustion-aware LazySequence.

Ordered collections (list, tuple, str, range) are read by index; any other
iterable is pulled. Values that are not iterable at all are treated as an
empty source.
"""

from __future__ import annotations

import typing
from collections.abc import Iterator

from .._helpers import is_iterable, is_ordered
from .._types import Source
from .cursor import exhaustion_aware

_MISSING: typing.Final = object()


@exhaustion_aware
def default[T](source: Source[T]) -> Iterator[T]:
    """Every item of source, in order."""
    if is_iterable(source):
        yield from source


@exhaustion_aware
def skip[T](source: Source[T], count: int) -> Iterator[T]:
    """
    Every item of source after the first ``count``.

    Indexed sources start reading at ``count`` directly. Other iterables are
    advanced ``count`` times first, stopping early if they run out.
    """
    count = max(count, 0)

    if is_ordered(source):
        for i in range(count, len(source)):
            yield source[i]
    elif is_iterable(source):
        iterator = iter(source)
        for _ in range(count):
            if next(iterator, _MISSING) is _MISSING:
                return
        yield from iterator


@exhaustion_aware
def reiterable[T](source: Source[T], times: int) -> Iterator[T]:
    """
    ``times`` consecutive passes over source.

    A single pass streams from source as is. More than one pass
    materializes source once and replays the copy. ``times <= 0`` is empty.
    """
    if times <= 0 or not is_iterable(source):
        return

    if times == 1:
        yield from source
        return

    items = list(source)
    for _ in range(times):
        yield from items


def _reverse[T](source: Source[T]) -> Iterator[T]:
    if is_ordered(source):
        for i in range(len(source) - 1, -1, -1):
            yield source[i]
    elif is_iterable(source):
        # One-directional iterators have no reverse without a full copy
        yield from _reverse(list(source))


@exhaustion_aware
def reverse[T](source: Source[T]) -> Iterator[T]:
    """Items of source from last to first."""
    return _reverse(source)


__all__ = ("default", "skip", "reiterable", "reverse")

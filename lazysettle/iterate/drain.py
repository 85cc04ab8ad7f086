"""Drain helpers

Materialize lazy sequences into lists."""

from __future__ import annotations

from collections.abc import AsyncIterable

from .._helpers import is_iterable
from .._types import Source


def to_list[T](source: Source[T]) -> list[T]:
    """Pull every item of a synchronous source. Non-iterables give []."""
    if not is_iterable(source):
        return []
    return list(source)


async def to_list_async[T](source: AsyncIterable[T]) -> list[T]:
    """
    Pull every item of an async iterable, in production order.

    Suspends on each pull until the next item (or the end) is available.
    """
    items: list[T] = []
    async for item in source:
        items.append(item)
    return items


__all__ = ("to_list", "to_list_async")

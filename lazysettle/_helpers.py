"""Internal helpers for lazysettle.

Source classification for the sequence factories, and the identity
extract used by the settlement combinators."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Sequence


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


# Source classification
def is_iterable(source: object) -> typing.TypeGuard[Iterable[typing.Any]]:
    """True for anything the factories can pull from (str included)."""
    return isinstance(source, Iterable)

def is_ordered(source: object) -> typing.TypeGuard[Sequence[typing.Any]]:
    """
    True for indexable ordered collections (list, tuple, str, range).

    These are read by index instead of being pulled, so skip/reverse
    never copy them.
    """
    return isinstance(source, Sequence)

__all__ = (
    "identity",
    "is_iterable",
    "is_ordered",
)

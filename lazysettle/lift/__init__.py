"""
Lift helpers with semantic namespaces.

    from lazysettle import lift as L

    L.up.pure("a")                  # fulfilled task
    L.up.fail("b")                  # rejected task
    L.up.from_awaitable(fetch)      # exception-based coroutine as a task

    await L.down.to_result(task)    # Ok(...) / Error(...)
    await L.down.unsafe(task)       # value, raises on Error

The most common functions are also available at the root: L.pure, L.fail,
L.from_awaitable, L.to_result, L.unsafe.
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns
from .down import to_result, unsafe
from .up import fail, from_awaitable, pure

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "from_awaitable",
    # Down
    "to_result",
    "unsafe",
)

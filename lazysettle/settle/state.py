"""
Settlement outcomes
===================

Tagged outcome of a settled task: fulfilled with a value, or rejected
with a reason.
"""

from __future__ import annotations

import enum
import typing
from dataclasses import dataclass

from kungfu import Error, Ok, Result


class SettlementState(enum.StrEnum):
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


FULFILLED: typing.Final = SettlementState.FULFILLED
REJECTED: typing.Final = SettlementState.REJECTED


@dataclass(frozen=True, slots=True)
class Settlement[T, E]:
    """
    Outcome of one task.

    Only ``value`` is meaningful for FULFILLED, only ``reason`` for REJECTED.
    ``index`` is the task's input position; it is filled in by
    all_settled_iterable, where emission order differs from input order.
    """

    state: SettlementState
    value: T | None = None
    reason: E | None = None
    index: int | None = None

    @staticmethod
    def fulfilled[V](value: V, index: int | None = None) -> Settlement[V, typing.Any]:
        return Settlement(FULFILLED, value=value, index=index)

    @staticmethod
    def rejected[R](reason: R, index: int | None = None) -> Settlement[typing.Any, R]:
        return Settlement(REJECTED, reason=reason, index=index)

    @staticmethod
    def of[V, R](result: Result[V, R], index: int | None = None) -> Settlement[V, R]:
        """Classify a Result: Ok -> fulfilled, Error -> rejected."""
        match result:
            case Ok(value):
                return Settlement.fulfilled(value, index)
            case Error(reason):
                return Settlement.rejected(reason, index)
            case _ as unreachable:
                typing.assert_never(unreachable)

    @property
    def is_fulfilled(self) -> bool:
        return self.state == FULFILLED

    @property
    def is_rejected(self) -> bool:
        return self.state == REJECTED

    def to_result(self) -> Result[T, E]:
        """Back to Ok(value) / Error(reason)."""
        if self.is_fulfilled:
            return Ok(typing.cast(T, self.value))
        return Error(typing.cast(E, self.reason))


__all__ = ("FULFILLED", "REJECTED", "Settlement", "SettlementState")

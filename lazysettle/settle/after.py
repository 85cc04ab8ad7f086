"""
After-settled combinator
========================

All-or-nothing aggregation with error accumulation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kungfu import Error, LazyCoroResult, Ok, Result

from .joint import all_settled
from .state import Settlement

logger = logging.getLogger(__name__)


def _partition[T, E](settlements: list[Settlement[T, E]]) -> tuple[list[T], list[E]]:
    values: list[T] = []
    reasons: list[E] = []

    for settlement in settlements:
        match settlement.to_result():
            case Ok(value):
                values.append(value)
            case Error(reason):
                reasons.append(reason)

    return values, reasons


def after_settled[T, E](
    tasks: Sequence[LazyCoroResult[T, E]],
) -> LazyCoroResult[list[T], list[E]]:
    """
    Wait for every task; succeed only if all of them did.

    Ok carries every value in input order. Error carries every rejection
    reason in input order, even when only one task failed; values from
    the tasks that did succeed are dropped in that case.
    """

    async def run() -> Result[list[T], list[E]]:
        settlements = (await all_settled(tasks)).unwrap()
        values, reasons = _partition(settlements)

        if reasons:
            logger.debug("%d of %d tasks rejected", len(reasons), len(settlements))
            return Error(reasons)
        return Ok(values)

    return LazyCoroResult(run)


__all__ = ("after_settled",)

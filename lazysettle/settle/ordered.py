"""
Ordered settlement stream
=========================

Async iteration over task outcomes in the order the tasks settle.

All tasks are launched together. N single-assignment slots are allocated
up front and a shared write cursor hands the next free slot to whichever
task settles next; the consumer reads slots in order, so it sees outcomes
in completion order. Each outcome keeps the input index of the task that
produced it.
"""

from __future__ import annotations

import asyncio
import heapq
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from kungfu import LazyCoroResult

from .._types import Task
from .state import Settlement

logger = logging.getLogger(__name__)

# Strong references to launched tasks; the loop itself only keeps weak ones.
_running: set[asyncio.Task[None]] = set()


@dataclass(slots=True)
class _SlotWriter[T, E]:
    """Pre-allocated slots plus the shared write cursor."""

    slots: list[asyncio.Future[Settlement[T, E]]]
    cursor: int = 0

    def _claim(self) -> asyncio.Future[Settlement[T, E]] | None:
        slot = self.slots[self.cursor]
        self.cursor += 1
        if slot.done():
            logger.warning("slot %d was already settled; outcome dropped", self.cursor - 1)
            return None
        return slot

    def fill(self, settlement: Settlement[T, E]) -> None:
        logger.debug(
            "task %d settled %s into slot %d", settlement.index, settlement.state, self.cursor
        )
        if (slot := self._claim()) is not None:
            slot.set_result(settlement)

    def fail(self, exc: BaseException) -> None:
        if (slot := self._claim()) is not None:
            slot.set_exception(exc)

    def cancel(self) -> None:
        if (slot := self._claim()) is not None:
            slot.cancel()


async def _settle_into[T, E](
    task: Task[T, E],
    index: int,
    writer: _SlotWriter[T, E],
) -> None:
    try:
        result = await task()
    except asyncio.CancelledError:
        writer.cancel()
        raise
    except Exception as exc:
        # Not a rejection: the consumer gets the exception at this slot.
        writer.fail(exc)
        return
    writer.fill(Settlement.of(result, index))


class SettlementStream[T, E]:
    """
    One-shot async iterator of Settlements in completion order.

    The race starts on the first pull. Once drained, further pulls end
    immediately; call all_settled_iterable again for a fresh race.
    Abandoning the stream does not cancel the tasks already launched.

    Cancelling a pull leaves its slot unread: the next pull picks it up,
    so every task's outcome is still delivered exactly once.
    """

    __slots__ = ("_tasks", "_writer", "_position", "_unread")

    def __init__(self, tasks: Sequence[LazyCoroResult[T, E]], /) -> None:
        self._tasks = tuple(tasks)
        self._writer: _SlotWriter[T, E] | None = None
        self._position = 0
        self._unread: list[int] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __aiter__(self) -> SettlementStream[T, E]:
        return self

    async def __anext__(self) -> Settlement[T, E]:
        if self._writer is None:
            self._writer = self._start()
        if self._unread:
            index = heapq.heappop(self._unread)
        elif self._position < len(self._writer.slots):
            index = self._position
            self._position += 1
        else:
            raise StopAsyncIteration

        slot = self._writer.slots[index]
        try:
            return await asyncio.shield(slot)
        except asyncio.CancelledError:
            if not slot.cancelled():
                heapq.heappush(self._unread, index)
            raise

    def _start(self) -> _SlotWriter[T, E]:
        loop = asyncio.get_running_loop()
        writer: _SlotWriter[T, E] = _SlotWriter([loop.create_future() for _ in self._tasks])
        for index, task in enumerate(self._tasks):
            runner = loop.create_task(_settle_into(task, index, writer))
            _running.add(runner)
            runner.add_done_callback(_running.discard)
        logger.debug("started settlement race over %d tasks", len(self._tasks))
        return writer


def all_settled_iterable[T, E](
    tasks: Sequence[LazyCoroResult[T, E]],
) -> SettlementStream[T, E]:
    """
    Iterate outcomes in the order tasks settle, each tagged with its index.

    Example:
        stream = all_settled_iterable([delay_resolve("a", seconds=0.025), delay_reject("b", seconds=0.015)])
        await to_list_async(stream)
        # [Settlement(REJECTED, reason="b", index=1), Settlement(FULFILLED, value="a", index=0)]
    """
    return SettlementStream(tasks)


__all__ = ("SettlementStream", "all_settled_iterable")

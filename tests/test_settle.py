"""
Tests for the settlement combinators.

Completion order is controlled with fixed delays (15ms vs 25ms) rather than
racing on wall-clock time.
"""

import asyncio

import pytest
from kungfu import Error, LazyCoroResult, Ok

from lazysettle import (
    FULFILLED,
    REJECTED,
    Settlement,
    SettlementState,
    SettlementStream,
    after_settled,
    all_settled,
    all_settled_iterable,
    delay_reject,
    delay_resolve,
    to_list_async,
    to_resolved,
    to_resolvedM,
)
from lazysettle import lift as L


async def boom():
    raise RuntimeError("boom")


# ============================================================================
# States
# ============================================================================


def test_state_tags():
    """Test the values of the two settlement tags."""
    assert FULFILLED == "fulfilled"
    assert REJECTED == "rejected"
    assert SettlementState("rejected") is REJECTED


def test_settlement_from_result():
    """Test classifying Ok and Error into Settlements and back."""
    fulfilled = Settlement.of(Ok("a"))
    rejected = Settlement.of(Error("b"), index=3)

    assert fulfilled == Settlement(FULFILLED, value="a")
    assert fulfilled.is_fulfilled
    assert rejected == Settlement(REJECTED, reason="b", index=3)
    assert rejected.is_rejected
    assert fulfilled.to_result() == Ok("a")
    assert rejected.to_result() == Error("b")


# ============================================================================
# to_resolved
# ============================================================================


@pytest.mark.asyncio
async def test_to_resolved_never_fails():
    """Test that every classified task succeeds with its tagged outcome."""
    resolved = to_resolved([L.pure("a"), L.fail("b")])

    assert len(resolved) == 2
    assert await resolved[0]() == Ok(Settlement.fulfilled("a"))
    assert await resolved[1]() == Ok(Settlement.rejected("b"))


@pytest.mark.asyncio
async def test_to_resolvedM_uses_extract():
    """Test the generic classifier with a custom task shape."""

    async def raw_ok():
        return {"ok": True, "payload": 1}

    async def raw_err():
        return {"ok": False, "payload": "bad"}

    def extract(raw):
        return Ok(raw["payload"]) if raw["ok"] else Error(raw["payload"])

    resolved = to_resolvedM([raw_ok, raw_err], extract=extract, wrap=LazyCoroResult)

    assert await resolved[0]() == Ok(Settlement.fulfilled(1))
    assert await resolved[1]() == Ok(Settlement.rejected("bad"))


# ============================================================================
# all_settled
# ============================================================================


@pytest.mark.asyncio
async def test_all_settled_keeps_input_order():
    """Test that outcomes follow input order, not completion order."""
    a = delay_resolve("a-resolved", seconds=0.025)
    b = delay_reject("b-rejected", seconds=0.015)

    result = await all_settled([a, b])

    assert result.unwrap() == [
        Settlement(FULFILLED, value="a-resolved"),
        Settlement(REJECTED, reason="b-rejected"),
    ]


@pytest.mark.asyncio
async def test_all_settled_runs_concurrently():
    """Test that tasks overlap instead of running one after another."""
    loop = asyncio.get_running_loop()
    tasks = [delay_resolve(i, seconds=0.05) for i in range(5)]

    started = loop.time()
    result = await all_settled(tasks)

    assert [s.value for s in result.unwrap()] == [0, 1, 2, 3, 4]
    assert loop.time() - started < 0.2


@pytest.mark.asyncio
async def test_all_settled_empty():
    """Test that no tasks settle to an empty list."""
    assert await all_settled([]) == Ok([])


@pytest.mark.asyncio
async def test_all_settled_propagates_exceptions():
    """Test that a raised exception is not mistaken for a rejection."""
    with pytest.raises(RuntimeError, match="boom"):
        await all_settled([L.pure("a"), LazyCoroResult(boom)])


# ============================================================================
# all_settled_iterable
# ============================================================================


@pytest.mark.asyncio
async def test_all_settled_iterable_rejection_first():
    """Test completion order when the rejection settles first."""
    a = delay_resolve("a-resolved", seconds=0.025)
    b = delay_reject("b-rejected", seconds=0.015)

    result = await to_list_async(all_settled_iterable([a, b]))

    assert result == [
        Settlement(REJECTED, reason="b-rejected", index=1),
        Settlement(FULFILLED, value="a-resolved", index=0),
    ]


@pytest.mark.asyncio
async def test_all_settled_iterable_fulfillment_first():
    """Test completion order when the fulfillment settles first."""
    a = delay_resolve("a-resolved", seconds=0.015)
    b = delay_reject("b-rejected", seconds=0.025)

    result = await to_list_async(all_settled_iterable([a, b]))

    assert result == [
        Settlement(FULFILLED, value="a-resolved", index=0),
        Settlement(REJECTED, reason="b-rejected", index=1),
    ]


@pytest.mark.asyncio
async def test_all_settled_iterable_index_names_originating_task():
    """Test that each outcome is tagged with its task's input position."""
    tasks = [
        delay_resolve("slow", seconds=0.045),
        delay_resolve("fast", seconds=0.015),
        delay_reject("middle", seconds=0.03),
    ]

    result = await to_list_async(all_settled_iterable(tasks))

    assert [s.index for s in result] == [1, 2, 0]
    assert [s.state for s in result] == [FULFILLED, REJECTED, FULFILLED]


@pytest.mark.asyncio
async def test_all_settled_iterable_is_one_shot():
    """Test that a drained stream stays drained."""
    stream = all_settled_iterable([L.pure("a"), L.fail("b")])

    assert isinstance(stream, SettlementStream)
    assert len(stream) == 2
    assert len(await to_list_async(stream)) == 2
    assert await to_list_async(stream) == []


@pytest.mark.asyncio
async def test_all_settled_iterable_fresh_race_per_call():
    """Test that calling again with the same tasks runs them again."""
    tasks = [L.pure("a"), L.fail("b")]

    first = await to_list_async(all_settled_iterable(tasks))
    second = await to_list_async(all_settled_iterable(tasks))

    assert sorted(s.index for s in first) == [0, 1]
    assert sorted(s.index for s in second) == [0, 1]


@pytest.mark.asyncio
async def test_all_settled_iterable_pull_waits_for_next_settlement():
    """Test that a pull suspends until some task settles."""
    stream = all_settled_iterable([delay_resolve("a", seconds=0.02)])

    pull = asyncio.ensure_future(anext(stream))
    await asyncio.sleep(0)

    assert not pull.done()
    assert await pull == Settlement(FULFILLED, value="a", index=0)


@pytest.mark.asyncio
async def test_all_settled_iterable_timed_out_pull_keeps_outcome():
    """Test that a pull cancelled by a timeout does not lose that outcome."""
    stream = all_settled_iterable(
        [delay_resolve("a", seconds=0.03), delay_resolve("b", seconds=0.06)]
    )

    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(anext(stream), 0.01)

    result = await to_list_async(stream)

    assert [s.value for s in result] == ["a", "b"]
    assert [s.index for s in result] == [0, 1]


@pytest.mark.asyncio
async def test_all_settled_iterable_cancelled_pull_while_another_waits():
    """Test that a slot abandoned by one pull goes to the next pull."""
    stream = all_settled_iterable(
        [delay_resolve("a", seconds=0.015), delay_reject("b", seconds=0.025)]
    )

    first = asyncio.ensure_future(anext(stream))
    second = asyncio.ensure_future(anext(stream))
    await asyncio.sleep(0)
    first.cancel()

    assert await second == Settlement(REJECTED, reason="b", index=1)
    assert await anext(stream) == Settlement(FULFILLED, value="a", index=0)
    assert await to_list_async(stream) == []


@pytest.mark.asyncio
async def test_all_settled_iterable_empty():
    """Test that no tasks give an empty stream."""
    assert await to_list_async(all_settled_iterable([])) == []


@pytest.mark.asyncio
async def test_all_settled_iterable_delivers_exceptions_in_slot():
    """Test that a task raising instead of returning reaches the consumer."""
    stream = all_settled_iterable([L.pure("a"), LazyCoroResult(boom)])

    assert await anext(stream) == Settlement(FULFILLED, value="a", index=0)
    with pytest.raises(RuntimeError, match="boom"):
        await anext(stream)


# ============================================================================
# after_settled
# ============================================================================


@pytest.mark.asyncio
async def test_after_settled_all_fulfilled():
    """Test that all successes give the values in input order."""
    result = await after_settled([L.pure("a-resolved"), L.pure("b-resolved")])

    assert result == Ok(["a-resolved", "b-resolved"])


@pytest.mark.asyncio
async def test_after_settled_one_rejected():
    """Test that a single failure still reports a list of reasons."""
    result = await after_settled([L.pure("a-resolved"), L.fail("b-rejected")])

    assert result == Error(["b-rejected"])


@pytest.mark.asyncio
async def test_after_settled_all_rejected():
    """Test that every reason is reported, in input order."""
    a = delay_reject("a-rejected", seconds=0.025)
    b = delay_reject("b-rejected", seconds=0.015)

    result = await after_settled([a, b])

    assert result == Error(["a-rejected", "b-rejected"])


@pytest.mark.asyncio
async def test_after_settled_empty():
    """Test that no tasks is a success with no values."""
    assert await after_settled([]) == Ok([])

"""
Unit tests for PhaseClock and the Suspension primitive.
"""

import asyncio

import pytest
from metacog_trials.execution import PhaseClock, Suspension, wait


# ==================== PHASE CLOCK TESTS ====================

@pytest.mark.unit
def test_clock_start_returns_absolute_time(make_clock):
    clock = PhaseClock(make_clock(start=1000))

    assert clock.start() == 1000
    assert clock.started


@pytest.mark.unit
def test_clock_elapsed_is_relative_to_start(make_clock):
    source = make_clock(start=1000)
    clock = PhaseClock(source)
    clock.start()

    source.advance(250)

    assert clock.elapsed() == 250
    assert clock.relative(1120) == 120


@pytest.mark.unit
def test_clock_cannot_start_twice(phase_clock):
    phase_clock.start()

    with pytest.raises(RuntimeError):
        phase_clock.start()


@pytest.mark.unit
def test_clock_elapsed_before_start_raises(phase_clock):
    with pytest.raises(RuntimeError):
        phase_clock.elapsed()


@pytest.mark.unit
def test_clock_defaults_to_wall_clock_ms():
    clock = PhaseClock()
    start = clock.start()

    assert start > 1_000_000_000_000
    assert clock.elapsed() >= 0


# ==================== SUSPENSION TESTS ====================

@pytest.mark.unit
def test_suspension_resolves_after_duration():
    async def scenario():
        return await Suspension(5, value="elapsed")

    assert asyncio.run(scenario()) == "elapsed"


@pytest.mark.unit
def test_suspension_resolved_early():
    async def scenario():
        gate = Suspension()
        asyncio.get_running_loop().call_soon(gate.resolve, "done")
        result = await gate
        return result, gate.done

    assert asyncio.run(scenario()) == ("done", True)


@pytest.mark.unit
def test_suspension_resolve_only_once():
    async def scenario():
        gate = Suspension(1000)
        first = gate.resolve(1)
        second = gate.resolve(2)
        return first, second, await gate

    assert asyncio.run(scenario()) == (True, False, 1)


@pytest.mark.unit
def test_suspension_cancel():
    async def scenario():
        gate = Suspension(1000)
        gate.cancel()
        with pytest.raises(asyncio.CancelledError):
            await gate
        return gate.cancelled

    assert asyncio.run(scenario()) is True


@pytest.mark.unit
def test_suspension_does_not_block_other_tasks():
    """While one task is suspended, other tasks keep running."""
    async def scenario():
        events = []

        async def suspended():
            await Suspension(20)
            events.append('suspended done')

        async def other():
            events.append('other ran')

        await asyncio.gather(suspended(), other())
        return events

    assert asyncio.run(scenario()) == ['other ran', 'suspended done']


@pytest.mark.unit
@pytest.mark.parametrize("duration", [None, 0])
def test_wait_without_duration_still_yields(duration):
    async def scenario():
        events = []

        async def waiter():
            await wait(duration)
            events.append('waiter')

        async def other():
            events.append('other')

        await asyncio.gather(waiter(), other())
        return events

    assert asyncio.run(scenario()) == ['other', 'waiter']


@pytest.mark.unit
def test_wait_with_duration():
    async def scenario():
        loop = asyncio.get_running_loop()
        start = loop.time()
        await wait(20)
        return loop.time() - start

    assert asyncio.run(scenario()) >= 0.015

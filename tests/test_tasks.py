"""Tests for Tasks.all and Tasks.any."""

import asyncio

import pytest
from driftless import Err, Ok, Panic, Task, Tasks


async def _settle_after(result, delay):
    await asyncio.sleep(delay)
    return result


class TestTasksAll:
    @pytest.mark.asyncio
    async def test_all_ok(self):
        assert await Tasks.all([Task.succeed(1), Task.succeed(2)]) == Ok([1, 2])

    @pytest.mark.asyncio
    async def test_all_keeps_input_order(self):
        slow = Task.of(_settle_after(Ok('slow'), 0.03))
        fast = Task.of(_settle_after(Ok('fast'), 0.0))
        assert await Tasks.all([slow, fast]) == Ok(['slow', 'fast'])

    @pytest.mark.asyncio
    async def test_all_first_err_by_position(self):
        """The positionally first Err wins even when a later one settles first."""
        first = Task.of(_settle_after(Err('e1'), 0.03))
        second = Task.fail('e2')
        assert await Tasks.all([Task.succeed(0), first, second]) == Err('e1')

    @pytest.mark.asyncio
    async def test_all_empty(self):
        assert await Tasks.all([]) == Ok([])

    @pytest.mark.asyncio
    async def test_all_accepts_results_and_coroutines(self):
        tasks = [Ok(1), _settle_after(Ok(2), 0), Task.succeed(3)]
        assert await Tasks.all(tasks) == Ok([1, 2, 3])

    @pytest.mark.asyncio
    async def test_all_runs_concurrently(self):
        loop = asyncio.get_running_loop()
        start = loop.time()
        await Tasks.all([_settle_after(Ok(n), 0.1) for n in range(5)])
        assert loop.time() - start < 0.3

    @pytest.mark.asyncio
    async def test_all_member_panic_surfaces(self):
        broken = Task.succeed(1).map(lambda x: x / 0)
        with pytest.raises(Panic) as info:
            await Tasks.all([Task.succeed(1), broken])
        assert isinstance(info.value.cause, ZeroDivisionError)


class TestTasksAny:
    @pytest.mark.asyncio
    async def test_any_discards_errors(self):
        task = Tasks.any([Task.fail(ValueError()), Task.succeed(42), Task.fail(KeyError())])
        assert await task == Ok(42)

    @pytest.mark.asyncio
    async def test_any_first_ok_by_position(self):
        slow = Task.of(_settle_after(Ok('slow'), 0.03))
        fast = Task.succeed('fast')
        assert await Tasks.any([slow, fast]) == Ok('slow')

    @pytest.mark.asyncio
    async def test_any_collects_errors(self):
        assert await Tasks.any([Task.fail('a'), Task.fail('b')]) == Err(['a', 'b'])

    @pytest.mark.asyncio
    async def test_any_empty(self):
        assert await Tasks.any([]) == Err([])

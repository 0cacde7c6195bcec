"""Tests for Pending results and await_chain()."""

import asyncio

import pytest
from resultant import ConsumedError, Err, Nil, Ok, Pending, err, ok, task


async def double_async(x: int) -> Ok[int]:
    await asyncio.sleep(0)
    return Ok(x * 2)


class TestPending:
    """Tests for the Pending wrapper."""

    @pytest.mark.anyio
    async def test_resolved(self):
        """Pending.resolved settles to the given result."""
        r = Ok(1)
        assert await Pending.resolved(r) is r

    @pytest.mark.anyio
    async def test_resolved_can_be_awaited_repeatedly(self):
        """A resolved Pending settles to the same result on every await."""
        r = Ok(1)
        pending = Pending.resolved(r)
        assert await pending is r
        assert await pending is r
        assert await pending.map(lambda x: x + 1) == Ok(2)
        assert repr(pending) == 'Pending.resolved(Ok(value=1))'

    @pytest.mark.anyio
    async def test_wraps_raw_awaitable(self):
        """A raw awaited value is normalized."""

        async def five() -> int:
            return 5

        assert await Pending(five()) == Ok(5)

    @pytest.mark.anyio
    async def test_wraps_none_as_nil(self):
        """An awaitable settling to None gives Nil."""

        async def nothing() -> None:
            return None

        assert await Pending(nothing()) is Nil

    @pytest.mark.anyio
    async def test_map(self):
        """map transforms once settled."""
        assert await Pending.resolved(Ok(5)).map(lambda x: x * 2) == Ok(10)

    @pytest.mark.anyio
    async def test_map_raising_becomes_err(self):
        """A raising transformer gives Err."""
        r = await Pending.resolved(Ok(5)).map(lambda x: x / 0)
        assert isinstance(r.error, ZeroDivisionError)

    @pytest.mark.anyio
    async def test_chain_sync_and_async(self):
        """chain accepts both sync and async functions."""
        r = await Pending.resolved(Ok(5)).chain(lambda x: Ok(x + 1)).chain(double_async)
        assert r == Ok(12)

    @pytest.mark.anyio
    async def test_chain_skips_nil(self):
        """chain does not call f on Nil."""
        calls = []

        async def record(x):
            calls.append(x)
            return Ok(x)

        assert await Pending.resolved(Nil).chain(record) is Nil
        assert calls == []

    @pytest.mark.anyio
    async def test_filter_and_guard(self):
        """filter and guard behave like their sync counterparts."""
        assert await Pending.resolved(Ok(5)).filter(lambda x: x > 10) is Nil
        assert await Pending.resolved(err('x')).guard(lambda x: True) is Nil

    @pytest.mark.anyio
    async def test_or(self):
        """or_ supplies a fallback."""
        assert await Pending.resolved(Nil).or_(lambda: 3) == Ok(3)

    @pytest.mark.anyio
    async def test_catch_async_recovery(self):
        """catch accepts an async recovery function."""

        async def recover(e: BaseException) -> Ok[str]:
            await asyncio.sleep(0)
            return Ok(f'recovered from {e}')

        r = await Pending.resolved(err('boom')).catch(recover)
        assert r == Ok('recovered from boom')

    @pytest.mark.anyio
    async def test_catch_ok_untouched(self):
        """catch leaves Ok alone."""
        r = Ok(1)
        assert await Pending.resolved(r).catch(lambda e: Ok(0)) is r

    @pytest.mark.anyio
    async def test_match(self):
        """match dispatches once settled."""
        out = await Pending.resolved(Ok(2)).match(ok=lambda v: v * 10, nil=lambda: 0)
        assert out == 20

    @pytest.mark.anyio
    async def test_match_async_handler(self):
        """Async handlers are awaited."""

        async def handle(e: BaseException) -> str:
            return f'handled {e}'

        assert await Pending.resolved(err('x')).match(err=handle) == 'handled x'

    @pytest.mark.anyio
    async def test_get(self):
        """get settles and retrieves the payload once."""
        r = Ok(7)
        assert await Pending.resolved(r).get() == 7
        with pytest.raises(ConsumedError):
            await Pending.resolved(r).get()

    @pytest.mark.anyio
    async def test_get_err_raises(self):
        """get on a settled Err raises the error."""
        with pytest.raises(KeyError):
            await Pending.resolved(Err(KeyError('k'))).get()


class TestAwaitChain:
    """Tests for Result.await_chain()."""

    @pytest.mark.anyio
    async def test_ok(self):
        """await_chain runs the async function on Ok."""
        pending = ok(5).await_chain(double_async)
        assert isinstance(pending, Pending)
        assert await pending == Ok(10)

    @pytest.mark.anyio
    async def test_nil_and_err_resolve_immediately(self):
        """await_chain on Nil and Err settles to self without calling f."""
        calls = []

        async def record(x):
            calls.append(x)
            return Ok(x)

        e = err('x')
        assert await Nil.await_chain(record) is Nil
        assert await e.await_chain(record) is e
        assert calls == []

    @pytest.mark.anyio
    async def test_short_circuit_is_reusable(self):
        """The Pending returned for Nil can be awaited more than once."""

        async def record(x):
            return Ok(x)

        pending = Nil.await_chain(record)
        assert await pending is Nil
        assert await pending is Nil

    @pytest.mark.anyio
    async def test_rejection_becomes_err(self):
        """An exception inside the async function becomes Err."""

        async def explode(x):
            await asyncio.sleep(0)
            raise RuntimeError('rejected')

        r = await ok(1).await_chain(explode)
        assert isinstance(r, Err)
        assert str(r.error) == 'rejected'

    @pytest.mark.anyio
    async def test_continue_chaining(self):
        """A Pending can keep chaining with await_chain and catch."""

        async def fail(x):
            raise ValueError(x)

        r = await ok(1).await_chain(fail).catch(lambda e: Ok(0)).await_chain(double_async)
        assert r == Ok(0)

    @pytest.mark.anyio
    async def test_with_task(self):
        """task results chain the same way."""
        r = await task(double_async, 4).map(lambda x: x + 1)
        assert r == Ok(9)

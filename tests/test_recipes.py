"""Tests for recipes built from the combinators."""

import pytest
from structlog.testing import capture_logs
from resultant import Err, Nil, Ok, retry


class Flaky:
    """Async callable failing a fixed number of times before succeeding."""

    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.calls = 0

    async def __call__(self, value: str) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError(f'attempt {self.calls}')
        return value


class TestRetry:
    """Tests for retry()."""

    @pytest.mark.anyio
    async def test_succeeds_after_failures(self):
        """Failed attempts are retried until one succeeds."""
        flaky = Flaky(failures=2)
        with capture_logs() as logs:
            r = await retry(flaky, 'done', attempts=3, delay=0)
        assert r == Ok('done')
        assert flaky.calls == 3
        assert [entry['event'] for entry in logs] == ['retrying', 'retrying']

    @pytest.mark.anyio
    async def test_gives_up(self):
        """The last Err is returned once attempts run out."""
        flaky = Flaky(failures=10)
        with capture_logs():
            r = await retry(flaky, 'never', attempts=4, delay=0)
        assert isinstance(r, Err)
        assert str(r.error) == 'attempt 4'
        assert flaky.calls == 4

    @pytest.mark.anyio
    async def test_first_success_no_retry(self):
        """A successful first call is not repeated."""
        flaky = Flaky(failures=0)
        assert await retry(flaky, 'x', delay=0) == Ok('x')
        assert flaky.calls == 1

    @pytest.mark.anyio
    async def test_nil_is_not_retried(self):
        """Nil is an outcome, not a failure."""
        calls = []

        async def nothing():
            calls.append(1)

        assert await retry(nothing, attempts=3, delay=0) is Nil
        assert calls == [1]

    def test_invalid_attempts(self):
        """attempts must be positive."""

        async def noop():
            return 1

        with pytest.raises(ValueError, match='attempts must be at least 1'):
            retry(noop, attempts=0)

"""Tests for decorator utilities."""
import logging

import pytest

from fxbands.utils.decorators import log_execution, retry


@pytest.mark.asyncio
async def test_retry_success():
    """Test retry decorator with successful execution."""
    call_count = 0

    @retry(max_attempts=3, delay=0.01)
    async def flaky_function():
        nonlocal call_count
        call_count += 1
        if call_count < 2:
            raise ValueError("Temporary error")
        return "success"

    result = await flaky_function()
    assert result == "success"
    assert call_count == 2


@pytest.mark.asyncio
async def test_retry_failure():
    """Test retry decorator with persistent failure."""
    call_count = 0

    @retry(max_attempts=3, delay=0.01)
    async def always_fails():
        nonlocal call_count
        call_count += 1
        raise ValueError("Persistent error")

    with pytest.raises(ValueError, match="Persistent error"):
        await always_fails()
    assert call_count == 3


@pytest.mark.asyncio
async def test_retry_ignores_unlisted_exceptions():
    call_count = 0

    @retry(max_attempts=3, delay=0.01, exceptions=(KeyError,))
    async def wrong_kind():
        nonlocal call_count
        call_count += 1
        raise ValueError("not retried")

    with pytest.raises(ValueError):
        await wrong_kind()
    assert call_count == 1


def test_retry_sync():
    attempts = []

    @retry(max_attempts=2, delay=0.0)
    def sometimes():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("first call fails")
        return 42

    assert sometimes() == 42
    assert len(attempts) == 2


@pytest.mark.asyncio
async def test_log_execution_async(caplog):
    @log_execution()
    async def compute(x):
        return x * 2

    with caplog.at_level(logging.DEBUG, logger="fxbands.utils.decorators"):
        assert await compute(21) == 42
    messages = [r.getMessage() for r in caplog.records]
    assert "Starting compute" in messages
    assert "Completed compute" in messages


def test_log_execution_sync_failure(caplog):
    @log_execution(log_args=True)
    def explode():
        raise RuntimeError("boom")

    with caplog.at_level(logging.DEBUG, logger="fxbands.utils.decorators"):
        with pytest.raises(RuntimeError):
            explode()
    failed = [r for r in caplog.records if r.getMessage() == "Failed explode"]
    assert failed and failed[0].error == "boom"

"""Tests for the async retry helper."""

from __future__ import annotations

import pytest

from abn_lookup.utils.retry import retry_async


@pytest.mark.asyncio
async def test_retry_until_success():
    calls: list[int] = []

    async def operation():
        calls.append(1)
        if len(calls) < 3:
            raise ConnectionError("flaky")
        return "ok"

    assert await retry_async(operation, max_attempts=3, base_delay=0) == "ok"
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_retry_gives_up_after_max_attempts():
    calls: list[int] = []

    async def operation():
        calls.append(1)
        raise ConnectionError("down")

    with pytest.raises(ConnectionError):
        await retry_async(operation, max_attempts=2, base_delay=0)
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_non_retryable_errors_raise_immediately():
    calls: list[int] = []
    warnings = []

    class RecordingLogger:
        def warning(self, event, **kwargs):
            warnings.append(event)

    async def operation():
        calls.append(1)
        raise ValueError("bad request")

    with pytest.raises(ValueError):
        await retry_async(
            operation,
            max_attempts=5,
            base_delay=0,
            should_retry=lambda exc: isinstance(exc, ConnectionError),
            logger=RecordingLogger(),
        )
    assert len(calls) == 1
    assert warnings == []

"""
Unit tests for the async retry decorator.
"""
from unittest.mock import AsyncMock, patch

import pytest

from environ_backend.core.exceptions import DatabaseConnectionError, DatabaseError
from environ_backend.utils.retry_utils import async_retry_on_exception


@pytest.fixture(autouse=True)
def no_sleep():
    with patch("environ_backend.utils.retry_utils.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.mark.asyncio
async def test_returns_first_success():
    func = AsyncMock(return_value="ok")
    wrapped = async_retry_on_exception(max_retries=2)(func)

    assert await wrapped() == "ok"
    assert func.await_count == 1


@pytest.mark.asyncio
async def test_retries_then_succeeds(no_sleep):
    func = AsyncMock(side_effect=[DatabaseConnectionError("a"), DatabaseConnectionError("b"), "ok"])
    wrapped = async_retry_on_exception(max_retries=3, initial_delay=1.0, jitter=False)(func)

    assert await wrapped() == "ok"
    assert func.await_count == 3
    # 1s then 2s with exponential backoff
    assert [c.args[0] for c in no_sleep.await_args_list] == [1.0, 2.0]


@pytest.mark.asyncio
async def test_delay_capped(no_sleep):
    func = AsyncMock(side_effect=[DatabaseConnectionError("a")] * 3 + ["ok"])
    wrapped = async_retry_on_exception(max_retries=3, initial_delay=4.0, max_delay=5.0, jitter=False)(func)

    await wrapped()
    assert [c.args[0] for c in no_sleep.await_args_list] == [4.0, 5.0, 5.0]


@pytest.mark.asyncio
async def test_non_retryable_raises_immediately():
    func = AsyncMock(side_effect=DatabaseError("bad query", retryable=False))
    wrapped = async_retry_on_exception(max_retries=3, exceptions=(DatabaseError,))(func)

    with pytest.raises(DatabaseError):
        await wrapped()
    assert func.await_count == 1


@pytest.mark.asyncio
async def test_other_exceptions_not_retried():
    func = AsyncMock(side_effect=KeyError("x"))
    wrapped = async_retry_on_exception(max_retries=3)(func)

    with pytest.raises(KeyError):
        await wrapped()
    assert func.await_count == 1

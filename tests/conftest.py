"""Pytest configuration and shared fixtures for awaitkit tests."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine, Generator
from typing import Any

import pytest
from awaitkit import _config
from awaitkit._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None]:
    """Reset configuration and log hooks around each test."""
    _config.reset()
    clear_log_hooks()
    yield
    _config.reset()
    clear_log_hooks()


async def resolve_after[T](value: T, delay: float = 0) -> T:
    """Return value after sleeping for delay seconds."""
    await asyncio.sleep(delay)
    return value


async def fail_after(error: BaseException, delay: float = 0) -> Any:
    """Raise error after sleeping for delay seconds."""
    await asyncio.sleep(delay)
    raise error


@pytest.fixture
def resolved() -> Callable[..., Coroutine[Any, Any, Any]]:
    """Factory for coroutines that succeed after an optional delay."""
    return resolve_after


@pytest.fixture
def fails() -> Callable[..., Coroutine[Any, Any, Any]]:
    """Factory for coroutines that raise after an optional delay."""
    return fail_after


@pytest.fixture
def done_future() -> Callable[[Any], asyncio.Future[Any]]:
    """Factory for futures that are already resolved."""

    def make(value: Any) -> asyncio.Future[Any]:
        future = asyncio.get_running_loop().create_future()
        future.set_result(value)
        return future

    return make


@pytest.fixture
def failed_future() -> Callable[[BaseException], asyncio.Future[Any]]:
    """Factory for futures that have already failed."""

    def make(error: BaseException) -> asyncio.Future[Any]:
        future = asyncio.get_running_loop().create_future()
        future.set_exception(error)
        return future

    return make

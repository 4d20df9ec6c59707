"""Async helpers."""

from __future__ import annotations

import anyio

__all__ = ['sleep']


async def sleep(seconds: float) -> None:
    """Suspend the current task for the given number of seconds.

    Backend-agnostic: works under asyncio and trio.
    """
    await anyio.sleep(seconds)

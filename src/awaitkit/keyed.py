"""Keyed combinators: await a mapping of pending values concurrently.

``keyed_all`` and ``keyed_all_settled`` are the mapping counterparts of
``asyncio.gather`` with and without ``return_exceptions``. They take a
mapping from string keys to either concrete values or pending values
(coroutines, tasks, futures, other awaitables, thread-pool futures) and
return a new dict with the same keys, in the same order.

Resolution is one level deep: a pending value nested inside a concrete
value, or inside a resolved value, is returned as-is.

The same pending object listed under several keys is started once and
its outcome is shared by every one of those keys.

Example:
    ```python
    async def load(user_id: int) -> dict[str, Any]:
        return await keyed_all({
            'user': fetch_user(user_id),
            'orders': fetch_orders(user_id),
            'region': 'eu-west-1',
        })

    async def check_health() -> dict[str, Settled[Any]]:
        return await keyed_all_settled({'db': ping_db(), 'cache': ping_cache()})
    ```
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import functools
from collections.abc import Awaitable, Mapping
from typing import Any

import aiologic

from awaitkit._config import current_config
from awaitkit._logging import get_logger
from awaitkit.guards import is_awaitable
from awaitkit.settled import Fulfilled, Rejected, Settled

__all__ = ['keyed_all', 'keyed_all_settled']

# Strong references to every observed future until it finishes; the event
# loop only keeps weak references to tasks, and keyed_all can return while
# siblings are still running.
_in_flight: set[asyncio.Future[Any]] = set()


def _as_future(value: Awaitable[Any] | concurrent.futures.Future[Any]) -> asyncio.Future[Any]:
    """Start (or adopt) a pending value as a future on the running loop.

    Raises:
        ValueError: ``value`` is an asyncio future bound to another loop.
    """
    loop = asyncio.get_running_loop()
    if isinstance(value, concurrent.futures.Future):
        return asyncio.wrap_future(value, loop=loop)
    return asyncio.ensure_future(value, loop=loop)


def _outcome_of(future: asyncio.Future[Any]) -> Settled[Any]:
    """Read a finished future's outcome, marking any exception as retrieved."""
    if future.cancelled():
        return Rejected(asyncio.CancelledError())
    exc = future.exception()
    if exc is not None:
        return Rejected(exc)
    return Fulfilled(future.result())


class _FanIn:
    """Fan-in barrier over a fixed number of positional slots.

    Each entry settles into its slot exactly once. The completion event fires
    when every slot is filled or, in fail-fast mode, on the first rejection.
    Entries still running after a fail-fast completion are left alone.

    Settlements only ever arrive on the event loop thread (thread-pool futures
    are relayed through ``wrap_future``), so the counters need no lock.

    Attributes:
        _slots: Settled outcome per input position, None while pending.
        _outstanding: Number of slots not yet filled.
        _failure: First rejection reason seen in fail-fast mode.
        _adopted: Future per pending object, keyed by identity, so an object
            listed under several keys is started once.
        _event: Completion signal.
    """

    __slots__ = (
        '_adopted',
        '_event',
        '_fail_fast',
        '_failure',
        '_keys',
        '_log',
        '_outstanding',
        '_slots',
    )

    def __init__(self, keys: list[str], *, fail_fast: bool) -> None:
        self._keys = keys
        self._fail_fast = fail_fast
        self._slots: list[Settled[Any] | None] = [None] * len(keys)
        self._outstanding = len(keys)
        self._failure: BaseException | None = None
        self._adopted: dict[int, asyncio.Future[Any]] = {}
        self._event = aiologic.Event()
        self._log = get_logger(__name__) if current_config().trace_settlements else None
        if not keys:
            self._event.set()

    def watch(self, index: int, value: Any) -> None:
        """Register the entry at ``index``; concrete values settle immediately.

        A pending value that cannot be adopted on the running loop settles as
        ``Rejected`` with the adoption error.
        """
        if not is_awaitable(value):
            self._settle(index, Fulfilled(value))
            return

        future = self._adopted.get(id(value))
        if future is None:
            try:
                future = _as_future(value)
            except (TypeError, ValueError) as exc:
                self._settle(index, Rejected(exc))
                return
            self._adopted[id(value)] = future
            _in_flight.add(future)
            future.add_done_callback(_in_flight.discard)
        future.add_done_callback(functools.partial(self._on_done, index))

    def _on_done(self, index: int, future: asyncio.Future[Any]) -> None:
        self._settle(index, _outcome_of(future))

    def _settle(self, index: int, outcome: Settled[Any]) -> None:
        self._slots[index] = outcome
        self._outstanding -= 1
        first_failure = self._fail_fast and self._failure is None and isinstance(outcome, Rejected)
        if first_failure:
            self._failure = outcome.reason  # type: ignore[union-attr]

        self.trace('keyed.settled', key=self._keys[index], status=outcome.status, outstanding=self._outstanding)
        if first_failure or self._outstanding == 0:
            self._event.set()

    @property
    def failure(self) -> BaseException | None:
        return self._failure

    def trace(self, event: str, **fields: Any) -> None:
        """Emit a debug event when settlement tracing is enabled."""
        if self._log is not None:
            self._log.debug(event, **fields)

    async def wait(self) -> list[Settled[Any]]:
        """Suspend until the terminal condition, then return the slots.

        In fail-fast mode, slots of entries still running are None.
        """
        await self._event
        return self._slots  # type: ignore[return-value]


def _start(record: Mapping[str, Any], *, fail_fast: bool) -> tuple[list[str], _FanIn]:
    keys = list(record.keys())
    values = list(record.values())
    barrier = _FanIn(keys, fail_fast=fail_fast)
    barrier.trace('keyed.start', size=len(keys), fail_fast=fail_fast)
    for index, value in enumerate(values):
        barrier.watch(index, value)
    return keys, barrier


async def keyed_all[V](record: Mapping[str, Awaitable[V] | V]) -> dict[str, V]:
    """Resolve every entry of a mapping concurrently.

    All pending values are started before the first suspension. The result
    is a new dict with the same keys in the same order, each mapped to its
    resolved value; concrete values pass through unchanged.

    Fails fast: as soon as any entry raises, that exception object is raised
    unchanged. Other entries are not cancelled and keep running; their
    outcomes are discarded.

    Args:
        record: Mapping from key to a concrete or pending value.

    Returns:
        Mapping from key to resolved value.

    Raises:
        BaseException: The first failing entry's own exception.

    Example:
        ```python
        await keyed_all({'foo': fetch_foo(), 'bar': 2})
        # {'foo': 'foo', 'bar': 2}
        ```
    """
    keys, barrier = _start(record, fail_fast=True)
    slots = await barrier.wait()

    if barrier.failure is not None:
        barrier.trace('keyed.failed', error=type(barrier.failure).__name__)
        raise barrier.failure

    barrier.trace('keyed.done', size=len(keys))
    return {key: slot.value for key, slot in zip(keys, slots, strict=True)}  # type: ignore[union-attr]


async def keyed_all_settled[V](record: Mapping[str, Awaitable[V] | V]) -> dict[str, Settled[V]]:
    """Wait for every entry of a mapping to settle, concurrently.

    Never raises because of an entry. Each key maps to ``Fulfilled(value)``
    or ``Rejected(reason)``, where ``reason`` is the raised exception object.
    A cancelled input is reported as ``Rejected(CancelledError())``.

    Args:
        record: Mapping from key to a concrete or pending value.

    Returns:
        Mapping from key to settled outcome, in input order.

    Example:
        ```python
        await keyed_all_settled({'foo': fails(), 'baz': 'baz'})
        # {'foo': Rejected(reason=ValueError(...)), 'baz': Fulfilled(value='baz')}
        ```
    """
    keys, barrier = _start(record, fail_fast=False)
    slots = await barrier.wait()

    barrier.trace('keyed.done', size=len(keys))
    return dict(zip(keys, slots, strict=True))

"""Tests for logging configuration, hooks and combinator tracing."""

from __future__ import annotations

from typing import Any

from awaitkit import init, keyed_all, keyed_all_settled
from awaitkit._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'

    def test_remove_and_clear_hooks(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

        add_log_hook(hook)
        clear_log_hooks()
        logger.info('Third')
        assert len(calls) == 1

    def test_hook_exception_does_not_break_logging(self) -> None:
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        def good_hook(event_dict: dict[str, Any]) -> None:
            calls.append('good')

        configure_logging(level='DEBUG')
        add_log_hook(bad_hook)
        add_log_hook(good_hook)

        get_logger('test').info('Test')
        assert calls == ['good']

    def test_console_output(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='INFO', json_output=False)
        add_log_hook(received.append)

        get_logger().warning('console')

        assert received[-1]['event'] == 'console'
        assert received[-1]['logger'] == 'awaitkit'


class TestSettlementTracing:
    """Tests for the debug events emitted by the keyed combinators."""

    async def test_trace_events(self, resolved) -> None:
        events: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        init(trace_settlements=True)
        add_log_hook(events.append)

        await keyed_all({'a': resolved(1), 'b': 2})

        names = [e['event'] for e in events]
        assert names[0] == 'keyed.start'
        assert names[-1] == 'keyed.done'
        settled = [e for e in events if e['event'] == 'keyed.settled']
        assert {e['key'] for e in settled} == {'a', 'b'}
        assert all(e['status'] == 'fulfilled' for e in settled)

    async def test_trace_failure(self, fails) -> None:
        events: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        init(trace_settlements=True)
        add_log_hook(events.append)

        try:
            await keyed_all({'bad': fails(KeyError('x'))})
        except KeyError:
            pass

        failed = [e for e in events if e['event'] == 'keyed.failed']
        assert failed[0]['error'] == 'KeyError'

    async def test_no_trace_by_default(self, resolved) -> None:
        events: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(events.append)

        await keyed_all_settled({'a': resolved(1)})

        assert not [e for e in events if str(e.get('event', '')).startswith('keyed.')]

    async def test_trace_outstanding_counts_down(self, resolved) -> None:
        events: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        init(trace_settlements=True)
        add_log_hook(events.append)

        await keyed_all_settled({'a': 1, 'b': resolved(2), 'c': resolved(3)})

        settled = [e for e in events if e['event'] == 'keyed.settled']
        assert [e['outstanding'] for e in settled] == [2, 1, 0]
        assert settled[0]['key'] == 'a'

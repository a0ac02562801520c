"""Tests for logging configuration and hooks."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
from klaw_collections import delete_by_index, sort_by_field
from klaw_collections._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def _runtime(clean_runtime) -> None:
    """Every test here starts and ends with pristine logging state."""


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        logger = get_logger('test')
        logger.info('Test message', extra_field='extra_value')

        test_entries = [e for e in received if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'
        assert test_entries[0]['level'] == 'info'

    def test_multiple_hooks_all_called(self) -> None:
        """Multiple registered hooks are all called."""
        calls: list[str] = []

        configure_logging(level='DEBUG')
        add_log_hook(lambda _: calls.append('hook1'))
        add_log_hook(lambda _: calls.append('hook2'))

        get_logger('test').info('Test')

        assert calls == ['hook1', 'hook2']

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        remove_log_hook(hook)
        logger.info('Second')

        assert calls == ['called']

    def test_remove_unknown_hook_is_noop(self) -> None:
        """Removing a hook that was never added does nothing."""
        remove_log_hook(lambda _: None)

    def test_clear_hooks(self) -> None:
        """clear_log_hooks() removes every hook."""
        calls: list[str] = []
        configure_logging(level='DEBUG')
        add_log_hook(lambda _: calls.append('x'))
        clear_log_hooks()

        get_logger('test').info('Nothing')

        assert calls == []

    def test_failing_hook_does_not_break_logging(self) -> None:
        """An exception inside a hook is contained."""
        received: list[dict[str, Any]] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise ValueError('hook failure')

        configure_logging(level='DEBUG')
        add_log_hook(bad_hook)
        add_log_hook(received.append)

        get_logger('test').info('Still logged')

        assert [e['event'] for e in received] == ['Still logged']


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_sets_root_level(self) -> None:
        """The root logger level follows the requested level."""
        configure_logging(level='warning')
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_defaults_to_info(self) -> None:
        """Unknown level names fall back to INFO."""
        configure_logging(level='chatty')
        assert logging.getLogger().level == logging.INFO

    def test_single_handler_installed(self) -> None:
        """Repeated configuration replaces the root handler."""
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON output renders one object per line on stderr."""
        configure_logging(level='INFO', json_output=True)

        get_logger('json-test').info('rendered', answer=42)

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        payload = json.loads(lines[-1])
        assert payload['event'] == 'rendered'
        assert payload['answer'] == 42
        assert payload['logger'] == 'json-test'


class TestLibraryEvents:
    """The library emits debug events when an operation returns Err."""

    def test_index_error_is_logged(self) -> None:
        """delete_by_index() logs index_out_of_range."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        delete_by_index([1, 2], 5)

        entries = [e for e in received if e.get('event') == 'index_out_of_range']
        assert len(entries) == 1
        assert entries[0]['op'] == 'delete_by_index'
        assert entries[0]['index'] == 5
        assert entries[0]['length'] == 2

    def test_sort_error_is_logged(self) -> None:
        """sort_by_field() logs field_not_found."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        sort_by_field([{'a': 1}], 'b')

        assert any(e.get('event') == 'field_not_found' and e['field'] == 'b' for e in received)

    def test_success_is_silent(self) -> None:
        """Successful operations log nothing."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        delete_by_index([1, 2], 0)
        sort_by_field([{'a': 2}, {'a': 1}], 'a')

        assert received == []

"""Structured logging for klaw-collections.

Library modules log through `get_logger(__name__)`. Events travel through
stdlib logging, so a host that never configures logging sees nothing, and a
host that already has handlers keeps its own format. `configure_logging()`
is the opt-in: one stderr handler rendering structlog and foreign stdlib
records alike, as JSON or console lines.

The library only emits `debug` events when an operation returns an `Err`,
plus a `warning` for an unusable seed in the environment.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    from structlog.typing import EventDict, Processor, WrappedLogger

__all__ = [
    'LogHook',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of every emitted event dict.

    Hooks see events after level filtering, so `debug` events only reach them
    when the logger is enabled for `debug`.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister a hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_hooks(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    for hook in list(_log_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001, S110
            pass  # a failing hook must not break logging
    return event_dict


def _pre_chain() -> list[Processor]:
    """Processors applied to every record, structlog or foreign."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _event_chain() -> list[Processor]:
    """Processors for events emitted through `get_logger()` loggers."""
    return [
        structlog.stdlib.filter_by_level,
        *_pre_chain(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _stderr_handler(json_output: bool) -> logging.Handler:
    renderer: Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route all logging to stderr through structlog's ProcessorFormatter.

    Replaces the root logger's handlers. Calling it again reconfigures.

    Args:
        level: Root level name ("DEBUG", "INFO", ...). Unknown names mean INFO.
        json_output: JSON lines if True, otherwise human-readable console output.
    """
    structlog.configure(
        processors=_event_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(json_output))
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger `name`.

    The stdlib level of `name` decides what is emitted, whether or not
    `configure_logging()` has run.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_event_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

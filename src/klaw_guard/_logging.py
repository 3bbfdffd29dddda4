"""Structured logging for klaw-guard.

Guards log nothing until a level is configured through ``klaw_guard.init``
(or ``KLAW_GUARD_LOG_LEVEL``). From then on every failed check emits a
``guard.check_failed`` debug event carrying the parameter name, the error
kind and the message. structlog's ProcessorFormatter renders those events and
any stdlib records from the host application through one handler.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001
            pass  # a broken hook must not break logging
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to guard events and foreign stdlib records alike."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route guard events through structlog on the root stderr handler.

    ``klaw_guard.init`` calls this when a log level is set; call it directly
    to switch the output format, e.g. to readable console lines while
    debugging a validation chain.

    Args:
        level: Root logger level. Failure events are emitted at DEBUG, so
            anything above that hides them from the handler (hooks still fire).
        json_output: One JSON object per line when True, otherwise structlog's
            console renderer.
    """
    import structlog

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # init() may be called again with another level
        cache_logger_on_first_use=False,
    )

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return the structlog logger guards use; ``name`` defaults to the caller's module."""
    import structlog

    return structlog.get_logger(name)


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of each log entry.

    Handy for shipping failed checks to metrics or for asserting on them in
    tests.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()

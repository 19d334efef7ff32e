"""Structured logging helpers distilled into tiny orchestration phrases.

Purpose
    Keep every emission of logging data predictable and contextual without
    forcing applications to adopt a specific logging backend.

Contents
    - ``TRACE_ID``: context variable storing the active trace identifier.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_trace_id``: binds or clears the active trace identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: fixed-schema payload for hosts file lifecycle events.

System Integration
    Used by the document, the adapters, and the composition root so every
    hosts file operation carries the same trace metadata. The domain layer
    stays free from logging concerns.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_hostsfile_trace_id", default=None)
"""Current trace identifier propagated through logging helpers."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_hostsfile")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('abc123')
    >>> TRACE_ID.get()
    'abc123'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry that includes the trace context."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry that includes the trace context."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry that includes the trace context."""

    _emit(logging.ERROR, message, fields)


def make_event(
    stage: str,
    path: str | None,
    *,
    entries: int | None = None,
    errors: int | None = None,
    **detail: Any,
) -> dict[str, Any]:
    """Build the logging payload for a hosts file lifecycle event.

    Every event carries the same four keys so log consumers can count entries
    and parse errors across stages; counts that a stage does not know stay
    ``None``. Extra keyword arguments are appended after them.

    Examples
    --------
    >>> make_event("parse", "/etc/hosts", entries=3, errors=0)
    {'stage': 'parse', 'path': '/etc/hosts', 'entries': 3, 'errors': 0}
    >>> make_event("save", "/etc/hosts", size=42)
    {'stage': 'save', 'path': '/etc/hosts', 'entries': None, 'errors': None, 'size': 42}
    """

    event: dict[str, Any] = {"stage": stage, "path": path, "entries": entries, "errors": errors}
    event.update(detail)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    _LOGGER.log(level, message, extra={"context": context})

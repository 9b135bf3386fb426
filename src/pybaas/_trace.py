"""Debug trace sinks for the signer and dispatcher.

A sink receives ``(stage, value)`` at fixed points of request processing.
Sinks are observers only: whatever they do (or raise) never changes the
signature or the outcome of a request.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pybaas._redact import is_sensitive_key, redact_for_log

_logger = logging.getLogger(__name__)

TraceSink = Callable[[str, Any], None]


def null_sink(stage: str, value: Any) -> None:
    """Default sink: discard everything."""


class LoggingSink:
    """Sink that writes each stage as a DEBUG record, with secrets redacted."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("pybaas.trace")

    def __call__(self, stage: str, value: Any) -> None:
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        shown = "<redacted>" if is_sensitive_key(stage) else redact_for_log(value)
        self._logger.debug("%s: %s", stage, shown)


def emit(sink: TraceSink | None, stage: str, value: Any) -> None:
    """Deliver one trace stage to *sink*, containing any sink failure."""
    if sink is None:
        return
    try:
        sink(stage, value)
    except Exception:
        _logger.debug("trace sink failed at stage=%s", stage, exc_info=True)

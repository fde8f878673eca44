"""Diagnostic sink for non-fatal load failures."""

import logging
from typing import Optional, Protocol

logger = logging.getLogger("host_trust")


class DiagnosticSink(Protocol):
    """Receives fire-and-forget diagnostic messages."""

    def record(self, message: str, *args: object) -> None: ...


class LoggingSink:
    """Forwards diagnostics to a standard library logger at DEBUG level."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def record(self, message: str, *args: object) -> None:
        self.log.debug(message, *args)


def default_sink() -> DiagnosticSink:
    return LoggingSink()

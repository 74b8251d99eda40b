"""Log sink interface shared by adapters and handlers."""

from typing import Protocol

LEVELS = ("debug", "info", "warn", "error")


class ILogSink(Protocol):
    """Destination for client log lines (level is one of LEVELS)."""

    def log(self, level: str, message: str) -> None:
        """Write one log line."""
        ...

"""Stdout logging adapter."""

import sys
from datetime import datetime

_ORDER = {"debug": 0, "info": 1, "warn": 2, "error": 3}


class StdoutAdapter:
    """Adapter for stdout logging; errors go to stderr."""

    def __init__(self, min_level: str = "info"):
        self.min_level = min_level

    def log(self, level: str, message: str) -> None:
        """Write timestamped log entry."""
        if _ORDER.get(level, 1) < _ORDER.get(self.min_level, 1):
            return

        timestamp = datetime.now().isoformat()
        stream = sys.stderr if level == "error" else sys.stdout
        print(f"[{timestamp}] {level.upper()}: {message}", file=stream)

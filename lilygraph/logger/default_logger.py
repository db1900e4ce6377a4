import sys
import uuid
from datetime import datetime, timezone
from typing import Any, TextIO
from .interface import Logger


class DefaultLogger(Logger):
    """Logger that prints formatted lines to a stream, with session tracking"""

    def __init__(self, output: TextIO = sys.stderr, include_timestamp: bool = True):
        """
        Initialize the default logger

        Args:
            output: Output stream (default: stderr)
            include_timestamp: Whether to include timestamps in log messages
        """
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._include_timestamp = include_timestamp

    def get_session_id(self) -> str:
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        """Format a log message with session ID and optional timestamp"""
        parts = []

        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"))

        parts.append(f"[{level}]")
        parts.append(f"[session:{self._session_id[:8]}]")
        parts.append(message)

        if kwargs:
            extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
            parts.append(f"({extra})")

        return " ".join(parts)

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        print(self._format_message(level, message, **kwargs), file=self._output, flush=True)

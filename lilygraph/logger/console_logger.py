import logging as python_logging
import uuid
from typing import Any
from .interface import Logger


class ConsoleLogger(Logger):
    """
    Logger implementation using Python's built-in logging module.
    Logs to console with session tracking.
    """

    def __init__(
        self,
        name: str = "lilygraph",
        level: int = python_logging.INFO,
        format_string: str = "%(asctime)s [%(levelname)s] [session:%(session_id)s] %(message)s",
    ):
        """
        Initialize the console logger

        Args:
            name: Logger name
            level: Logging level (logging.DEBUG, logging.INFO, etc.)
            format_string: Log format string (must include %(session_id)s)
        """
        self._session_id = str(uuid.uuid4())[:8]
        self._logger = python_logging.getLogger(name)
        self._logger.setLevel(level)

        # Only add handler if none exist (avoid duplicate handlers)
        if not self._logger.handlers:
            handler = python_logging.StreamHandler()
            handler.setLevel(level)
            handler.setFormatter(python_logging.Formatter(format_string))
            self._logger.addHandler(handler)

    def get_session_id(self) -> str:
        return self._session_id

    @property
    def name(self) -> str:
        return self._logger.name

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Forward to the stdlib logger, appending key=value context"""
        if kwargs:
            message = message + " " + " ".join(f"{k}={v}" for k, v in kwargs.items())
        numeric_level = python_logging.getLevelName(level)
        self._logger.log(numeric_level, message, extra={"session_id": self._session_id})

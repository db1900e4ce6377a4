"""Logger interface

Chart code only talks to this interface, so applications can route render
diagnostics into their own logging setup by subclassing Logger.
"""

from abc import ABC, abstractmethod
from typing import Any

DEBUG = "DEBUG"
INFO = "INFO"
WARNING = "WARNING"
ERROR = "ERROR"
CRITICAL = "CRITICAL"


class Logger(ABC):
    """Abstract base class for logging interface

    Subclasses implement log(); the level helpers forward to it. Keyword
    arguments carry structured context (chart_type=..., slots=...).
    """

    @abstractmethod
    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Emit a message at the given level name"""
        pass

    @abstractmethod
    def get_session_id(self) -> str:
        """Get the current session ID"""
        pass

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log(DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log(INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log(WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log(ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self.log(CRITICAL, message, **kwargs)

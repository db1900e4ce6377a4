"""
Logger module for lilygraph

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from lilygraph.logger import Logger, DefaultLogger

    # Use the default logger
    logger = DefaultLogger()
    logger.info("Chart rendered")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
]

"""Custom exceptions for lilygraph.

All errors raised by the package derive from LilygraphError so callers can
catch the whole family with a single except clause.
"""


class LilygraphError(Exception):
    """Base exception for all lilygraph errors"""


class ConfigurationError(LilygraphError):
    """Raised when chart options or inputs cannot be used"""


class InvalidConfiguration(ConfigurationError, ValueError):
    """Raised for option values the renderer cannot draw

    Examples are an unknown chart type or an empty color sequence.
    """


class RenderError(LilygraphError, RuntimeError):
    """Raised when an unexpected failure happens while drawing a chart"""


__all__ = [
    "LilygraphError",
    "ConfigurationError",
    "InvalidConfiguration",
    "RenderError",
]

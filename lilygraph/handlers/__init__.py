from lilygraph.handlers.base import SeriesHandler
from lilygraph.handlers.bar import BarSeriesHandler
from lilygraph.handlers.line import LineSeriesHandler

__all__ = [
    "SeriesHandler",
    "BarSeriesHandler",
    "LineSeriesHandler",
]

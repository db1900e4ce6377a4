from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from lilygraph.render.document import ChartCanvas
    from lilygraph.render.geometry import Bar, Point


class SeriesHandler(ABC):
    """Base class for chart type handlers

    Handlers are stateless. The trail list belongs to one render call and
    holds the last point drawn for each series index, one entry per item
    position within a slot.
    """

    @abstractmethod
    def plot(
        self, canvas: "ChartCanvas", bar: "Bar", color: str, trail: List[Optional["Point"]]
    ) -> None:
        """Draw one item on the canvas"""
        pass

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from lilygraph.render.document import ChartCanvas
    from lilygraph.render.geometry import Bar, Point

from lilygraph.handlers.base import SeriesHandler


class BarSeriesHandler(SeriesHandler):
    """Handler for bar charts"""

    def plot(
        self, canvas: "ChartCanvas", bar: "Bar", color: str, trail: List[Optional["Point"]]
    ) -> None:
        """Draw a filled rectangle, one unit shorter than the bar height"""
        canvas.add(
            canvas.drawing.rect(
                insert=(bar.x, bar.y),
                size=(max(bar.width, 0), max(bar.height - 1, 0)),
                fill=color,
                stroke=color,
                stroke_width=0,
            )
        )

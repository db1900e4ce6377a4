from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from lilygraph.render.document import ChartCanvas
    from lilygraph.render.geometry import Bar, Point

from lilygraph.handlers.base import SeriesHandler


class LineSeriesHandler(SeriesHandler):
    """Handler for line charts"""

    def plot(
        self, canvas: "ChartCanvas", bar: "Bar", color: str, trail: List[Optional["Point"]]
    ) -> None:
        """
        Draw a point, joined to the previous point of the same series

        The series is identified by the item index within the slot, so the
        first item of every slot forms one line, the second item another.
        """
        drawing = canvas.drawing
        previous = trail[bar.item_index]
        if previous is not None:
            canvas.add(
                drawing.line(
                    start=previous,
                    end=bar.point,
                    fill=color,
                    stroke=color,
                    stroke_width=2,
                )
            )
        canvas.add(
            drawing.circle(
                center=bar.point,
                r=max(bar.width * 1.5, 0),
                fill=color,
                stroke=color,
            )
        )
        trail[bar.item_index] = bar.point

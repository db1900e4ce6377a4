"""Chart renderer implementation

Main renderer class that lays out a chart and writes it as SVG.
"""

import logging
from typing import Any, Dict, List, Optional

import svgwrite
from svgwrite.container import Group

from lilygraph.colors import ColorPolicy, color_policy
from lilygraph.exceptions import InvalidConfiguration, LilygraphError, RenderError
from lilygraph.graph_params import ChartData, ChartOptions
from lilygraph.handlers import BarSeriesHandler, LineSeriesHandler, SeriesHandler
from lilygraph.logger import ConsoleLogger, Logger
from lilygraph.render.document import ChartCanvas, ExtraDrawing, create_drawing, serialize
from lilygraph.render.geometry import (
    Bar,
    ChartGeometry,
    Point,
    format_number,
    round_half_up,
)
from lilygraph.render.scale import ScaleCalculator
from lilygraph.validation import ChartOptionsValidator

FONT_FAMILY = "Helvetica, Arial, sans-serif"
GRIDLINE_COLOR = "#666666"
MINOR_GRIDLINE_COLOR = "#999999"
# Charts whose top gridline is below this also get half-step gridlines
MINOR_GRIDLINE_LIMIT = 55
# Minimum vertical distance between two neighbouring value labels
LABEL_CLEARANCE = 14
LEGEND_ROW_HEIGHT = 15


class ChartRenderer:
    """Lays out bar and line charts and delegates series drawing to handlers"""

    def __init__(self, logger: Optional[Logger] = None):
        self.handlers: Dict[str, SeriesHandler] = {
            "bar": BarSeriesHandler(),
            "line": LineSeriesHandler(),
        }
        self.validator = ChartOptionsValidator(chart_types=list(self.handlers.keys()))
        self.scale_calculator = ScaleCalculator()
        self.logger = logger or ConsoleLogger(name="lilygraph.renderer", level=logging.INFO)
        self.logger.debug("ChartRenderer initialized", handlers=list(self.handlers.keys()))

    def render(
        self,
        options: ChartOptions,
        data: ChartData,
        colors: Any = None,
        extra: Optional[ExtraDrawing] = None,
    ) -> str:
        """
        Render a chart as an SVG document

        Args:
            options: Resolved chart options
            data: Slots, labels and legend to draw
            colors: Color policy, or any value accepted by color_policy()
            extra: Optional callback drawing additional elements; it receives
                the chart canvas and the options and runs after everything else

        Returns:
            SVG 1.1 document as a string

        Raises:
            InvalidConfiguration: If an option has an unsupported value
            RenderError: If drawing fails unexpectedly
        """
        self.logger.info(
            "Starting render",
            chart_type=options.chart_type,
            slots=data.slot_count,
            labels=len(data.labels),
        )

        result = self.validator.validate(options)
        if not result.is_valid:
            self.logger.error("Invalid chart options", fields=",".join(result.fields))
            raise InvalidConfiguration(result.get_error_summary())

        policy = color_policy(colors)
        handler = self.handlers[options.chart_type]
        self.logger.debug("Handler selected", handler=type(handler).__name__)

        if options.graph_width <= 0 or options.graph_height <= 0:
            self.logger.warning(
                "Margins leave no room for the plot area",
                graph_width=options.graph_width,
                graph_height=options.graph_height,
            )

        try:
            drawing = create_drawing(options)
            outer = drawing.add(
                drawing.g(
                    fill="black",
                    stroke="black",
                    stroke_width=2,
                    font_family=FONT_FAMILY,
                    font_size="10px",
                    font_weight="normal",
                )
            )
            self._draw_background(drawing, outer, options)

            inner = outer.add(drawing.g(stroke_width=1))
            canvas = ChartCanvas(drawing, inner)
            self._draw_titles(canvas, options)

            if data.slot_count == 0:
                self.logger.info("No data to plot, drawing background only")
            else:
                scale = self.scale_calculator.compute(data.slots, options.flush)
                self.logger.debug("Scale selected", max=scale.max, division=scale.division)
                geometry = ChartGeometry(options, scale, data.slot_count)

                self._draw_gridlines(canvas, geometry)
                self._draw_labels(canvas, geometry, data.labels)
                self._draw_series(canvas, geometry, data, policy, handler)
                self._draw_legend(canvas, options, data)

            if extra is not None:
                self.logger.debug("Running extra drawing callback")
                extra(canvas, options)

            output = serialize(drawing, options.indent)
        except LilygraphError:
            raise
        except Exception as e:
            self.logger.error(
                "Unexpected error during rendering", error=str(e), error_type=type(e).__name__
            )
            raise RenderError(f"Unexpected error during rendering: {str(e)}") from e

        self.logger.info(
            "Render completed successfully",
            chart_type=options.chart_type,
            output_size_chars=len(output),
        )
        return output

    def _draw_background(
        self, drawing: svgwrite.Drawing, parent: Group, options: ChartOptions
    ) -> None:
        margin = options.margin
        parent.add(
            drawing.rect(
                insert=(margin.left, margin.top),
                size=(max(options.graph_width, 0), max(options.graph_height, 0)),
                fill="lightgray",
            )
        )

    def _draw_titles(self, canvas: ChartCanvas, options: ChartOptions) -> None:
        center_x = round_half_up(options.viewbox.width / 2.0)
        if options.title:
            canvas.add(
                canvas.drawing.text(
                    options.title,
                    insert=(center_x, 24 if options.subtitle else 32),
                    font_size="24px",
                    text_anchor="middle",
                )
            )
        if options.subtitle:
            canvas.add(
                canvas.drawing.text(
                    options.subtitle,
                    insert=(center_x, 34),
                    font_size="18px",
                    text_anchor="middle",
                )
            )

    def _draw_gridlines(self, canvas: ChartCanvas, geometry: ChartGeometry) -> None:
        """Horizontal gridlines with their values, the top line drawn last"""
        drawing = canvas.drawing
        options = geometry.options
        scale = geometry.scale
        group = canvas.add(drawing.g(font_size="10px"))

        line_x1 = options.margin.left + 1
        line_x2 = options.viewbox.width - options.margin.right - 1
        text_x = options.margin.left - 5
        minor = scale.max < MINOR_GRIDLINE_LIMIT

        def axis_text(value: int, y: float) -> None:
            group.add(
                drawing.text(
                    str(value), insert=(text_x, y + 4), stroke_width=0.5, text_anchor="end"
                )
            )

        def minor_line(y: float) -> None:
            half_y = y + 0.5 * geometry.dy
            group.add(
                drawing.line(
                    start=(line_x1, half_y), end=(line_x2, half_y), stroke=MINOR_GRIDLINE_COLOR
                )
            )

        axis_text(0, geometry.baseline)

        for line_number in range(1, scale.steps):
            y = geometry.gridline_y(line_number)
            group.add(drawing.line(start=(line_x1, y), end=(line_x2, y), stroke=GRIDLINE_COLOR))
            axis_text(scale.max - line_number * scale.division, y)
            if minor:
                minor_line(y)

        top = options.margin.top
        group.add(drawing.line(start=(line_x1, top), end=(line_x2, top), stroke=GRIDLINE_COLOR))
        axis_text(scale.max, top)
        if minor:
            minor_line(top)

    def _draw_labels(
        self, canvas: ChartCanvas, geometry: ChartGeometry, labels: List[str]
    ) -> None:
        """Category labels under each slot, rotated to read upward"""
        drawing = canvas.drawing
        group = canvas.add(drawing.g(text_anchor="end", font_size="12px", stroke_width=0.3))
        for index, label in enumerate(labels):
            x, y = geometry.label_position(index)
            group.add(drawing.text(label, insert=(x, y), transform=f"rotate(-45 {x} {y})"))

    def _draw_series(
        self,
        canvas: ChartCanvas,
        geometry: ChartGeometry,
        data: ChartData,
        policy: ColorPolicy,
        handler: SeriesHandler,
    ) -> None:
        drawing = canvas.drawing
        group = canvas.add(drawing.g(font_size="10px", stroke_width=0.3))
        series_canvas = ChartCanvas(drawing, group)

        slot_bars = [geometry.bars(index, slot) for index, slot in enumerate(data.slots)]
        trail: List[Optional[Point]] = [None] * max(len(slot) for slot in data.slots)

        for bars in slot_bars:
            for bar in bars:
                color = policy.resolve(bar.slot_index, bar.item_index, data.slot_count, len(bars))
                handler.plot(series_canvas, bar, color, trail)

        # Value labels go last so no bar paints over them
        if geometry.options.bar_text == "none":
            return
        for bars in slot_bars:
            self._draw_value_labels(series_canvas, geometry.options, bars)

    def _draw_value_labels(
        self, canvas: ChartCanvas, options: ChartOptions, bars: List[Bar]
    ) -> None:
        """
        Value text above each non-zero item of one slot

        When two neighbouring items have nearly the same height the second
        label is lifted to sit LABEL_CLEARANCE above the first. Only direct
        neighbours are compared.
        """
        slot_total = sum(bar.value for bar in bars)
        last_height: Optional[int] = None

        for bar in bars:
            if bar.value <= 0:
                last_height = None
                continue

            text_y = bar.y - 3
            if last_height is not None and abs(bar.height - last_height) < LABEL_CLEARANCE:
                text_y -= LABEL_CLEARANCE - (bar.height - last_height)
                last_height = None
            else:
                last_height = bar.height

            if options.bar_text == "percent":
                text = f"{round_half_up(100.0 * bar.value / slot_total)}%"
            else:
                text = format_number(bar.value)

            text_x = bar.x if options.chart_type == "line" else bar.center_x
            canvas.add(canvas.drawing.text(text, insert=(text_x, text_y), text_anchor="middle"))

    def _draw_legend(self, canvas: ChartCanvas, options: ChartOptions, data: ChartData) -> None:
        entries = data.legend_entries()
        if not entries:
            return

        drawing = canvas.drawing
        margin = options.margin
        if options.legend_side == "right":
            legend_x = options.viewbox.width - 3 * margin.right
        else:
            legend_x = round_half_up(margin.left * 1.5)
        legend_y = round_half_up(margin.top * 1.5)

        canvas.add(
            drawing.rect(
                insert=(legend_x, legend_y),
                size=(2.5 * margin.right, len(entries) * LEGEND_ROW_HEIGHT + 16),
                rx=5,
                ry=5,
                fill="#ffffff",
                stroke="#000000",
                stroke_width=2,
            )
        )
        for index, (color, label) in enumerate(entries):
            row_y = legend_y + index * LEGEND_ROW_HEIGHT
            canvas.add(
                drawing.rect(
                    insert=(legend_x + 10, row_y + 10),
                    size=(35, 10),
                    fill=color,
                    stroke=color,
                    stroke_width=0,
                )
            )
            canvas.add(
                drawing.text(label, insert=(legend_x + 55, row_y + 18), text_anchor="start")
            )


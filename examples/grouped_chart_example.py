#!/usr/bin/env python3
"""
Example rendering a grouped bar chart and a line chart to SVG files

Run from the repository root:
    python examples/grouped_chart_example.py /tmp/charts
"""

import logging
import sys
from pathlib import Path

from lilygraph import ChartRenderer, Lilygraph
from lilygraph.logger import ConsoleLogger


def mark_target(canvas, options):
    """Draw a dashed target line across the plot area"""
    y = options.margin.top + 60
    canvas.add(
        canvas.drawing.line(
            start=(options.margin.left, y),
            end=(options.viewbox.width - options.margin.right, y),
            stroke="#d35c56",
            stroke_dasharray="6,4",
        )
    )


def main(output_dir: Path) -> None:
    logger = ConsoleLogger(name="example", level=logging.INFO)
    renderer = ChartRenderer(logger=logger)
    output_dir.mkdir(parents=True, exist_ok=True)

    graph = Lilygraph(renderer=renderer, title="Quarterly Sales", subtitle="by region")
    graph.data = [[120, 90], [150, 110], [135, 160], [180, 150]]
    graph.labels = ["Q1", "Q2", "Q3", "Q4"]
    graph.colors = [["#2F6DB2", "#C97A1E"]]
    graph.legend = {"#2F6DB2": "North", "#C97A1E": "South"}

    bar_path = output_dir / "sales_bar.svg"
    bar_path.write_text(graph.render(mark_target))
    logger.info("Wrote bar chart", path=bar_path)

    graph.update_options(chart_type="line", bar_text="percent", legend_side="left")
    line_path = output_dir / "sales_line.svg"
    line_path.write_text(graph.render())
    logger.info("Wrote line chart", path=line_path)


if __name__ == "__main__":
    main(Path(sys.argv[1] if len(sys.argv) > 1 else "."))

"""SVG document handling

Creates the svgwrite drawing for a chart and turns it into a complete
SVG 1.1 document. svgwrite does not write a DOCTYPE, so the declaration
and DOCTYPE are written here ahead of the drawing's element tree.
"""

from typing import Any, Callable
from xml.etree import ElementTree

import svgwrite
from svgwrite.container import Group

from lilygraph.graph_params import ChartOptions
from lilygraph.render.geometry import format_number

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
SVG_DOCTYPE = (
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">'
)


class ChartCanvas:
    """Drawing surface handed to extra-drawing callbacks

    drawing is the svgwrite element factory (drawing.rect(...), drawing.text(...));
    add() appends an element to the chart's inner group, so it shares the
    chart coordinate space and paints over everything drawn before it.
    """

    def __init__(self, drawing: svgwrite.Drawing, group: Group):
        self.drawing = drawing
        self.group = group

    def add(self, element: Any) -> Any:
        return self.group.add(element)


ExtraDrawing = Callable[[ChartCanvas, ChartOptions], None]


def create_drawing(options: ChartOptions) -> svgwrite.Drawing:
    """Create an empty drawing sized by the options' viewbox"""
    viewbox = options.viewbox
    return svgwrite.Drawing(
        size=(options.width, options.height),
        viewBox=f"0 0 {format_number(viewbox.width)} {format_number(viewbox.height)}",
        profile="full",
        debug=False,
    )


def serialize(drawing: svgwrite.Drawing, indent: int = 2) -> str:
    """
    Write the drawing as an SVG 1.1 document string

    Args:
        drawing: Finished drawing
        indent: Spaces per nesting level; 0 puts the element tree on one line
    """
    root = drawing.get_xml()
    if indent > 0:
        ElementTree.indent(root, space=" " * indent)
    body = ElementTree.tostring(root, encoding="unicode")
    return "\n".join([XML_DECLARATION, SVG_DOCTYPE, body])

"""Chart rendering

ScaleCalculator picks the gridline scale, ChartGeometry turns values into
pixel positions and ChartRenderer draws the whole chart with svgwrite.
"""

from lilygraph.render.document import ChartCanvas, ExtraDrawing, SVG_DOCTYPE
from lilygraph.render.geometry import Bar, ChartGeometry, Point
from lilygraph.render.renderer import ChartRenderer
from lilygraph.render.scale import Scale, ScaleCalculator

__all__ = [
    "Bar",
    "ChartCanvas",
    "ChartGeometry",
    "ChartRenderer",
    "ExtraDrawing",
    "Point",
    "SVG_DOCTYPE",
    "Scale",
    "ScaleCalculator",
]

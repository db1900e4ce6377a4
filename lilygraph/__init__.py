"""lilygraph - bar and line charts as standalone SVG documents"""

from lilygraph.colors import color_policy, default_colors
from lilygraph.exceptions import (
    ConfigurationError,
    InvalidConfiguration,
    LilygraphError,
    RenderError,
)
from lilygraph.graph import Lilygraph
from lilygraph.graph_params import ChartData, ChartOptions, Margin, ViewBox
from lilygraph.render import ChartCanvas, ChartRenderer, Scale, ScaleCalculator

__version__ = "0.4.0"

__all__ = [
    "ChartCanvas",
    "ChartData",
    "ChartOptions",
    "ChartRenderer",
    "ConfigurationError",
    "InvalidConfiguration",
    "Lilygraph",
    "LilygraphError",
    "Margin",
    "RenderError",
    "Scale",
    "ScaleCalculator",
    "ViewBox",
    "color_policy",
    "default_colors",
]

"""Chart object

Lilygraph keeps options, data, labels, colors and legend together between
renders, so a chart can be filled in step by step and rendered repeatedly.

Usage:
    graph = Lilygraph(title="Sales", chart_type="bar")
    graph.data = [[1, 10], [2, 20], [3, 30]]
    graph.labels = ["Q1", "Q2", "Q3"]
    graph.legend = {"#cc0000": "North"}
    svg = graph.render()
"""

from typing import Any, Dict, Mapping, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from lilygraph.colors import ColorPolicy, color_policy
from lilygraph.exceptions import InvalidConfiguration
from lilygraph.graph_params import ChartData, ChartOptions
from lilygraph.render import ChartRenderer, ExtraDrawing

_default_renderer: Optional[ChartRenderer] = None


def get_renderer() -> ChartRenderer:
    """Shared renderer used by Lilygraph instances without their own"""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = ChartRenderer()
    return _default_renderer


class Lilygraph:
    """A bar or line chart that renders to SVG"""

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        renderer: Optional[ChartRenderer] = None,
        **overrides: Any,
    ):
        """
        Create a chart with default options updated by the given ones

        Args:
            options: Mapping of option names to values
            renderer: Renderer to use instead of the shared one
            **overrides: Options given as keywords, applied after options

        Raises:
            InvalidConfiguration: If an option has the wrong type
        """
        self._options = _merge_options(ChartOptions(), options, overrides)
        self._renderer = renderer
        self.data: Sequence[Union[float, Sequence[float]]] = []
        self.labels: Sequence[str] = []
        self.legend: Optional[Dict[str, str]] = None
        self._colors: ColorPolicy = color_policy(None)

    @property
    def options(self) -> ChartOptions:
        return self._options

    def update_options(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> None:
        """Merge new option values over the current ones"""
        self._options = _merge_options(self._options, options, overrides)

    @property
    def colors(self) -> ColorPolicy:
        return self._colors

    @colors.setter
    def colors(self, value: Any) -> None:
        """
        Accepts a callable, a list of colors, a list of color lists or a
        single color; None restores the default hue spread.

        Raises:
            InvalidConfiguration: If a color list is empty
        """
        self._colors = color_policy(value)

    def chart_data(self) -> ChartData:
        """Current data, labels and legend as a validated ChartData"""
        try:
            return ChartData(slots=self.data, labels=self.labels, legend=self.legend)
        except PydanticValidationError as e:
            raise InvalidConfiguration(f"Invalid chart data: {e}") from e

    def render(self, extra: Optional[ExtraDrawing] = None) -> str:
        """
        Render the chart as an SVG document

        Args:
            extra: Optional callback called as extra(canvas, options) after the
                chart is drawn, to add custom elements in chart coordinates

        Returns:
            SVG document string
        """
        renderer = self._renderer or get_renderer()
        return renderer.render(self._options, self.chart_data(), self._colors, extra)


def _merge_options(
    base: ChartOptions, options: Optional[Mapping[str, Any]], overrides: Dict[str, Any]
) -> ChartOptions:
    values: Dict[str, Any] = dict(options or {})
    values.update(overrides)
    try:
        return base.merged(**values)
    except PydanticValidationError as e:
        raise InvalidConfiguration(f"Invalid chart options: {e}") from e


__all__ = ["Lilygraph", "get_renderer"]

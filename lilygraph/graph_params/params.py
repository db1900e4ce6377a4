"""Chart rendering parameters

Defines the data model for chart rendering requests: the option set that
controls canvas size, margins and chart style, and the series data itself.
"""

from numbers import Real
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class ViewBox(BaseModel):
    """Size of the drawing canvas in SVG user units"""

    model_config = ConfigDict(frozen=True)

    width: Union[int, float] = 800
    height: Union[int, float] = 600


class Margin(BaseModel):
    """Space between the canvas edge and the plot area"""

    model_config = ConfigDict(frozen=True)

    top: Union[int, float] = 50
    left: Union[int, float] = 50
    right: Union[int, float] = 50
    bottom: Union[int, float] = 100


class ChartOptions(BaseModel):
    """Resolved option set for one chart render

    Options are immutable; use merged() (or Lilygraph.update_options) to
    derive a new set with some keys replaced. Keys not declared here are kept
    as extra attributes so an extra-drawing callback can read them.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    # Attributes of the root <svg> element, passed through verbatim
    width: str = "100%"
    height: str = "100%"
    indent: int = 2  # pretty-print indent, 0 writes the document on one line

    viewbox: ViewBox = ViewBox()
    margin: Margin = Margin()
    padding: Union[int, float] = 14  # gap between adjacent slots

    title: Optional[str] = None
    subtitle: Optional[str] = None

    chart_type: str = "bar"  # Validated by ChartOptionsValidator for better error messages
    bar_text: str = "number"  # Validated by ChartOptionsValidator for better error messages
    legend_side: str = "right"  # Validated by ChartOptionsValidator for better error messages
    flush: bool = False  # top gridline equals the data max instead of adding headroom

    @property
    def graph_width(self) -> float:
        return self.viewbox.width - self.margin.left - self.margin.right

    @property
    def graph_height(self) -> float:
        return self.viewbox.height - self.margin.top - self.margin.bottom

    def merged(self, **overrides: Any) -> "ChartOptions":
        """
        Return a new option set with the given keys replaced

        Unspecified keys keep their current values. Nested viewbox and margin
        mappings are merged key by key as well, so margin={"top": 80} keeps
        the other three margins.

        Raises:
            pydantic.ValidationError: If an override has the wrong type
        """
        values = self.model_dump()
        for key, value in overrides.items():
            if key in ("viewbox", "margin") and isinstance(value, dict):
                values[key] = {**values[key], **value}
            elif isinstance(value, BaseModel):
                values[key] = value.model_dump()
            else:
                values[key] = value
        return ChartOptions.model_validate(values)


class ChartData(BaseModel):
    """Series data, category labels and legend for one chart

    Each slot is a list of numbers drawn side by side; a bare number is
    stored as a one-element slot.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    slots: List[List[Union[int, float]]] = []
    labels: List[str] = []
    legend: Optional[Dict[str, str]] = None

    @field_validator("slots", mode="before")
    @classmethod
    def wrap_bare_numbers(cls, value: Any) -> Any:
        """Wrap bare numbers as one-element slots"""
        if value is None:
            return []
        if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
            raise ValueError("slots must be a sequence of numbers or number sequences")
        return [[item] if isinstance(item, Real) else item for item in value]

    @field_validator("labels", mode="before")
    @classmethod
    def stringify_labels(cls, value: Any) -> Any:
        if value is None:
            return []
        return [str(label) for label in value]

    @property
    def slot_count(self) -> int:
        return len(self.slots)

    def legend_entries(self) -> List[tuple[str, str]]:
        """Legend (color, label) pairs sorted by color"""
        if not self.legend:
            return []
        return sorted(self.legend.items())

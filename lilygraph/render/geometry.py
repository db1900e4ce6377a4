"""Chart geometry

Pixel positions derived from the options, the scale and the slot count.
Both the series pass and the value-label pass read bar positions from
here so the two always agree.
"""

import math
from typing import List, NamedTuple, Sequence, Union

from lilygraph.graph_params import ChartOptions
from lilygraph.render.scale import Scale

Number = Union[int, float]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero"""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def format_number(value: Number) -> str:
    """Format a value for display, dropping the fraction of integral floats"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Point(NamedTuple):
    x: Number
    y: Number


class Bar(NamedTuple):
    """Position of one item: its bar in bar charts, its point in line charts"""

    slot_index: int
    item_index: int
    value: Number
    x: int
    y: Number
    width: float
    height: int

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    @property
    def center_x(self) -> int:
        return round_half_up(self.x + self.width / 2.0)


class ChartGeometry:
    """Per-render derived constants

    Only built when there is at least one slot.
    """

    def __init__(self, options: ChartOptions, scale: Scale, slot_count: int):
        self.options = options
        self.scale = scale
        self.slot_count = slot_count

        self.graph_width = options.graph_width
        self.graph_height = options.graph_height
        self.dx = self.graph_width / slot_count
        self.dy = self.graph_height * scale.division / scale.max
        self.baseline = options.viewbox.height - options.margin.bottom

    def gridline_y(self, line_number: int) -> int:
        return round_half_up(self.options.margin.top + line_number * self.dy)

    def label_position(self, slot_index: int) -> Point:
        """Anchor point of the category label under a slot"""
        x = round_half_up(self.options.margin.left + self.dx * slot_index + self.dx / 2.0)
        return Point(x, self.baseline + 15)

    def value_height(self, value: Number) -> int:
        return round_half_up(value * self.dy / self.scale.division)

    def bars(self, slot_index: int, slot: Sequence[Number]) -> List[Bar]:
        """Positions of every item in one slot"""
        available = self.dx - self.options.padding
        bar_width = available / len(slot) if slot else available
        x = self.options.margin.left + self.dx * slot_index

        bars = []
        for item_index, value in enumerate(slot):
            height = self.value_height(value)
            bar_x = round_half_up(x + (self.dx - available) / 2.0 + item_index * bar_width)
            bars.append(
                Bar(
                    slot_index=slot_index,
                    item_index=item_index,
                    value=value,
                    x=bar_x,
                    y=self.baseline - height,
                    width=bar_width,
                    height=height,
                )
            )
        return bars

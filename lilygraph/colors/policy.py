"""Color policies

A color policy decides the fill of every bar or point from its position:
the slot index, the item index inside the slot, the slot count and the
number of items in the slot. Four shapes are supported:

    FunctionColors  - a callable receiving the four indices
    NestedColors    - a list per slot, each entry a color or a list of colors
    FlatColors      - one color per slot, cycled
    SingleColor     - one color for everything

color_policy() builds the right variant from a plain Python value.
"""

import colorsys
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence, Union

from matplotlib.colors import to_hex

from lilygraph.exceptions import InvalidConfiguration

ColorFunction = Callable[[int, int, int, int], str]


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert HSL fractions (0..1) to a #rrggbb string"""
    return to_hex(colorsys.hls_to_rgb(hue % 1.0, lightness, saturation))


def default_colors(slot_index: int, item_index: int, slot_count: int, item_count: int) -> str:
    """Spread slots around the hue wheel and items across lightness"""
    hue = slot_index / slot_count if slot_count else 0.0
    lightness = 0.4 + 0.4 * (item_index / item_count if item_count else 0.0)
    return hsl_to_hex(hue, 1.0, lightness)


class ColorPolicy(ABC):
    """Base class for color policies"""

    @abstractmethod
    def resolve(self, slot_index: int, item_index: int, slot_count: int, item_count: int) -> str:
        """Return the color for one item"""
        pass


class FunctionColors(ColorPolicy):
    def __init__(self, function: ColorFunction):
        self.function = function

    def resolve(self, slot_index: int, item_index: int, slot_count: int, item_count: int) -> str:
        return self.function(slot_index, item_index, slot_count, item_count)


class NestedColors(ColorPolicy):
    """Colors picked per slot, then per item when the slot entry is a list"""

    def __init__(self, colors: Sequence[Union[str, Sequence[str]]]):
        if not colors:
            raise InvalidConfiguration("Color sequence cannot be empty")
        for entry in colors:
            if _is_sequence(entry) and not entry:
                raise InvalidConfiguration("Nested color sequences cannot be empty")
        self.colors = [list(entry) if _is_sequence(entry) else entry for entry in colors]

    def resolve(self, slot_index: int, item_index: int, slot_count: int, item_count: int) -> str:
        entry = self.colors[slot_index % len(self.colors)]
        if isinstance(entry, list):
            return entry[item_index % len(entry)]
        return entry


class FlatColors(ColorPolicy):
    """One color per slot, cycled when there are more slots than colors"""

    def __init__(self, colors: Sequence[str]):
        if not colors:
            raise InvalidConfiguration("Color sequence cannot be empty")
        self.colors = list(colors)

    def resolve(self, slot_index: int, item_index: int, slot_count: int, item_count: int) -> str:
        return self.colors[slot_index % len(self.colors)]


class SingleColor(ColorPolicy):
    def __init__(self, color: str):
        self.color = color

    def resolve(self, slot_index: int, item_index: int, slot_count: int, item_count: int) -> str:
        return self.color


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def color_policy(colors: Any = None) -> ColorPolicy:
    """
    Build a color policy from a plain value

    Args:
        colors: None for the default hue spread, a ColorPolicy, a callable,
            a list of colors, a list whose entries may be lists of colors,
            or a single color string

    Returns:
        ColorPolicy instance

    Raises:
        InvalidConfiguration: If a color sequence is empty
    """
    if colors is None:
        return FunctionColors(default_colors)
    if isinstance(colors, ColorPolicy):
        return colors
    if callable(colors):
        return FunctionColors(colors)
    if _is_sequence(colors):
        if any(_is_sequence(entry) for entry in colors):
            return NestedColors(colors)
        return FlatColors(colors)
    return SingleColor(str(colors))


def resolve_color(
    policy: ColorPolicy, slot_index: int, item_index: int, slot_count: int, item_count: int
) -> str:
    """Resolve one item's color"""
    return policy.resolve(slot_index, item_index, slot_count, item_count)

"""Gridline scale selection

Picks the value of the topmost gridline and the value step between
gridlines so that any non-negative dataset maps onto a fixed number of
round-numbered lines.
"""

import math
from typing import Iterable, Sequence

from pydantic import BaseModel, ConfigDict

from lilygraph.exceptions import InvalidConfiguration


class Scale(BaseModel):
    """Topmost gridline value and value-per-gridline"""

    model_config = ConfigDict(frozen=True)

    max: int
    division: int

    @property
    def steps(self) -> int:
        """Number of gridline steps between the baseline and the top"""
        return self.max // self.division


class ScaleCalculator:
    """Derives a Scale from series data"""

    def compute(self, slots: Iterable[Sequence[float]], flush: bool = False) -> Scale:
        """
        Compute max and division for the given slots

        Args:
            slots: Series data, one sequence of numbers per slot
            flush: If True the top gridline sits exactly on the rounded data
                maximum, otherwise at least one minor step of headroom is added

        Returns:
            Scale with max a positive multiple of division

        Raises:
            InvalidConfiguration: If any value is infinite or nan
        """
        numbers = [number for slot in slots for number in slot]
        if not all(math.isfinite(number) for number in numbers):
            raise InvalidConfiguration("Chart data must contain only finite numbers")

        data_max = max(numbers, default=0)
        data_max = max(data_max, 1)

        division = self.division_for(data_max)

        if flush:
            padded_max = data_max
        else:
            padded_max = data_max + max(division // 10, 1)

        return Scale(max=math.ceil(padded_max / division) * division, division=division)

    @staticmethod
    def division_for(value: float) -> int:
        """Largest power of 10 that is <= value, floored at 1"""
        division = 1
        while division * 10 <= value:
            division *= 10
        return division

"""
Validation module for lilygraph

Checks chart options before rendering and reports every problem at once,
with suggestions for fixing each.
"""

from .models import OptionError, ValidationResult
from .validator import BAR_TEXT_MODES, CHART_TYPES, LEGEND_SIDES, ChartOptionsValidator

__all__ = [
    "OptionError",
    "ValidationResult",
    "ChartOptionsValidator",
    "CHART_TYPES",
    "BAR_TEXT_MODES",
    "LEGEND_SIDES",
]

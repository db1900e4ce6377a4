from typing import List, Optional, Sequence

from lilygraph.graph_params import ChartOptions
from lilygraph.validation.models import OptionError, ValidationResult

CHART_TYPES = ["bar", "line"]
BAR_TEXT_MODES = ["none", "number", "percent"]
LEGEND_SIDES = ["left", "right"]


class ChartOptionsValidator:
    """Checks the enumerated chart options, with suggestions for typos"""

    def __init__(self, chart_types: Optional[Sequence[str]] = None):
        self.valid_chart_types = list(chart_types or CHART_TYPES)
        self.valid_bar_text = list(BAR_TEXT_MODES)
        self.valid_legend_sides = list(LEGEND_SIDES)

    def validate(self, options: ChartOptions) -> ValidationResult:
        """
        Validate chart options and return detailed results

        Args:
            options: ChartOptions instance to validate

        Returns:
            ValidationResult with errors and suggestions
        """
        errors: List[OptionError] = []
        errors.extend(self._validate_chart_type(options))
        errors.extend(self._validate_bar_text(options))
        errors.extend(self._validate_legend_side(options))
        errors.extend(self._validate_indent(options))
        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    def _validate_chart_type(self, options: ChartOptions) -> List[OptionError]:
        if options.chart_type in self.valid_chart_types:
            return []
        return [
            OptionError(
                field="chart_type",
                message=f"Invalid chart type '{options.chart_type}'",
                received_value=options.chart_type,
                expected=f"One of: {', '.join(self.valid_chart_types)}",
                suggestions=[
                    "Use 'bar' for grouped bar charts",
                    "Use 'line' for one connected line per series",
                    f"Did you mean '{self._find_closest_match(options.chart_type, self.valid_chart_types)}'?",
                ],
            )
        ]

    def _validate_bar_text(self, options: ChartOptions) -> List[OptionError]:
        if options.bar_text in self.valid_bar_text:
            return []
        return [
            OptionError(
                field="bar_text",
                message=f"Invalid bar text mode '{options.bar_text}'",
                received_value=options.bar_text,
                expected=f"One of: {', '.join(self.valid_bar_text)}",
                suggestions=[
                    "Use 'number' to print each value above its bar",
                    "Use 'percent' to print each value's share of its slot",
                    "Use 'none' to hide value labels",
                    f"Did you mean '{self._find_closest_match(options.bar_text, self.valid_bar_text)}'?",
                ],
            )
        ]

    def _validate_legend_side(self, options: ChartOptions) -> List[OptionError]:
        if options.legend_side in self.valid_legend_sides:
            return []
        return [
            OptionError(
                field="legend_side",
                message=f"Invalid legend side '{options.legend_side}'",
                received_value=options.legend_side,
                expected=f"One of: {', '.join(self.valid_legend_sides)}",
                suggestions=[
                    f"Did you mean '{self._find_closest_match(options.legend_side, self.valid_legend_sides)}'?",
                ],
            )
        ]

    def _validate_indent(self, options: ChartOptions) -> List[OptionError]:
        if options.indent >= 0:
            return []
        return [
            OptionError(
                field="indent",
                message="Indent cannot be negative",
                received_value=options.indent,
                expected="0 (single line) or a positive number of spaces",
                suggestions=["Try: 2"],
            )
        ]

    def _find_closest_match(self, value: str, options: List[str]) -> str:
        """Find the closest matching option using simple string similarity"""
        if not options:
            return ""

        value_lower = value.lower()

        # Exact substring matches first
        for option in options:
            if value_lower in option.lower() or option.lower() in value_lower:
                return option

        # Then a shared first letter
        if value_lower:
            for option in options:
                if option.lower().startswith(value_lower[0]):
                    return option

        return options[0]

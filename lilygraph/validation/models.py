from typing import Any, Dict, List
from pydantic import BaseModel


class OptionError(BaseModel):
    """One rejected chart option, with hints on how to fix it"""

    field: str
    message: str
    received_value: Any
    expected: str
    suggestions: List[str]


class ValidationResult(BaseModel):
    """Outcome of validating a ChartOptions instance"""

    is_valid: bool
    errors: List[OptionError] = []

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]

    def get_error_summary(self) -> str:
        """Get a formatted summary of all errors"""
        if not self.errors:
            return "No errors"

        lines = ["Invalid chart options:\n"]
        for i, error in enumerate(self.errors, 1):
            lines.append(f"{i}. {error.field}: {error.message}")
            lines.append(f"   Received: {error.received_value!r}")
            lines.append(f"   Expected: {error.expected}")
            for suggestion in error.suggestions:
                lines.append(f"   - {suggestion}")

        return "\n".join(lines)

    def get_json_errors(self) -> List[Dict[str, Any]]:
        """Get errors in JSON-friendly format"""
        return [error.model_dump() for error in self.errors]

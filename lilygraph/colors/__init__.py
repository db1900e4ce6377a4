from .policy import (
    ColorFunction,
    ColorPolicy,
    FlatColors,
    FunctionColors,
    NestedColors,
    SingleColor,
    color_policy,
    default_colors,
    hsl_to_hex,
    resolve_color,
)

__all__ = [
    "ColorFunction",
    "ColorPolicy",
    "FlatColors",
    "FunctionColors",
    "NestedColors",
    "SingleColor",
    "color_policy",
    "default_colors",
    "hsl_to_hex",
    "resolve_color",
]

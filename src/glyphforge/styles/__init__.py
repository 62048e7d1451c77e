"""Style registry for GlyphForge."""

from .registry import (
    SAMPLE_TEXT,
    STYLE_DEFINITIONS,
    Style,
    StyleDefinition,
    StyleInfo,
    describe_styles,
    get_definition,
    is_style,
    resolve_style,
    reversible_styles,
    style_names,
)

__all__ = [
    "SAMPLE_TEXT",
    "STYLE_DEFINITIONS",
    "Style",
    "StyleDefinition",
    "StyleInfo",
    "describe_styles",
    "get_definition",
    "is_style",
    "resolve_style",
    "reversible_styles",
    "style_names",
]

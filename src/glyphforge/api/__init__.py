"""Public API layer: the styling engine, request validation and the tool adapter."""

from .engine import (
    TextStyler,
    TransformRequest,
    batch_transform,
    list_styles,
    revert,
    transform,
    transform_all,
)
from .tools import TOOL_DEFINITIONS, ToolAdapter, call_tool, list_tools
from .validation import RequestValidator

__all__ = [
    "TextStyler",
    "TransformRequest",
    "batch_transform",
    "list_styles",
    "revert",
    "transform",
    "transform_all",
    "RequestValidator",
    "TOOL_DEFINITIONS",
    "ToolAdapter",
    "call_tool",
    "list_tools",
]

"""GlyphForge.

Stylized Unicode text generation: mathematical alphabets, enclosed letters,
small caps, flipped text, encodings and zalgo decorations, over a closed
registry of named styles.

Progressive API Disclosure:
- Level 1: Simple functions - transform(), transform_all(), list_styles()
- Level 2: Configured engine - TextStyler class with EngineConfig
- Level 3: JSON tool adapter - call_tool() / ToolAdapter
"""

__version__ = "0.1.0"
__author__ = "GlyphForge Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Configured engine
from .api import (
    RequestValidator,
    TextStyler,
    TransformRequest,
    ToolAdapter,
    batch_transform,
    call_tool,
    list_styles,
    revert,
    transform,
    transform_all,
)

# Configuration classes for advanced usage
from .shared.config import EngineConfig, ZalgoIntensity

# Core result objects and errors
from .shared.exceptions import (
    GlyphForgeError,
    IrreversibleStyleError,
    RequestValidationError,
    UnknownStyleError,
)
from .shared.result import BatchResult, TransformFailure, TransformSuccess
from .styles import Style, StyleInfo

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions (progressive disclosure entry point)
    "transform",
    "transform_all",
    "list_styles",
    "batch_transform",
    "revert",

    # Level 2: Configured engine
    "TextStyler",
    "TransformRequest",
    "RequestValidator",

    # Level 3: Tool adapter
    "ToolAdapter",
    "call_tool",

    # Styles and results
    "Style",
    "StyleInfo",
    "BatchResult",
    "TransformSuccess",
    "TransformFailure",

    # Configuration and errors
    "EngineConfig",
    "ZalgoIntensity",
    "GlyphForgeError",
    "UnknownStyleError",
    "IrreversibleStyleError",
    "RequestValidationError",
]

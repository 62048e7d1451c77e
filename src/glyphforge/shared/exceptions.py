"""Exception hierarchy for GlyphForge text styling."""

from typing import List, Optional


class GlyphForgeError(Exception):
    """Base exception for all GlyphForge errors."""


class StyleError(GlyphForgeError):
    """Base exception for style resolution and application errors."""


class UnknownStyleError(StyleError, ValueError):
    """Raised when a style name is not part of the style enumeration."""

    def __init__(self, style: object) -> None:
        super().__init__(f"Unknown style: {style}")
        self.style = style


class IrreversibleStyleError(StyleError):
    """Raised when reverting a style that has no inverse table."""

    def __init__(self, style: str) -> None:
        super().__init__(f"Style is not reversible: {style}")
        self.style = style


class RequestValidationError(GlyphForgeError):
    """Raised when a caller-side transform request violates the request limits."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []

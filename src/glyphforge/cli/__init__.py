"""Command-line interface module for GlyphForge.

This module provides the ``glyphforge`` command for styling text, listing
styles, running JSON batches and reverting styled text.
"""

from .main import main

__all__ = ["main"]

"""Character layer for GlyphForge.

This module provides the codepoint substitution tables and the per-style
transformation functions built on them.
"""

from .tables import (
    CodepointMap,
    ZALGO_DOWN,
    ZALGO_MARKS,
    ZALGO_MID,
    ZALGO_UP,
    build_alphabet_map,
    invert_map,
    reversible_domain,
)
from .transformation import (
    ZALGO_MARK_COUNTS,
    ZalgoMarkCounts,
    ZalgoOptions,
    apply_map,
    zalgo,
)

__all__ = [
    # Modules
    "tables",
    "transformation",
    # Table building
    "CodepointMap",
    "build_alphabet_map",
    "invert_map",
    "reversible_domain",
    # Zalgo
    "ZALGO_UP",
    "ZALGO_MID",
    "ZALGO_DOWN",
    "ZALGO_MARKS",
    "ZALGO_MARK_COUNTS",
    "ZalgoMarkCounts",
    "ZalgoOptions",
    "zalgo",
    "apply_map",
]

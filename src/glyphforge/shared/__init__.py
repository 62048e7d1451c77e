"""Shared utilities for GlyphForge.

This module provides the configuration objects, result types, exceptions and
logging helpers used across the character, styles, api and cli layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    EngineConfig,
    GlobalConfig,
    LimitsConfig,
    PerformanceConfig,
    ZalgoConfig,
    ZalgoIntensity,
)
from .exceptions import (
    GlyphForgeError,
    IrreversibleStyleError,
    RequestValidationError,
    StyleError,
    UnknownStyleError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    BatchResult,
    ItemOutcome,
    PerformanceMetrics,
    TransformFailure,
    TransformSuccess,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "EngineConfig",
    "GlobalConfig",
    "LimitsConfig",
    "PerformanceConfig",
    "ZalgoConfig",
    "ZalgoIntensity",
    "GlyphForgeError",
    "IrreversibleStyleError",
    "RequestValidationError",
    "StyleError",
    "UnknownStyleError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "BatchResult",
    "ItemOutcome",
    "PerformanceMetrics",
    "TransformFailure",
    "TransformSuccess",
]

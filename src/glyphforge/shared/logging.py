"""Structured logging utilities for GlyphForge.

Every log record emitted through a :class:`CorrelationLogger` carries the
component name and an optional correlation ID in its ``extra`` data, so the
engine, the tool adapter and the CLI can be traced per request.
"""

import logging
from typing import Any, Dict, Optional

DEFAULT_LOG_FORMAT = (
    "%(asctime)s %(levelname)s [%(component)s] %(name)s: %(message)s"
)


class _ComponentDefaultsFilter(logging.Filter):
    """Fill in component fields for records logged outside CorrelationLogger."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "component"):
            record.component = record.name.split(".")[-1]
        if not hasattr(record, "correlation_id"):
            record.correlation_id = None
        return True


class CorrelationLogger:
    """Logger that automatically includes correlation ID and component information."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name (typically __name__)
            correlation_id: Optional correlation ID for request tracking
            component: Component name for structured logging
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.split(".")[-1]

    def _get_extra(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        combined_extra = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        if extra:
            combined_extra.update(extra)
        return combined_extra

    def with_correlation_id(self, correlation_id: Optional[str]) -> "CorrelationLogger":
        """Return a logger for the same component bound to another correlation ID."""
        return CorrelationLogger(self.logger.name, correlation_id, self.component)

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def debug(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False
    ) -> None:
        """Log debug message with correlation info."""
        self.logger.debug(message, extra=self._get_extra(extra), exc_info=exc_info)

    def info(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False
    ) -> None:
        """Log info message with correlation info."""
        self.logger.info(message, extra=self._get_extra(extra), exc_info=exc_info)

    def warning(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False
    ) -> None:
        """Log warning message with correlation info."""
        self.logger.warning(message, extra=self._get_extra(extra), exc_info=exc_info)

    def error(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = True
    ) -> None:
        """Log error message with correlation info."""
        self.logger.error(message, extra=self._get_extra(extra), exc_info=exc_info)

    def exception(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log exception message with correlation info and traceback."""
        self.logger.exception(message, extra=self._get_extra(extra))


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger instance.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracking
        component: Component name for structured logging

    Returns:
        CorrelationLogger instance
    """
    return CorrelationLogger(name, correlation_id, component)


def configure_logging(level: str = "WARNING", fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Install a stderr handler on the ``glyphforge`` logger hierarchy.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Format string; may reference ``component`` and ``correlation_id``
    """
    package_logger = logging.getLogger("glyphforge")
    package_logger.setLevel(level)

    for handler in package_logger.handlers:
        if getattr(handler, "_glyphforge_handler", False):
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter(fmt))
            return

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    handler.addFilter(_ComponentDefaultsFilter())
    handler._glyphforge_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)

"""Caller-side request validation.

The engine accepts any string; the limits here (text length, batch size,
style and intensity names) belong to the callers that expose the engine, such
as the tool adapter and the CLI.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from glyphforge.api.engine import TransformRequest
from glyphforge.character.transformation import ZalgoOptions
from glyphforge.shared import (
    LimitsConfig,
    RequestValidationError,
    ZalgoIntensity,
    get_logger,
)
from glyphforge.styles import Style, is_style, style_names

TEXT_TYPE_MESSAGE = "Text is required and must be a string"
EMPTY_BATCH_MESSAGE = "Items array is required and must not be empty"


class RequestValidator:
    """Validates transform requests against configured limits.

    Examples:
        >>> validator = RequestValidator()
        >>> validator.validate_transform("Hello", "bold").style
        <Style.BOLD: 'bold'>
    """

    def __init__(
        self,
        limits: Optional[LimitsConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize request validator.

        Args:
            limits: Request limits (defaults to LimitsConfig())
            correlation_id: Optional correlation ID for request tracking
        """
        self.limits = limits or LimitsConfig()
        self.logger = get_logger(__name__, correlation_id, "request_validator")

        self.validation_count = 0
        self.rejection_count = 0
        self.rejection_reasons: Dict[str, int] = {}

    def _reject(
        self,
        reason: str,
        message: str,
        field_name: str,
        suggestions: Optional[List[str]] = None,
    ) -> RequestValidationError:
        self.rejection_count += 1
        self.rejection_reasons[reason] = self.rejection_reasons.get(reason, 0) + 1
        self.logger.debug(
            "Request rejected",
            extra={"reason": reason, "field_name": field_name},
        )
        return RequestValidationError(message, field_name, suggestions)

    def _validate_text(self, text: Any, max_length: int, field_name: str = "text") -> str:
        if not isinstance(text, str):
            raise self._reject("invalid_text_type", TEXT_TYPE_MESSAGE, field_name)

        if not text and self.limits.min_text_length > 0:
            raise self._reject("empty_text", TEXT_TYPE_MESSAGE, field_name)

        if len(text) < self.limits.min_text_length:
            raise self._reject(
                "text_too_short",
                f"Text too short. Min {self.limits.min_text_length} characters.",
                field_name,
            )

        if len(text) > max_length:
            raise self._reject(
                "text_too_long",
                f"Text too long. Max {max_length} characters.",
                field_name,
                suggestions=["Split the text into smaller requests"],
            )
        return text

    def _validate_style(self, style: Any, field_name: str = "style") -> Style:
        if isinstance(style, Style):
            return style
        if not is_style(style):
            raise self._reject(
                "unknown_style",
                f"Invalid style. Available styles: {', '.join(style_names())}",
                field_name,
                suggestions=list(style_names()),
            )
        return Style(style)

    def _validate_intensity(
        self, intensity: Any, field_name: str = "zalgoIntensity"
    ) -> ZalgoIntensity:
        try:
            return ZalgoIntensity.parse(intensity)
        except ValueError as e:
            raise self._reject(
                "unknown_intensity",
                str(e),
                field_name,
                suggestions=[member.value for member in ZalgoIntensity],
            ) from e

    def validate_transform(
        self,
        text: Any,
        style: Any,
        zalgo_intensity: Any = None,
    ) -> TransformRequest:
        """Validate a single transform request.

        Args:
            text: Text to transform (1 to ``max_text_length`` characters)
            style: Style name from the enumeration
            zalgo_intensity: Optional intensity name (mini, normal, maxi)

        Returns:
            Validated request

        Raises:
            RequestValidationError: If any field violates the limits
        """
        self.validation_count += 1
        valid_text = self._validate_text(text, self.limits.max_text_length)
        valid_style = self._validate_style(style)

        options = None
        if zalgo_intensity is not None:
            options = ZalgoOptions(intensity=self._validate_intensity(zalgo_intensity))

        return TransformRequest(text=valid_text, style=valid_style, options=options)

    def validate_transform_all(self, text: Any) -> str:
        """Validate a transform-all request (at most ``max_all_styles_length``)."""
        self.validation_count += 1
        return self._validate_text(text, self.limits.max_all_styles_length)

    def validate_batch(self, items: Any) -> List[Mapping[str, Any]]:
        """Validate the shape of a batch request.

        Only the list itself is checked here; an item with a bad text or style
        becomes an inline failure of the batch rather than rejecting the whole
        request.

        Raises:
            RequestValidationError: If items is not a non-empty list of mappings
                within ``max_batch_items``
        """
        self.validation_count += 1
        if not isinstance(items, Sequence) or isinstance(items, (str, bytes)) or not items:
            raise self._reject("empty_batch", EMPTY_BATCH_MESSAGE, "items")

        if len(items) > self.limits.max_batch_items:
            raise self._reject(
                "batch_too_large",
                f"Too many items. Max {self.limits.max_batch_items} per batch.",
                "items",
                suggestions=["Split the batch into smaller requests"],
            )

        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                raise self._reject(
                    "invalid_item",
                    f"Batch item {index} must be an object",
                    f"items[{index}]",
                )
        return list(items)

    def get_statistics(self) -> Dict[str, Any]:
        """Validation counters for monitoring."""
        return {
            "validation_count": self.validation_count,
            "rejection_count": self.rejection_count,
            "rejection_reasons": dict(self.rejection_reasons),
        }

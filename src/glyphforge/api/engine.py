"""Styling engine API with progressive disclosure.

Level 1 is the module-level functions (``list_styles``, ``transform``,
``transform_all``, ``batch_transform``, ``revert``) backed by a shared default
engine. Level 2 is :class:`TextStyler`, which takes an :class:`EngineConfig`
and an injectable random source.

The engine holds no per-call state: tables and the registry are read-only, so
one instance can serve any number of threads.
"""

import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from glyphforge.character.transformation import ZalgoOptions, apply_map
from glyphforge.shared import (
    BatchResult,
    EngineConfig,
    IrreversibleStyleError,
    ItemOutcome,
    PerformanceMetrics,
    TransformFailure,
    TransformSuccess,
    ZalgoIntensity,
    get_logger,
)
from glyphforge.styles import (
    STYLE_DEFINITIONS,
    Style,
    StyleInfo,
    describe_styles,
    get_definition,
)

MS_PER_SECOND = 1000

OptionsInput = Union[None, str, ZalgoIntensity, ZalgoOptions, Dict[str, Any]]


@dataclass(frozen=True)
class TransformRequest:
    """A single (text, style, options) request."""

    text: str
    style: Union[str, Style]
    options: Optional[ZalgoOptions] = None

    @classmethod
    def from_mapping(cls, item: Mapping[str, Any]) -> "TransformRequest":
        """Build a request from a wire mapping.

        Accepts ``options`` (a ZalgoOptions mapping or intensity) or the
        shorthand ``zalgoIntensity``. Options are only read for zalgo items.

        Raises:
            ValueError: If text is missing or not a string, or zalgo options
                are invalid
        """
        text = item.get("text")
        if not isinstance(text, str):
            raise ValueError("Text is required and must be a string")

        style = item.get("style")
        raw_options = item.get("options")
        if raw_options is None:
            raw_options = item.get("zalgoIntensity")

        options = None
        if raw_options is not None and style in (Style.ZALGO, Style.ZALGO.value):
            options = ZalgoOptions.from_value(raw_options)

        return cls(text=text, style=style, options=options)


class TextStyler:
    """Configured styling engine.

    Attributes:
        config: Engine configuration
        correlation_id: Correlation ID attached to log records

    Examples:
        Basic usage:
        >>> styler = TextStyler()
        >>> styler.transform("AB", "bold")
        '𝐀𝐁'

        Reproducible zalgo:
        >>> styler = TextStyler(rng=random.Random(7))
        >>> first = styler.transform("hi", "zalgo")
        >>> TextStyler(rng=random.Random(7)).transform("hi", "zalgo") == first
        True
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Engine configuration (defaults to balanced)
            rng: Random source for zalgo; a fresh unseeded generator by default
            correlation_id: Optional correlation ID for request tracking,
                dropped when ``global_.enable_correlation_tracking`` is off
        """
        self.config = config or EngineConfig.balanced()
        self.rng = rng or random.Random()
        if not self.config.global_.enable_correlation_tracking:
            correlation_id = None
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "text_styler")

    def _resolve_options(self, options: OptionsInput) -> ZalgoOptions:
        if options is None:
            return ZalgoOptions(intensity=self.config.zalgo.default_intensity)
        return ZalgoOptions.from_value(options)

    def list_styles(self) -> List[StyleInfo]:
        """Describe every style with a rendering of the sample text."""
        return describe_styles(
            sample=self.config.global_.sample_text,
            rng=self.rng,
            example_intensity=self.config.zalgo.example_intensity,
        )

    def transform(
        self,
        text: str,
        style: Union[str, Style],
        options: OptionsInput = None,
    ) -> str:
        """Apply one style to ``text``.

        Args:
            text: Input text; any content, including the empty string
            style: Style name or member
            options: Zalgo options, ignored by every other style

        Returns:
            Styled text

        Raises:
            UnknownStyleError: If the style is not registered
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, not {type(text).__name__}")

        definition = get_definition(style)
        if definition.style is Style.ZALGO:
            resolved = self._resolve_options(options)
        else:
            resolved = ZalgoOptions()
        result = definition.handler(text, resolved, self.rng)

        if self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug(
                "Applied style",
                extra={
                    "style": definition.name,
                    "input_length": len(text),
                    "output_length": len(result),
                },
            )
        return result

    def transform_all(self, text: str) -> Dict[str, str]:
        """Apply every style to ``text``.

        A style that fails is logged and contributes the original text, so the
        result always holds every style name.
        """
        start_time = time.time()
        default_options = self._resolve_options(None)
        results: Dict[str, str] = {}

        for style, definition in STYLE_DEFINITIONS.items():
            try:
                results[style.value] = definition.handler(text, default_options, self.rng)
            except Exception:
                self.logger.warning(
                    "Style failed during transform-all; keeping original text",
                    extra={"style": style.value},
                    exc_info=True,
                )
                results[style.value] = text

        self.logger.debug(
            "Transform-all completed",
            extra={
                "style_count": len(results),
                "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
            },
        )
        return results

    def _run_item(
        self, index: int, item: Union[TransformRequest, Mapping[str, Any]]
    ) -> ItemOutcome:
        original = item.text if isinstance(item, TransformRequest) else None
        style: Any = item.style if isinstance(item, TransformRequest) else None

        try:
            if isinstance(item, Mapping):
                original = item.get("text")
                style = item.get("style")
                request = TransformRequest.from_mapping(item)
            elif isinstance(item, TransformRequest):
                request = item
            else:
                raise TypeError(
                    f"Batch item must be a mapping or TransformRequest, "
                    f"not {type(item).__name__}"
                )

            transformed = self.transform(request.text, request.style, request.options)
        except Exception as e:
            self.logger.debug(
                "Batch item failed",
                extra={"index": index, "error": str(e)},
            )
            if isinstance(style, Style):
                style = style.value
            return TransformFailure(
                index=index,
                original=original,
                style=style,
                error=str(e) or type(e).__name__,
            )

        if isinstance(style, Style):
            style = style.value
        return TransformSuccess(
            index=index, original=original, style=style, transformed=transformed
        )

    def batch_transform(
        self, items: Sequence[Union[TransformRequest, Mapping[str, Any]]]
    ) -> BatchResult:
        """Apply each item independently.

        Failures are reported inline as :class:`TransformFailure` entries;
        results keep the input order.

        Args:
            items: Requests or mappings with ``text``, ``style`` and optional
                ``options`` / ``zalgoIntensity``

        Returns:
            BatchResult with one outcome per item
        """
        start_time = time.time()
        items = list(items)
        performance_config = self.config.performance
        parallel = (
            performance_config.enable_parallel_processing
            and len(items) >= performance_config.parallel_threshold
        )

        if parallel:
            with ThreadPoolExecutor(
                max_workers=performance_config.max_worker_threads
            ) as executor:
                outcomes = list(executor.map(self._run_item, range(len(items)), items))
        else:
            outcomes = [self._run_item(index, item) for index, item in enumerate(items)]

        result = BatchResult(
            results=outcomes,
            performance=PerformanceMetrics(
                processing_time_ms=(time.time() - start_time) * MS_PER_SECOND,
                characters_processed=sum(
                    len(outcome.original) for outcome in outcomes
                    if isinstance(outcome.original, str)
                ),
                items_processed=len(outcomes),
                parallel=parallel,
            ),
            correlation_id=self.correlation_id,
        )

        self.logger.info(
            "Batch transform completed",
            extra={
                "total_items": result.total_items,
                "successful": result.successful,
                "parallel": parallel,
                "processing_time_ms": result.performance.processing_time_ms,
            },
        )
        return result

    def revert(self, text: str, style: Union[str, Style]) -> str:
        """Map styled text back to plain text through the style's inverse table.

        Only characters in the style's reversible domain round-trip exactly;
        anything else passes through.

        Raises:
            UnknownStyleError: If the style is not registered
            IrreversibleStyleError: If the style has no inverse table
        """
        definition = get_definition(style)
        if definition.inverse is None:
            raise IrreversibleStyleError(definition.name)
        return apply_map(text, definition.inverse)


_default_styler = TextStyler()


def list_styles() -> List[StyleInfo]:
    """List every style with a description and an example rendering of "Hello"."""
    return _default_styler.list_styles()


def transform(text: str, style: Union[str, Style], options: OptionsInput = None) -> str:
    """Apply one style to ``text`` with the default engine."""
    return _default_styler.transform(text, style, options)


def transform_all(text: str) -> Dict[str, str]:
    """Apply every style to ``text`` with the default engine."""
    return _default_styler.transform_all(text)


def batch_transform(
    items: Sequence[Union[TransformRequest, Mapping[str, Any]]]
) -> BatchResult:
    """Apply each batch item independently with the default engine."""
    return _default_styler.batch_transform(items)


def revert(text: str, style: Union[str, Style]) -> str:
    """Map styled text back to plain text with the default engine."""
    return _default_styler.revert(text, style)

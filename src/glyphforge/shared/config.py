"""Configuration classes for GlyphForge.

This module provides configuration objects for the styling engine and the
caller-facing layers (request validation, tool adapter, CLI), enabling
fine-tuned control over limits, concurrency and zalgo defaults.
"""

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Union

COMPONENT_FIELDS = ("limits", "performance", "zalgo", "global_")


class ZalgoIntensity(Enum):
    """Zalgo intensity levels."""

    MINI = "mini"
    NORMAL = "normal"
    MAXI = "maxi"

    @classmethod
    def parse(cls, value: Union[str, "ZalgoIntensity"]) -> "ZalgoIntensity":
        """Resolve an intensity from its enum member or wire value.

        Raises:
            ValueError: If the value is not a known intensity
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        valid = [member.value for member in cls]
        raise ValueError(f"Unknown zalgo intensity: {value!r} (expected one of {valid})")


@dataclass
class LimitsConfig:
    """Caller-side request limits enforced before the engine is invoked."""

    max_text_length: int = 10000
    max_all_styles_length: int = 1000
    max_batch_items: int = 100
    min_text_length: int = 1

    def __post_init__(self) -> None:
        """Validate limits configuration."""
        if self.min_text_length < 0:
            raise ValueError("min_text_length must be >= 0")
        if self.max_text_length <= 0:
            raise ValueError("max_text_length must be > 0")
        if self.max_all_styles_length <= 0:
            raise ValueError("max_all_styles_length must be > 0")
        if self.max_batch_items <= 0:
            raise ValueError("max_batch_items must be > 0")
        if self.min_text_length > self.max_text_length:
            raise ValueError("min_text_length must be <= max_text_length")


@dataclass
class PerformanceConfig:
    """Configuration for aggregate operation execution."""

    enable_parallel_processing: bool = False
    max_worker_threads: int = 4
    parallel_threshold: int = 8

    def __post_init__(self) -> None:
        """Validate performance configuration."""
        if self.max_worker_threads <= 0:
            raise ValueError("max_worker_threads must be > 0")
        if self.parallel_threshold <= 0:
            raise ValueError("parallel_threshold must be > 0")


@dataclass
class ZalgoConfig:
    """Defaults for the zalgo style."""

    default_intensity: ZalgoIntensity = ZalgoIntensity.NORMAL
    example_intensity: ZalgoIntensity = ZalgoIntensity.MINI

    def __post_init__(self) -> None:
        """Coerce wire values to intensity members."""
        self.default_intensity = ZalgoIntensity.parse(self.default_intensity)
        self.example_intensity = ZalgoIntensity.parse(self.example_intensity)


@dataclass
class GlobalConfig:
    """Global settings that apply across all components."""

    logging_level: str = "WARNING"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    enable_correlation_tracking: bool = True
    sample_text: str = "Hello"

    def __post_init__(self) -> None:
        """Validate global configuration."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging_level not in valid_levels:
            raise ValueError(f"logging_level must be one of {valid_levels}")
        if not self.sample_text:
            raise ValueError("sample_text must not be empty")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class EngineConfig:
    """Complete configuration for the styling engine and its callers.

    Immutable once built, so a single instance can be shared by every thread
    using the engine.
    """

    limits: LimitsConfig = field(default_factory=LimitsConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)
    zalgo: ZalgoConfig = field(default_factory=ZalgoConfig)
    global_: GlobalConfig = field(default_factory=GlobalConfig)

    version: str = "1.0.0"
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete engine configuration."""
        try:
            self.limits.__post_init__()
            self.performance.__post_init__()
            self.zalgo.__post_init__()
            self.global_.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

        self._validate_cross_component_dependencies()

    def _validate_cross_component_dependencies(self) -> None:
        if self.limits.max_all_styles_length > self.limits.max_text_length:
            raise ConfigValidationError(
                "Transform-all length limit exceeds single transform length limit",
                field_name="limits.max_all_styles_length",
                suggestions=["Reduce limits.max_all_styles_length",
                             "Increase limits.max_text_length"]
            )

    def override(self, **kwargs: Any) -> "EngineConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New EngineConfig instance with overrides applied

        Example:
            >>> config = EngineConfig()
            >>> new_config = config.override(
            ...     limits__max_batch_items=10,
            ...     performance__enable_parallel_processing=True
            ... )
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                # match by prefix; "global_" itself ends in an underscore
                component = next(
                    (name for name in COMPONENT_FIELDS if key.startswith(f"{name}__")),
                    key.split("__", 1)[0],
                )
                if component not in COMPONENT_FIELDS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=[f"Use one of {list(COMPONENT_FIELDS)}"]
                    )
                field_name = key[len(component) + 2:]
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        for field_name in COMPONENT_FIELDS:
            current_config = getattr(self, field_name)
            if field_name in nested_overrides:
                try:
                    new_fields[field_name] = replace(
                        current_config, **nested_overrides[field_name]
                    )
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=field_name) from e

        for key, value in nested_overrides.items():
            if key not in COMPONENT_FIELDS:
                new_fields[key] = value

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            if isinstance(obj, Enum):
                return obj.name
            if isinstance(obj, (list, tuple, set)):
                return [_dataclass_to_dict(item) for item in obj]
            if isinstance(obj, dict):
                return {key: _dataclass_to_dict(value) for key, value in obj.items()}
            return obj

        result = _dataclass_to_dict(self)
        if not isinstance(result, dict):
            raise ConfigValidationError("Configuration serialization failed")
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """Create configuration from dictionary.

        Unknown keys are ignored; missing keys keep their defaults.
        """
        def _dict_to_dataclass(data_dict: Dict[str, Any], target_class: type) -> Any:
            if not isinstance(data_dict, dict):
                raise ConfigValidationError(
                    f"{target_class.__name__} section must be a JSON object"
                )
            field_values: Dict[str, Any] = {}
            for field_name, field_info in target_class.__dataclass_fields__.items():
                if field_name not in data_dict:
                    continue
                value = data_dict[field_name]
                field_type = field_info.type

                if hasattr(field_type, "__dataclass_fields__"):
                    field_values[field_name] = _dict_to_dataclass(value, field_type)
                elif hasattr(field_type, "__members__") and isinstance(value, str):
                    if value in field_type.__members__:
                        field_values[field_name] = field_type[value]
                    else:
                        field_values[field_name] = value
                else:
                    field_values[field_name] = value

            try:
                return target_class(**field_values)
            except (TypeError, ValueError) as e:
                raise ConfigValidationError(
                    f"Invalid {target_class.__name__}: {e}"
                ) from e

        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration data must be a JSON object")
        result = _dict_to_dataclass(data, cls)
        if not isinstance(result, cls):
            raise ConfigValidationError(f"Failed to deserialize to {cls.__name__}")
        return result

    @classmethod
    def from_json(cls, json_str: str) -> "EngineConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def balanced(cls) -> "EngineConfig":
        """Default configuration: sequential aggregates, standard request limits."""
        return cls(name="balanced")

    @classmethod
    def performance_optimized(cls) -> "EngineConfig":
        """Configuration that fans batch items out to a thread pool."""
        return cls(
            performance=PerformanceConfig(
                enable_parallel_processing=True,
                max_worker_threads=8,
                parallel_threshold=4
            ),
            name="performance_optimized",
            description="Parallel batch execution for large batches"
        )

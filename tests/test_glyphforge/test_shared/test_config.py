"""Comprehensive tests for configuration system."""

import json

import pytest

from glyphforge.shared.config import (
    # Configuration classes
    EngineConfig,
    GlobalConfig,
    LimitsConfig,
    PerformanceConfig,
    ZalgoConfig,

    # Enums
    ZalgoIntensity,

    # Exceptions
    ConfigError,
    ConfigValidationError
)


class TestZalgoIntensity:
    """Test suite for ZalgoIntensity."""

    def test_parse_wire_values(self):
        assert ZalgoIntensity.parse("mini") is ZalgoIntensity.MINI
        assert ZalgoIntensity.parse("normal") is ZalgoIntensity.NORMAL
        assert ZalgoIntensity.parse("maxi") is ZalgoIntensity.MAXI

    def test_parse_member(self):
        assert ZalgoIntensity.parse(ZalgoIntensity.MAXI) is ZalgoIntensity.MAXI

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown zalgo intensity"):
            ZalgoIntensity.parse("MINI")


class TestLimitsConfig:
    """Test suite for LimitsConfig."""

    def test_default_configuration(self):
        """Test default request limits."""
        config = LimitsConfig()

        assert config.max_text_length == 10000
        assert config.max_all_styles_length == 1000
        assert config.max_batch_items == 100
        assert config.min_text_length == 1

    def test_limits_validation_failures(self):
        with pytest.raises(ValueError, match="max_text_length must be > 0"):
            LimitsConfig(max_text_length=0)

        with pytest.raises(ValueError, match="max_batch_items must be > 0"):
            LimitsConfig(max_batch_items=-1)

        with pytest.raises(ValueError, match="min_text_length must be >= 0"):
            LimitsConfig(min_text_length=-1)

        with pytest.raises(ValueError, match="min_text_length must be <= max_text_length"):
            LimitsConfig(min_text_length=20, max_text_length=10)


class TestPerformanceConfig:
    """Test suite for PerformanceConfig."""

    def test_default_configuration(self):
        config = PerformanceConfig()

        assert config.enable_parallel_processing is False
        assert config.max_worker_threads == 4
        assert config.parallel_threshold == 8

    def test_performance_validation_failures(self):
        with pytest.raises(ValueError, match="max_worker_threads must be > 0"):
            PerformanceConfig(max_worker_threads=0)

        with pytest.raises(ValueError, match="parallel_threshold must be > 0"):
            PerformanceConfig(parallel_threshold=0)


class TestZalgoConfig:
    """Test suite for ZalgoConfig."""

    def test_default_configuration(self):
        config = ZalgoConfig()

        assert config.default_intensity is ZalgoIntensity.NORMAL
        assert config.example_intensity is ZalgoIntensity.MINI

    def test_wire_values_are_coerced(self):
        config = ZalgoConfig(default_intensity="maxi")

        assert config.default_intensity is ZalgoIntensity.MAXI

    def test_unknown_intensity(self):
        with pytest.raises(ValueError):
            ZalgoConfig(default_intensity="extreme")


class TestGlobalConfig:
    """Test suite for GlobalConfig."""

    def test_default_configuration(self):
        config = GlobalConfig()

        assert config.logging_level == "WARNING"
        assert config.enable_correlation_tracking is True
        assert config.sample_text == "Hello"

    def test_global_validation_failures(self):
        with pytest.raises(ValueError, match="logging_level must be one of"):
            GlobalConfig(logging_level="VERBOSE")

        with pytest.raises(ValueError, match="sample_text must not be empty"):
            GlobalConfig(sample_text="")


class TestEngineConfig:
    """Test suite for EngineConfig."""

    def test_default_configuration(self):
        config = EngineConfig()

        assert isinstance(config.limits, LimitsConfig)
        assert isinstance(config.performance, PerformanceConfig)
        assert isinstance(config.zalgo, ZalgoConfig)
        assert isinstance(config.global_, GlobalConfig)
        assert config.version == "1.0.0"

    def test_config_is_frozen(self):
        config = EngineConfig()

        with pytest.raises(AttributeError):
            config.name = "other"  # type: ignore[misc]

    def test_cross_component_validation(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            EngineConfig(limits=LimitsConfig(max_text_length=500))

        assert exc_info.value.field_name == "limits.max_all_styles_length"
        assert exc_info.value.suggestions

    def test_component_errors_are_wrapped(self):
        limits = LimitsConfig()
        limits.max_batch_items = 0

        with pytest.raises(ConfigValidationError, match="max_batch_items must be > 0"):
            EngineConfig(limits=limits)

    def test_validation_error_is_config_error(self):
        assert issubclass(ConfigValidationError, ConfigError)


class TestConfigOverride:
    """Test suite for EngineConfig.override."""

    def test_nested_override(self):
        config = EngineConfig().override(
            limits__max_batch_items=10,
            performance__enable_parallel_processing=True,
        )

        assert config.limits.max_batch_items == 10
        assert config.performance.enable_parallel_processing is True
        assert config.limits.max_text_length == 10000

    def test_override_global_component(self):
        config = EngineConfig().override(global___sample_text="Hi")

        assert config.global_.sample_text == "Hi"

    def test_override_top_level_field(self):
        config = EngineConfig().override(name="custom")

        assert config.name == "custom"

    def test_original_is_unchanged(self):
        original = EngineConfig()
        original.override(limits__max_batch_items=10)

        assert original.limits.max_batch_items == 100

    def test_unknown_component(self):
        with pytest.raises(ConfigValidationError, match="Unknown configuration component"):
            EngineConfig().override(cache__size=10)

    def test_invalid_value(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            EngineConfig().override(performance__max_worker_threads=0)

        assert exc_info.value.field_name == "performance"

    def test_unknown_field(self):
        with pytest.raises(ConfigValidationError):
            EngineConfig().override(limits__max_width=3)


class TestConfigSerialization:
    """Test suite for configuration serialization."""

    def test_to_dict(self):
        data = EngineConfig().to_dict()

        assert data["limits"]["max_text_length"] == 10000
        assert data["zalgo"]["default_intensity"] == "NORMAL"
        assert data["global_"]["sample_text"] == "Hello"

    def test_round_trip(self):
        config = EngineConfig().override(
            zalgo__default_intensity="maxi",
            limits__max_batch_items=5,
            name="custom",
        )

        restored = EngineConfig.from_json(config.to_json())

        assert restored == config
        assert restored.zalgo.default_intensity is ZalgoIntensity.MAXI

    def test_from_dict_partial(self):
        config = EngineConfig.from_dict({"limits": {"max_batch_items": 3}})

        assert config.limits.max_batch_items == 3
        assert config.limits.max_text_length == 10000
        assert config.performance == PerformanceConfig()

    def test_from_dict_accepts_wire_intensity(self):
        config = EngineConfig.from_dict({"zalgo": {"default_intensity": "mini"}})

        assert config.zalgo.default_intensity is ZalgoIntensity.MINI

    def test_from_dict_invalid(self):
        with pytest.raises(ConfigValidationError):
            EngineConfig.from_dict({"performance": {"max_worker_threads": -1}})

    def test_from_dict_not_a_mapping(self):
        with pytest.raises(ConfigValidationError):
            EngineConfig.from_dict(["limits"])  # type: ignore[arg-type]

    @pytest.mark.parametrize("section", [5, "x", ["max_batch_items"], None])
    def test_from_dict_component_not_a_mapping(self, section):
        with pytest.raises(ConfigValidationError, match="LimitsConfig section must be a JSON object"):
            EngineConfig.from_dict({"limits": section})

    def test_from_json_invalid(self):
        with pytest.raises(ConfigValidationError, match="Invalid configuration JSON"):
            EngineConfig.from_json("{not json")

    def test_to_json_is_valid_json(self):
        assert json.loads(EngineConfig().to_json())["version"] == "1.0.0"


class TestConfigPresets:
    """Test suite for configuration presets."""

    def test_balanced(self):
        config = EngineConfig.balanced()

        assert config.name == "balanced"
        assert config.performance.enable_parallel_processing is False

    def test_performance_optimized(self):
        config = EngineConfig.performance_optimized()

        assert config.name == "performance_optimized"
        assert config.performance.enable_parallel_processing is True
        assert config.performance.max_worker_threads == 8
        assert config.performance.parallel_threshold == 4

"""Tests for configuration classes."""

import dataclasses
import json

import pytest

from xml2yaml.shared import (
    ConfigValidationError,
    ConverterConfig,
    OutputSettings,
    ParserSettings,
)


class TestParserSettings:
    """Test parser settings defaults and validation."""

    def test_defaults(self) -> None:
        """Test default parser settings."""
        settings = ParserSettings()
        assert settings.chunk_size == 65536
        assert settings.trim_text is True
        assert settings.huge_tree is True
        assert settings.resolve_entities == "internal"
        assert settings.no_network is True

    @pytest.mark.parametrize("chunk_size", [0, -1])
    def test_invalid_chunk_size_raises_error(self, chunk_size: int) -> None:
        """Test that non-positive chunk sizes are rejected."""
        with pytest.raises(ConfigValidationError, match="chunk_size must be > 0"):
            ParserSettings(chunk_size=chunk_size)

    def test_invalid_entity_mode_raises_error(self) -> None:
        """Test that unknown entity modes are rejected."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ParserSettings(resolve_entities="sometimes")
        assert exc_info.value.field_name == "parser.resolve_entities"

    def test_unresolved_entity_mode_is_rejected(self) -> None:
        """Test entity expansion cannot be switched off."""
        with pytest.raises(ConfigValidationError):
            ParserSettings(resolve_entities="none")


class TestOutputSettings:
    """Test output settings defaults and validation."""

    def test_defaults(self) -> None:
        """Test default output settings."""
        settings = OutputSettings()
        assert settings.indent == 2
        assert settings.width == 80
        assert settings.allow_unicode is True
        assert settings.explicit_start is False
        assert settings.explicit_end is False

    @pytest.mark.parametrize("indent", [1, 10])
    def test_indent_out_of_range_raises_error(self, indent: int) -> None:
        """Test indent bounds."""
        with pytest.raises(ConfigValidationError, match="indent must be between 2 and 9"):
            OutputSettings(indent=indent)

    def test_narrow_width_raises_error_with_suggestions(self) -> None:
        """Test width must exceed twice the indent."""
        with pytest.raises(ConfigValidationError) as exc_info:
            OutputSettings(indent=4, width=8)
        assert exc_info.value.suggestions

    def test_width_none_is_allowed(self) -> None:
        """Test that None disables wrapping."""
        assert OutputSettings(width=None).width is None


class TestConverterConfig:
    """Test the complete converter configuration."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = ConverterConfig()
        assert config.parser == ParserSettings()
        assert config.output == OutputSettings()
        assert config.correlation_id is None
        assert config.logging_level == "WARNING"

    def test_config_is_immutable(self) -> None:
        """Test that configuration cannot be mutated in place."""
        config = ConverterConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.logging_level = "DEBUG"  # type: ignore[misc]

    def test_invalid_logging_level_raises_error(self) -> None:
        """Test logging level validation."""
        with pytest.raises(ConfigValidationError, match="logging_level"):
            ConverterConfig(logging_level="LOUD")

    def test_override_nested_fields(self) -> None:
        """Test overriding nested fields returns a new configuration."""
        config = ConverterConfig()
        new_config = config.override(
            output__indent=4,
            parser__chunk_size=1024,
            correlation_id="abc",
        )

        assert new_config.output.indent == 4
        assert new_config.parser.chunk_size == 1024
        assert new_config.correlation_id == "abc"
        # Original untouched
        assert config.output.indent == 2
        assert config.parser.chunk_size == 65536

    def test_override_validates_values(self) -> None:
        """Test that overrides go through validation."""
        with pytest.raises(ConfigValidationError):
            ConverterConfig().override(parser__chunk_size=0)

    def test_override_unknown_section_raises_error(self) -> None:
        """Test that unknown sections are rejected."""
        with pytest.raises(ConfigValidationError, match="Unknown configuration section"):
            ConverterConfig().override(tree__depth=3)

    def test_dict_round_trip(self) -> None:
        """Test conversion to and from dictionaries."""
        config = ConverterConfig().override(output__explicit_start=True, logging_level="INFO")
        restored = ConverterConfig.from_dict(config.to_dict())
        assert restored == config

    def test_from_dict_rejects_unknown_fields(self) -> None:
        """Test that unknown keys are not silently ignored."""
        with pytest.raises(ConfigValidationError, match="Invalid configuration"):
            ConverterConfig.from_dict({"output": {"colour": "blue"}})

    def test_from_json(self) -> None:
        """Test loading configuration from JSON text."""
        config = ConverterConfig.from_json(json.dumps({"output": {"indent": 3}}))
        assert config.output.indent == 3
        assert config.parser == ParserSettings()

    def test_from_json_invalid_text(self) -> None:
        """Test that malformed JSON raises a validation error."""
        with pytest.raises(ConfigValidationError, match="not valid JSON"):
            ConverterConfig.from_json("{not json")

    def test_from_json_requires_object(self) -> None:
        """Test that JSON arrays are rejected."""
        with pytest.raises(ConfigValidationError, match="must be an object"):
            ConverterConfig.from_json("[1, 2]")

    def test_to_json_is_parseable(self) -> None:
        """Test JSON output."""
        data = json.loads(ConverterConfig().to_json())
        assert data["parser"]["chunk_size"] == 65536
        assert data["output"]["width"] == 80

    def test_from_file(self, tmp_path) -> None:
        """Test loading configuration from a file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"parser": {"huge_tree": False}}))

        config = ConverterConfig.from_file(config_path)
        assert config.parser.huge_tree is False

    def test_from_missing_file(self, tmp_path) -> None:
        """Test loading configuration from a missing file."""
        with pytest.raises(ConfigValidationError, match="Could not read configuration file"):
            ConverterConfig.from_file(tmp_path / "missing.json")


class TestConfigPresets:
    """Test preset factory methods."""

    def test_default_preset(self) -> None:
        """Test that the default preset matches the plain constructor."""
        assert ConverterConfig.default() == ConverterConfig()

    def test_compact_preset_disables_wrapping(self) -> None:
        """Test compact preset."""
        assert ConverterConfig.compact().output.width is None

    def test_large_documents_preset(self) -> None:
        """Test large document preset."""
        config = ConverterConfig.large_documents()
        assert config.parser.huge_tree is True
        assert config.parser.chunk_size == 1024 * 1024

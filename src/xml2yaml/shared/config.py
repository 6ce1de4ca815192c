"""Configuration classes for XML to YAML conversion.

This module provides configuration objects for the parsing and output stages.
Defaults reproduce the plain conversion behaviour; presets trade output
layout or memory limits for specific workloads.
"""

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import ConfigValidationError

_VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_VALID_ENTITY_MODES = ["internal", "all"]
_MIN_INDENT = 2
_MAX_INDENT = 9


@dataclass
class ParserSettings:
    """Configuration for the XML event source."""

    chunk_size: int = 65536
    trim_text: bool = True
    huge_tree: bool = True
    resolve_entities: str = "internal"  # internal, all
    no_network: bool = True

    def __post_init__(self) -> None:
        """Validate parser settings."""
        if self.chunk_size <= 0:
            raise ConfigValidationError(
                "chunk_size must be > 0", field_name="parser.chunk_size"
            )
        if self.resolve_entities not in _VALID_ENTITY_MODES:
            raise ConfigValidationError(
                f"resolve_entities must be one of {_VALID_ENTITY_MODES}",
                field_name="parser.resolve_entities",
            )


@dataclass
class OutputSettings:
    """Configuration for YAML emission."""

    indent: int = 2
    width: Optional[int] = 80
    allow_unicode: bool = True
    explicit_start: bool = False
    explicit_end: bool = False

    def __post_init__(self) -> None:
        """Validate output settings."""
        if not (_MIN_INDENT <= self.indent <= _MAX_INDENT):
            raise ConfigValidationError(
                f"indent must be between {_MIN_INDENT} and {_MAX_INDENT}",
                field_name="output.indent",
            )
        if self.width is not None and self.width <= self.indent * 2:
            raise ConfigValidationError(
                "width must be greater than twice the indent or None",
                field_name="output.width",
                suggestions=["Increase output.width", "Use width=None for no wrapping"],
            )


@dataclass(frozen=True)
class ConverterConfig:
    """Complete configuration for a conversion.

    Immutable; use ``override`` to derive a modified copy.
    """

    parser: ParserSettings = field(default_factory=ParserSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    correlation_id: Optional[str] = None
    logging_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        if self.logging_level not in _VALID_LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {_VALID_LOGGING_LEVELS}",
                field_name="logging_level",
            )

    def override(self, **kwargs: Any) -> "ConverterConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Field overrides; nested fields use ``section__field``

        Returns:
            New ConverterConfig instance with overrides applied

        Example:
            >>> config = ConverterConfig().override(output__indent=4)
            >>> config.output.indent
            4
        """
        nested: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                section, field_name = key.split("__", 1)
                nested.setdefault(section, {})[field_name] = value
            else:
                top_level[key] = value

        for section, values in nested.items():
            if section not in ("parser", "output"):
                raise ConfigValidationError(
                    f"Unknown configuration section: {section}", field_name=section
                )
            top_level[section] = replace(getattr(self, section), **values)

        return replace(self, **top_level)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "parser": dict(vars(self.parser)),
            "output": dict(vars(self.output)),
            "correlation_id": self.correlation_id,
            "logging_level": self.logging_level,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConverterConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected rather than ignored.
        """
        try:
            return cls(
                parser=ParserSettings(**data.get("parser", {})),
                output=OutputSettings(**data.get("output", {})),
                correlation_id=data.get("correlation_id"),
                logging_level=data.get("logging_level", "WARNING"),
            )
        except TypeError as e:
            raise ConfigValidationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "ConverterConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Configuration is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ConverterConfig":
        """Load configuration from a JSON file."""
        path = Path(config_path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigValidationError(
                f"Could not read configuration file {path}: {e}"
            ) from e
        return cls.from_json(text)

    # Preset factory methods
    @classmethod
    def default(cls) -> "ConverterConfig":
        """Create the default configuration."""
        return cls()

    @classmethod
    def compact(cls) -> "ConverterConfig":
        """Create configuration that never wraps long scalars."""
        return cls(output=OutputSettings(width=None))

    @classmethod
    def large_documents(cls) -> "ConverterConfig":
        """Create configuration for very large documents."""
        return cls(parser=ParserSettings(chunk_size=1024 * 1024))

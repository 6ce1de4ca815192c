"""Shared utilities for XML to YAML conversion.

This module provides configuration objects, the error taxonomy, result types
and logging helpers used across all pipeline stages.
"""

from .config import (
    ConverterConfig,
    OutputSettings,
    ParserSettings,
)
from .errors import (
    ConfigError,
    ConfigValidationError,
    ConversionError,
    InputOutputError,
    SerializationError,
    XMLParseError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    ConversionMetrics,
    ConversionResult,
)

__all__ = [
    "ConverterConfig",
    "OutputSettings",
    "ParserSettings",
    "ConfigError",
    "ConfigValidationError",
    "ConversionError",
    "InputOutputError",
    "SerializationError",
    "XMLParseError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "ConversionMetrics",
    "ConversionResult",
]

"""Exception hierarchy for XML to YAML conversion.

Every fallible step of the pipeline (reading, parsing, serializing, writing)
raises one of these. Nothing inside the library recovers from them; the CLI
turns them into an error message and a non-zero exit code.
"""

from typing import Any, Dict, List, Optional


class ConversionError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InputOutputError(ConversionError):
    """Raised when an input cannot be read or an output cannot be written."""

    def __init__(self, message: str, path: Optional[str] = None,
                 operation: Optional[str] = None):
        super().__init__(message, {"path": path, "operation": operation})
        self.path = path
        self.operation = operation


class XMLParseError(ConversionError):
    """Raised when the input is not well-formed XML."""

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None):
        super().__init__(message, {"line": line, "column": column})
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class SerializationError(ConversionError):
    """Raised when a structured value cannot be rendered as YAML."""


class ConfigError(ConversionError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message, {"field": field_name})
        self.field_name = field_name
        self.suggestions = suggestions or []

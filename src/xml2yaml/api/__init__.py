"""Public API for XML to YAML conversion.

Progressive API disclosure:
- Level 1: Simple functions - convert(), convert_string(), convert_file(),
  convert_to_value()
- Level 2: Configured converter - XMLToYAMLConverter class
"""

from .converter import (
    InputType,
    XMLToYAMLConverter,
    convert,
    convert_file,
    convert_string,
    convert_to_value,
    read_input,
)

__all__ = [
    "InputType",
    "XMLToYAMLConverter",
    "convert",
    "convert_file",
    "convert_string",
    "convert_to_value",
    "read_input",
]

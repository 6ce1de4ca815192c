"""XML to YAML converter.

Streams XML parse events through a stack-based tree builder and renders the
resulting nested mappings and strings as block-style YAML.

Progressive API Disclosure:
- Level 1: Simple functions - convert(), convert_string(), convert_file()
- Level 2: Configured converter - XMLToYAMLConverter class
- Level 3: Building blocks - iter_events(), XMLTreeBuilder, serialize_value()
"""

__version__ = "0.1.0"
__author__ = "xml2yaml developers"

# Level 1 and 2: conversion entry points
from .api import (
    XMLToYAMLConverter,
    convert,
    convert_file,
    convert_string,
    convert_to_value,
)

# Level 3: pipeline stages
from .events import XMLEvent, iter_events
from .serialization import serialize_value
from .tree import XMLTreeBuilder

# Configuration, results and errors
from .shared import (
    ConversionError,
    ConversionResult,
    ConverterConfig,
    InputOutputError,
    SerializationError,
    XMLParseError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: simple conversion functions
    "convert",
    "convert_file",
    "convert_string",
    "convert_to_value",

    # Level 2: reusable converter
    "XMLToYAMLConverter",

    # Level 3: pipeline stages
    "XMLEvent",
    "XMLTreeBuilder",
    "iter_events",
    "serialize_value",

    # Configuration and results
    "ConverterConfig",
    "ConversionResult",

    # Errors
    "ConversionError",
    "InputOutputError",
    "SerializationError",
    "XMLParseError",
]

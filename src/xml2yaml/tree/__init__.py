"""Tree building engine for XML to YAML conversion.

This module provides the stack-based builder that turns XML events into
nested mappings and scalars ready for YAML serialization.

Key Components:
    XMLTreeBuilder: Consumes events and maintains the frame stack and cursor
    Frame: An open element on the builder's stack
    StructuredValue: Mapping (dict) or scalar (str) produced by the builder
"""

from .builder import (
    Frame,
    StructuredValue,
    XMLTreeBuilder,
)

__all__ = [
    "Frame",
    "StructuredValue",
    "XMLTreeBuilder",
]

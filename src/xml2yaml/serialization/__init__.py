"""YAML serialization of structured values."""

from .emitter import serialize_value

__all__ = ["serialize_value"]

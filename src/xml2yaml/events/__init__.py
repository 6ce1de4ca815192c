"""Event source layer for XML to YAML conversion.

Key Components:
    XMLEvent: Single structural parse event (start, end, text, end of document)
    XMLEventSource: Lazy single-pass iterable of events over one XML input
    iter_events: Convenience function returning an event iterator
"""

from .source import (
    EventType,
    XMLEvent,
    XMLEventSource,
    XMLSource,
    iter_events,
)

__all__ = [
    "EventType",
    "XMLEvent",
    "XMLEventSource",
    "XMLSource",
    "iter_events",
]

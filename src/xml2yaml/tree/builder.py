"""Core tree building implementation for XML to YAML conversion.

This module converts a stream of XML events into a nested structured value
made of mappings (``dict``) and scalars (``str``). Construction is iterative:
an explicit stack of frames records the open elements and a single cursor
holds the value of the innermost one.
"""

import time
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Union

from xml2yaml.events import EventType, XMLEvent
from xml2yaml.shared import ConversionMetrics, get_logger

StructuredValue = Union[Dict[str, Any], str]


class Frame(NamedTuple):
    """An open element: its tag and the value it will be inserted into."""

    tag: str
    parent: StructuredValue


class XMLTreeBuilder:
    """Builds a structured value from XML events.

    Event handling:
        START_ELEMENT: push ``Frame(tag, cursor)``, cursor becomes ``{}``
        TEXT: non-empty content replaces the cursor with the string
        END_ELEMENT: pop a frame, store the cursor under its tag when the
            parent is a mapping, then the parent becomes the cursor
        END_OF_DOCUMENT: marks the builder finished

    Repeated sibling tags overwrite earlier entries. Text arriving after
    children replaces the accumulated mapping, and children closing under a
    scalar parent are dropped. These cases, along with end events on an empty
    stack, are tolerated and only counted in ``metrics``.
    """

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize tree builder.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "xml_tree_builder")

        # Tree building state
        self._stack: List[Frame] = []
        self._cursor: StructuredValue = {}
        self._finished = False
        self.metrics = ConversionMetrics()

    @property
    def cursor(self) -> StructuredValue:
        """Value of the innermost open element, or the document once finished."""
        return self._cursor

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._stack)

    @property
    def finished(self) -> bool:
        """Whether END_OF_DOCUMENT has been consumed."""
        return self._finished

    def reset(self) -> None:
        """Reset internal state for a new document."""
        self._stack.clear()
        self._cursor = {}
        self._finished = False
        self.metrics = ConversionMetrics()

    def consume(self, event: XMLEvent) -> None:
        """Apply a single event to the builder state."""
        self.metrics.events_processed += 1

        if event.type == EventType.START_ELEMENT:
            self._start_element(event.value)
        elif event.type == EventType.TEXT:
            self._text(event.value)
        elif event.type == EventType.END_ELEMENT:
            self._end_element()
        elif event.type == EventType.END_OF_DOCUMENT:
            self._finished = True
        # Comments, processing instructions and anything else are ignored.

    def _start_element(self, tag: str) -> None:
        self._stack.append(Frame(tag, self._cursor))
        self._cursor = {}
        if len(self._stack) > self.metrics.max_depth:
            self.metrics.max_depth = len(self._stack)

    def _text(self, content: str) -> None:
        if not content or not content.strip():
            self.metrics.ignored_text_events += 1
            return
        self._cursor = content

    def _end_element(self) -> None:
        if not self._stack:
            self.metrics.ignored_end_events += 1
            self.logger.debug("End event with no open element ignored")
            return

        tag, parent = self._stack.pop()
        if isinstance(parent, dict):
            parent[tag] = self._cursor
            self.metrics.elements_built += 1
        else:
            self.metrics.dropped_entries += 1
            self.logger.debug(
                "Element closed under a text value was dropped",
                extra={"tag": tag, "depth": len(self._stack)}
            )
        self._cursor = parent

    def build(self, events: Iterable[XMLEvent]) -> StructuredValue:
        """Build a structured value from a complete event sequence.

        Args:
            events: Events in document order, normally ending with
                END_OF_DOCUMENT

        Returns:
            The document value: a one-key mapping from the root tag to the
            root element's value

        Raises:
            XMLParseError: If the event source reports malformed input
        """
        self.reset()
        start_time = time.time()

        try:
            for event in events:
                self.consume(event)
                if self._finished:
                    break
        except Exception:
            self.logger.debug(
                "Tree building aborted",
                extra={"events_processed": self.metrics.events_processed}
            )
            self._stack.clear()
            self._cursor = {}
            raise

        self.metrics.processing_time_ms = (time.time() - start_time) * 1000
        self.logger.info(
            "Tree building completed",
            extra={
                "elements_built": self.metrics.elements_built,
                "max_depth": self.metrics.max_depth,
                "dropped_entries": self.metrics.dropped_entries,
            }
        )
        return self._cursor

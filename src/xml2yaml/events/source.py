"""XML event source built on lxml's pull parser.

This module turns XML text into a lazy, single-pass sequence of parse events
(element start, element end, text, comment, processing instruction, end of
document). Input is fed to ``lxml.etree.XMLPullParser`` in chunks and events
are yielded as soon as each chunk has been parsed, so the consumer never waits
for the whole document.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import IO, Generator, Iterator, Optional, Tuple, Union

from lxml import etree

from xml2yaml.shared import ParserSettings, XMLParseError, get_logger

# Type definitions for input data
XMLSource = Union[str, bytes, IO[str], IO[bytes]]

_ENTITY_MODES = {"internal": "internal", "all": True}


class EventType(Enum):
    """Parse event kinds delivered to the tree builder."""

    START_ELEMENT = auto()           # Opening tag: <name>
    END_ELEMENT = auto()             # Closing tag: </name> or end of <name/>
    TEXT = auto()                    # Character content, entities resolved
    END_OF_DOCUMENT = auto()         # Input exhausted after the root element
    COMMENT = auto()                 # <!-- ... -->, value is the comment text
    PROCESSING_INSTRUCTION = auto()  # <?target ...?>, value is the target


@dataclass(frozen=True)
class XMLEvent:
    """Single parse event; ``value`` is the tag name or the text content."""

    type: EventType
    value: str = ""

    @classmethod
    def start(cls, tag: str) -> "XMLEvent":
        return cls(EventType.START_ELEMENT, tag)

    @classmethod
    def end(cls, tag: str = "") -> "XMLEvent":
        return cls(EventType.END_ELEMENT, tag)

    @classmethod
    def text(cls, content: str) -> "XMLEvent":
        return cls(EventType.TEXT, content)

    @classmethod
    def comment(cls, content: str = "") -> "XMLEvent":
        return cls(EventType.COMMENT, content)

    @classmethod
    def processing_instruction(cls, target: str = "") -> "XMLEvent":
        return cls(EventType.PROCESSING_INSTRUCTION, target)

    @classmethod
    def end_of_document(cls) -> "XMLEvent":
        return cls(EventType.END_OF_DOCUMENT)


def _tag_name(element: etree._Element) -> str:
    """Return the tag as written in the source, ``prefix:local`` for namespaces.

    Tags with an undeclared prefix are kept by libxml2 as plain ``x:name``
    strings and pass through unchanged.
    """
    tag = element.tag
    if not tag.startswith("{"):
        return tag
    local = tag.split("}", 1)[1]
    if element.prefix:
        return f"{element.prefix}:{local}"
    return local


def _is_entity(node: etree._Element) -> bool:
    return node.tag is etree.Entity


def _to_parse_error(error: etree.XMLSyntaxError) -> XMLParseError:
    line, column = error.position if error.position else (None, None)
    return XMLParseError(error.msg or str(error), line=line, column=column)


class XMLEventSource:
    """Iterable of XMLEvent objects over one XML input.

    Whitespace-only text is never emitted and, with ``trim_text`` enabled,
    text is stripped of surrounding whitespace. Comments and processing
    instructions are reported as their own events, so text on either side of
    one arrives as two separate text events. Malformed input raises
    XMLParseError from the iterator.
    """

    def __init__(
        self,
        source: XMLSource,
        settings: Optional[ParserSettings] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize event source.

        Args:
            source: XML as str, bytes, or a readable text or binary file object
            settings: Parser settings (defaults apply when omitted)
            correlation_id: Optional correlation ID for request tracking
        """
        self.source = source
        self.settings = settings or ParserSettings()
        self.logger = get_logger(__name__, correlation_id, "event_source")
        self.characters_processed = 0
        self._consumed = False

    def __iter__(self) -> Iterator[XMLEvent]:
        if self._consumed:
            raise RuntimeError("XMLEventSource can only be iterated once")
        self._consumed = True
        return self._generate()

    def _create_parser(self) -> etree.XMLPullParser:
        return etree.XMLPullParser(
            events=("start", "end", "comment", "pi"),
            resolve_entities=_ENTITY_MODES[self.settings.resolve_entities],
            no_network=self.settings.no_network,
            huge_tree=self.settings.huge_tree,
        )

    def _chunks(self) -> Iterator[Union[str, bytes]]:
        size = self.settings.chunk_size
        if hasattr(self.source, "read"):
            while True:
                chunk = self.source.read(size)
                if not chunk:
                    return
                yield chunk
        else:
            for offset in range(0, len(self.source), size):
                yield self.source[offset:offset + size]

    def _text_of(self, pending: Tuple[etree._Element, str]) -> Optional[str]:
        node, attribute = pending
        pieces = [getattr(node, attribute) or ""]
        # Entity references left unexpanded become nodes; the text after
        # each one is stored in that node's tail.
        following = node.iterchildren() if attribute == "text" else node.itersiblings()
        for sibling in following:
            if not _is_entity(sibling):
                break
            pieces.append(sibling.tail or "")

        text = "".join(pieces)
        if not text.strip():
            return None
        return text.strip() if self.settings.trim_text else text

    def _release(self, element: etree._Element) -> None:
        """Drop a finished subtree; only the open path stays in memory."""
        element.clear(keep_tail=True)
        parent = element.getparent()
        if parent is None:
            return
        while element.getprevious() is not None:
            del parent[0]

    def _translate(
        self,
        parser_events: Iterator[Tuple[str, etree._Element]],
        pending: Optional[Tuple[etree._Element, str]]
    ) -> Generator[XMLEvent, None, Optional[Tuple[etree._Element, str]]]:
        """Convert lxml parser events, returning the text still pending.

        Text following a start (``element.text``) or any other node (its
        ``tail``) is only complete once the parser has reported the next event.
        """
        for action, node in parser_events:
            if pending is not None:
                text = self._text_of(pending)
                if text is not None:
                    yield XMLEvent.text(text)
                pending = None

            if action == "start":
                yield XMLEvent.start(_tag_name(node))
                pending = (node, "text")
                continue

            if action == "end":
                yield XMLEvent.end(_tag_name(node))
            elif action == "comment":
                yield XMLEvent.comment(node.text or "")
            else:
                yield XMLEvent.processing_instruction(node.target)

            # Nodes outside the root element have no parent and their tails
            # are insignificant whitespace.
            if node.getparent() is not None:
                pending = (node, "tail")
            if action == "end":
                self._release(node)
        return pending

    def _generate(self) -> Iterator[XMLEvent]:
        parser = self._create_parser()
        pending: Optional[Tuple[etree._Element, str]] = None
        has_content = False

        for chunk in self._chunks():
            self.characters_processed += len(chunk)
            has_content = has_content or bool(chunk.strip())
            try:
                parser.feed(chunk)
            except etree.XMLSyntaxError as e:
                raise _to_parse_error(e) from e
            pending = yield from self._translate(parser.read_events(), pending)

        if not has_content:
            raise XMLParseError("Document is empty", line=1, column=1)

        try:
            parser.close()
        except etree.XMLSyntaxError as e:
            raise _to_parse_error(e) from e
        yield from self._translate(parser.read_events(), pending)

        self.logger.debug(
            "Event stream exhausted",
            extra={"characters_processed": self.characters_processed}
        )
        yield XMLEvent.end_of_document()


def iter_events(
    source: XMLSource,
    settings: Optional[ParserSettings] = None,
    correlation_id: Optional[str] = None
) -> Iterator[XMLEvent]:
    """Iterate over the parse events of an XML input.

    Args:
        source: XML as str, bytes, or a readable file object
        settings: Optional parser settings
        correlation_id: Optional correlation ID for request tracking

    Returns:
        Lazy iterator of XMLEvent objects ending with END_OF_DOCUMENT

    Examples:
        >>> [e.type.name for e in iter_events("<a>x</a>")]
        ['START_ELEMENT', 'TEXT', 'END_ELEMENT', 'END_OF_DOCUMENT']
    """
    return iter(XMLEventSource(source, settings, correlation_id))

"""Conversion API for XML to YAML.

This module provides the public entry points, from simple module-level
functions to the reusable, configurable XMLToYAMLConverter class. A
conversion either succeeds completely or raises a ConversionError subclass;
no partial tree or partial output is ever produced.
"""

import time
import uuid
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, TextIO, Tuple, Union

from xml2yaml.events import XMLEventSource
from xml2yaml.serialization import serialize_value
from xml2yaml.shared import (
    ConversionMetrics,
    ConversionResult,
    ConverterConfig,
    InputOutputError,
    get_logger,
)
from xml2yaml.tree import StructuredValue, XMLTreeBuilder

# Type definitions for input data
InputType = Union[str, bytes, BinaryIO, TextIO, Path]

MS_PER_SECOND = 1000


def read_input(path: Union[str, Path]) -> bytes:
    """Read a whole input file as bytes.

    Raises:
        InputOutputError: If the file cannot be opened or read
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            return f.read()
    except OSError as e:
        raise InputOutputError(
            f"Failed to open file: {path} ({e.strerror or e})",
            path=str(path),
            operation="read",
        ) from e


class XMLToYAMLConverter:
    """Reusable converter with fixed configuration and running statistics.

    Examples:
        >>> converter = XMLToYAMLConverter()
        >>> converter.convert("<root><item>value</item></root>").yaml_text
        'root:\\n  item: value\\n'
        >>> converter.statistics["conversions"]
        1
    """

    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        """Initialize converter.

        Args:
            config: Conversion configuration (defaults apply when omitted)
        """
        self.config = config or ConverterConfig()
        self.correlation_id = self.config.correlation_id or uuid.uuid4().hex[:12]
        self.logger = get_logger(__name__, self.correlation_id, "converter")
        self._statistics: Dict[str, Any] = {}
        self.reset_statistics()

    def build_value(self, input_data: InputType) -> StructuredValue:
        """Parse XML and build its structured value without serializing it."""
        return self._build(input_data)[0]

    def _build(self, input_data: InputType) -> Tuple[StructuredValue, ConversionMetrics]:
        if isinstance(input_data, Path):
            input_data = read_input(input_data)

        source = XMLEventSource(input_data, self.config.parser, self.correlation_id)
        builder = XMLTreeBuilder(self.correlation_id)
        value = builder.build(source)

        builder.metrics.characters_processed = source.characters_processed
        return value, builder.metrics

    def convert(self, input_data: InputType, source_name: Optional[str] = None) -> ConversionResult:
        """Convert XML to YAML.

        Args:
            input_data: XML content as str or bytes, a readable file object,
                or a Path to read from
            source_name: Label recorded in the result (defaults to the path
                or ``<string>``)

        Returns:
            ConversionResult holding the value, the YAML text and metrics

        Raises:
            InputOutputError: If a Path input cannot be read
            XMLParseError: If the input is not well-formed XML
            SerializationError: If the value cannot be rendered
        """
        start_time = time.time()
        if source_name is None:
            source_name = str(input_data) if isinstance(input_data, Path) else "<string>"

        self.logger.info(
            "Starting conversion",
            extra={"source": source_name, "input_type": type(input_data).__name__}
        )

        try:
            value, metrics = self._build(input_data)
            yaml_text = serialize_value(value, self.config.output, self.correlation_id)
        except Exception:
            self._statistics["failures"] += 1
            self.logger.exception("Conversion failed", extra={"source": source_name})
            raise

        metrics.processing_time_ms = (time.time() - start_time) * MS_PER_SECOND
        self._statistics["conversions"] += 1
        self._statistics["total_processing_time_ms"] += metrics.processing_time_ms
        self._statistics["total_events"] += metrics.events_processed

        self.logger.info(
            "Conversion completed",
            extra={
                "source": source_name,
                "elements_built": metrics.elements_built,
                "processing_time_ms": metrics.processing_time_ms,
            }
        )
        return ConversionResult(
            value=value,
            yaml_text=yaml_text,
            metrics=metrics,
            source=source_name,
            correlation_id=self.correlation_id,
        )

    def convert_file(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None
    ) -> ConversionResult:
        """Convert an XML file, optionally writing the YAML to ``output_path``.

        The output file is only created after the conversion succeeded.
        """
        input_path = Path(input_path)
        result = self.convert(input_path, source_name=str(input_path))
        if output_path is not None:
            result.write_to(output_path)
        return result

    def convert_stream(self, stream: Union[BinaryIO, TextIO], source_name: str = "<stream>") -> ConversionResult:
        """Convert XML read from an open file object such as stdin."""
        try:
            data = stream.read()
        except OSError as e:
            raise InputOutputError(
                f"Failed to read {source_name} ({e.strerror or e})",
                path=source_name,
                operation="read",
            ) from e
        return self.convert(data, source_name=source_name)

    def reconfigure(self, config: ConverterConfig) -> None:
        """Replace the configuration used by subsequent conversions."""
        self.config = config
        if config.correlation_id:
            self.correlation_id = config.correlation_id
            self.logger = get_logger(__name__, self.correlation_id, "converter")

    @property
    def statistics(self) -> Dict[str, Any]:
        """Running totals over all conversions made by this converter."""
        stats = dict(self._statistics)
        conversions = stats["conversions"]
        stats["average_processing_time_ms"] = (
            stats["total_processing_time_ms"] / conversions if conversions else 0.0
        )
        return stats

    def reset_statistics(self) -> None:
        """Reset running totals."""
        self._statistics = {
            "conversions": 0,
            "failures": 0,
            "total_processing_time_ms": 0.0,
            "total_events": 0,
        }


def convert(input_data: InputType, config: Optional[ConverterConfig] = None) -> ConversionResult:
    """Convert XML from any supported input to YAML.

    Args:
        input_data: XML content as str or bytes, a readable file object, or a Path
        config: Optional conversion configuration

    Returns:
        ConversionResult containing the value, YAML text and metrics

    Examples:
        >>> convert("<root>hello</root>").yaml_text
        'root: hello\\n'
    """
    return XMLToYAMLConverter(config).convert(input_data)


def convert_string(xml_string: Union[str, bytes], config: Optional[ConverterConfig] = None) -> str:
    """Convert an XML string to YAML text.

    Examples:
        >>> convert_string("<r><a>1</a><a>2</a></r>")
        "r:\\n  a: '2'\\n"
    """
    return XMLToYAMLConverter(config).convert(xml_string).yaml_text


def convert_file(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[ConverterConfig] = None
) -> ConversionResult:
    """Convert an XML file, optionally writing the YAML to ``output_path``."""
    return XMLToYAMLConverter(config).convert_file(input_path, output_path)


def convert_to_value(input_data: InputType, config: Optional[ConverterConfig] = None) -> StructuredValue:
    """Convert XML to its structured value (nested dicts and strings).

    Examples:
        >>> convert_to_value("<r><a/></r>")
        {'r': {'a': {}}}
    """
    return XMLToYAMLConverter(config).build_value(input_data)

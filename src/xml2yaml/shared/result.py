"""Result objects and metrics for XML to YAML conversion.

This module defines the metrics collected while building a tree and the
result object returned by the conversion API.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import InputOutputError


@dataclass
class ConversionMetrics:
    """Counters and timings for one conversion."""

    processing_time_ms: float = 0.0
    characters_processed: int = 0
    events_processed: int = 0
    elements_built: int = 0
    max_depth: int = 0
    dropped_entries: int = 0       # children closed under a scalar parent
    ignored_end_events: int = 0    # end events with an empty stack
    ignored_text_events: int = 0   # empty or whitespace-only text

    @property
    def events_per_second(self) -> float:
        """Calculate events processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.events_processed * 1000.0) / self.processing_time_ms

    @property
    def defensive_operations(self) -> int:
        """Total number of tolerated no-op conditions."""
        return self.dropped_entries + self.ignored_end_events + self.ignored_text_events

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary representation."""
        return {
            "processing_time_ms": self.processing_time_ms,
            "characters_processed": self.characters_processed,
            "events_processed": self.events_processed,
            "elements_built": self.elements_built,
            "max_depth": self.max_depth,
            "dropped_entries": self.dropped_entries,
            "ignored_end_events": self.ignored_end_events,
            "ignored_text_events": self.ignored_text_events,
        }


@dataclass
class ConversionResult:
    """Outcome of a successful conversion.

    Failed conversions raise instead of returning a result, so a
    ConversionResult always holds a complete tree and its YAML rendering.
    """

    value: Any
    yaml_text: str
    metrics: ConversionMetrics = field(default_factory=ConversionMetrics)
    source: str = "<string>"
    correlation_id: Optional[str] = None

    @property
    def root_tag(self) -> Optional[str]:
        """Tag of the document element, if the tree holds one."""
        if isinstance(self.value, dict) and self.value:
            return next(iter(self.value))
        return None

    def write_to(self, output_path: Union[str, Path]) -> None:
        """Write the YAML text to a file, creating or truncating it."""
        path = Path(output_path)
        try:
            with path.open("w", encoding="utf-8") as f:
                f.write(self.yaml_text)
        except OSError as e:
            raise InputOutputError(
                f"Failed to create file: {path} ({e.strerror or e})",
                path=str(path),
                operation="write",
            ) from e

    def summary(self) -> Dict[str, Any]:
        """Get summary statistics for the conversion."""
        return {
            "source": self.source,
            "root_tag": self.root_tag,
            "output_length": len(self.yaml_text),
            "correlation_id": self.correlation_id,
            "metrics": self.metrics.to_dict(),
        }

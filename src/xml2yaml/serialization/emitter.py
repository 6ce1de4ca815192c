"""YAML emission for structured values.

Renders the builder's output with PyYAML in block style, keeping mapping keys
in insertion order and leaving scalar quoting to PyYAML's defaults.
"""

import sys
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple

import yaml

from xml2yaml.shared import OutputSettings, SerializationError, get_logger

_UNLIMITED_WIDTH = float("inf")

# PyYAML's representer and serializer recurse once per nesting level; each
# level costs a handful of Python frames.
_FRAMES_PER_LEVEL = 6
_RECURSION_HEADROOM = 1000


class _NoAliasDumper(yaml.SafeDumper):
    """Safe dumper that never emits anchors or aliases."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def _check_value(value: Any) -> int:
    """Reject anything outside the mapping/string value model.

    Returns:
        Nesting depth of the value (a bare scalar has depth 0)
    """
    pending: List[Tuple[Any, int]] = [(value, 0)]
    max_depth = 0
    while pending:
        current, depth = pending.pop()
        max_depth = max(max_depth, depth)
        if isinstance(current, str):
            continue
        if not isinstance(current, dict):
            raise SerializationError(
                f"Cannot serialize value of type {type(current).__name__}",
                {"type": type(current).__name__},
            )
        for key, child in current.items():
            if not isinstance(key, str):
                raise SerializationError(
                    f"Mapping keys must be strings, got {type(key).__name__}",
                    {"type": type(key).__name__},
                )
            pending.append((child, depth + 1))
    return max_depth


@contextmanager
def _recursion_allowance(depth: int) -> Iterator[None]:
    """Temporarily raise the interpreter recursion limit for ``depth`` levels."""
    previous = sys.getrecursionlimit()
    required = depth * _FRAMES_PER_LEVEL + _RECURSION_HEADROOM
    if required > previous:
        sys.setrecursionlimit(required)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def serialize_value(
    value: Any,
    options: Optional[OutputSettings] = None,
    correlation_id: Optional[str] = None
) -> str:
    """Render a structured value as YAML text.

    Args:
        value: Mapping (dict with str keys) or scalar (str), nested freely
        options: Output layout settings (defaults apply when omitted)
        correlation_id: Optional correlation ID for request tracking

    Returns:
        YAML document text

    Raises:
        SerializationError: If the value is outside the model or PyYAML
            cannot render it

    Examples:
        >>> serialize_value({"root": {"a": "1", "b": {}}})
        "root:\\n  a: '1'\\n  b: {}\\n"
    """
    options = options or OutputSettings()
    logger = get_logger(__name__, correlation_id, "yaml_serializer")

    depth = _check_value(value)

    try:
        with _recursion_allowance(depth):
            return yaml.dump(
                value,
                Dumper=_NoAliasDumper,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=options.allow_unicode,
                indent=options.indent,
                width=options.width if options.width is not None else _UNLIMITED_WIDTH,
                explicit_start=options.explicit_start,
                explicit_end=options.explicit_end,
            )
    except (yaml.YAMLError, RecursionError) as e:
        logger.debug("YAML serialization failed", extra={"error": str(e)})
        raise SerializationError(f"Failed to serialize YAML: {e}") from e

"""Main CLI entry point for the xml2yaml command-line tool.

Usage: xml2yaml [INPUT] [OUTPUT]

INPUT and OUTPUT default to stdin and stdout; ``-`` selects them explicitly.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from xml2yaml import __version__
from xml2yaml.api import XMLToYAMLConverter
from xml2yaml.shared import (
    ConversionError,
    ConversionResult,
    ConverterConfig,
    InputOutputError,
    configure_logging,
    get_logger,
)

STDIO_MARKER = "-"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml2yaml",
        description="Convert XML to YAML"
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "input",
        nargs="?",
        metavar="INPUT",
        help="Input XML file (use - for stdin)"
    )
    parser.add_argument(
        "output",
        nargs="?",
        metavar="OUTPUT",
        help="Output YAML file (use - for stdout)"
    )

    return parser


def _is_stdio(path: Optional[str]) -> bool:
    return path is None or path == STDIO_MARKER


def read_and_convert(converter: XMLToYAMLConverter, input_path: Optional[str]) -> ConversionResult:
    """Convert the named input file, or stdin when no path is given."""
    if _is_stdio(input_path):
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
        return converter.convert_stream(stdin, source_name="<stdin>")
    return converter.convert_file(Path(input_path))


def write_output(result: ConversionResult, output_path: Optional[str]) -> None:
    """Write YAML to the named file, or to stdout as UTF-8."""
    if not _is_stdio(output_path):
        result.write_to(output_path)
        return

    try:
        stdout = getattr(sys.stdout, "buffer", None)
        if stdout is None:
            sys.stdout.write(result.yaml_text)
            sys.stdout.flush()
        else:
            sys.stdout.flush()
            stdout.write(result.yaml_text.encode("utf-8"))
            stdout.flush()
    except OSError as e:
        raise InputOutputError(
            f"Failed to write <stdout> ({e.strerror or e})",
            path="<stdout>",
            operation="write",
        ) from e


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = ConverterConfig()
    configure_logging(config.logging_level)
    logger = get_logger(__name__, config.correlation_id, "cli")

    converter = XMLToYAMLConverter(config)
    try:
        result = read_and_convert(converter, args.input)
        write_output(result, args.output)

    except ConversionError as e:
        logger.debug("Conversion failed", extra={"error_type": type(e).__name__})
        print(f"xml2yaml: error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED

    return EXIT_SUCCESS


def entry_point() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    entry_point()

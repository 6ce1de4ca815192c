"""Command-line interface module for xml2yaml.

This module provides the ``xml2yaml [INPUT] [OUTPUT]`` tool that converts an
XML file or stdin into YAML on a file or stdout.
"""

from .main import main

__all__ = ["main"]

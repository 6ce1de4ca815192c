"""Allow ``python -m xml2yaml``."""

from xml2yaml.cli.main import entry_point

entry_point()

"""Command-line tokenizing and the argument model."""

from package_builder.core.command_line.command_line import (
    CommandLine,
    CommandLineBuilder,
)
from package_builder.core.command_line.models import (
    AssemblyVersionSource,
    CommandLineMetadata,
    CommandLineVersion,
    ExplicitVersion,
    VersionSource,
)
from package_builder.core.command_line.parser import (
    ArgumentProperties,
    CommandLineParser,
    normalize_dashes,
    smart_index_of,
    trim_quotes,
)

__all__ = [
    "ArgumentProperties",
    "AssemblyVersionSource",
    "CommandLine",
    "CommandLineBuilder",
    "CommandLineMetadata",
    "CommandLineParser",
    "CommandLineVersion",
    "ExplicitVersion",
    "VersionSource",
    "normalize_dashes",
    "smart_index_of",
    "trim_quotes",
]

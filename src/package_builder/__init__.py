"""
Package builder command line.

Parses the package builder's ``-name:value`` command-line syntax into an
immutable ``CommandLine`` model.

Example:
    from package_builder import CommandLine

    command_line = CommandLine.parse("-module:Custom.Module -version:1.2.3")
"""

__version__ = "0.1.0"

from package_builder.core.command_line import (  # noqa: E402
    CommandLine,
    CommandLineMetadata,
    CommandLineParser,
    CommandLineVersion,
)
from package_builder.core.common.exceptions import (  # noqa: E402
    ArgumentErrorKind,
    CommandLineArgumentError,
    CommandLineArgumentPropertyError,
)

__all__ = [
    "ArgumentErrorKind",
    "CommandLine",
    "CommandLineArgumentError",
    "CommandLineArgumentPropertyError",
    "CommandLineMetadata",
    "CommandLineParser",
    "CommandLineVersion",
    "__version__",
]

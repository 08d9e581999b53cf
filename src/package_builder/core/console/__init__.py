"""Console output: plain writer, text layout and help rendering."""

from package_builder.core.console.formatting import (
    TableRow,
    format_table,
    wrap_message,
)
from package_builder.core.console.help import HelpRenderer
from package_builder.core.console.writer import ConsoleWriter

__all__ = [
    "ConsoleWriter",
    "HelpRenderer",
    "TableRow",
    "format_table",
    "wrap_message",
]

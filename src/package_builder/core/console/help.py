"""
Renders the command-line help text from the argument registration table.
"""

from __future__ import annotations

from package_builder.core.command_line.arguments import (
    ARGUMENTS,
    METADATA_PROPERTIES,
    VERSION_PROPERTIES,
    ArgumentPropertySpec,
)
from package_builder.core.config.app_config import ConsoleConfig
from package_builder.core.console.formatting import (
    TableRow,
    format_table,
    wrap_message,
)

USAGE = "Usage: {tool} -module:<codename> [options]"

METADATA_SECTION_TITLE = "Metadata object properties (-metadata:<name>=<value>,...):"
VERSION_SECTION_TITLE = "Version object properties (-version:<name>=<value>,...):"

NOTES_SECTION_TITLE = "Notes:"
NOTES = (
    "Values containing spaces or commas must be wrapped in single or double "
    "quotes. The shell removes quotes, so quote the whole argument as well, "
    "e.g. \"-metadata:authors='A, B'\". Argument and property names are "
    "not case-sensitive.\n"
    "When -version is omitted, the version of the module itself is used."
)

EXAMPLES_SECTION_TITLE = "Examples:"
EXAMPLES = (
    "{tool} -module:Custom.Module\n"
    "{tool} -module:Custom.Module -nuspec \"-properties:author='Some Person'\"\n"
    "{tool} -module:Custom.Module -version:1.2.3 -output:Packages\n"
    "{tool} -module:Custom.Module "
    "-version:assembly=Custom.Module.dll,assemblyAttribute=AssemblyInformationalVersion\n"
    "{tool} -module:Custom.Module \"-metadata:id=Custom.Module,title='Custom Module'\""
)


class HelpRenderer:
    """Builds the help text as a list of lines."""

    def __init__(self, console: ConsoleConfig | None = None) -> None:
        self.console = console or ConsoleConfig()

    def render(self) -> list[str]:
        tool = self.console.tool_name
        lines: list[str] = []

        lines.extend(wrap_message(USAGE.format(tool=tool), self.console.width))
        lines.append("")
        lines.extend(self._table(TableRow(a.usage, a.description) for a in ARGUMENTS))

        lines.append("")
        lines.extend(self._property_section(METADATA_SECTION_TITLE, METADATA_PROPERTIES))
        lines.append("")
        lines.extend(self._property_section(VERSION_SECTION_TITLE, VERSION_PROPERTIES))

        lines.append("")
        lines.append(NOTES_SECTION_TITLE)
        lines.append("")
        lines.extend(wrap_message(NOTES, self.console.width, self.console.indent))

        lines.append("")
        lines.append(EXAMPLES_SECTION_TITLE)
        lines.append("")
        lines.extend(
            wrap_message(
                EXAMPLES.format(tool=tool),
                self.console.width,
                self.console.indent,
                self.console.indent,
            )
        )
        return lines

    def _table(self, rows) -> list[str]:
        return format_table(
            rows,
            self.console.width,
            indent=self.console.indent,
            column_spacing=self.console.column_spacing,
        )

    def _property_section(
        self, title: str, properties: tuple[ArgumentPropertySpec, ...]
    ) -> list[str]:
        lines = wrap_message(title, self.console.width)
        lines.append("")
        lines.extend(self._table(TableRow(p.name, p.description) for p in properties))
        return lines

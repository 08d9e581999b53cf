"""
Names of the recognized command-line arguments and their registration table.

The registration table drives the help output; the model in
``command_line.py`` maps the same names to fields.
"""

from __future__ import annotations

from dataclasses import dataclass

HELP = "-help"
DEBUG = "-debug"
MODULE = "-module"
NUSPEC_FILE = "-nuspec"
OUTPUT_DIRECTORY = "-output"
METADATA = "-metadata"
PROPERTIES = "-properties"
VERSION = "-version"

# Accepted as written; "-help" itself is matched case-insensitively
HELP_ALIASES: frozenset[str] = frozenset({"-?", "/?", "?"})

# -metadata properties
METADATA_ID = "id"
METADATA_TITLE = "title"
METADATA_DESCRIPTION = "description"
METADATA_AUTHORS = "authors"

# -version properties
VERSION_VALUE = "<value>"
VERSION_ASSEMBLY = "assembly"
VERSION_ASSEMBLY_ATTRIBUTE = "assemblyAttribute"


@dataclass(frozen=True)
class ArgumentSpec:
    """Help entry for a command-line argument."""

    name: str
    description: str
    value_name: str = ""

    @property
    def usage(self) -> str:
        if self.value_name.strip():
            return f"{self.name}:<{self.value_name}>"
        return self.name


@dataclass(frozen=True)
class ArgumentPropertySpec:
    """Help entry for a property of a structured argument."""

    name: str
    description: str


ARGUMENTS: tuple[ArgumentSpec, ...] = (
    ArgumentSpec(
        MODULE,
        "The code name of the module to package.",
        "codename",
    ),
    ArgumentSpec(
        NUSPEC_FILE,
        "The NuSpec file used as the package manifest template. Without a "
        "value, '<codename>.nuspec' is used.",
        "nuspecfile",
    ),
    ArgumentSpec(
        OUTPUT_DIRECTORY,
        "The directory the package is written to.",
        "path",
    ),
    ArgumentSpec(
        METADATA,
        "Overrides the package metadata taken from the module.",
        "object",
    ),
    ArgumentSpec(
        PROPERTIES,
        "Replacement tokens applied to the NuSpec file, as name=value pairs.",
        "object",
    ),
    ArgumentSpec(
        VERSION,
        "The package version, given explicitly or read from an assembly.",
        "object",
    ),
    ArgumentSpec(
        DEBUG,
        "Writes error details and stack traces on failure.",
    ),
    ArgumentSpec(
        HELP,
        "Shows this help text.",
    ),
)

METADATA_PROPERTIES: tuple[ArgumentPropertySpec, ...] = (
    ArgumentPropertySpec(METADATA_ID, "The package identifier."),
    ArgumentPropertySpec(METADATA_TITLE, "The package title."),
    ArgumentPropertySpec(METADATA_DESCRIPTION, "The package description."),
    ArgumentPropertySpec(METADATA_AUTHORS, "A comma-separated list of authors."),
)

VERSION_PROPERTIES: tuple[ArgumentPropertySpec, ...] = (
    ArgumentPropertySpec(VERSION_VALUE, "An explicit version, e.g. 1.2.3."),
    ArgumentPropertySpec(
        VERSION_ASSEMBLY,
        "The assembly the version is read from. Without a value, the "
        "assembly named after the module is used.",
    ),
    ArgumentPropertySpec(
        VERSION_ASSEMBLY_ATTRIBUTE,
        "AssemblyVersion, AssemblyFileVersion (default) or "
        "AssemblyInformationalVersion.",
    ),
)


def find_argument(name: str) -> ArgumentSpec | None:
    """Return the registration for ``name``, matched case-insensitively."""
    folded = name.lower()
    for spec in ARGUMENTS:
        if spec.name.lower() == folded:
            return spec
    return None
